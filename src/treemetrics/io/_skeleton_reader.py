""" Reader for skeleton graphs stored in PLY files. """

__all__ = ["SkeletonReader", "read_skeleton"]

import logging
import os
from typing import List

import numpy as np
from plyfile import PlyData, PlyListProperty, PlyParseError

from treemetrics.structures import SkeletonGraph


class SkeletonReader:
    """
    Reader for skeleton graphs stored in PLY files. The file must contain a :code:`vertex` element with the properties
    :code:`x`, :code:`y`, and :code:`z`. A :code:`radius` property of the vertices is optional and defaults to 1.0.
    The edges are read from an optional :code:`edge` element, either from a list property :code:`vertex_indices` or
    from the scalar properties :code:`vertex1` and :code:`vertex2`. Edge lists that do not contain exactly two vertex
    indices are ignored.
    """

    def __init__(self):
        self._logger = logging.getLogger(__name__)

    def supported_file_formats(self) -> List[str]:
        """
        Returns:
            File formats supported by the reader.
        """

        return ["ply"]

    def read(self, file_path: str) -> SkeletonGraph:
        """
        Reads a skeleton graph from a PLY file.

        Args:
            file_path: Path of the file to be read.

        Returns:
            Skeleton graph.

        Raises:
            ValueError: If the file format is not supported by the reader or if the file does not contain valid
                skeleton data.
            FileNotFoundError: If the file does not exist.
        """

        file_format = file_path.split(".")[-1]
        if file_format not in self.supported_file_formats():
            raise ValueError(f"The {file_format} format is not supported by the skeleton reader.")
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"Skeleton file does not exist: {file_path}")

        try:
            ply_data = PlyData.read(file_path)
        except PlyParseError as error:
            raise ValueError(f"The skeleton file {file_path} is not a valid PLY file: {error}") from error

        if "vertex" not in ply_data:
            raise ValueError(f"The skeleton file {file_path} contains no vertex element.")
        vertex_element = ply_data["vertex"]
        vertex_properties = {ply_property.name: ply_property for ply_property in vertex_element.properties}
        for coordinate in ["x", "y", "z"]:
            if coordinate not in vertex_properties or isinstance(vertex_properties[coordinate], PlyListProperty):
                raise ValueError(f"The vertex element of {file_path} has no scalar property {coordinate}.")

        vertices = np.column_stack([vertex_element[coordinate] for coordinate in ["x", "y", "z"]]).astype(np.float64)
        radii = None
        if "radius" in vertex_properties and not isinstance(vertex_properties["radius"], PlyListProperty):
            radii = np.asarray(vertex_element["radius"], dtype=np.float64)

        edges = np.empty((0, 2), dtype=np.int64)
        if "edge" in ply_data:
            edge_element = ply_data["edge"]
            edge_properties = {ply_property.name: ply_property for ply_property in edge_element.properties}
            if isinstance(edge_properties.get("vertex_indices"), PlyListProperty):
                edge_list = [indices for indices in edge_element["vertex_indices"] if len(indices) == 2]
                if len(edge_list) > 0:
                    edges = np.array(edge_list, dtype=np.int64)
            elif "vertex1" in edge_properties and "vertex2" in edge_properties:
                edges = np.column_stack([edge_element["vertex1"], edge_element["vertex2"]]).astype(np.int64)
        else:
            self._logger.info("No edge data found in %s.", file_path)

        return SkeletonGraph(vertices, edges, radii)


def read_skeleton(file_path: str) -> SkeletonGraph:
    """
    Reads a skeleton graph from a PLY file.

    Args:
        file_path: Path of the file to be read.

    Returns:
        Skeleton graph.
    """

    return SkeletonReader().read(file_path)
