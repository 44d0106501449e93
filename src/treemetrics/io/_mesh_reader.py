""" Reader for triangle meshes of the stem and branches. """

__all__ = ["MeshReader", "read_mesh", "read_mesh_vertices"]

import os
from typing import List

import trimesh

from treemetrics.structures import MeshVertexCloud


class MeshReader:
    """
    Reader for surface meshes based on :code:`trimesh`. The meshes are loaded without any processing so that the
    vertices keep the order in which they are stored in the file.
    """

    def supported_file_formats(self) -> List[str]:
        """
        Returns:
            File formats supported by the reader.
        """

        return ["obj", "off", "ply", "stl"]

    def read(self, file_path: str) -> trimesh.Trimesh:
        """
        Reads a mesh file. Scenes with multiple geometries are merged into a single mesh.

        Args:
            file_path: Path of the file to be read.

        Returns:
            Triangle mesh.

        Raises:
            ValueError: If the file format is not supported by the reader.
            FileNotFoundError: If the file does not exist.
        """

        file_format = file_path.split(".")[-1].lower()
        if file_format not in self.supported_file_formats():
            raise ValueError(f"The {file_format} format is not supported by the mesh reader.")
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"Mesh file does not exist: {file_path}")

        mesh = trimesh.load_mesh(file_path, file_type=file_format, process=False)
        if not isinstance(mesh, trimesh.Trimesh):
            raise ValueError(f"The file {file_path} does not contain a triangle mesh.")

        return mesh

    def read_vertices(self, file_path: str) -> MeshVertexCloud:
        """
        Reads the vertices of a mesh file.

        Args:
            file_path: Path of the file to be read.

        Returns:
            Vertices of the mesh.
        """

        return MeshVertexCloud(self.read(file_path).vertices)


def read_mesh(file_path: str) -> trimesh.Trimesh:
    """
    Reads a triangle mesh from a file.

    Args:
        file_path: Path of the file to be read.

    Returns:
        Triangle mesh.
    """

    return MeshReader().read(file_path)


def read_mesh_vertices(file_path: str) -> MeshVertexCloud:
    """
    Reads the vertices of a triangle mesh from a file.

    Args:
        file_path: Path of the file to be read.

    Returns:
        Vertices of the mesh.
    """

    return MeshReader().read_vertices(file_path)
