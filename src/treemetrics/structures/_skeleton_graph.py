""" Skeleton graph of a reconstructed tree. """

__all__ = ["SkeletonGraph"]

from dataclasses import dataclass
from typing import Optional

import numpy as np

from treemetrics.type_aliases import FloatArray, LongArray
from ._read_only_array import read_only_array


@dataclass(frozen=True, eq=False)
class SkeletonGraph:
    r"""
    Immutable skeleton graph of a tree. The vertices are the skeleton nodes and the edges connect adjacent nodes. The
    graph does not have to be connected.

    Args:
        vertices: Coordinates of the skeleton vertices.
        edges: Unordered pairs of vertex indices. Defaults to :code:`None`, which means that the graph has no edges.
        radii: Branch radius at each skeleton vertex. If set to :code:`None`, all radii are set to 1.0. Defaults to
            :code:`None`.

    Raises:
        ValueError: If one of the inputs has an invalid shape or if an edge references a vertex that does not exist.

    Shape:
        - :code:`vertices`: :math:`(V, 3)`
        - :code:`edges`: :math:`(E, 2)`
        - :code:`radii`: :math:`(V)`

        | where
        |
        | :math:`V = \text{ number of vertices}`
        | :math:`E = \text{ number of edges}`
    """

    vertices: FloatArray
    edges: Optional[LongArray] = None
    radii: Optional[FloatArray] = None

    def __post_init__(self):
        vertices = read_only_array(self.vertices, np.float64, num_columns=3, name="vertices")
        edges = read_only_array(
            self.edges if self.edges is not None else np.empty((0, 2)), np.int64, num_columns=2, name="edges"
        )

        if len(edges) > 0 and (edges.min() < 0 or edges.max() >= len(vertices)):
            raise ValueError("All edge endpoints must be valid vertex indices.")

        if self.radii is None:
            radii = read_only_array(np.ones(len(vertices)), np.float64, name="radii")
        else:
            radii = read_only_array(self.radii, np.float64, name="radii")
            if len(radii) != len(vertices):
                raise ValueError("vertices and radii must have the same length.")

        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "edges", edges)
        object.__setattr__(self, "radii", radii)

    @property
    def num_vertices(self) -> int:
        """
        Returns:
            Number of vertices of the graph.
        """

        return len(self.vertices)

    @property
    def num_edges(self) -> int:
        """
        Returns:
            Number of edges of the graph.
        """

        return len(self.edges)  # type: ignore[arg-type]

    def height_range(self) -> float:
        """
        Returns:
            Difference between the maximum and the minimum z-coordinate of all skeleton vertices. For a graph without
            vertices, zero is returned.
        """

        if self.num_vertices == 0:
            return 0.0
        heights = self.vertices[:, 2]
        return float(heights.max() - heights.min())
