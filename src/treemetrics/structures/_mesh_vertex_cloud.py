""" Vertices of a reconstructed stem and branch surface. """

__all__ = ["MeshVertexCloud"]

from dataclasses import dataclass

import numpy as np

from treemetrics.type_aliases import FloatArray
from ._read_only_array import read_only_array


@dataclass(frozen=True, eq=False)
class MeshVertexCloud:
    r"""
    Immutable list of the 3D vertices of a surface mesh. The face topology of the mesh is not stored.

    Args:
        vertices: Coordinates of the mesh vertices.

    Raises:
        ValueError: If :code:`vertices` has an invalid shape.

    Shape:
        - :code:`vertices`: :math:`(M, 3)`

        | where
        |
        | :math:`M = \text{ number of vertices}`
    """

    vertices: FloatArray

    def __post_init__(self):
        object.__setattr__(self, "vertices", read_only_array(self.vertices, np.float64, num_columns=3, name="vertices"))

    def __len__(self) -> int:
        return len(self.vertices)
