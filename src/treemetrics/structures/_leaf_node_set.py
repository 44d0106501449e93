""" Leaf nodes of a skeleton graph. """

__all__ = ["LeafNode", "LeafNodeSet"]

from dataclasses import dataclass
from typing import Iterator, Union

import numpy as np
import numpy.typing as npt

from treemetrics.type_aliases import FloatArray, LongArray
from ._point import Point3D
from ._point_set import FilteredPointSet
from ._read_only_array import read_only_array


@dataclass(frozen=True)
class LeafNode:
    """
    Degree-one vertex of a skeleton graph, i.e., the tip of a branch.

    Args:
        position: Position of the leaf node.
        radius: Branch radius at the leaf node.
        original_index: Index of the leaf node in the vertex array of the skeleton graph.
        height: Height of the leaf node (equal to the z-coordinate of its position).
    """

    position: Point3D
    radius: float
    original_index: int
    height: float


@dataclass(frozen=True, eq=False)
class LeafNodeSet:
    r"""
    Immutable, ordered collection of leaf nodes. The order is the order in which the leaf nodes appear in the vertex
    array of the skeleton graph.

    Args:
        xyz: Coordinates of the leaf nodes.
        radii: Branch radius at each leaf node.
        original_indices: Index of each leaf node in the vertex array of the skeleton graph.

    Raises:
        ValueError: If the inputs have invalid shapes or different lengths.

    Shape:
        - :code:`xyz`: :math:`(L, 3)`
        - :code:`radii`: :math:`(L)`
        - :code:`original_indices`: :math:`(L)`

        | where
        |
        | :math:`L = \text{ number of leaf nodes}`
    """

    xyz: FloatArray
    radii: FloatArray
    original_indices: LongArray

    def __post_init__(self):
        xyz = read_only_array(self.xyz, np.float64, num_columns=3, name="xyz")
        radii = read_only_array(self.radii, np.float64, name="radii")
        original_indices = read_only_array(self.original_indices, np.int64, name="original_indices")

        if not len(xyz) == len(radii) == len(original_indices):
            raise ValueError("xyz, radii, and original_indices must have the same length.")

        object.__setattr__(self, "xyz", xyz)
        object.__setattr__(self, "radii", radii)
        object.__setattr__(self, "original_indices", original_indices)

    def __len__(self) -> int:
        return len(self.xyz)

    def __getitem__(self, index: int) -> LeafNode:
        x, y, z = (float(coord) for coord in self.xyz[index])
        radius = float(self.radii[index])
        return LeafNode(
            position=Point3D(x, y, z, radius),
            radius=radius,
            original_index=int(self.original_indices[index]),
            height=z,
        )

    def __iter__(self) -> Iterator[LeafNode]:
        for index in range(len(self)):
            yield self[index]

    @property
    def heights(self) -> FloatArray:
        """
        Returns:
            Height of each leaf node.
        """

        return self.xyz[:, 2]

    def subset(self, selection: Union[npt.NDArray[np.bool_], LongArray]) -> "LeafNodeSet":
        """
        Creates a new leaf node set containing a subset of the leaf nodes.

        Args:
            selection: Boolean mask or indices of the leaf nodes to keep. Indices are sorted so that the original order
                of the leaf nodes is preserved.

        Returns:
            Leaf node set containing the selected leaf nodes.
        """

        selection = np.asarray(selection)
        if selection.dtype == np.bool_:
            if len(selection) != len(self):
                raise ValueError("The selection mask must have the same length as the leaf node set.")
            indices = np.flatnonzero(selection)
        else:
            indices = np.unique(selection.astype(np.int64))

        return LeafNodeSet(self.xyz[indices], self.radii[indices], self.original_indices[indices])

    def to_point_set(self) -> FilteredPointSet:
        """
        Returns:
            Positions and radii of the leaf nodes as point set.
        """

        return FilteredPointSet(self.xyz, self.radii)
