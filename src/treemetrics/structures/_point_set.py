""" Set of canopy points remaining after the adaptive leaf filtering. """

__all__ = ["FilteredPointSet"]

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

import numpy as np

from treemetrics.type_aliases import FloatArray
from ._point import Point3D
from ._read_only_array import read_only_array


@dataclass(frozen=True, eq=False)
class FilteredPointSet:
    r"""
    Immutable set of 3D points with radii. This is the canonical point set from which the tree height, the crown-base
    height, and the crown geometry are derived.

    Args:
        xyz: Coordinates of the points.
        radii: Radius of each point. If set to :code:`None`, all radii are set to 1.0. Defaults to :code:`None`.

    Raises:
        ValueError: If :code:`xyz` or :code:`radii` have an invalid shape.

    Shape:
        - :code:`xyz`: :math:`(N, 3)`
        - :code:`radii`: :math:`(N)`

        | where
        |
        | :math:`N = \text{ number of points}`
    """

    xyz: FloatArray
    radii: Optional[FloatArray] = None

    def __post_init__(self):
        xyz = read_only_array(self.xyz, np.float64, num_columns=3, name="xyz")
        if self.radii is None:
            radii = read_only_array(np.ones(len(xyz)), np.float64, name="radii")
        else:
            radii = read_only_array(self.radii, np.float64, name="radii")
        if len(radii) != len(xyz):
            raise ValueError("xyz and radii must have the same length.")

        object.__setattr__(self, "xyz", xyz)
        object.__setattr__(self, "radii", radii)

    @classmethod
    def from_points(cls, points: Iterable[Point3D]) -> "FilteredPointSet":
        """
        Args:
            points: Points to include in the point set.

        Returns:
            Point set containing the given points in the given order.
        """

        point_list = list(points)
        xyz = np.array([[point.x, point.y, point.z] for point in point_list], dtype=np.float64)
        radii = np.array([point.radius for point in point_list], dtype=np.float64)
        return cls(xyz, radii)

    def __len__(self) -> int:
        return len(self.xyz)

    def __iter__(self) -> Iterator[Point3D]:
        return iter(self.points())

    @property
    def heights(self) -> FloatArray:
        """
        Returns:
            Height (z-coordinate) of each point.
        """

        return self.xyz[:, 2]

    def points(self) -> List[Point3D]:
        """
        Returns:
            The points of the set as :code:`Point3D` objects.
        """

        return [
            Point3D(float(x), float(y), float(z), float(radius)) for (x, y, z), radius in zip(self.xyz, self.radii)
        ]
