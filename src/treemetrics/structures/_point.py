""" Immutable 3D point. """

__all__ = ["Point3D"]

from dataclasses import dataclass
import functools


@functools.total_ordering
@dataclass(frozen=True)
class Point3D:
    """
    Immutable 3D point with an optional radius. Points are ordered by their height, i.e., by their z-coordinate.

    Args:
        x: X-coordinate of the point.
        y: Y-coordinate of the point.
        z: Z-coordinate (height) of the point.
        radius: Radius associated with the point (e.g., the branch radius at a skeleton vertex). Defaults to 1.0.
    """

    x: float
    y: float
    z: float
    radius: float = 1.0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Point3D):
            return NotImplemented
        return self.z < other.z
