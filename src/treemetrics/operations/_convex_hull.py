""" Convex hull of 2D points. """

__all__ = ["convex_hull_2d"]

import numpy as np
from scipy.spatial import ConvexHull, QhullError

from treemetrics.type_aliases import FloatArray


def convex_hull_2d(xy: FloatArray) -> FloatArray:
    r"""
    Computes the convex hull of a set of 2D points using `Qhull <http://www.qhull.org/>`__.

    For degenerate inputs, i.e., if there are fewer than three distinct points or all points are collinear, the hull
    has less than three vertices: The distinct points are returned for inputs with at most two distinct points and the
    two extreme points (the lexicographically smallest and largest point) for collinear inputs.

    Args:
        xy: Coordinates of the points.

    Returns:
        Hull vertices in counterclockwise order.

    Raises:
        ValueError: If :code:`xy` has an invalid shape.

    Shape:
        - :code:`xy`: :math:`(N, 2)`
        - Output: :math:`(H, 2)`

        | where
        |
        | :math:`N = \text{ number of points}`
        | :math:`H = \text{ number of hull vertices}`
    """

    if xy.ndim != 2 or xy.shape[1] != 2:
        raise ValueError("xy must be an array of 2D coordinates.")

    unique_xy = np.unique(xy, axis=0)
    if len(unique_xy) < 3:
        return unique_xy

    try:
        hull = ConvexHull(unique_xy)
    except QhullError:
        # np.unique sorts lexicographically, so the first and last point are the extremes of a collinear point set
        return unique_xy[[0, -1]]

    return unique_xy[hull.vertices]
