""" Selection of the highest and lowest points of a point set. """

__all__ = ["select_top_n", "select_bottom_n"]

import numpy as np

from treemetrics.type_aliases import FloatArray


def select_top_n(xyz: FloatArray, n: int) -> FloatArray:
    r"""
    Selects the :code:`n` highest points of a point set.

    Args:
        xyz: Point coordinates.
        n: Number of points to select. If the point set contains fewer points, all points are returned.

    Returns:
        The :math:`min(n, N)` points with the largest z-coordinates, sorted by decreasing height.

    Raises:
        ValueError: If :code:`n` is not positive.

    Shape:
        - :code:`xyz`: :math:`(N, 3)`
        - Output: :math:`(min(n, N), 3)`

        | where
        |
        | :math:`N = \text{ number of points}`
    """

    if n <= 0:
        raise ValueError("n must be a positive integer.")

    sorting_indices = np.argsort(-xyz[:, 2], kind="stable")
    return xyz[sorting_indices[:n]]


def select_bottom_n(xyz: FloatArray, n: int) -> FloatArray:
    r"""
    Selects the :code:`n` lowest points of a point set.

    Args:
        xyz: Point coordinates.
        n: Number of points to select. If the point set contains fewer points, all points are returned.

    Returns:
        The :math:`min(n, N)` points with the smallest z-coordinates, sorted by increasing height.

    Raises:
        ValueError: If :code:`n` is not positive.

    Shape:
        - :code:`xyz`: :math:`(N, 3)`
        - Output: :math:`(min(n, N), 3)`

        | where
        |
        | :math:`N = \text{ number of points}`
    """

    if n <= 0:
        raise ValueError("n must be a positive integer.")

    sorting_indices = np.argsort(xyz[:, 2], kind="stable")
    return xyz[sorting_indices[:n]]
