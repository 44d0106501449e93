""" Extraction of horizontal point slices. """

__all__ = ["points_at_height"]

import numpy as np

from treemetrics.type_aliases import FloatArray


def points_at_height(xyz: FloatArray, height: float, tolerance: float = 0.05) -> FloatArray:
    r"""
    Selects all points whose z-coordinate differs by at most :code:`tolerance` from :code:`height`.

    Args:
        xyz: Point coordinates.
        height: Height of the slice.
        tolerance: Maximum vertical distance between a selected point and the slice height. Defaults to 0.05.

    Returns:
        Coordinates of the selected points in their original order.

    Raises:
        ValueError: If :code:`tolerance` is negative.

    Shape:
        - :code:`xyz`: :math:`(N, 3)`
        - Output: :math:`(N', 3)`

        | where
        |
        | :math:`N = \text{ number of points}`
        | :math:`N' = \text{ number of points within the slice}`
    """

    if tolerance < 0:
        raise ValueError("tolerance must not be negative.")

    return xyz[np.abs(xyz[:, 2] - height) <= tolerance]
