""" Planar extent of a point set. """

__all__ = ["planar_diameter"]

from scipy.spatial.distance import pdist

from treemetrics.type_aliases import FloatArray


def planar_diameter(xy: FloatArray) -> float:
    r"""
    Computes the largest pairwise distance between 2D points.

    Args:
        xy: Planar coordinates of the points.

    Returns:
        Largest pairwise distance. Zero if there are fewer than two points.

    Raises:
        ValueError: If :code:`xy` has an invalid shape.

    Shape:
        - :code:`xy`: :math:`(N, 2)`

        | where
        |
        | :math:`N = \text{ number of points}`
    """

    if xy.ndim != 2 or xy.shape[1] != 2:
        raise ValueError("xy must be an array of 2D coordinates.")

    if len(xy) < 2:
        return 0.0

    return float(pdist(xy).max())
