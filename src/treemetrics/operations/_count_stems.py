""" Counting of stems in a horizontal slice of a stem point cloud. """

__all__ = ["count_stems"]

import numpy as np

from treemetrics.type_aliases import FloatArray


def count_stems(xy: FloatArray, distance_threshold: float = 0.3) -> int:
    r"""
    Estimates the number of stems in a horizontal slice by greedily clustering the points in a single pass: The points
    are visited in their input order. Each point that has not been assigned to a cluster yet starts a new cluster, and
    all points whose planar distance to it is smaller than :code:`distance_threshold` are assigned to that cluster.

    The clustering is not transitive, i.e., two points that are connected only via a chain of close points can end up
    in different clusters. The synthetic and taper-corrected DBH estimates are calibrated for this behavior.

    Args:
        xy: Planar coordinates of the slice points.
        distance_threshold: Points closer than this distance to the seed point of a cluster are assigned to the
            cluster. Defaults to 0.3.

    Returns:
        Number of clusters. Zero for an empty slice.

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

    visited = np.zeros(len(xy), dtype=np.bool_)
    num_clusters = 0

    for idx, seed in enumerate(xy):
        if visited[idx]:
            continue
        num_clusters += 1
        visited |= np.linalg.norm(xy - seed, axis=1) < distance_threshold

    return num_clusters
