""" Adaptive filtering of skeleton leaf nodes based on the canopy profile of their neighborhood. """

__all__ = ["round_half_up", "nearest_neighbor_indices", "neighborhood_top_heights", "adaptive_leaf_filter"]

import math

import numpy as np
from scipy.spatial.distance import cdist

from treemetrics.structures import LeafNodeSet
from treemetrics.type_aliases import FloatArray, LongArray


def round_half_up(value: float) -> int:
    """
    Rounds a non-negative number to the nearest integer. Ties are rounded up, e.g., 2.5 is rounded to 3.

    Args:
        value: Number to round.

    Returns:
        Rounded number.
    """

    return int(math.floor(value + 0.5))


def nearest_neighbor_indices(xyz: FloatArray, k: int) -> LongArray:
    r"""
    Exact brute-force search for the :code:`k` nearest neighbors of each point within the same point set. A point is
    not included in its own neighborhood. Neighbors with equal distance are ordered by their index, so that the result
    is deterministic.

    Args:
        xyz: Point coordinates.
        k: Number of neighbors to search. If a point has fewer than :code:`k` other points, all other points are
            returned.

    Returns:
        Indices of the neighbors of each point, sorted by increasing distance.

    Raises:
        ValueError: If :code:`k` is not positive.

    Shape:
        - :code:`xyz`: :math:`(N, 3)`
        - Output: :math:`(N, min(k, N - 1))`

        | where
        |
        | :math:`N = \text{ number of points}`
    """

    if k <= 0:
        raise ValueError("k must be a positive integer.")

    num_points = len(xyz)
    k = min(k, max(num_points - 1, 0))
    if num_points == 0 or k == 0:
        return np.empty((num_points, 0), dtype=np.int64)

    dists = cdist(xyz, xyz)
    np.fill_diagonal(dists, np.inf)

    # a stable sort keeps lower indices first among neighbors with equal distance
    sorting_indices = np.argsort(dists, axis=1, kind="stable")

    return sorting_indices[:, :k].astype(np.int64)


def neighborhood_top_heights(heights: FloatArray, neighbor_indices: LongArray, top_n: int) -> FloatArray:
    r"""
    Computes for each point the mean height of the :code:`top_n` highest points in its neighborhood.

    Args:
        heights: Height of each point.
        neighbor_indices: Indices of the neighbors of each point.
        top_n: Number of highest neighbors to average. If a point has fewer neighbors, all of them are averaged.

    Returns:
        Mean height of the highest neighbors of each point. For points without neighbors, the value is NaN.

    Shape:
        - :code:`heights`: :math:`(N)`
        - :code:`neighbor_indices`: :math:`(N, K)`
        - Output: :math:`(N)`

        | where
        |
        | :math:`N = \text{ number of points}`
        | :math:`K = \text{ number of neighbors}`
    """

    if neighbor_indices.shape[1] == 0:
        return np.full(len(heights), fill_value=np.nan, dtype=np.float64)

    neighbor_heights = np.sort(heights[neighbor_indices], axis=1)[:, ::-1]
    top_n = min(top_n, neighbor_indices.shape[1])

    return neighbor_heights[:, :top_n].mean(axis=1)


def adaptive_leaf_filter(
    leaf_nodes: LeafNodeSet, skeleton_height: float, filter_percentage: float = 0.15
) -> LeafNodeSet:
    r"""
    Removes leaf nodes whose height deviates from the canopy profile of their spatial neighborhood. The filter
    proceeds as follows:

    1. The height tolerance is set to :math:`h_l = H \cdot p`, where :math:`H` is the height range of the whole
       skeleton and :math:`p` is the :code:`filter_percentage`.
    2. The neighborhood size is set to :math:`n = max(1, round(L \cdot p))`, where :math:`L` is the number of leaf
       nodes, and the number of neighbors to average is set to :math:`n_{top} = max(1, round(n \cdot p))`.
    3. For each leaf node with height :math:`h_a`, the :math:`n` nearest other leaf nodes are determined and the mean
       height :math:`h_{ne}` of the :math:`n_{top}` highest of them is computed.
    4. A leaf node is kept if :math:`|h_{ne} - h_a| \leq h_l`.

    A leaf node that has no neighbors (i.e., if there is only one leaf node) is always kept.

    Args:
        leaf_nodes: Leaf nodes to filter.
        skeleton_height: Height range of all skeleton vertices (not only of the leaf nodes).
        filter_percentage: Percentage :math:`p \in (0, 1]` used to derive the height tolerance and the neighborhood
            sizes. Defaults to 0.15.

    Returns:
        Leaf nodes that passed the filter in their original order.

    Raises:
        ValueError: If :code:`filter_percentage` is not within :math:`(0, 1]`.
    """

    if not 0 < filter_percentage <= 1:
        raise ValueError("filter_percentage must be within the interval (0, 1].")

    num_leaf_nodes = len(leaf_nodes)
    if num_leaf_nodes == 0:
        return leaf_nodes

    height_tolerance = skeleton_height * filter_percentage
    num_neighbors = max(1, round_half_up(num_leaf_nodes * filter_percentage))
    top_n = max(1, round_half_up(num_neighbors * filter_percentage))

    neighbor_indices = nearest_neighbor_indices(leaf_nodes.xyz, num_neighbors)
    neighborhood_heights = neighborhood_top_heights(leaf_nodes.heights, neighbor_indices, top_n)

    height_deviations = np.abs(neighborhood_heights - leaf_nodes.heights)
    keep_mask = np.logical_or(np.isnan(neighborhood_heights), height_deviations <= height_tolerance)

    return leaf_nodes.subset(keep_mask)
