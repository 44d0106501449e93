""" Tests for the adaptive leaf filter in treemetrics.operations. """

import numpy as np
import pytest

from treemetrics.operations import (
    adaptive_leaf_filter,
    nearest_neighbor_indices,
    neighborhood_top_heights,
    round_half_up,
)
from treemetrics.structures import LeafNodeSet


def _leaf_nodes(xyz: np.ndarray) -> LeafNodeSet:
    return LeafNodeSet(xyz, np.ones(len(xyz)), np.arange(len(xyz)))


class TestAdaptiveLeafFilter:
    """Tests for treemetrics.operations.adaptive_leaf_filter."""

    def test_outlier_removed(self):
        xyz = np.column_stack([np.arange(10, dtype=np.float64), np.zeros(10), np.full(10, fill_value=10.0)])
        xyz[5, 2] = 2.0

        filtered_leaf_nodes = adaptive_leaf_filter(_leaf_nodes(xyz), skeleton_height=10, filter_percentage=0.15)

        np.testing.assert_array_equal(np.array([0, 1, 2, 3, 4, 6, 7, 8, 9]), filtered_leaf_nodes.original_indices)

    def test_large_tolerance_keeps_all(self):
        xyz = np.column_stack([np.arange(10, dtype=np.float64), np.zeros(10), np.full(10, fill_value=10.0)])
        xyz[5, 2] = 2.0

        filtered_leaf_nodes = adaptive_leaf_filter(_leaf_nodes(xyz), skeleton_height=10, filter_percentage=1.0)

        assert len(filtered_leaf_nodes) == 10

    def test_single_leaf_kept(self):
        leaf_nodes = _leaf_nodes(np.array([[0, 0, 5]], dtype=np.float64))

        filtered_leaf_nodes = adaptive_leaf_filter(leaf_nodes, skeleton_height=5)

        assert len(filtered_leaf_nodes) == 1

    def test_empty(self):
        leaf_nodes = _leaf_nodes(np.empty((0, 3)))

        assert len(adaptive_leaf_filter(leaf_nodes, skeleton_height=5)) == 0

    def test_deterministic(self):
        random_generator = np.random.default_rng(seed=1)
        xyz = random_generator.uniform(0, 10, size=(50, 3))

        first_result = adaptive_leaf_filter(_leaf_nodes(xyz), skeleton_height=10, filter_percentage=0.15)
        second_result = adaptive_leaf_filter(_leaf_nodes(xyz), skeleton_height=10, filter_percentage=0.15)

        np.testing.assert_array_equal(first_result.original_indices, second_result.original_indices)

    def test_subset_of_input_in_order(self):
        random_generator = np.random.default_rng(seed=2)
        xyz = random_generator.uniform(0, 10, size=(40, 3))

        filtered_leaf_nodes = adaptive_leaf_filter(_leaf_nodes(xyz), skeleton_height=10, filter_percentage=0.15)

        assert np.all(np.diff(filtered_leaf_nodes.original_indices) > 0)
        np.testing.assert_array_equal(xyz[filtered_leaf_nodes.original_indices], filtered_leaf_nodes.xyz)

    @pytest.mark.parametrize("skeleton_height, expected_indices", [(2.0, [2]), (1.9, [])])
    def test_multiple_top_neighbors(self, skeleton_height: float, expected_indices):
        # five leaves with p = 0.5 give n = 3 neighbors and a top-2 mean; leaves 3 and 4 are equidistant from
        # leaves 0 and 1, so the lower index 3 enters their neighborhoods
        xyz = np.array([[0, 0, 10], [1, 0, 10], [2, 0, 11], [0, 3, 14], [0, -3, 6]], dtype=np.float64)

        filtered_leaf_nodes = adaptive_leaf_filter(
            _leaf_nodes(xyz), skeleton_height=skeleton_height, filter_percentage=0.5
        )

        # leaf 2 deviates by exactly 1.0 from the mean of its two highest neighbors (14 and 10)
        np.testing.assert_array_equal(np.array(expected_indices, dtype=np.int64), filtered_leaf_nodes.original_indices)

    def test_tie_break_decides_acceptance(self):
        # same leaves as above with leaves 3 and 4 swapped, so that the lower leaf now wins the tie
        xyz = np.array([[0, 0, 10], [1, 0, 10], [2, 0, 11], [0, -3, 6], [0, 3, 14]], dtype=np.float64)

        filtered_leaf_nodes = adaptive_leaf_filter(_leaf_nodes(xyz), skeleton_height=2, filter_percentage=0.5)

        np.testing.assert_array_equal(np.array([0, 1, 2]), filtered_leaf_nodes.original_indices)

    @pytest.mark.parametrize("filter_percentage", [0.0, -0.1, 1.5])
    def test_invalid_filter_percentage(self, filter_percentage: float):
        with pytest.raises(ValueError):
            adaptive_leaf_filter(_leaf_nodes(np.zeros((2, 3))), skeleton_height=1, filter_percentage=filter_percentage)


class TestNearestNeighborIndices:
    """Tests for treemetrics.operations.nearest_neighbor_indices."""

    def test_ties_ordered_by_index(self):
        xyz = np.array([[0, 0, 0], [1, 0, 0], [-1, 0, 0]], dtype=np.float64)

        neighbor_indices = nearest_neighbor_indices(xyz, 1)

        np.testing.assert_array_equal(np.array([[1], [0], [0]]), neighbor_indices)

    def test_k_larger_than_point_count(self):
        xyz = np.array([[0, 0, 0], [1, 0, 0], [3, 0, 0]], dtype=np.float64)

        neighbor_indices = nearest_neighbor_indices(xyz, 10)

        np.testing.assert_array_equal(np.array([[1, 2], [0, 2], [1, 0]]), neighbor_indices)

    def test_single_point(self):
        neighbor_indices = nearest_neighbor_indices(np.zeros((1, 3)), 3)

        assert neighbor_indices.shape == (1, 0)

    def test_invalid_k(self):
        with pytest.raises(ValueError):
            nearest_neighbor_indices(np.zeros((2, 3)), 0)


class TestNeighborhoodTopHeights:
    """Tests for treemetrics.operations.neighborhood_top_heights."""

    def test_top_heights(self):
        heights = np.array([1, 2, 3], dtype=np.float64)
        neighbor_indices = np.array([[1, 2], [0, 2], [0, 1]])

        np.testing.assert_array_equal(np.array([3, 3, 2]), neighborhood_top_heights(heights, neighbor_indices, 1))
        np.testing.assert_array_equal(
            np.array([2.5, 2, 1.5]), neighborhood_top_heights(heights, neighbor_indices, 5)
        )

    def test_no_neighbors(self):
        heights = np.array([1.0])

        assert np.isnan(neighborhood_top_heights(heights, np.empty((1, 0), dtype=np.int64), 1)[0])


class TestRoundHalfUp:
    """Tests for treemetrics.operations.round_half_up."""

    @pytest.mark.parametrize("value, expected", [(0.0, 0), (0.3, 0), (0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2)])
    def test_round_half_up(self, value: float, expected: int):
        assert round_half_up(value) == expected
