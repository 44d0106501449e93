""" Extraction and adaptive filtering of the leaf nodes of a skeleton graph. """

__all__ = ["filter_skeleton_leaves"]

from treemetrics.operations import adaptive_leaf_filter, extract_leaf_nodes
from treemetrics.structures import SkeletonGraph
from ._errors import MetricErrorKind
from ._results import LeafFilterResult


def filter_skeleton_leaves(skeleton: SkeletonGraph, filter_percentage: float = 0.15) -> LeafFilterResult:
    """
    Extracts the leaf nodes of a skeleton graph and keeps those that are consistent with the canopy profile of their
    neighborhood (see :code:`treemetrics.operations.adaptive_leaf_filter`).

    Args:
        skeleton: Skeleton graph of the tree.
        filter_percentage: Percentage used to derive the height tolerance and the neighborhood sizes of the filter.
            Defaults to 0.15.

    Returns:
        Filtering result. The result is unsuccessful if the skeleton has no vertices, if it has no leaf nodes, if the
        filter percentage is invalid, or if no leaf node passes the filter.
    """

    if skeleton.num_vertices == 0:
        return LeafFilterResult(error="Skeleton has no vertices", error_kind=MetricErrorKind.INPUT_MISSING)

    if not 0 < filter_percentage <= 1:
        return LeafFilterResult(
            error=f"Invalid filter percentage: {filter_percentage}", error_kind=MetricErrorKind.INVALID_PARAMETER
        )

    leaf_nodes = extract_leaf_nodes(skeleton)
    if len(leaf_nodes) == 0:
        return LeafFilterResult(error="No leaf nodes found", error_kind=MetricErrorKind.INSUFFICIENT_DATA)

    filtered_leaf_nodes = adaptive_leaf_filter(leaf_nodes, skeleton.height_range(), filter_percentage)
    if len(filtered_leaf_nodes) == 0:
        return LeafFilterResult(
            total_leaves=len(leaf_nodes),
            error="No leaf nodes after filtering",
            error_kind=MetricErrorKind.INSUFFICIENT_DATA,
        )

    return LeafFilterResult(
        success=True,
        total_leaves=len(leaf_nodes),
        filtered_leaves=len(filtered_leaf_nodes),
        points=filtered_leaf_nodes.to_point_set(),
    )
