""" Extraction of the leaf nodes of a skeleton graph. """

__all__ = ["vertex_degrees", "extract_leaf_nodes"]

import numpy as np

from treemetrics.structures import LeafNodeSet, SkeletonGraph
from treemetrics.type_aliases import LongArray


def vertex_degrees(skeleton: SkeletonGraph) -> LongArray:
    r"""
    Computes the degree of each vertex of a skeleton graph. Each edge contributes one to the degree of both of its
    endpoints, so a self loop increases the degree of its vertex by two and duplicate edges are counted repeatedly.

    Args:
        skeleton: Skeleton graph.

    Returns:
        Degree of each vertex.

    Shape:
        - Output: :math:`(V)`

        | where
        |
        | :math:`V = \text{ number of vertices}`
    """

    edges = skeleton.edges.reshape(-1)  # type: ignore[union-attr]
    return np.bincount(edges, minlength=skeleton.num_vertices).astype(np.int64)


def extract_leaf_nodes(skeleton: SkeletonGraph) -> LeafNodeSet:
    """
    Extracts all vertices of degree one from a skeleton graph. For a graph without edges, the returned leaf node set is
    empty.

    Args:
        skeleton: Skeleton graph.

    Returns:
        Leaf nodes in the order in which they appear in the vertex array of the skeleton graph.
    """

    leaf_indices = np.flatnonzero(vertex_degrees(skeleton) == 1)

    return LeafNodeSet(
        skeleton.vertices[leaf_indices],
        skeleton.radii[leaf_indices],  # type: ignore[index]
        leaf_indices,
    )
