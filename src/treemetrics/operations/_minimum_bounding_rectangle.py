""" Minimum-area bounding rectangle of a convex polygon. """

__all__ = ["minimum_bounding_rectangle"]

from typing import Tuple

import numpy as np

from treemetrics.type_aliases import FloatArray


def minimum_bounding_rectangle(hull_xy: FloatArray, edge_epsilon: float = 1e-10) -> Tuple[float, float]:
    r"""
    Computes the extents of the minimum-area bounding rectangle of a convex polygon using the rotating calipers
    approach: For each polygon edge, the polygon vertices are projected onto the edge direction and onto the direction
    perpendicular to it. The extents of the projections define a bounding rectangle aligned with the edge and the
    rectangle with the smallest area is selected. If multiple edges yield the same minimal area, the first of these
    edges is used.

    Args:
        hull_xy: Vertices of the convex polygon in the order in which they appear along its outline.
        edge_epsilon: Polygon edges shorter than this length are skipped. Defaults to :math:`10^{-10}`.

    Returns:
        Extent of the rectangle along the direction of the selected edge and extent perpendicular to it. If the polygon
        has no edge that is longer than :code:`edge_epsilon`, both extents are zero.

    Raises:
        ValueError: If :code:`hull_xy` has an invalid shape.

    Shape:
        - :code:`hull_xy`: :math:`(H, 2)`
        - Output: Tuple of two floats.

        | where
        |
        | :math:`H = \text{ number of polygon vertices}`
    """

    if hull_xy.ndim != 2 or hull_xy.shape[1] != 2:
        raise ValueError("hull_xy must be an array of 2D coordinates.")

    min_area = np.inf
    best_extents = (0.0, 0.0)

    edge_vectors = np.roll(hull_xy, -1, axis=0) - hull_xy
    edge_lengths = np.linalg.norm(edge_vectors, axis=1)

    for edge_vector, edge_length in zip(edge_vectors, edge_lengths):
        if edge_length < edge_epsilon:
            continue

        direction = edge_vector / edge_length
        perpendicular = np.array([-direction[1], direction[0]])

        projections_direction = hull_xy @ direction
        projections_perpendicular = hull_xy @ perpendicular

        width = float(projections_direction.max() - projections_direction.min())
        height = float(projections_perpendicular.max() - projections_perpendicular.min())
        area = width * height

        if area < min_area:
            min_area = area
            best_extents = (width, height)

    return best_extents
