""" Minimum enclosing circle of 2D points. """

__all__ = ["minimum_enclosing_circle"]

from typing import Optional, Tuple

import numpy as np

from treemetrics.type_aliases import FloatArray

Circle = Tuple[float, float, float]

_RELATIVE_EPSILON = 1e-12


def _contains(circle: Circle, point: FloatArray) -> bool:
    center_x, center_y, radius = circle
    return float(np.hypot(point[0] - center_x, point[1] - center_y)) <= radius * (1 + _RELATIVE_EPSILON) + 1e-15


def _diameter_circle(point_a: FloatArray, point_b: FloatArray) -> Circle:
    center_x = (point_a[0] + point_b[0]) / 2
    center_y = (point_a[1] + point_b[1]) / 2
    radius = max(
        float(np.hypot(point_a[0] - center_x, point_a[1] - center_y)),
        float(np.hypot(point_b[0] - center_x, point_b[1] - center_y)),
    )
    return float(center_x), float(center_y), radius


def _circumcircle(point_a: FloatArray, point_b: FloatArray, point_c: FloatArray) -> Optional[Circle]:
    # coordinates are shifted to the center of the bounding box to improve the numerical stability
    offset_x = (min(point_a[0], point_b[0], point_c[0]) + max(point_a[0], point_b[0], point_c[0])) / 2
    offset_y = (min(point_a[1], point_b[1], point_c[1]) + max(point_a[1], point_b[1], point_c[1])) / 2
    ax, ay = point_a[0] - offset_x, point_a[1] - offset_y
    bx, by = point_b[0] - offset_x, point_b[1] - offset_y
    cx, cy = point_c[0] - offset_x, point_c[1] - offset_y

    determinant = (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by)) * 2
    if determinant == 0:
        return None

    center_x = offset_x + (
        (ax * ax + ay * ay) * (by - cy) + (bx * bx + by * by) * (cy - ay) + (cx * cx + cy * cy) * (ay - by)
    ) / determinant
    center_y = offset_y + (
        (ax * ax + ay * ay) * (cx - bx) + (bx * bx + by * by) * (ax - cx) + (cx * cx + cy * cy) * (bx - ax)
    ) / determinant

    radius = max(
        float(np.hypot(point[0] - center_x, point[1] - center_y)) for point in (point_a, point_b, point_c)
    )
    return float(center_x), float(center_y), radius


def _cross_product(point_a: FloatArray, point_b: FloatArray, x: float, y: float) -> float:
    return float((point_b[0] - point_a[0]) * (y - point_a[1]) - (point_b[1] - point_a[1]) * (x - point_a[0]))


def _circle_with_two_boundary_points(xy: FloatArray, point_a: FloatArray, point_b: FloatArray) -> Circle:
    circle = _diameter_circle(point_a, point_b)
    left: Optional[Circle] = None
    right: Optional[Circle] = None

    for point in xy:
        if _contains(circle, point):
            continue

        cross = _cross_product(point_a, point_b, point[0], point[1])
        candidate = _circumcircle(point_a, point_b, point)
        if candidate is None:
            continue
        candidate_cross = _cross_product(point_a, point_b, candidate[0], candidate[1])
        if cross > 0 and (left is None or candidate_cross > _cross_product(point_a, point_b, left[0], left[1])):
            left = candidate
        elif cross < 0 and (right is None or candidate_cross < _cross_product(point_a, point_b, right[0], right[1])):
            right = candidate

    if left is None and right is None:
        return circle
    if left is None:
        return right  # type: ignore[return-value]
    if right is None:
        return left
    return left if left[2] <= right[2] else right


def _circle_with_one_boundary_point(xy: FloatArray, point: FloatArray) -> Circle:
    circle: Circle = (float(point[0]), float(point[1]), 0.0)

    for idx, other_point in enumerate(xy):
        if _contains(circle, other_point):
            continue
        if circle[2] == 0:
            circle = _diameter_circle(point, other_point)
        else:
            circle = _circle_with_two_boundary_points(xy[: idx + 1], point, other_point)

    return circle


def minimum_enclosing_circle(xy: FloatArray) -> Circle:
    r"""
    Computes the smallest circle that contains all given 2D points. The circle is constructed incrementally as
    described in `Welzl, Emo. "Smallest Enclosing Disks (Balls and Ellipsoids)." New Results and New Trends in
    Computer Science. Springer, 1991. 359-370. <https://doi.org/10.1007/BFb0038202>`__ The points are processed in
    their input order without random shuffling, so that the result is deterministic. Without shuffling the worst-case
    runtime is cubic in the number of points, which is why the circle should be computed from the vertices of the
    convex hull rather than from all points.

    Args:
        xy: Coordinates of the points.

    Returns:
        X- and y-coordinate of the circle center and the circle radius.

    Raises:
        ValueError: If :code:`xy` is empty or has an invalid shape.

    Shape:
        - :code:`xy`: :math:`(N, 2)`
        - Output: Tuple of three floats.

        | where
        |
        | :math:`N = \text{ number of points}`
    """

    if xy.ndim != 2 or xy.shape[1] != 2:
        raise ValueError("xy must be an array of 2D coordinates.")
    if len(xy) == 0:
        raise ValueError("The minimum enclosing circle of an empty point set is undefined.")

    xy = xy.astype(np.float64)
    circle: Optional[Circle] = None

    for idx, point in enumerate(xy):
        if circle is None or not _contains(circle, point):
            circle = _circle_with_one_boundary_point(xy[: idx + 1], point)

    return circle  # type: ignore[return-value]
