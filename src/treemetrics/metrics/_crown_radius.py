""" Crown radius and crown widths from the planar projection of the canopy points. """

__all__ = ["compute_crown_radius"]

from treemetrics.operations import convex_hull_2d, minimum_bounding_rectangle, minimum_enclosing_circle
from treemetrics.structures import FilteredPointSet
from ._errors import MetricErrorKind
from ._results import CrownRadiusResult


def _aspect_ratio(max_width: float, min_width: float) -> float:
    return max_width / min_width if min_width > 0 else 1.0


def compute_crown_radius(points: FilteredPointSet, edge_epsilon: float = 1e-10) -> CrownRadiusResult:
    """
    Computes the crown geometry from the canopy points projected onto the xy-plane:

    - The crown radius is the radius of the minimum enclosing circle of the convex hull of the projected points.
    - The maximum and minimum crown width are the side lengths of the minimum-area bounding rectangle of the convex
      hull, which is determined using rotating calipers.

    If the convex hull has fewer than three vertices (fewer than three distinct points or collinear points), the
    axis-aligned bounding box of the projected points is used instead: Its side lengths are used as crown widths and
    the crown radius is set to the mean of the side lengths divided by two.

    Args:
        points: Canopy points of the tree.
        edge_epsilon: Hull edges shorter than this length are skipped by the rotating calipers. Defaults to
            :math:`10^{-10}`.

    Returns:
        Crown geometry result. The result is unsuccessful if :code:`points` is empty.
    """

    if len(points) == 0:
        return CrownRadiusResult(error="No points provided", error_kind=MetricErrorKind.INPUT_MISSING)

    xy = points.xyz[:, :2]
    hull_xy = convex_hull_2d(xy)

    if len(hull_xy) < 3:
        width_x, width_y = (float(extent) for extent in xy.max(axis=0) - xy.min(axis=0))
        max_width = max(width_x, width_y)
        min_width = min(width_x, width_y)
        return CrownRadiusResult(
            success=True,
            crown_radius=(width_x + width_y) / 4,
            max_width=max_width,
            min_width=min_width,
            aspect_ratio=_aspect_ratio(max_width, min_width),
            total_points=len(points),
        )

    _, _, crown_radius = minimum_enclosing_circle(hull_xy)
    width, height = minimum_bounding_rectangle(hull_xy, edge_epsilon=edge_epsilon)
    max_width = max(width, height)
    min_width = min(width, height)

    return CrownRadiusResult(
        success=True,
        crown_radius=crown_radius,
        max_width=max_width,
        min_width=min_width,
        aspect_ratio=_aspect_ratio(max_width, min_width),
        total_points=len(points),
    )
