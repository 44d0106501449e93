""" Tree height, crown-base height, and crown depth. """

__all__ = ["compute_height", "compute_h0", "compute_crown_depth"]

from treemetrics.operations import select_bottom_n, select_top_n
from treemetrics.structures import FilteredPointSet
from ._errors import MetricErrorKind
from ._results import CrownDepthResult, HeightResult


def compute_height(points: FilteredPointSet, top_n: int = 5) -> HeightResult:
    """
    Estimates the tree height as the mean height of the :code:`top_n` highest canopy points.

    Args:
        points: Canopy points of the tree.
        top_n: Number of highest points to average. If there are fewer points, all points are averaged. Defaults to 5.

    Returns:
        Tree height result. The result is unsuccessful if :code:`points` is empty or :code:`top_n` is not positive.
    """

    if len(points) == 0:
        return HeightResult(error="No points provided", error_kind=MetricErrorKind.INPUT_MISSING)
    if top_n <= 0:
        return HeightResult(error=f"Invalid top_n value: {top_n}", error_kind=MetricErrorKind.INVALID_PARAMETER)

    top_points = select_top_n(points.xyz, top_n)

    return HeightResult(success=True, tree_height=float(top_points[:, 2].mean()), point_count=len(top_points))


def compute_h0(points: FilteredPointSet, bottom_n: int = 5) -> CrownDepthResult:
    """
    Estimates the crown-base height h0 as the mean height of the :code:`bottom_n` lowest canopy points. The crown depth
    of the returned result is not computed and left at zero.

    Args:
        points: Canopy points of the tree.
        bottom_n: Number of lowest points to average. If there are fewer points, all points are averaged. Defaults to
            5.

    Returns:
        Crown-base height result. The result is unsuccessful if :code:`points` is empty or :code:`bottom_n` is not
        positive.
    """

    if len(points) == 0:
        return CrownDepthResult(error="No points provided", error_kind=MetricErrorKind.INPUT_MISSING)
    if bottom_n <= 0:
        return CrownDepthResult(
            error=f"Invalid bottom_n value: {bottom_n}", error_kind=MetricErrorKind.INVALID_PARAMETER
        )

    bottom_points = select_bottom_n(points.xyz, bottom_n)

    return CrownDepthResult(success=True, h0=float(bottom_points[:, 2].mean()), point_count=len(bottom_points))


def compute_crown_depth(points: FilteredPointSet, tree_height: float, bottom_n: int = 5) -> CrownDepthResult:
    """
    Computes the crown-base height h0 and the crown depth :code:`tree_height - h0`. The crown depth is not clamped, so
    it is negative if h0 exceeds the tree height.

    Args:
        points: Canopy points of the tree.
        tree_height: Tree height in meters.
        bottom_n: Number of lowest points to average for the crown-base height. Defaults to 5.

    Returns:
        Crown depth result. The result is unsuccessful if :code:`points` is empty or if :code:`tree_height` or
        :code:`bottom_n` are not positive.
    """

    if len(points) == 0:
        return CrownDepthResult(error="No points provided", error_kind=MetricErrorKind.INPUT_MISSING)
    if tree_height <= 0:
        return CrownDepthResult(
            error=f"Invalid tree height: {tree_height}", error_kind=MetricErrorKind.INVALID_PARAMETER
        )

    h0_result = compute_h0(points, bottom_n)
    if not h0_result.success:
        return h0_result

    return CrownDepthResult(
        success=True,
        h0=h0_result.h0,
        crown_depth=tree_height - h0_result.h0,
        point_count=h0_result.point_count,
    )
