""" Result records of the tree measurements. """

__all__ = ["HeightResult", "CrownDepthResult", "CrownRadiusResult", "DBHResult", "LeafFilterResult", "VolumeResult"]

from dataclasses import dataclass
from typing import Optional, Tuple

from treemetrics.structures import FilteredPointSet
from ._errors import MetricErrorKind


@dataclass(frozen=True)
class HeightResult:
    """
    Result of the tree height estimation.

    Args:
        success: Whether the tree height could be computed.
        tree_height: Mean height of the highest points in meters.
        point_count: Number of points that were averaged.
        error: Error message if :code:`success` is :code:`False`, otherwise an empty string.
        error_kind: Kind of the error if :code:`success` is :code:`False`, otherwise :code:`None`.
    """

    success: bool = False
    tree_height: float = 0.0
    point_count: int = 0
    error: str = ""
    error_kind: Optional[MetricErrorKind] = None


@dataclass(frozen=True)
class CrownDepthResult:
    """
    Result of the estimation of the crown-base height and the crown depth.

    Args:
        success: Whether the measurement could be computed.
        h0: Crown-base height, i.e., mean height of the lowest points, in meters.
        crown_depth: Difference between the tree height and the crown-base height in meters. The value is not clamped
            and can be negative if the crown-base height exceeds the tree height.
        point_count: Number of points that were averaged.
        error: Error message if :code:`success` is :code:`False`, otherwise an empty string.
        error_kind: Kind of the error if :code:`success` is :code:`False`, otherwise :code:`None`.
    """

    success: bool = False
    h0: float = 0.0
    crown_depth: float = 0.0
    point_count: int = 0
    error: str = ""
    error_kind: Optional[MetricErrorKind] = None


@dataclass(frozen=True)
class CrownRadiusResult:  # pylint: disable=too-many-instance-attributes
    """
    Result of the crown geometry estimation.

    Args:
        success: Whether the crown geometry could be computed.
        crown_radius: Crown radius in meters.
        max_width: Longer side of the minimum bounding rectangle of the crown projection in meters.
        min_width: Shorter side of the minimum bounding rectangle of the crown projection in meters.
        aspect_ratio: Ratio of :code:`max_width` and :code:`min_width`. Set to 1.0 if :code:`min_width` is zero.
        total_points: Number of points from which the crown geometry was computed.
        error: Error message if :code:`success` is :code:`False`, otherwise an empty string.
        error_kind: Kind of the error if :code:`success` is :code:`False`, otherwise :code:`None`.
    """

    success: bool = False
    crown_radius: float = 0.0
    max_width: float = 0.0
    min_width: float = 0.0
    aspect_ratio: float = 0.0
    total_points: int = 0
    error: str = ""
    error_kind: Optional[MetricErrorKind] = None


@dataclass(frozen=True)
class DBHResult:
    """
    Result of the estimation of the diameter at breast height.

    Args:
        success: Whether the DBH could be computed.
        dbh_cm: Diameter at breast height in centimeters.
        method_used: :code:`"synthetic"` or :code:`"taper"` if :code:`success` is :code:`True`, otherwise an empty
            string.
        error: Error message if :code:`success` is :code:`False`, otherwise an empty string.
        error_kind: Kind of the error if :code:`success` is :code:`False`, otherwise :code:`None`.
    """

    success: bool = False
    dbh_cm: float = 0.0
    method_used: str = ""
    error: str = ""
    error_kind: Optional[MetricErrorKind] = None


@dataclass(frozen=True)
class LeafFilterResult:
    """
    Result of the leaf node extraction and filtering.

    Args:
        success: Whether at least one leaf node passed the filter.
        total_leaves: Number of leaf nodes of the skeleton graph.
        filtered_leaves: Number of leaf nodes that passed the filter.
        points: Positions and radii of the leaf nodes that passed the filter.
        error: Error message if :code:`success` is :code:`False`, otherwise an empty string.
        error_kind: Kind of the error if :code:`success` is :code:`False`, otherwise :code:`None`.
    """

    success: bool = False
    total_leaves: int = 0
    filtered_leaves: int = 0
    points: Optional[FilteredPointSet] = None
    error: str = ""
    error_kind: Optional[MetricErrorKind] = None


@dataclass(frozen=True)
class VolumeResult:  # pylint: disable=too-many-instance-attributes
    """
    Result of the mesh volume computation.

    Args:
        success: Whether the volume could be computed.
        is_closed: Whether the mesh is watertight. The volume of open meshes is only an approximation.
        num_vertices: Number of mesh vertices.
        num_faces: Number of mesh faces.
        volume: Absolute volume enclosed by the mesh in cubic meters.
        surface_area: Surface area of the mesh in square meters.
        bbox_min: Minimum corner of the axis-aligned bounding box.
        bbox_max: Maximum corner of the axis-aligned bounding box.
        bbox_volume: Volume of the axis-aligned bounding box in cubic meters.
        volume_ratio: Mesh volume in percent of the bounding box volume.
        error: Error message if :code:`success` is :code:`False`, otherwise an empty string.
        error_kind: Kind of the error if :code:`success` is :code:`False`, otherwise :code:`None`.
    """

    success: bool = False
    is_closed: bool = False
    num_vertices: int = 0
    num_faces: int = 0
    volume: float = 0.0
    surface_area: float = 0.0
    bbox_min: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    bbox_max: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    bbox_volume: float = 0.0
    volume_ratio: float = 0.0
    error: str = ""
    error_kind: Optional[MetricErrorKind] = None
