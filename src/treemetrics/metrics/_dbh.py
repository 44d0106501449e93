""" Diameter at breast height estimated from the vertices of the branch mesh. """

__all__ = ["compute_dbh"]

import math

from treemetrics.operations import count_stems, planar_diameter, points_at_height, taper_corrected_diameter
from treemetrics.structures import MeshVertexCloud
from treemetrics.type_aliases import FloatArray
from ._errors import MetricErrorKind
from ._results import DBHResult

_TAPER_MEASUREMENT_HEIGHT = 1.0
_TAPER_FALLBACK_MEASUREMENT_HEIGHT = 0.7


def _insufficient_data(height: float) -> DBHResult:
    return DBHResult(error=f"No mesh vertices at height {height:.2f} m", error_kind=MetricErrorKind.INSUFFICIENT_DATA)


def _finalize(dbh_cm: float, method: str) -> DBHResult:
    if dbh_cm <= 0:
        return DBHResult(
            error="Stem diameter is zero, the height slice is too sparse",
            error_kind=MetricErrorKind.INSUFFICIENT_DATA,
        )
    return DBHResult(success=True, dbh_cm=dbh_cm, method_used=method)


def _synthetic_dbh(
    vertices: FloatArray, breast_height: float, height_tolerance: float, cluster_distance: float
) -> DBHResult:
    slice_xyz = points_at_height(vertices, breast_height, tolerance=height_tolerance)
    if len(slice_xyz) == 0:
        return _insufficient_data(breast_height)

    stem_count = count_stems(slice_xyz[:, :2], distance_threshold=cluster_distance)
    diameter = planar_diameter(slice_xyz[:, :2])

    if stem_count == 1:
        return _finalize(diameter * 100, "synthetic")

    # area-equivalent diameter of stem_count stems of equal size
    individual_diameter = diameter / stem_count
    return _finalize(individual_diameter * math.sqrt(stem_count) * 100, "synthetic")


def _taper_dbh(
    vertices: FloatArray, h0: float, breast_height: float, height_tolerance: float, cluster_distance: float
) -> DBHResult:
    measurement_height = (
        _TAPER_MEASUREMENT_HEIGHT if h0 >= _TAPER_MEASUREMENT_HEIGHT else _TAPER_FALLBACK_MEASUREMENT_HEIGHT
    )

    slice_xyz = points_at_height(vertices, measurement_height, tolerance=height_tolerance)
    if len(slice_xyz) == 0:
        return _insufficient_data(measurement_height)

    stem_count = count_stems(slice_xyz[:, :2], distance_threshold=cluster_distance)

    if stem_count != 1 and measurement_height == _TAPER_MEASUREMENT_HEIGHT:
        measurement_height = _TAPER_FALLBACK_MEASUREMENT_HEIGHT
        slice_xyz = points_at_height(vertices, measurement_height, tolerance=height_tolerance)
        stem_count = count_stems(slice_xyz[:, :2], distance_threshold=cluster_distance)

    if stem_count != 1:
        return DBHResult(
            error=f"Stem is forked at {measurement_height:.2f} m ({stem_count} stems detected)",
            error_kind=MetricErrorKind.UNRESOLVED_FORK,
        )

    diameter_cm = planar_diameter(slice_xyz[:, :2]) * 100
    return _finalize(taper_corrected_diameter(diameter_cm, measurement_height, target_height=breast_height), "taper")


def compute_dbh(  # pylint: disable=too-many-arguments
    mesh: MeshVertexCloud,
    h0: float,
    height_tolerance: float = 0.05,
    cluster_distance: float = 0.3,
    breast_height: float = 1.3,
    min_crown_base_height: float = 0.7,
) -> DBHResult:
    r"""
    Estimates the diameter at breast height (DBH) from the vertices of the stem and branch mesh. The diameter of a
    horizontal slice of the mesh is the largest planar distance between two of its vertices, and the number of stems
    in a slice is estimated using :code:`treemetrics.operations.count_stems`. Depending on the crown-base height h0,
    one of two methods is used:

    - **Synthetic DBH** (:math:`h_0 > 1.3`): The mesh is sliced at breast height. For a single stem, the DBH is the
      slice diameter. For :math:`k > 1` stems, all stems are assumed to be of equal size and the DBH is set to the
      area-equivalent diameter :math:`d / k \cdot \sqrt{k}`.
    - **Taper model** (:math:`0.7 \leq h_0 \leq 1.3`): The mesh is sliced at 1.0 m if :math:`h_0 \geq 1.0` and at
      0.7 m otherwise. If the stem is forked at 1.0 m, the measurement is repeated once at 0.7 m. The diameter
      :math:`D_{POM}` of the single stem is converted to breast height using the taper model
      :math:`D_{POM} \cdot (1.3 / h_{POM})^a` with :math:`a = -0.156 + 0.048 \cdot D_{POM}`.

    Args:
        mesh: Vertices of the stem and branch mesh.
        h0: Crown-base height of the tree in meters.
        height_tolerance: Maximum vertical distance of a vertex from the slice height. Defaults to 0.05.
        cluster_distance: Distance threshold of the stem clustering. Defaults to 0.3.
        breast_height: Breast height in meters. Defaults to 1.3.
        min_crown_base_height: Minimum crown-base height required to compute the DBH. Defaults to 0.7.

    Returns:
        DBH result with the DBH in centimeters. The result is unsuccessful if the mesh is empty, if h0 is below
        :code:`min_crown_base_height`, if a height slice contains no vertices, or if the stem is forked at all
        permitted measurement heights.
    """

    if len(mesh) == 0:
        return DBHResult(error="Mesh has no vertices", error_kind=MetricErrorKind.INPUT_MISSING)

    if h0 < min_crown_base_height:
        return DBHResult(
            error=f"Crown-base height {h0:.2f} m is below {min_crown_base_height:.2f} m",
            error_kind=MetricErrorKind.CONDITION_NOT_MET,
        )

    if h0 > breast_height:
        return _synthetic_dbh(mesh.vertices, breast_height, height_tolerance, cluster_distance)

    return _taper_dbh(mesh.vertices, h0, breast_height, height_tolerance, cluster_distance)
