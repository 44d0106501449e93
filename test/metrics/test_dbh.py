""" Tests for treemetrics.metrics.compute_dbh. """

import numpy as np
import pytest

from treemetrics.metrics import MetricErrorKind, compute_dbh
from treemetrics.structures import MeshVertexCloud

from test.utils import generate_ring_vertices  # pylint: disable=wrong-import-order


def _stem(*rings) -> MeshVertexCloud:
    vertices = [generate_ring_vertices(center, radius, height) for center, radius, height in rings]
    return MeshVertexCloud(np.vstack(vertices))


class TestComputeDBH:
    """Tests for treemetrics.metrics.compute_dbh."""

    def test_synthetic_single_stem(self):
        mesh = _stem(((0, 0), 0.1, 1.0), ((0, 0), 0.1, 1.3), ((0, 0), 0.12, 1.6))

        result = compute_dbh(mesh, h0=2.0)

        assert result.success
        assert result.method_used == "synthetic"
        assert result.dbh_cm == pytest.approx(20)

    def test_synthetic_three_points(self):
        mesh = MeshVertexCloud(np.array([[0.15, 0, 1.3], [0, 0, 1.3], [0.3, 0, 1.3]], dtype=np.float64))

        result = compute_dbh(mesh, h0=1.5)

        assert result.success
        assert result.method_used == "synthetic"
        assert result.dbh_cm == pytest.approx(30)

    def test_synthetic_two_stems(self):
        mesh = _stem(((0, 0), 0.1, 1.3), ((1, 0), 0.1, 1.3))

        result = compute_dbh(mesh, h0=3.0)

        assert result.success
        assert result.method_used == "synthetic"
        assert result.dbh_cm == pytest.approx(1.2 / 2 * np.sqrt(2) * 100)

    def test_taper_at_one_meter(self):
        mesh = _stem(((0, 0), 0.1, 0.7), ((0, 0), 0.1, 1.0), ((0, 0), 0.1, 1.3))

        result = compute_dbh(mesh, h0=1.1)

        assert result.success
        assert result.method_used == "taper"
        assert result.dbh_cm == pytest.approx(20 * 1.3**0.804)

    def test_taper_at_seventy_centimeters(self):
        mesh = _stem(((0, 0), 0.1, 0.7), ((0, 0), 0.15, 1.0))

        result = compute_dbh(mesh, h0=0.8)

        assert result.success
        assert result.method_used == "taper"
        assert result.dbh_cm == pytest.approx(20 * (1.3 / 0.7) ** 0.804)

    def test_h0_equal_to_breast_height_uses_taper(self):
        mesh = _stem(((0, 0), 0.1, 1.0), ((0, 0), 0.2, 1.3))

        result = compute_dbh(mesh, h0=1.3)

        assert result.method_used == "taper"
        assert result.dbh_cm == pytest.approx(20 * 1.3**0.804)

    def test_fork_resolved_at_lower_height(self):
        mesh = _stem(((0, 0), 0.1, 0.7), ((-0.5, 0), 0.1, 1.0), ((0.5, 0), 0.1, 1.0))

        result = compute_dbh(mesh, h0=1.2)

        assert result.success
        assert result.method_used == "taper"
        assert result.dbh_cm == pytest.approx(20 * (1.3 / 0.7) ** 0.804)

    def test_unresolved_fork(self):
        mesh = _stem(((-0.5, 0), 0.1, 0.7), ((0.5, 0), 0.1, 0.7), ((-0.5, 0), 0.1, 1.0), ((0.5, 0), 0.1, 1.0))

        result = compute_dbh(mesh, h0=1.2)

        assert not result.success
        assert result.error_kind == MetricErrorKind.UNRESOLVED_FORK

    def test_fork_with_empty_retry_slice(self):
        mesh = _stem(((-0.5, 0), 0.1, 1.0), ((0.5, 0), 0.1, 1.0))

        result = compute_dbh(mesh, h0=1.2)

        assert not result.success
        assert result.error_kind == MetricErrorKind.UNRESOLVED_FORK

    @pytest.mark.parametrize("h0", [0.5, 0.0, 0.69])
    def test_crown_base_too_low(self, h0: float):
        mesh = _stem(((0, 0), 0.1, 0.7), ((0, 0), 0.1, 1.3))

        result = compute_dbh(mesh, h0=h0)

        assert not result.success
        assert result.error_kind == MetricErrorKind.CONDITION_NOT_MET

    def test_empty_mesh(self):
        result = compute_dbh(MeshVertexCloud(np.empty((0, 3))), h0=2.0)

        assert not result.success
        assert result.error_kind == MetricErrorKind.INPUT_MISSING

    @pytest.mark.parametrize("h0", [2.0, 1.1])
    def test_empty_slice(self, h0: float):
        mesh = _stem(((0, 0), 0.1, 3.0))

        result = compute_dbh(mesh, h0=h0)

        assert not result.success
        assert result.error_kind == MetricErrorKind.INSUFFICIENT_DATA

    def test_zero_diameter(self):
        mesh = MeshVertexCloud(np.array([[0, 0, 1.3]], dtype=np.float64))

        result = compute_dbh(mesh, h0=2.0)

        assert not result.success
        assert result.error_kind == MetricErrorKind.INSUFFICIENT_DATA
