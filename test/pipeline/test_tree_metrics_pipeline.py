""" Tests for treemetrics.pipeline.TreeMetricsPipeline. """

import os

import numpy as np
import pytest

from treemetrics.io import read_filtered_points, write_filtered_points
from treemetrics.pipeline import TreeMetricsPipeline
from treemetrics.structures import FilteredPointSet

from test.utils import (  # pylint: disable=wrong-import-order
    STEM_RADIUS,
    generate_stem_mesh,
    write_obj,
    write_tree_files,
)


def _prism_volume(radius: float, height: float, num_sections: int = 16) -> float:
    return 0.5 * num_sections * radius**2 * np.sin(2 * np.pi / num_sections) * height


class TestTreeMetricsPipeline:
    """Tests for treemetrics.pipeline.TreeMetricsPipeline."""

    def test_process_tree(self, tmp_path):
        input_dir = str(tmp_path / "input")
        output_dir = str(tmp_path / "output")
        os.makedirs(input_dir)
        write_tree_files(input_dir, "tree_1")

        pipeline = TreeMetricsPipeline()
        metrics = pipeline.process_tree(
            "tree_1",
            os.path.join(input_dir, "tree_1_skeleton.ply"),
            os.path.join(input_dir, "tree_1_branches.obj"),
            output_dir,
        )

        assert metrics.tree_id == "tree_1"
        assert metrics.processing_time != ""
        assert metrics.has_skeleton_data
        assert metrics.leaf_nodes_total == 10
        assert metrics.leaf_nodes_filtered == 10
        assert metrics.height == pytest.approx(7.1, abs=1e-5)
        assert metrics.h0 == pytest.approx(7.0, abs=1e-5)
        assert metrics.crown_depth == pytest.approx(0.1, abs=1e-5)
        assert metrics.crown_radius == pytest.approx(2, abs=1e-5)
        assert metrics.crown_diameter == pytest.approx(2 * metrics.crown_radius)
        assert metrics.max_crown_width >= metrics.min_crown_width > 0
        assert metrics.crown_aspect_ratio >= 1
        assert metrics.dbh == pytest.approx(20, abs=1e-3)
        assert metrics.dbh_method == "synthetic"
        assert metrics.volume == pytest.approx(_prism_volume(STEM_RADIUS, 2.0), rel=1e-4)
        assert metrics.surface_area > 0
        assert metrics.mesh_is_closed
        assert metrics.errors == {}

        filtered_points = read_filtered_points(os.path.join(output_dir, "tree_1_filtered.xyz"))
        assert len(filtered_points) == 10

        performance_metrics = pipeline.performance_metrics()
        assert set(performance_metrics["Stage"]) == {"Total", "Leaf filtering", "Height", "Crown", "DBH", "Volume"}
        assert set(performance_metrics["Tree ID"]) == {"tree_1"}

        performance_summary = pipeline.performance_summary()
        assert set(performance_summary.index) == set(performance_metrics["Stage"])
        assert ("Wallclock Time [s]", "mean") in performance_summary.columns

    def test_disabled_crown_and_volume(self, tmp_path):
        write_tree_files(str(tmp_path), "tree_1")

        pipeline = TreeMetricsPipeline(calculate_crown=False, calculate_volume=False)
        metrics = pipeline.process_tree(
            "tree_1", str(tmp_path / "tree_1_skeleton.ply"), str(tmp_path / "tree_1_branches.obj")
        )

        assert metrics.height > 0
        assert metrics.crown_radius == 0
        assert metrics.volume == 0
        assert not metrics.mesh_is_closed
        assert metrics.dbh > 0
        assert not os.path.exists(str(tmp_path / "tree_1_filtered.xyz"))

    def test_without_mesh(self, tmp_path):
        write_tree_files(str(tmp_path), "tree_1", mesh_suffix=None)

        metrics = TreeMetricsPipeline().process_tree("tree_1", str(tmp_path / "tree_1_skeleton.ply"))

        assert metrics.height > 0
        assert metrics.dbh == 0
        assert metrics.dbh_method == "not computed"
        assert metrics.volume == 0

    def test_without_skeleton(self, tmp_path):
        write_tree_files(str(tmp_path), "tree_1", with_skeleton=False)

        metrics = TreeMetricsPipeline().process_tree("tree_1", mesh_path=str(tmp_path / "tree_1_branches.obj"))

        assert not metrics.has_skeleton_data
        assert metrics.height == 0
        assert metrics.h0 == 0
        assert metrics.dbh_method == "not computed"
        assert metrics.volume > 0

    def test_existing_filtered_points(self, tmp_path):
        write_tree_files(str(tmp_path), "tree_1", with_skeleton=False)
        xyz = np.array([[0, 0, 1.0], [1, 0, 1.0], [1, 1, 2.0], [0, 1, 2.0]], dtype=np.float64)
        write_filtered_points(FilteredPointSet(xyz), str(tmp_path / "tree_1_filtered.xyz"))

        metrics = TreeMetricsPipeline(top_n=2, bottom_n=2).process_tree(
            "tree_1", mesh_path=str(tmp_path / "tree_1_branches.obj"), output_dir=str(tmp_path)
        )

        assert not metrics.has_skeleton_data
        assert metrics.height == pytest.approx(2)
        assert metrics.h0 == pytest.approx(1)
        assert metrics.crown_depth == pytest.approx(1)
        assert metrics.crown_radius == pytest.approx(np.sqrt(2) / 2)
        assert metrics.dbh_method == "taper"
        assert metrics.dbh == pytest.approx(20 * 1.3**0.804, rel=1e-4)

    def test_dbh_failure(self, tmp_path):
        write_tree_files(str(tmp_path), "tree_1", mesh_suffix=None)
        write_obj(str(tmp_path / "tree_1_branches.obj"), generate_stem_mesh(STEM_RADIUS, [0.0, 3.0]))

        metrics = TreeMetricsPipeline().process_tree(
            "tree_1", str(tmp_path / "tree_1_skeleton.ply"), str(tmp_path / "tree_1_branches.obj")
        )

        assert metrics.dbh == 0
        assert metrics.dbh_method == "failed"
        assert "DBH" in metrics.errors
        assert metrics.volume > 0

    def test_invalid_skeleton_file(self, tmp_path):
        skeleton_path = str(tmp_path / "tree_1_skeleton.ply")
        with open(skeleton_path, "w", encoding="utf-8") as file:
            file.write("invalid\n")

        metrics = TreeMetricsPipeline().process_tree("tree_1", skeleton_path)

        assert not metrics.has_skeleton_data
        assert "leaf filtering" in metrics.errors
        assert metrics.height == 0

    def test_missing_mesh_file(self, tmp_path):
        metrics = TreeMetricsPipeline().process_tree("tree_1", mesh_path=str(tmp_path / "missing_branches.obj"))

        assert "mesh reading" in metrics.errors
        assert metrics.volume == 0

    @pytest.mark.parametrize(
        "parameters",
        [
            {"filter_percentage": 0},
            {"filter_percentage": 1.1},
            {"top_n": 0},
            {"bottom_n": -1},
            {"height_tolerance": -0.1},
            {"cluster_distance": 0},
        ],
    )
    def test_invalid_parameters(self, parameters):
        with pytest.raises(ValueError):
            TreeMetricsPipeline(**parameters)


class TestProcessDirectory:
    """Tests for treemetrics.pipeline.TreeMetricsPipeline.process_directory."""

    def test_process_directory(self, tmp_path):
        input_dir = str(tmp_path / "input")
        output_dir = str(tmp_path / "output")
        os.makedirs(input_dir)
        write_tree_files(input_dir, "tree_b")
        write_tree_files(input_dir, "tree_a", with_skeleton=False, mesh_suffix="_branches_filled.obj")
        with open(os.path.join(input_dir, "tree_c_skeleton.ply"), "w", encoding="utf-8") as file:
            file.write("invalid\n")
        with open(os.path.join(input_dir, "notes.txt"), "w", encoding="utf-8") as file:
            file.write("not a tree\n")

        batch_result = TreeMetricsPipeline().process_directory(input_dir, output_dir)

        assert batch_result.success_count == 2
        assert batch_result.failure_count == 1
        assert [tree.tree_id for tree in batch_result.trees] == ["tree_a", "tree_b"]
        assert batch_result.failed_tree_ids == ["tree_c"]
        assert os.path.exists(os.path.join(output_dir, "tree_b_filtered.xyz"))

    def test_find_tree_files_prefers_filled_mesh(self, tmp_path):
        write_tree_files(str(tmp_path), "tree_1")
        write_tree_files(str(tmp_path), "tree_1", with_skeleton=False, mesh_suffix="_branches_filled.obj")

        tree_files = TreeMetricsPipeline.find_tree_files(str(tmp_path))

        assert tree_files == [
            (
                "tree_1",
                os.path.join(str(tmp_path), "tree_1_skeleton.ply"),
                os.path.join(str(tmp_path), "tree_1_branches_filled.obj"),
            )
        ]

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            TreeMetricsPipeline().process_directory(str(tmp_path / "missing"))
