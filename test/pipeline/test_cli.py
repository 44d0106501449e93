""" Tests for treemetrics.cli. """

import logging
import os

import pandas as pd

from treemetrics.cli import main

from test.utils import write_tree_files  # pylint: disable=wrong-import-order


class TestCli:
    """Tests for treemetrics.cli.main."""

    def test_main(self, tmp_path):
        input_dir = str(tmp_path / "input")
        output_dir = str(tmp_path / "output")
        os.makedirs(input_dir)
        write_tree_files(input_dir, "tree_1")
        write_tree_files(input_dir, "tree_2")
        summary_path = str(tmp_path / "summary.csv")

        exit_code = main([input_dir, output_dir, "--summary-csv", summary_path, "--no-volume", "--top-n", "3"])

        assert exit_code == 0
        summary = pd.read_csv(summary_path)
        assert list(summary["Tree_ID"]) == ["tree_1", "tree_2"]
        assert (summary["Volume_m3"] == 0).all()
        assert (summary["Height"] > 0).all()
        assert os.path.exists(os.path.join(output_dir, "tree_1_filtered.xyz"))

    def test_default_summary_path(self, tmp_path):
        write_tree_files(str(tmp_path), "tree_1")

        exit_code = main([str(tmp_path), "--preset", "dense", "--no-crown"])

        assert exit_code == 0
        summary = pd.read_csv(str(tmp_path / "summary.csv"))
        assert summary["Crown_Radius"].iloc[0] == 0

    def test_logs_stage_summary(self, tmp_path, caplog):
        write_tree_files(str(tmp_path), "tree_1")

        with caplog.at_level(logging.INFO):
            exit_code = main([str(tmp_path)])

        assert exit_code == 0
        assert "Processing time per stage" in caplog.text
        assert "Leaf filtering" in caplog.text

    def test_no_trees(self, tmp_path):
        assert main([str(tmp_path)]) == 1

    def test_missing_directory(self, tmp_path):
        assert main([str(tmp_path / "missing")]) == 1

    def test_invalid_parameter(self, tmp_path):
        assert main([str(tmp_path), "--filter-ratio", "2"]) == 2
