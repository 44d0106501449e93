""" Command line interface for computing the metrics of all trees in a directory. """

__all__ = ["main"]

import argparse
import logging
import os
from typing import List, Optional

from treemetrics.config import MetricsPresetDefault, MetricsPresetDense
from treemetrics.pipeline import TreeMetricsPipeline

_PRESETS = {"default": MetricsPresetDefault, "dense": MetricsPresetDense}


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="treemetrics",
        description="Computes height, crown, DBH, and volume metrics from tree skeletons and branch meshes.",
    )
    parser.add_argument(
        "input_dir", help="Directory containing <id>_skeleton.ply and <id>_branches[_filled].obj files."
    )
    parser.add_argument(
        "output_dir", nargs="?", default=None, help="Directory for the filtered points (default: input directory)."
    )
    parser.add_argument("--preset", choices=sorted(_PRESETS.keys()), default="default", help="Parameter preset.")
    parser.add_argument("--filter-ratio", type=float, default=None, help="Height tolerance of the leaf filter.")
    parser.add_argument("--top-n", type=int, default=None, help="Number of points averaged for the tree height.")
    parser.add_argument(
        "--bottom-n", type=int, default=None, help="Number of points averaged for the crown base height."
    )
    parser.add_argument("--no-crown", action="store_true", help="Skip the crown radius computation.")
    parser.add_argument("--no-volume", action="store_true", help="Skip the volume computation.")
    parser.add_argument(
        "--summary-csv", default=None, help="Path of the summary CSV (default: <output_dir>/summary.csv)."
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Runs the metric pipeline on all trees of a directory and writes a summary CSV file.

    Args:
        argv: Command line arguments. If set to :code:`None`, the arguments are read from :code:`sys.argv`.

    Returns:
        Exit code. Zero if at least one tree was processed successfully, otherwise one.
    """

    args = _parse_args(argv)

    preset = _PRESETS[args.preset]()
    if args.filter_ratio is not None:
        preset.filter_percentage = args.filter_ratio
    if args.top_n is not None:
        preset.top_n = args.top_n
    if args.bottom_n is not None:
        preset.bottom_n = args.bottom_n
    if args.no_crown:
        preset.calculate_crown = False
    if args.no_volume:
        preset.calculate_volume = False

    try:
        pipeline = TreeMetricsPipeline(**preset)
    except ValueError as error:
        logging.getLogger(__name__).error("Invalid parameters: %s", error)
        return 2

    logger = logging.getLogger(__name__)
    output_dir = args.output_dir if args.output_dir is not None else args.input_dir

    try:
        batch_result = pipeline.process_directory(args.input_dir, output_dir)
    except FileNotFoundError as error:
        logger.error("%s", error)
        return 1

    if batch_result.success_count == 0:
        logger.error("No tree could be processed.")
        return 1

    summary_path = args.summary_csv if args.summary_csv is not None else os.path.join(output_dir, "summary.csv")
    batch_result.write_csv(summary_path)
    logger.info("Summary written to %s.", summary_path)
    logger.info("Processing time per stage:\n%s", pipeline.performance_summary().round(3).to_string())

    if batch_result.success_count > 1:
        averages = batch_result.averages()
        logger.info("Averages:\n%s", averages.round(3).to_string())

    return 0
