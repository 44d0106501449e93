""" Pipeline that computes all metrics of one or more reconstructed trees. """

__all__ = ["TreeMetricsPipeline"]

from datetime import datetime
import logging
import os
import sys
from typing import List, Optional, Tuple

import pandas as pd
import trimesh

from treemetrics.evaluation import PerformanceTracker, Profiler
from treemetrics.io import MeshReader, SkeletonReader, XyzReader, XyzWriter
from treemetrics.metrics import (
    compute_crown_depth,
    compute_crown_radius,
    compute_dbh,
    compute_height,
    compute_volume,
    filter_skeleton_leaves,
)
from treemetrics.structures import FilteredPointSet, MeshVertexCloud
from ._batch_result import BatchResult
from ._tree_metrics import TreeMetrics

_SKELETON_SUFFIX = "_skeleton.ply"
_MESH_SUFFIXES = ["_branches_filled.obj", "_branches.obj"]
_FILTERED_POINTS_SUFFIX = "_filtered.xyz"


class TreeMetricsPipeline:  # pylint: disable=too-many-instance-attributes
    """
    Pipeline that computes the metrics of reconstructed trees from their skeleton graphs and branch meshes. For each
    tree, the leaf nodes of the skeleton are filtered, the filtered points are written to a file, and the tree height,
    the crown depth, the crown radius, the diameter at breast height, and the volume of the branch mesh are computed.
    Metrics that cannot be computed are logged and keep their default value.

    Args:
        filter_percentage: Fraction of the skeleton height that is used as height tolerance by the adaptive leaf
            filter. Must be in :math:`(0, 1]`.
        top_n: Number of highest filtered points averaged to compute the tree height.
        bottom_n: Number of lowest filtered points averaged to compute the live crown base height.
        height_tolerance: Half-thickness of the horizontal mesh slices used to estimate the stem diameter.
        cluster_distance: Distance threshold used to count the stems in a mesh slice.
        edge_epsilon: Hull edges shorter than this value are ignored when computing the minimum bounding rectangle of
            the crown.
        calculate_crown: Whether to compute the crown radius and crown widths.
        calculate_volume: Whether to compute the volume and surface area of the branch mesh.

    Raises:
        ValueError: If one of the parameters is invalid.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        *,
        filter_percentage: float = 0.15,
        top_n: int = 5,
        bottom_n: int = 5,
        height_tolerance: float = 0.05,
        cluster_distance: float = 0.3,
        edge_epsilon: float = 1e-10,
        calculate_crown: bool = True,
        calculate_volume: bool = True,
    ):
        if filter_percentage <= 0 or filter_percentage > 1:
            raise ValueError("filter_percentage must be in the interval (0, 1].")
        if top_n <= 0 or bottom_n <= 0:
            raise ValueError("top_n and bottom_n must be positive.")
        if height_tolerance < 0:
            raise ValueError("height_tolerance must not be negative.")
        if cluster_distance <= 0:
            raise ValueError("cluster_distance must be positive.")

        self._filter_percentage = filter_percentage
        self._top_n = top_n
        self._bottom_n = bottom_n
        self._height_tolerance = height_tolerance
        self._cluster_distance = cluster_distance
        self._edge_epsilon = edge_epsilon
        self._calculate_crown = calculate_crown
        self._calculate_volume = calculate_volume

        self._skeleton_reader = SkeletonReader()
        self._mesh_reader = MeshReader()
        self._xyz_reader = XyzReader()
        self._xyz_writer = XyzWriter()

        self._performance_tracker = PerformanceTracker()
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s:%(levelname)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=[logging.StreamHandler(sys.stdout)],
        )
        self._logger = logging.getLogger(__name__)
        self._logger.setLevel(logging.INFO)

    def performance_metrics(self) -> pd.DataFrame:
        """
        Returns:
            Tracked performance metrics as
            `pandas.DataFrame <https://pandas.pydata.org/docs/reference/api/pandas.DataFrame.html>`__ with the columns
            :code:`"Tree ID"`, :code:`"Stage"`, :code:`"Wallclock Time [s]"`, :code:`"CPU Time [s]"`,
            :code:`"Memory Usage [GB]"`, and :code:`"Memory Increment [GB]"`.
        """

        return self._performance_tracker.to_pandas()

    def performance_summary(self) -> pd.DataFrame:
        """
        Returns:
            Mean and total wallclock and CPU time of each processing stage across all processed trees as
            `pandas.DataFrame <https://pandas.pydata.org/docs/reference/api/pandas.DataFrame.html>`__.
        """

        return self._performance_tracker.summary()

    def _fail(self, metrics: TreeMetrics, stage: str, message: str) -> None:
        metrics.errors[stage] = message
        self._logger.warning("%s: %s failed: %s", metrics.tree_id, stage, message)

    def _filter_leaves(
        self, metrics: TreeMetrics, skeleton_path: str, output_dir: Optional[str]
    ) -> Optional[FilteredPointSet]:
        try:
            skeleton = self._skeleton_reader.read(skeleton_path)
        except (OSError, ValueError) as error:
            self._fail(metrics, "leaf filtering", f"Could not read skeleton: {error}")
            return None

        leaf_filter_result = filter_skeleton_leaves(skeleton, filter_percentage=self._filter_percentage)
        if not leaf_filter_result.success:
            self._fail(metrics, "leaf filtering", leaf_filter_result.error)
            return None

        metrics.has_skeleton_data = True
        metrics.leaf_nodes_total = leaf_filter_result.total_leaves
        metrics.leaf_nodes_filtered = leaf_filter_result.filtered_leaves
        self._logger.info(
            "%s: %d of %d leaf nodes retained.",
            metrics.tree_id,
            leaf_filter_result.filtered_leaves,
            leaf_filter_result.total_leaves,
        )

        if output_dir is not None:
            output_path = os.path.join(output_dir, metrics.tree_id + _FILTERED_POINTS_SUFFIX)
            try:
                self._xyz_writer.write(leaf_filter_result.points, output_path)  # type: ignore[arg-type]
            except OSError as error:
                self._fail(metrics, "leaf filtering", f"Could not write filtered points: {error}")

        return leaf_filter_result.points

    def _compute_height_metrics(self, metrics: TreeMetrics, points: FilteredPointSet) -> None:
        height_result = compute_height(points, top_n=self._top_n)
        if not height_result.success:
            self._fail(metrics, "height", height_result.error)
            return
        metrics.height = height_result.tree_height

        crown_depth_result = compute_crown_depth(points, metrics.height, bottom_n=self._bottom_n)
        if not crown_depth_result.success:
            self._fail(metrics, "crown depth", crown_depth_result.error)
            return
        metrics.h0 = crown_depth_result.h0
        metrics.crown_depth = crown_depth_result.crown_depth

    def _compute_crown_metrics(self, metrics: TreeMetrics, points: FilteredPointSet) -> None:
        crown_radius_result = compute_crown_radius(points, edge_epsilon=self._edge_epsilon)
        if not crown_radius_result.success:
            self._fail(metrics, "crown radius", crown_radius_result.error)
            return
        metrics.crown_radius = crown_radius_result.crown_radius
        metrics.crown_diameter = 2 * crown_radius_result.crown_radius
        metrics.max_crown_width = crown_radius_result.max_width
        metrics.min_crown_width = crown_radius_result.min_width
        metrics.crown_aspect_ratio = crown_radius_result.aspect_ratio

    def _compute_dbh(self, metrics: TreeMetrics, mesh: Optional[trimesh.Trimesh]) -> None:
        if metrics.h0 <= 0 or mesh is None:
            metrics.dbh_method = "not computed"
            self._logger.info("%s: Skipping DBH estimation, crown base height or mesh is missing.", metrics.tree_id)
            return

        dbh_result = compute_dbh(
            MeshVertexCloud(mesh.vertices),
            metrics.h0,
            height_tolerance=self._height_tolerance,
            cluster_distance=self._cluster_distance,
        )
        if not dbh_result.success:
            metrics.dbh_method = "failed"
            self._fail(metrics, "DBH", dbh_result.error)
            return
        metrics.dbh = dbh_result.dbh_cm
        metrics.dbh_method = dbh_result.method_used

    def _compute_volume(self, metrics: TreeMetrics, mesh: trimesh.Trimesh) -> None:
        volume_result = compute_volume(mesh)
        if not volume_result.success:
            self._fail(metrics, "volume", volume_result.error)
            return
        metrics.volume = volume_result.volume
        metrics.surface_area = volume_result.surface_area
        metrics.mesh_is_closed = volume_result.is_closed
        if not volume_result.is_closed:
            self._logger.info("%s: The mesh is not watertight, the volume is approximate.", metrics.tree_id)

    def _read_mesh(self, metrics: TreeMetrics, mesh_path: Optional[str]) -> Optional[trimesh.Trimesh]:
        if mesh_path is None:
            return None
        try:
            return self._mesh_reader.read(mesh_path)
        except (OSError, ValueError) as error:
            self._fail(metrics, "mesh reading", f"Could not read mesh: {error}")
            return None

    def _read_existing_points(self, metrics: TreeMetrics, output_dir: Optional[str]) -> Optional[FilteredPointSet]:
        if output_dir is None:
            return None
        points_path = os.path.join(output_dir, metrics.tree_id + _FILTERED_POINTS_SUFFIX)
        if not os.path.exists(points_path):
            return None
        self._logger.info("%s: Using existing filtered points from %s.", metrics.tree_id, points_path)
        try:
            return self._xyz_reader.read(points_path)
        except (OSError, ValueError) as error:
            self._fail(metrics, "point reading", f"Could not read filtered points: {error}")
            return None

    def process_tree(
        self,
        tree_id: str,
        skeleton_path: Optional[str] = None,
        mesh_path: Optional[str] = None,
        output_dir: Optional[str] = None,
    ) -> TreeMetrics:
        """
        Computes all metrics of a single tree.

        Args:
            tree_id: ID of the tree.
            skeleton_path: Path of the skeleton PLY file. If set to :code:`None`, no skeleton is processed and the
                filtered points are read from :code:`<output_dir>/<tree_id>_filtered.xyz` if that file exists.
            mesh_path: Path of the branch mesh. If set to :code:`None`, the diameter at breast height and the volume
                are not computed.
            output_dir: Directory in which the filtered points are stored as :code:`<tree_id>_filtered.xyz`. If set to
                :code:`None`, the filtered points are not written.

        Returns:
            Metrics of the tree.
        """

        metrics = TreeMetrics(tree_id, processing_time=datetime.now().strftime("%Y-%m-%d %H:%M:%S"))
        self._logger.info("Processing tree %s...", tree_id)

        with Profiler(tree_id, "Total", self._performance_tracker) as total_profiler:
            points = None
            if skeleton_path is not None:
                with Profiler(tree_id, "Leaf filtering", self._performance_tracker):
                    points = self._filter_leaves(metrics, skeleton_path, output_dir)
            else:
                points = self._read_existing_points(metrics, output_dir)

            if points is not None:
                with Profiler(tree_id, "Height", self._performance_tracker):
                    self._compute_height_metrics(metrics, points)
                if self._calculate_crown:
                    with Profiler(tree_id, "Crown", self._performance_tracker):
                        self._compute_crown_metrics(metrics, points)
            else:
                self._logger.info("%s: No filtered points available, skipping height and crown metrics.", tree_id)

            mesh = self._read_mesh(metrics, mesh_path)

            with Profiler(tree_id, "DBH", self._performance_tracker):
                self._compute_dbh(metrics, mesh)

            if self._calculate_volume and mesh is not None:
                with Profiler(tree_id, "Volume", self._performance_tracker):
                    self._compute_volume(metrics, mesh)

        self._logger.info("Finished tree %s in %.3f s.", tree_id, total_profiler.wall_clock_time)
        return metrics

    @staticmethod
    def find_tree_files(input_dir: str) -> List[Tuple[str, Optional[str], Optional[str]]]:
        """
        Discovers the skeleton and mesh files of all trees in a directory. Skeleton files must be named
        :code:`<tree_id>_skeleton.ply`, mesh files :code:`<tree_id>_branches_filled.obj` or
        :code:`<tree_id>_branches.obj`. If both mesh files exist for a tree, the filled mesh is used.

        Args:
            input_dir: Directory to search.

        Returns:
            Tuples of tree ID, skeleton path, and mesh path, sorted by tree ID. Paths of missing files are set to
            :code:`None`.

        Raises:
            FileNotFoundError: If the input directory does not exist.
        """

        if not os.path.isdir(input_dir):
            raise FileNotFoundError(f"Input directory does not exist: {input_dir}")

        file_names = set(os.listdir(input_dir))
        tree_ids = set()
        for file_name in file_names:
            for suffix in [_SKELETON_SUFFIX, *_MESH_SUFFIXES]:
                if file_name.endswith(suffix) and len(file_name) > len(suffix):
                    tree_ids.add(file_name[: -len(suffix)])
                    break

        tree_files = []
        for tree_id in sorted(tree_ids):
            skeleton_path = None
            if tree_id + _SKELETON_SUFFIX in file_names:
                skeleton_path = os.path.join(input_dir, tree_id + _SKELETON_SUFFIX)
            mesh_path = None
            for suffix in _MESH_SUFFIXES:
                if tree_id + suffix in file_names:
                    mesh_path = os.path.join(input_dir, tree_id + suffix)
                    break
            tree_files.append((tree_id, skeleton_path, mesh_path))

        return tree_files

    def process_directory(self, input_dir: str, output_dir: Optional[str] = None) -> BatchResult:
        """
        Computes the metrics of all trees in a directory.

        Args:
            input_dir: Directory containing the skeleton and mesh files (see :code:`find_tree_files`).
            output_dir: Directory in which the filtered points are stored. If set to :code:`None`, the input directory
                is used.

        Returns:
            Batch result. A tree counts as failed if neither its skeleton nor its mesh could be processed.

        Raises:
            FileNotFoundError: If the input directory does not exist.
        """

        if output_dir is None:
            output_dir = input_dir

        tree_files = self.find_tree_files(input_dir)
        self._logger.info("Found %d trees in %s.", len(tree_files), input_dir)

        batch_result = BatchResult()
        for idx, (tree_id, skeleton_path, mesh_path) in enumerate(tree_files):
            self._logger.info("[%d/%d] %s", idx + 1, len(tree_files), tree_id)
            metrics = self.process_tree(tree_id, skeleton_path, mesh_path, output_dir)

            mesh_processed = mesh_path is not None and "mesh reading" not in metrics.errors
            if metrics.has_skeleton_data or mesh_processed:
                batch_result.trees.append(metrics)
            else:
                batch_result.failed_tree_ids.append(tree_id)

        self._logger.info(
            "Processed %d trees successfully, %d trees failed.", batch_result.success_count, batch_result.failure_count
        )
        return batch_result
