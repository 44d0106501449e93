""" Result of processing all trees of a directory. """

__all__ = ["BatchResult"]

from dataclasses import dataclass, field
import os
from typing import List

import pandas as pd

from ._tree_metrics import TreeMetrics

_SUMMARY_COLUMNS = [
    "Tree_ID",
    "Processing_Time",
    "Height",
    "H0_Crown_Base",
    "Crown_Depth",
    "DBH_cm",
    "DBH_Method",
    "Crown_Radius",
    "Crown_Diameter",
    "Max_Crown_Width",
    "Min_Crown_Width",
    "Aspect_Ratio",
    "Volume_m3",
    "Surface_Area_m2",
    "Mesh_Closed",
    "Has_Skeleton",
    "Total_Leaf_Nodes",
    "Filtered_Leaf_Nodes",
]

_DECIMALS = {
    "Height": 3,
    "H0_Crown_Base": 3,
    "Crown_Depth": 3,
    "DBH_cm": 2,
    "Crown_Radius": 3,
    "Crown_Diameter": 3,
    "Max_Crown_Width": 3,
    "Min_Crown_Width": 3,
    "Aspect_Ratio": 2,
    "Volume_m3": 3,
    "Surface_Area_m2": 3,
}


@dataclass
class BatchResult:
    """
    Result of processing all trees of a directory.

    Args:
        trees: Metrics of the successfully processed trees, sorted by tree ID.
        failed_tree_ids: IDs of the trees for which neither the skeleton nor the mesh could be processed.
    """

    trees: List[TreeMetrics] = field(default_factory=list)
    failed_tree_ids: List[str] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        """
        Returns:
            Number of successfully processed trees.
        """

        return len(self.trees)

    @property
    def failure_count(self) -> int:
        """
        Returns:
            Number of trees for which neither the skeleton nor the mesh could be processed.
        """

        return len(self.failed_tree_ids)

    def to_pandas(self) -> pd.DataFrame:
        """
        Returns:
            Summary table with one row per successfully processed tree as
            `pandas.DataFrame <https://pandas.pydata.org/docs/reference/api/pandas.DataFrame.html>`__.
        """

        return pd.DataFrame([tree.to_record() for tree in self.trees], columns=_SUMMARY_COLUMNS)

    def averages(self) -> pd.Series:
        """
        Computes the average metrics of all successfully processed trees. The diameter at breast height, the crown
        metrics, and the volume metrics are only averaged over the trees for which they are greater than zero.

        Returns:
            Average of each numeric metric as
            `pandas.Series <https://pandas.pydata.org/docs/reference/api/pandas.Series.html>`__. Metrics without any
            valid value are set to zero.
        """

        summary = self.to_pandas()
        averages = {}
        for column in ["Height", "H0_Crown_Base", "Crown_Depth", "Filtered_Leaf_Nodes"]:
            averages[column] = float(summary[column].mean()) if len(summary) > 0 else 0.0

        for columns, reference_column in [
            (["DBH_cm"], "DBH_cm"),
            (["Crown_Diameter", "Max_Crown_Width", "Aspect_Ratio"], "Crown_Diameter"),
            (["Volume_m3", "Surface_Area_m2"], "Volume_m3"),
        ]:
            valid_rows = summary[summary[reference_column] > 0]
            for column in columns:
                averages[column] = float(valid_rows[column].mean()) if len(valid_rows) > 0 else 0.0

        return pd.Series(averages)

    def write_csv(self, file_path: str) -> None:
        """
        Writes the summary table to a CSV file. Missing parent directories are created.

        Args:
            file_path: Path of the CSV file.
        """

        output_dir = os.path.dirname(file_path)
        if output_dir != "":
            os.makedirs(output_dir, exist_ok=True)

        summary = self.to_pandas()
        for column, decimals in _DECIMALS.items():
            summary[column] = summary[column].map(lambda value, decimals=decimals: f"{value:.{decimals}f}")
        summary.to_csv(file_path, index=False)
