""" Reader for point files in the whitespace-separated xyz format. """

__all__ = ["XyzReader", "read_filtered_points"]

import os
from typing import List

import numpy as np
import pandas

from treemetrics.structures import FilteredPointSet


class XyzReader:
    """
    Reader for point files in which each line contains the x-, y-, and z-coordinate and optionally the radius of a
    point, separated by whitespace. Empty lines, lines starting with :code:`#` or :code:`/`, and lines that do not
    start with three numeric values are skipped. Values after the fourth value of a line are ignored. Missing radii
    are set to 1.0.
    """

    def supported_file_formats(self) -> List[str]:
        """
        Returns:
            File formats supported by the reader.
        """

        return ["xyz", "txt"]

    def read(self, file_path: str) -> FilteredPointSet:
        """
        Reads a point file.

        Args:
            file_path: Path of the file to be read.

        Returns:
            Point set containing the points from the file in the order in which they appear in the file.

        Raises:
            ValueError: If the file format is not supported by the reader.
            FileNotFoundError: If the file does not exist.
        """

        file_format = file_path.split(".")[-1]
        if file_format not in self.supported_file_formats():
            raise ValueError(f"The {file_format} format is not supported by the xyz reader.")
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"Input file does not exist: {file_path}")

        with open(file_path, "r", encoding="utf-8") as file:
            lines = pandas.Series(file.read().splitlines(), dtype=str).str.strip()
        lines = lines[(lines != "") & ~lines.str.startswith("#")]
        if len(lines) == 0:
            return FilteredPointSet(np.empty((0, 3), dtype=np.float64))

        # only the first four values of a line are used, additional values are ignored
        point_df = lines.str.split(expand=True).reindex(columns=range(4))
        point_df.columns = ["x", "y", "z", "radius"]
        point_df = point_df.apply(pandas.to_numeric, errors="coerce")
        point_df = point_df.dropna(subset=["x", "y", "z"])
        point_df["radius"] = point_df["radius"].fillna(1.0)

        return FilteredPointSet(
            point_df[["x", "y", "z"]].to_numpy(dtype=np.float64), point_df["radius"].to_numpy(dtype=np.float64)
        )


def read_filtered_points(file_path: str) -> FilteredPointSet:
    """
    Reads a point file in the xyz format.

    Args:
        file_path: Path of the file to be read.

    Returns:
        Point set containing the points from the file.
    """

    return XyzReader().read(file_path)
