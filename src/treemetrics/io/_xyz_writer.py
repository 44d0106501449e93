""" Writer for point files in the whitespace-separated xyz format. """

__all__ = ["XyzWriter", "write_filtered_points"]

import os
from typing import List

import pandas

from treemetrics.structures import FilteredPointSet


class XyzWriter:
    """
    Writer for point files in which each line contains the x-, y-, and z-coordinate and the radius of a point,
    separated by single spaces and formatted with six decimal places.
    """

    def supported_file_formats(self) -> List[str]:
        """
        Returns:
            File formats supported by the writer.
        """

        return ["xyz", "txt"]

    def write(self, points: FilteredPointSet, file_path: str) -> None:
        """
        Writes a point set to a file. Missing parent directories are created.

        Args:
            points: Point set to be written.
            file_path: Path of the output file.

        Raises:
            ValueError: If the file format is not supported by the writer.
        """

        file_format = file_path.split(".")[-1]
        if file_format not in self.supported_file_formats():
            raise ValueError(f"The {file_format} format is not supported by the xyz writer.")

        output_dir = os.path.dirname(file_path)
        if output_dir != "":
            os.makedirs(output_dir, exist_ok=True)

        point_df = pandas.DataFrame(points.xyz, columns=["x", "y", "z"])
        point_df["radius"] = points.radii

        point_df.to_csv(file_path, sep=" ", header=False, index=False, float_format="%.6f")


def write_filtered_points(points: FilteredPointSet, file_path: str) -> None:
    """
    Writes a point set to a file in the xyz format.

    Args:
        points: Point set to be written.
        file_path: Path of the output file.
    """

    XyzWriter().write(points, file_path)
