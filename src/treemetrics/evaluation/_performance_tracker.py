"""A tracker that stores the execution time and memory usage of the processing stages of each tree."""

__all__ = ["PerformanceTracker"]

from typing import Dict, List, Tuple

import pandas as pd

_METRIC_NAMES = ["Wallclock Time [s]", "CPU Time [s]", "Memory Usage [GB]", "Memory Increment [GB]"]


class PerformanceTracker:
    """A tracker that stores the execution time and memory usage of the processing stages of each tree."""

    def __init__(self):
        self._performance_metrics: Dict[Tuple[str, str], List[float]] = {}
        self.reset()

    def reset(self):
        """
        Deletes all tracked performance metrics.
        """

        self._performance_metrics = {}

    def save(
        self,
        tree_id: str,
        stage: str,
        wall_clock_time: float,
        cpu_time: float,
        memory_usage: float,
        memory_increment: float,
    ):
        """
        Saves the performance metrics of a processing stage.

        Args:
            tree_id: ID of the processed tree.
            stage: Name of the processing stage. If values have already been saved for the same tree and stage, the
                times and the memory increment are summed and the memory usage is overwritten.
            wall_clock_time: Wallclock time of the stage in seconds.
            cpu_time: CPU time of the stage in seconds.
            memory_usage: Memory usage of the process at the end of the stage in GB.
            memory_increment: Change of the memory usage during the stage in GB.
        """

        key = (tree_id, stage)
        if key in self._performance_metrics:
            previous = self._performance_metrics[key]
            self._performance_metrics[key] = [
                previous[0] + wall_clock_time,
                previous[1] + cpu_time,
                memory_usage,
                previous[3] + memory_increment,
            ]
        else:
            self._performance_metrics[key] = [wall_clock_time, cpu_time, memory_usage, memory_increment]

    def __len__(self) -> int:
        return len(self._performance_metrics)

    def to_pandas(self) -> pd.DataFrame:
        """
        Returns:
            Tracked performance metrics as
            `pandas.DataFrame <https://pandas.pydata.org/docs/reference/api/pandas.DataFrame.html>`__ with the columns
            :code:`"Tree ID"`, :code:`"Stage"`, :code:`"Wallclock Time [s]"`, :code:`"CPU Time [s]"`,
            :code:`"Memory Usage [GB]"`, and :code:`"Memory Increment [GB]"`. The rows are in the order in which the
            stages were first tracked.
        """

        rows = [[tree_id, stage, *metrics] for (tree_id, stage), metrics in self._performance_metrics.items()]
        return pd.DataFrame(rows, columns=["Tree ID", "Stage", *_METRIC_NAMES])

    def summary(self) -> pd.DataFrame:
        """
        Returns:
            Mean and total wallclock and CPU time of each processing stage across all trees as
            `pandas.DataFrame <https://pandas.pydata.org/docs/reference/api/pandas.DataFrame.html>`__ indexed by stage.
        """

        performance_metrics = self.to_pandas()
        return performance_metrics.groupby("Stage", sort=False)[["Wallclock Time [s]", "CPU Time [s]"]].agg(
            ["mean", "sum"]
        )
