""" A context manager that tracks the execution time and memory usage of a processing stage. """

__all__ = ["Profiler"]

import os
import time
from typing import Optional

import numpy as np
import psutil

from ._performance_tracker import PerformanceTracker


class Profiler:
    """
    A context manager that tracks the execution time and memory usage of the contained code.

    Args:
        tree_id: ID of the processed tree.
        stage: Name of the tracked processing stage.
        performance_tracker: Performance tracker in which the measured performance metrics are to be stored.

    Attributes:
        wall_clock_time: Measured wallclock time in seconds. Set when the context is exited.
    """

    def __init__(self, tree_id: str, stage: str, performance_tracker: PerformanceTracker):
        self._tree_id = tree_id
        self._stage = stage
        self._performance_tracker = performance_tracker
        self._start_time_wall_clock: Optional[float] = None
        self._start_time_cpu: Optional[float] = None
        self._start_memory: Optional[int] = None
        self.wall_clock_time = 0.0

    def __enter__(self) -> "Profiler":
        process = psutil.Process(os.getpid())
        self._start_memory = process.memory_info().rss
        self._start_time_wall_clock = time.perf_counter()
        self._start_time_cpu = time.process_time()
        return self

    def __exit__(self, *_):
        self.wall_clock_time = time.perf_counter() - self._start_time_wall_clock  # type: ignore[operator]
        execution_time_cpu = time.process_time() - self._start_time_cpu  # type: ignore[operator]
        process = psutil.Process(os.getpid())
        memory_usage = process.memory_info().rss
        memory_increment = memory_usage - self._start_memory  # type: ignore[operator]

        self._performance_tracker.save(
            self._tree_id,
            self._stage,
            self.wall_clock_time,
            execution_time_cpu,
            float(np.round(memory_usage / 1e9, 4)),
            float(np.round(memory_increment / 1e9, 4)),
        )
