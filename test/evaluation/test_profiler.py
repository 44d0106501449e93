"""Tests for treemetrics.evaluation.Profiler."""

import time

import numpy as np

from treemetrics.evaluation import PerformanceTracker, Profiler


def test_profiler():
    """Test for treemetrics.evaluation.Profiler."""

    performance_tracker = PerformanceTracker()
    wait_time = 0.2

    data = np.empty(0, dtype=np.float64)  # pylint: disable=unused-variable
    with Profiler("tree_1", "DBH", performance_tracker) as profiler:
        data = np.random.randn(int(1e6)).astype(np.float64)
        for _ in range(int(1e6)):  # busy waiting to obtain CPU time > 0
            pass
        time.sleep(wait_time)

    performance_metrics = performance_tracker.to_pandas()
    row = performance_metrics.loc[
        (performance_metrics["Tree ID"] == "tree_1") & (performance_metrics["Stage"] == "DBH")
    ].iloc[0]

    assert len(performance_metrics) == 1
    assert profiler.wall_clock_time >= 0.95 * wait_time
    assert row["Wallclock Time [s]"] == profiler.wall_clock_time
    assert row["CPU Time [s]"] > 0
    assert row["Memory Usage [GB]"] > 0


def test_profiler_accumulates_stage():
    """Test for treemetrics.evaluation.Profiler with repeated stages."""

    performance_tracker = PerformanceTracker()

    for _ in range(2):
        with Profiler("tree_1", "Height", performance_tracker):
            time.sleep(0.05)

    performance_metrics = performance_tracker.to_pandas()

    assert len(performance_metrics) == 1
    assert performance_metrics["Wallclock Time [s]"].iloc[0] >= 0.09
