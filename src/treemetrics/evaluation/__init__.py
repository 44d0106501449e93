"""Tools for tracking the runtime and memory usage of the metric computations."""

from ._performance_tracker import *
from ._profiler import *

__all__ = [name for name in globals().keys() if not name.startswith("_")]
