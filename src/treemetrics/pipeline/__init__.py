""" Pipeline that computes all metrics of one or more reconstructed trees. """

from ._tree_metrics import *
from ._batch_result import *
from ._tree_metrics_pipeline import *

__all__ = [name for name in globals().keys() if not name.startswith("_")]
