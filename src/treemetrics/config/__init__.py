""" Parameter presets for the tree metric pipeline. """

from ._metrics_presets import *

__all__ = [name for name in globals().keys() if not name.startswith("_")]
