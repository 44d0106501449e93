"""Geometric and statistical operations on skeleton, canopy, and stem points."""

from ._adaptive_leaf_filter import *
from ._convex_hull import *
from ._count_stems import *
from ._extract_leaf_nodes import *
from ._minimum_bounding_rectangle import *
from ._minimum_enclosing_circle import *
from ._planar_diameter import *
from ._points_at_height import *
from ._select_points import *
from ._taper_corrected_diameter import *

__all__ = [name for name in globals().keys() if not name.startswith("_")]
