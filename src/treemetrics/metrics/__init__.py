"""Tree measurements returning result records instead of raising errors."""

from ._errors import *
from ._results import *
from ._leaf_filter import *
from ._height import *
from ._crown_radius import *
from ._dbh import *
from ._volume import *

__all__ = [name for name in globals().keys() if not name.startswith("_")]
