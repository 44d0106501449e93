""" Utilities for generating test data. """

from ._generate_meshes import *
from ._generate_skeletons import *
from ._generate_tree_files import *

__all__ = [name for name in globals().keys() if not name.startswith("_")]
