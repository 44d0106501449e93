""" Tools for reading and writing skeleton, point, and mesh files. """

from ._mesh_reader import *
from ._skeleton_reader import *
from ._xyz_reader import *
from ._xyz_writer import *

__all__ = [name for name in globals().keys() if not name.startswith("_")]
