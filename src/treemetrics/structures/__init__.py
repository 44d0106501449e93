"""Data structures describing the inputs and intermediate artifacts of the tree measurements."""

from ._point import *
from ._point_set import *
from ._leaf_node_set import *
from ._mesh_vertex_cloud import *
from ._skeleton_graph import *

__all__ = [name for name in globals().keys() if not name.startswith("_")]
