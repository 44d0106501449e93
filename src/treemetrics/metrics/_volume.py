""" Volume and surface area of a branch mesh. """

__all__ = ["compute_volume"]

import numpy as np
import trimesh

from ._errors import MetricErrorKind
from ._results import VolumeResult


def compute_volume(mesh: trimesh.Trimesh) -> VolumeResult:
    """
    Computes the enclosed volume, the surface area, and the axis-aligned bounding box of a mesh. The sign of the volume
    depends on the orientation of the faces and is discarded. For meshes that are not watertight, the volume is only an
    approximation and :code:`is_closed` is set to :code:`False`.

    Args:
        mesh: Surface mesh of the stem and branches.

    Returns:
        Volume result. The result is unsuccessful if the mesh has no vertices or no faces.
    """

    if len(mesh.vertices) == 0 or len(mesh.faces) == 0:
        return VolumeResult(error="Mesh has no vertices or faces", error_kind=MetricErrorKind.INPUT_MISSING)

    mesh = mesh.copy()
    mesh.remove_unreferenced_vertices()

    bbox_min, bbox_max = (tuple(float(coord) for coord in corner) for corner in mesh.bounds)
    bbox_volume = float(np.prod(np.asarray(bbox_max) - np.asarray(bbox_min)))
    volume = abs(float(mesh.volume))

    return VolumeResult(
        success=True,
        is_closed=bool(mesh.is_watertight),
        num_vertices=len(mesh.vertices),
        num_faces=len(mesh.faces),
        volume=volume,
        surface_area=float(mesh.area),
        bbox_min=bbox_min,  # type: ignore[arg-type]
        bbox_max=bbox_max,  # type: ignore[arg-type]
        bbox_volume=bbox_volume,
        volume_ratio=volume / bbox_volume * 100 if bbox_volume > 0 else 0.0,
    )
