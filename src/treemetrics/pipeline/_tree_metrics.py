""" Metrics computed for a single tree. """

__all__ = ["TreeMetrics"]

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class TreeMetrics:  # pylint: disable=too-many-instance-attributes
    """
    Metrics computed for a single tree. Metrics that could not be computed keep their default value.

    Args:
        tree_id: ID of the tree.
        processing_time: Timestamp of the processing in the format :code:`YYYY-MM-DD HH:MM:SS`.
        height: Tree height in meters.
        h0: Live crown base height in meters.
        crown_depth: Crown depth in meters.
        dbh: Diameter at breast height in centimeters.
        dbh_method: Method used to estimate the diameter at breast height. Set to :code:`"not computed"` if the
            estimation was skipped and to :code:`"failed"` if the estimation failed.
        crown_radius: Crown radius in meters.
        crown_diameter: Crown diameter in meters.
        max_crown_width: Maximum crown width in meters.
        min_crown_width: Minimum crown width in meters.
        crown_aspect_ratio: Ratio between the maximum and the minimum crown width.
        volume: Volume of the branch mesh in cubic meters.
        surface_area: Surface area of the branch mesh in square meters.
        mesh_is_closed: Whether the branch mesh is watertight.
        has_skeleton_data: Whether the skeleton of the tree could be processed.
        leaf_nodes_total: Number of leaf nodes of the skeleton.
        leaf_nodes_filtered: Number of leaf nodes retained by the adaptive leaf filter.
        errors: Error message of each processing stage that failed, indexed by stage name.
    """

    tree_id: str
    processing_time: str = ""
    height: float = 0.0
    h0: float = 0.0
    crown_depth: float = 0.0
    dbh: float = 0.0
    dbh_method: str = ""
    crown_radius: float = 0.0
    crown_diameter: float = 0.0
    max_crown_width: float = 0.0
    min_crown_width: float = 0.0
    crown_aspect_ratio: float = 0.0
    volume: float = 0.0
    surface_area: float = 0.0
    mesh_is_closed: bool = False
    has_skeleton_data: bool = False
    leaf_nodes_total: int = 0
    leaf_nodes_filtered: int = 0
    errors: Dict[str, str] = field(default_factory=dict)

    def to_record(self) -> Dict[str, Any]:
        """
        Returns:
            Metrics of the tree as a dictionary whose keys are the column names of the summary table.
        """

        return {
            "Tree_ID": self.tree_id,
            "Processing_Time": self.processing_time,
            "Height": self.height,
            "H0_Crown_Base": self.h0,
            "Crown_Depth": self.crown_depth,
            "DBH_cm": self.dbh,
            "DBH_Method": self.dbh_method,
            "Crown_Radius": self.crown_radius,
            "Crown_Diameter": self.crown_diameter,
            "Max_Crown_Width": self.max_crown_width,
            "Min_Crown_Width": self.min_crown_width,
            "Aspect_Ratio": self.crown_aspect_ratio,
            "Volume_m3": self.volume,
            "Surface_Area_m2": self.surface_area,
            "Mesh_Closed": "Yes" if self.mesh_is_closed else "No",
            "Has_Skeleton": "Yes" if self.has_skeleton_data else "No",
            "Total_Leaf_Nodes": self.leaf_nodes_total,
            "Filtered_Leaf_Nodes": self.leaf_nodes_filtered,
        }
