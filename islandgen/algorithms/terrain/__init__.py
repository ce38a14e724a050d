from .blob import BlobConfig, BlobResult, grow, grow_in_region, pick_region
from .gaps import close_gaps, find_gaps
from .autotile import AutotileReport, UnmatchedNeighborPattern, autotile, assign_edges, assign_corners

__all__ = [
    "BlobConfig",
    "BlobResult",
    "grow",
    "grow_in_region",
    "pick_region",
    "close_gaps",
    "find_gaps",
    "AutotileReport",
    "UnmatchedNeighborPattern",
    "autotile",
    "assign_edges",
    "assign_corners",
]
