"""Domain services for block footprints and placement snapping.

This package provides:
- Footprint resolution (bounding rectangles and snap faces per shape)
- Placement snapping (face-to-face alignment with grid fallback)
"""

from .footprint import (
    FootprintResolver,
    compute_bounds,
    get_face_offsets,
    get_snap_faces,
    normalize_rotation,
    rotate_clockwise,
)
from .snapping import (
    DEFAULT_GRID_SIZE,
    SNAP_THRESHOLD,
    VERTICAL_MODULE,
    PlacementSnapper,
    snap_placement,
    snap_to_grid,
)

__all__ = [
    "DEFAULT_GRID_SIZE",
    "FootprintResolver",
    "PlacementSnapper",
    "SNAP_THRESHOLD",
    "VERTICAL_MODULE",
    "compute_bounds",
    "get_face_offsets",
    "get_snap_faces",
    "normalize_rotation",
    "rotate_clockwise",
    "snap_placement",
    "snap_to_grid",
]
