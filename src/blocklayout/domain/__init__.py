"""Domain layer - block geometry and placement snapping."""

from .catalog import BLOCK_CATALOG, BlockSpec, get_block_spec, shape_category
from .entities import PlacedBlock
from .services import (
    FootprintResolver,
    PlacementSnapper,
    compute_bounds,
    get_face_offsets,
    get_snap_faces,
    snap_placement,
    snap_to_grid,
)
from .value_objects import (
    BlockType,
    BoundingRectangle,
    FaceOffset,
    FaceOrientation,
    ShapeCategory,
    SnapEdge,
    SnapFace,
    SnapResult,
    Vector3,
)

__all__ = [
    "BLOCK_CATALOG",
    "BlockSpec",
    "BlockType",
    "BoundingRectangle",
    "FaceOffset",
    "FaceOrientation",
    "FootprintResolver",
    "PlacedBlock",
    "PlacementSnapper",
    "ShapeCategory",
    "SnapEdge",
    "SnapFace",
    "SnapResult",
    "Vector3",
    "compute_bounds",
    "get_block_spec",
    "get_face_offsets",
    "get_snap_faces",
    "shape_category",
    "snap_placement",
    "snap_to_grid",
]
