"""Value objects for the block layout domain.

This module provides immutable data types used throughout the layout
system. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Block types and shape categories
from ._blocks import (
    BlockType,
    CORE_THICKNESS_OPTIONS,
    RIGHT_ANGLE_ROTATIONS,
    ShapeCategory,
    SnapEdge,
)

# Ground-plane geometry
from ._geometry import (
    BoundingRectangle,
    FaceOffset,
    FaceOrientation,
    SnapFace,
    Vector3,
)

# Snap decisions
from ._snapping import (
    SnapResult,
    edge_for_orientation,
)

__all__ = [
    "BlockType",
    "BoundingRectangle",
    "CORE_THICKNESS_OPTIONS",
    "FaceOffset",
    "FaceOrientation",
    "RIGHT_ANGLE_ROTATIONS",
    "ShapeCategory",
    "SnapEdge",
    "SnapFace",
    "SnapResult",
    "Vector3",
    "edge_for_orientation",
]
