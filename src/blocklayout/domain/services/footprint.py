"""Footprint geometry for placed and prospective blocks.

This module resolves, for every shape category and right-angle rotation:

- the axis-aligned bounding rectangle of a block, and
- its four snap faces, either absolute (for a placed block) or as offsets
  from the block's own center (for a block that is about to be placed).

Absolute faces are the offsets translated by the block's position, so a
face computed for an existing block and the matching offset of a new block
always come from the same formulas.

Rotation convention: at 0 degrees a straight block runs along X. A 90
degree corner is positioned at the center of its bounding box, not at the
outside corner. A 45 degree corner's box sits in one quadrant of its
position: +X+Z at 0, +X-Z at 90, -X-Z at 180, -X+Z at 270.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..catalog import BlockSpec, get_block_spec
from ..entities import PlacedBlock
from ..value_objects import (
    BlockType,
    BoundingRectangle,
    FaceOffset,
    FaceOrientation,
    RIGHT_ANGLE_ROTATIONS,
    ShapeCategory,
    SnapFace,
)

logger = logging.getLogger(__name__)

__all__ = [
    "FALLBACK_HALF_DEPTH",
    "FALLBACK_HALF_WIDTH",
    "FootprintResolver",
    "compute_bounds",
    "get_face_offsets",
    "get_snap_faces",
    "normalize_rotation",
    "rotate_clockwise",
]

# Fallback footprint for block types missing from the catalog
FALLBACK_HALF_WIDTH = 24.0
FALLBACK_HALF_DEPTH = 7.0

# Leg lengths used when a corner spec leaves them unset
DEFAULT_LONG_LEG = 38.5
DEFAULT_SHORT_LEG = 22.5
DEFAULT_CORNER_45_LEG = 32.0

# (min_x, max_x, min_z, max_z) relative to the block center
Extents = tuple[float, float, float, float]


def normalize_rotation(rotation: float) -> int:
    """Reduce a rotation to one of 0, 90, 180 or 270 degrees.

    Values are taken modulo 360 first, so -90 becomes 270 and 450 becomes
    90. Anything that is still not a right angle is treated as 0.
    """
    reduced = rotation % 360
    for candidate in RIGHT_ANGLE_ROTATIONS:
        if reduced == candidate:
            return candidate
    logger.warning(f"Unsupported rotation {rotation!r}, treating as 0 degrees")
    return 0


def rotate_clockwise(rotation: float) -> int:
    """Next rotation state, a quarter turn after ``rotation``."""
    return (normalize_rotation(rotation) + 90) % 360


# =============================================================================
# Bounding extents
# =============================================================================


def _rectangular_extents(spec: BlockSpec, width: float, rotation: int) -> Extents:
    half_length = spec.length / 2
    half_width = width / 2
    if rotation in (0, 180):
        return (-half_length, half_length, -half_width, half_width)
    return (-half_width, half_width, -half_length, half_length)


def _corner_90_extents(spec: BlockSpec, width: float, rotation: int) -> Extents:
    long_leg = spec.long_leg or DEFAULT_LONG_LEG
    short_leg = spec.short_leg or DEFAULT_SHORT_LEG
    half_width = width / 2
    half_long = long_leg / 2

    if rotation == 90:
        return (-half_long, half_long, -short_leg + half_width, half_width)
    if rotation == 180:
        return (-short_leg + half_width, half_width, -half_long, half_long)
    if rotation == 270:
        return (-half_long, half_long, -half_width, short_leg - half_width)
    return (-half_width, short_leg - half_width, -half_long, half_long)


def _corner_45_extents(spec: BlockSpec, width: float, rotation: int) -> Extents:
    leg = spec.long_leg or DEFAULT_CORNER_45_LEG

    if rotation == 90:
        return (0.0, leg, -leg, 0.0)
    if rotation == 180:
        return (-leg, 0.0, -leg, 0.0)
    if rotation == 270:
        return (-leg, 0.0, 0.0, leg)
    return (0.0, leg, 0.0, leg)


def _fallback_extents() -> Extents:
    return (
        -FALLBACK_HALF_WIDTH,
        FALLBACK_HALF_WIDTH,
        -FALLBACK_HALF_DEPTH,
        FALLBACK_HALF_DEPTH,
    )


_EXTENT_BUILDERS: dict[ShapeCategory, Callable[[BlockSpec, float, int], Extents]] = {
    ShapeCategory.RECTANGULAR: _rectangular_extents,
    ShapeCategory.CORNER_90: _corner_90_extents,
    ShapeCategory.CORNER_45: _corner_45_extents,
}


def _relative_extents(
    block_type: BlockType | str, core_thickness: float, rotation: int
) -> Extents:
    spec = get_block_spec(block_type)
    if spec is None:
        logger.debug(f"Unknown block type {block_type!r}, using fallback footprint")
        return _fallback_extents()
    builder = _EXTENT_BUILDERS[spec.category]
    return builder(spec, spec.width_for(core_thickness), rotation)


def compute_bounds(block: PlacedBlock) -> BoundingRectangle:
    """Compute the world-space bounding rectangle of a placed block.

    Args:
        block: The placed block.

    Returns:
        BoundingRectangle enclosing the block's footprint, tagged with the
        normalized rotation it was computed under.
    """
    rotation = normalize_rotation(block.rotation)
    min_x, max_x, min_z, max_z = _relative_extents(
        block.block_type, block.core_thickness, rotation
    )
    x, z = block.position.x, block.position.z
    return BoundingRectangle(
        min_x=x + min_x,
        max_x=x + max_x,
        min_z=z + min_z,
        max_z=z + max_z,
        rotation=rotation,
    )


# =============================================================================
# Face offsets
# =============================================================================


def _bounding_side_offsets(extents: Extents) -> list[FaceOffset]:
    """Use the four sides of the bounding rectangle as faces."""
    min_x, max_x, min_z, max_z = extents
    mid_x = (min_x + max_x) / 2
    mid_z = (min_z + max_z) / 2
    return [
        FaceOffset(min_x, mid_z, min_x, FaceOrientation.MIN_X),
        FaceOffset(max_x, mid_z, max_x, FaceOrientation.MAX_X),
        FaceOffset(mid_x, min_z, min_z, FaceOrientation.MIN_Z),
        FaceOffset(mid_x, max_z, max_z, FaceOrientation.MAX_Z),
    ]


def _corner_90_offsets(spec: BlockSpec, width: float, rotation: int) -> list[FaceOffset]:
    """Faces on the physical walls of the L, one per orientation.

    At 0 degrees the long leg runs along Z on the -X side and the short leg
    runs along +X at the -Z end. The face midpoints sit on the outer walls
    and leg ends, which is why they differ from the bounding sides.
    """
    long_leg = spec.long_leg or DEFAULT_LONG_LEG
    short_leg = spec.short_leg or DEFAULT_SHORT_LEG
    half_width = width / 2
    half_long = long_leg / 2

    if rotation == 90:
        return [
            FaceOffset(-half_long, half_width - short_leg / 2, -half_long, FaceOrientation.MIN_X),
            FaceOffset(half_long, 0.0, half_long, FaceOrientation.MAX_X),
            FaceOffset(-half_long + half_width, -short_leg + half_width, -short_leg + half_width, FaceOrientation.MIN_Z),
            FaceOffset(0.0, half_width, half_width, FaceOrientation.MAX_Z),
        ]
    if rotation == 180:
        return [
            FaceOffset(-short_leg + half_width, half_long - half_width, -short_leg + half_width, FaceOrientation.MIN_X),
            FaceOffset(half_width, 0.0, half_width, FaceOrientation.MAX_X),
            FaceOffset(0.0, -half_long, -half_long, FaceOrientation.MIN_Z),
            FaceOffset(half_width - short_leg / 2, half_long, half_long, FaceOrientation.MAX_Z),
        ]
    if rotation == 270:
        return [
            FaceOffset(-half_long, 0.0, -half_long, FaceOrientation.MIN_X),
            FaceOffset(half_long, -half_width + short_leg / 2, half_long, FaceOrientation.MAX_X),
            FaceOffset(0.0, -half_width, -half_width, FaceOrientation.MIN_Z),
            FaceOffset(half_long - half_width, short_leg - half_width, short_leg - half_width, FaceOrientation.MAX_Z),
        ]
    return [
        FaceOffset(-half_width, 0.0, -half_width, FaceOrientation.MIN_X),
        FaceOffset(short_leg - half_width, -half_long + half_width, short_leg - half_width, FaceOrientation.MAX_X),
        FaceOffset(-half_width + short_leg / 2, -half_long, -half_long, FaceOrientation.MIN_Z),
        FaceOffset(0.0, half_long, half_long, FaceOrientation.MAX_Z),
    ]


def get_face_offsets(
    block_type: BlockType | str,
    core_thickness: float,
    rotation: float,
) -> list[FaceOffset]:
    """Snap faces of a block that has not been positioned yet.

    Args:
        block_type: Catalog block type; unknown values use the fallback box.
        core_thickness: Concrete core thickness in inches.
        rotation: Rotation in degrees, normalized with normalize_rotation().

    Returns:
        Four FaceOffset values relative to the block center, in the order
        -X, +X, -Z, +Z.
    """
    rotation = normalize_rotation(rotation)
    spec = get_block_spec(block_type)

    if spec is not None and spec.category is ShapeCategory.CORNER_90:
        return _corner_90_offsets(spec, spec.width_for(core_thickness), rotation)

    # Straight blocks, 45 degree corners and the fallback all snap on the
    # sides of their bounding rectangle.
    return _bounding_side_offsets(
        _relative_extents(block_type, core_thickness, rotation)
    )


def get_snap_faces(block: PlacedBlock) -> list[SnapFace]:
    """Snap faces of a placed block in world coordinates.

    Args:
        block: The placed block.

    Returns:
        Four SnapFace values in the order -X, +X, -Z, +Z.
    """
    offsets = get_face_offsets(block.block_type, block.core_thickness, block.rotation)
    return [offset.translated(block.position.x, block.position.z) for offset in offsets]


class FootprintResolver:
    """Stateless facade over the footprint functions.

    Lets services and commands take the resolver as a dependency.
    """

    def compute_bounds(self, block: PlacedBlock) -> BoundingRectangle:
        return compute_bounds(block)

    def get_snap_faces(self, block: PlacedBlock) -> list[SnapFace]:
        return get_snap_faces(block)

    def get_face_offsets(
        self,
        block_type: BlockType | str,
        core_thickness: float,
        rotation: float,
    ) -> list[FaceOffset]:
        return get_face_offsets(block_type, core_thickness, rotation)
