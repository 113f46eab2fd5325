"""Block type and shape category value objects."""

from __future__ import annotations

from enum import Enum


class ShapeCategory(str, Enum):
    """Footprint shapes the resolver knows how to reason about.

    Attributes:
        RECTANGULAR: Straight wall block, symmetric about its center.
        CORNER_90: Right-angle L with a long and a short leg.
        CORNER_45: Equal-leg corner, approximated by a square.
        UNRECOGNIZED: Anything else; resolved with a fixed fallback box.
    """

    RECTANGULAR = "rectangular"
    CORNER_90 = "corner_90"
    CORNER_45 = "corner_45"
    UNRECOGNIZED = "unrecognized"


class BlockType(str, Enum):
    """ICF block products that can be placed in a layout."""

    STANDARD = "standard"
    CORNER_90 = "corner_90"
    CORNER_45 = "corner_45"
    TAPER_TOP = "taper_top"
    BRICK_LEDGE = "brick_ledge"
    HEIGHT_ADJUSTER = "height_adjuster"


class SnapEdge(str, Enum):
    """Edge of the new block that touched an existing block."""

    LEFT = "left"
    RIGHT = "right"
    FRONT = "front"
    BACK = "back"


# Allowed concrete core thicknesses in inches
CORE_THICKNESS_OPTIONS: tuple[int, ...] = (4, 6, 8, 10, 12)

# The four rotation states a block can be placed in, in degrees
RIGHT_ANGLE_ROTATIONS: tuple[int, ...] = (0, 90, 180, 270)
