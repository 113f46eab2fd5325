"""Data Transfer Objects for the application layer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from blocklayout.domain import PlacedBlock, SnapResult, Vector3
from blocklayout.domain.value_objects import (
    BlockType,
    CORE_THICKNESS_OPTIONS,
    RIGHT_ANGLE_ROTATIONS,
)


@dataclass
class PlacementInput:
    """Input DTO for a block placement request (cursor position plus block)."""

    x: float
    z: float
    block_type: str = BlockType.STANDARD.value
    core_thickness: float = 8
    rotation: int = 0
    y: float = 0.0

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if not all(math.isfinite(v) for v in (self.x, self.y, self.z)):
            errors.append("Position must be finite")
        valid_types = [t.value for t in BlockType]
        if self.block_type not in valid_types:
            errors.append(f"Block type must be one of: {', '.join(valid_types)}")
        if self.core_thickness not in CORE_THICKNESS_OPTIONS:
            options = ", ".join(str(c) for c in CORE_THICKNESS_OPTIONS)
            errors.append(f"Core thickness must be one of: {options}")
        if self.rotation not in RIGHT_ANGLE_ROTATIONS:
            errors.append("Rotation must be one of: 0, 90, 180, 270")
        return errors

    def to_position(self) -> Vector3:
        """Raw cursor position as a Vector3."""
        return Vector3(self.x, self.y, self.z)


@dataclass
class PlacementOutput:
    """Output DTO for a placement request.

    Attributes:
        result: Snap decision, None if the input was invalid.
        block: The new block for place requests, None for snap previews.
        errors: Error messages if the request was rejected.
    """

    result: SnapResult | None = None
    block: PlacedBlock | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the request produced a snap decision."""
        return not self.errors and self.result is not None
