"""Edge-to-edge placement snapping.

When a new block is moved or dropped, every opposing pair of faces between
the new block and each placed block yields a candidate center that makes the
two faces touch with their midpoints aligned. The candidate closest to the
cursor wins if it is within the snap threshold; otherwise the cursor is
rounded to the placement grid.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from ..entities import PlacedBlock
from ..value_objects import (
    BlockType,
    FaceOffset,
    SnapFace,
    SnapResult,
    Vector3,
    edge_for_orientation,
)
from .footprint import FootprintResolver

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_GRID_SIZE",
    "SNAP_THRESHOLD",
    "VERTICAL_MODULE",
    "PlacementSnapper",
    "snap_placement",
    "snap_to_grid",
]

# Max ground-plane distance from cursor to an aligned position, in inches
SNAP_THRESHOLD = 150.0

# Horizontal placement grid in inches
DEFAULT_GRID_SIZE = 8.0

# Block course height; vertical positions snap to whole courses
VERTICAL_MODULE = 16.0


def _round_to(value: float, step: float) -> float:
    """Round to the nearest multiple of step.

    Exact halves go to the even multiple, so 500 on an 8" grid lands on 496.
    """
    return float(round(value / step) * step)


def _solve_center(face: SnapFace, offset: FaceOffset) -> tuple[float, float]:
    """Center (x, z) that puts ``offset`` flush against ``face``.

    The face planes coincide and the face midpoints line up along the
    other axis.
    """
    if face.orientation.axis == "x":
        return face.plane - offset.plane_offset, face.center_z - offset.offset_z
    return face.center_x - offset.offset_x, face.plane - offset.plane_offset


@dataclass
class PlacementSnapper:
    """Resolves the position of a block being placed.

    Attributes:
        snap_threshold: Candidates at or beyond this ground distance from
            the cursor are ignored.
        grid_size: Default horizontal grid for the fallback.
        vertical_module: Vertical grid for the fallback.
        resolver: Footprint resolver used for faces.
    """

    snap_threshold: float = SNAP_THRESHOLD
    grid_size: float = DEFAULT_GRID_SIZE
    vertical_module: float = VERTICAL_MODULE
    resolver: FootprintResolver = field(default_factory=FootprintResolver)

    def __post_init__(self) -> None:
        if self.snap_threshold <= 0:
            raise ValueError("snap_threshold must be positive")
        if self.grid_size <= 0:
            raise ValueError("grid_size must be positive")
        if self.vertical_module <= 0:
            raise ValueError("vertical_module must be positive")

    def snap_to_grid(self, position: Vector3, grid_size: float | None = None) -> Vector3:
        """Round X and Z to the horizontal grid and Y to the vertical module.

        Args:
            position: Position to round.
            grid_size: Horizontal grid override; defaults to self.grid_size.

        Returns:
            New rounded Vector3.

        Raises:
            ValueError: If grid_size is not positive.
        """
        step = self.grid_size if grid_size is None else grid_size
        if step <= 0:
            raise ValueError("grid_size must be positive")
        return Vector3(
            x=_round_to(position.x, step),
            y=_round_to(position.y, self.vertical_module),
            z=_round_to(position.z, step),
        )

    def snap_placement(
        self,
        raw_position: Vector3,
        block_type: BlockType | str,
        core_thickness: float,
        rotation: float,
        existing_blocks: Sequence[PlacedBlock],
        grid_size: float | None = None,
    ) -> SnapResult:
        """Align a new block to the nearest face of an existing block.

        Candidates are visited in the order of ``existing_blocks``, then
        existing face, then new face. Only a strictly smaller distance
        replaces the current best, so on an exact tie the first candidate
        found wins.

        Args:
            raw_position: Cursor position on the ground plane.
            block_type: Block type being placed.
            core_thickness: Core thickness of the block being placed.
            rotation: Rotation of the block being placed, in degrees.
            existing_blocks: Blocks already in the layout. Not modified.
            grid_size: Horizontal grid override for the fallback.

        Returns:
            SnapResult with the aligned position, or the grid-rounded
            position when no candidate is within the threshold.
        """
        new_offsets = self.resolver.get_face_offsets(block_type, core_thickness, rotation)

        best: SnapResult | None = None
        closest = math.inf

        for existing in existing_blocks:
            for face in self.resolver.get_snap_faces(existing):
                for offset in new_offsets:
                    if offset.orientation is not face.orientation.opposite:
                        continue

                    x, z = _solve_center(face, offset)
                    distance = raw_position.ground_distance(x, z)

                    if distance < self.snap_threshold and distance < closest:
                        closest = distance
                        best = SnapResult(
                            position=Vector3(x, raw_position.y, z),
                            snapped_to_block=True,
                            snapped_block_id=existing.id,
                            snap_edge=edge_for_orientation(offset.orientation),
                            distance=distance,
                        )

        if best is not None:
            logger.debug(
                f"Snapped {block_type} to block {best.snapped_block_id} "
                f"({best.snap_edge.value if best.snap_edge else '-'} edge, "
                f"distance {closest:.3f})"
            )
            return best

        position = self.snap_to_grid(raw_position, grid_size)
        logger.debug(
            f"No face within {self.snap_threshold} of "
            f"({raw_position.x}, {raw_position.z}), grid snap to "
            f"({position.x}, {position.y}, {position.z})"
        )
        return SnapResult(position=position, snapped_to_block=False)


_default_snapper = PlacementSnapper()


def snap_placement(
    raw_position: Vector3,
    block_type: BlockType | str,
    core_thickness: float,
    rotation: float,
    existing_blocks: Sequence[PlacedBlock],
    grid_size: float = DEFAULT_GRID_SIZE,
) -> SnapResult:
    """Snap a new block with the default threshold and vertical module.

    See PlacementSnapper.snap_placement.
    """
    return _default_snapper.snap_placement(
        raw_position, block_type, core_thickness, rotation, existing_blocks, grid_size
    )


def snap_to_grid(position: Vector3, grid_size: float = DEFAULT_GRID_SIZE) -> Vector3:
    """Round a position to the placement grid.

    X and Z go to the nearest multiple of ``grid_size``; Y always goes to
    the nearest 16" course.
    """
    return _default_snapper.snap_to_grid(position, grid_size)
