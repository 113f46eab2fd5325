"""Application commands (use cases) for block placement."""

from __future__ import annotations

import logging
import math
import uuid
from collections.abc import Callable, Sequence

from blocklayout.domain import PlacedBlock, PlacementSnapper

from .dtos import PlacementInput, PlacementOutput

logger = logging.getLogger(__name__)


def _new_block_id() -> str:
    return uuid.uuid4().hex


class SnapPlacementCommand:
    """Resolve where a block would land for a cursor position.

    This is the pointer-move path: nothing is added to the layout.
    """

    def __init__(self, snapper: PlacementSnapper | None = None) -> None:
        self.snapper = snapper or PlacementSnapper()

    def execute(
        self,
        placement: PlacementInput,
        blocks: Sequence[PlacedBlock],
        grid_size: float | None = None,
    ) -> PlacementOutput:
        """Execute the snap.

        Args:
            placement: Cursor position and the block being placed.
            blocks: Blocks already in the layout, in placement order.
            grid_size: Optional grid override for the fallback.

        Returns:
            PlacementOutput with the snap result, or errors if the
            placement input is invalid.
        """
        errors = placement.validate()
        if grid_size is not None and not (0 < grid_size < math.inf):
            errors.append("Grid size must be a positive finite number")
        if errors:
            logger.debug(f"Rejected placement input: {errors}")
            return PlacementOutput(errors=errors)

        result = self.snapper.snap_placement(
            placement.to_position(),
            placement.block_type,
            placement.core_thickness,
            placement.rotation,
            blocks,
            grid_size,
        )
        return PlacementOutput(result=result)


class PlaceBlockCommand:
    """Snap a block and build the PlacedBlock for it.

    This is the click path. The caller owns the layout and decides where
    to store the returned block.
    """

    def __init__(
        self,
        snapper: PlacementSnapper | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self.snap_command = SnapPlacementCommand(snapper)
        self.id_factory = id_factory or _new_block_id

    def execute(
        self,
        placement: PlacementInput,
        blocks: Sequence[PlacedBlock],
        grid_size: float | None = None,
    ) -> PlacementOutput:
        """Execute the placement.

        Returns:
            PlacementOutput with both the snap result and the new block.
        """
        output = self.snap_command.execute(placement, blocks, grid_size)
        if not output.is_valid or output.result is None:
            return output

        block = PlacedBlock(
            id=self.id_factory(),
            block_type=placement.block_type,
            core_thickness=placement.core_thickness,
            position=output.result.position,
            rotation=placement.rotation,
        )
        logger.info(
            f"Placed {block.block_type} block {block.id} at "
            f"({block.position.x}, {block.position.y}, {block.position.z})"
        )
        return PlacementOutput(result=output.result, block=block)
