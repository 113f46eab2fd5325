"""Snap decision value objects."""

from __future__ import annotations

from dataclasses import dataclass

from ._blocks import SnapEdge
from ._geometry import FaceOrientation, Vector3

_EDGE_BY_ORIENTATION: dict[FaceOrientation, SnapEdge] = {
    FaceOrientation.MIN_X: SnapEdge.LEFT,
    FaceOrientation.MAX_X: SnapEdge.RIGHT,
    FaceOrientation.MIN_Z: SnapEdge.BACK,
    FaceOrientation.MAX_Z: SnapEdge.FRONT,
}


def edge_for_orientation(orientation: FaceOrientation) -> SnapEdge:
    """Map a face orientation of the new block to its semantic edge label."""
    return _EDGE_BY_ORIENTATION[orientation]


@dataclass(frozen=True)
class SnapResult:
    """Outcome of a single placement snap.

    Attributes:
        position: Resolved world position of the new block's center.
        snapped_to_block: True if the block aligned to an existing block,
            False if the position came from the grid fallback.
        snapped_block_id: Id of the block aligned to, if any.
        snap_edge: Edge of the new block that touches the existing block.
        distance: Ground-plane distance between the raw and the snapped
            position for a block snap, None on grid fallback.
    """

    position: Vector3
    snapped_to_block: bool
    snapped_block_id: str | None = None
    snap_edge: SnapEdge | None = None
    distance: float | None = None

    def __post_init__(self) -> None:
        if self.snapped_to_block and self.snapped_block_id is None:
            raise ValueError("snapped_block_id is required for a block snap")
        if not self.snapped_to_block and self.snapped_block_id is not None:
            raise ValueError("snapped_block_id must be None for a grid snap")
