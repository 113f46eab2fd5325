"""Unit tests for placement snapping.

These tests verify:
- Face-to-face alignment against a placed block
- The exclusive snap threshold and the grid fallback
- Grid rounding of X/Z and of Y to the 16\" course
- First-found tie-breaking in block list order
- Faces truly coincide after a snap
- Placed blocks are never modified
"""

import math

import pytest

from blocklayout.domain import (
    BlockType,
    FaceOrientation,
    PlacedBlock,
    PlacementSnapper,
    SnapEdge,
    Vector3,
    get_snap_faces,
    snap_placement,
    snap_to_grid,
)

ALL_TYPES = [t.value for t in BlockType] + ["window_buck"]
ROTATIONS = [0, 90, 180, 270]

ORIENTATION_BY_EDGE = {
    SnapEdge.LEFT: FaceOrientation.MIN_X,
    SnapEdge.RIGHT: FaceOrientation.MAX_X,
    SnapEdge.BACK: FaceOrientation.MIN_Z,
    SnapEdge.FRONT: FaceOrientation.MAX_Z,
}


def _standard(block_id: str, x: float = 0.0, z: float = 0.0) -> PlacedBlock:
    return PlacedBlock(
        id=block_id,
        block_type=BlockType.STANDARD,
        core_thickness=8,
        position=Vector3(x, 0.0, z),
    )


class TestSnapToBlock:
    """Tests for alignment against an existing block."""

    def test_snaps_to_right_side(self, standard_block: PlacedBlock) -> None:
        """A cursor just past the +X end lands flush against it.

        The new block's -X face touches, so the edge is reported as left.
        """
        result = snap_placement(
            Vector3(50, 0, 2), BlockType.STANDARD, 8, 0, [standard_block]
        )
        assert result.snapped_to_block is True
        assert result.snapped_block_id == "A"
        assert result.snap_edge is SnapEdge.LEFT
        assert result.position == Vector3(48, 0, 0)
        assert result.distance == pytest.approx(math.sqrt(8))

    def test_snaps_to_left_side(self, standard_block: PlacedBlock) -> None:
        result = snap_placement(
            Vector3(-50, 0, -2), "standard", 8, 0, [standard_block]
        )
        assert result.position == Vector3(-48, 0, 0)
        assert result.snap_edge is SnapEdge.RIGHT

    def test_snaps_to_front(self, standard_block: PlacedBlock) -> None:
        result = snap_placement(Vector3(2, 0, 20), "standard", 8, 0, [standard_block])
        assert result.position == Vector3(0, 0, 13.5)
        assert result.snap_edge is SnapEdge.BACK

    def test_snaps_to_back(self, standard_block: PlacedBlock) -> None:
        result = snap_placement(Vector3(-2, 0, -20), "standard", 8, 0, [standard_block])
        assert result.position == Vector3(0, 0, -13.5)
        assert result.snap_edge is SnapEdge.FRONT

    def test_keeps_raw_y(self, standard_block: PlacedBlock) -> None:
        """Y passes through untouched on a block snap."""
        result = snap_placement(Vector3(50, 7, 2), "standard", 8, 0, [standard_block])
        assert result.position == Vector3(48, 7, 0)

    def test_rotated_new_block(self, standard_block: PlacedBlock) -> None:
        """A block turned along Z is 13.5\" wide on X."""
        result = snap_placement(Vector3(35, 0, 0), "standard", 8, 90, [standard_block])
        assert result.position == Vector3(30.75, 0, 0)
        assert result.snap_edge is SnapEdge.LEFT

    def test_corner_uses_leg_faces(self, standard_block: PlacedBlock) -> None:
        """The corner's +X face midpoint is off its center, so Z shifts."""
        result = snap_placement(Vector3(-40, 0, 12), "corner_90", 8, 0, [standard_block])
        assert result.position.x == pytest.approx(-39.75)
        assert result.position.z == pytest.approx(12.5)
        assert result.snap_edge is SnapEdge.RIGHT

    def test_unknown_new_block_uses_fallback_box(
        self, standard_block: PlacedBlock
    ) -> None:
        result = snap_placement(Vector3(75, 0, 0), "window_buck", 8, 0, [standard_block])
        assert result.snapped_to_block is True
        assert result.position == Vector3(48, 0, 0)

    def test_picks_closest_block(self) -> None:
        blocks = [_standard("far", x=0), _standard("near", x=200)]
        result = snap_placement(Vector3(255, 0, 0), "standard", 8, 0, blocks)
        assert result.snapped_block_id == "near"
        assert result.position == Vector3(248, 0, 0)


class TestThreshold:
    """Tests for the snap threshold and the grid fallback."""

    def test_far_cursor_falls_back_to_grid(self, standard_block: PlacedBlock) -> None:
        result = snap_placement(Vector3(500, 0, 500), "standard", 8, 0, [standard_block])
        assert result.snapped_to_block is False
        assert result.snapped_block_id is None
        assert result.snap_edge is None
        assert result.distance is None
        assert result.position == Vector3(496, 0, 496)

    def test_exactly_at_threshold_does_not_snap(
        self, standard_block: PlacedBlock
    ) -> None:
        """The nearest candidate (48, 0) is exactly 150 away."""
        result = snap_placement(Vector3(198, 0, 0), "standard", 8, 0, [standard_block])
        assert result.snapped_to_block is False
        assert result.position == Vector3(200, 0, 0)

    def test_just_inside_threshold_snaps(self, standard_block: PlacedBlock) -> None:
        result = snap_placement(
            Vector3(197.999, 0, 0), "standard", 8, 0, [standard_block]
        )
        assert result.snapped_to_block is True
        assert result.position == Vector3(48, 0, 0)

    def test_custom_threshold(self, standard_block: PlacedBlock) -> None:
        snapper = PlacementSnapper(snap_threshold=10)
        near = snapper.snap_placement(Vector3(50, 0, 2), "standard", 8, 0, [standard_block])
        assert near.snapped_to_block is True
        at_limit = snapper.snap_placement(
            Vector3(58, 0, 0), "standard", 8, 0, [standard_block]
        )
        assert at_limit.snapped_to_block is False
        assert at_limit.position == Vector3(56, 0, 0)

    def test_grid_override(self, standard_block: PlacedBlock) -> None:
        result = snap_placement(
            Vector3(1014, 0, 1026), "standard", 8, 0, [standard_block], grid_size=10
        )
        assert result.position == Vector3(1010, 0, 1030)

    @pytest.mark.parametrize(
        "raw",
        [Vector3(0, 0, 0), Vector3(13.2, 25, -3.9), Vector3(-101, -9, 77.7)],
    )
    def test_no_blocks_equals_grid_snap(self, raw: Vector3) -> None:
        result = snap_placement(raw, "standard", 8, 0, [])
        assert result.snapped_to_block is False
        assert result.position == snap_to_grid(raw, 8)


class TestSnapToGrid:
    """Tests for grid rounding."""

    def test_rounds_x_z_to_grid_and_y_to_course(self) -> None:
        assert snap_to_grid(Vector3(3, 25, -3)) == Vector3(0, 32, 0)

    def test_halves_round_to_even_multiple(self) -> None:
        assert snap_to_grid(Vector3(500, 0, 500)) == Vector3(496, 0, 496)
        assert snap_to_grid(Vector3(4, 8, 12)) == Vector3(0, 0, 16)

    def test_vertical_module_ignores_grid_size(self) -> None:
        assert snap_to_grid(Vector3(14, 20, 26), grid_size=10) == Vector3(10, 16, 30)

    def test_idempotent(self) -> None:
        once = snap_to_grid(Vector3(37.3, 41, -12.9))
        assert snap_to_grid(once) == once

    @pytest.mark.parametrize("grid_size", [0, -8])
    def test_non_positive_grid_rejected(self, grid_size: float) -> None:
        with pytest.raises(ValueError, match="grid_size"):
            snap_to_grid(Vector3(1, 1, 1), grid_size)


class TestTieBreak:
    """Tests for exact distance ties."""

    def test_first_block_wins(self) -> None:
        twins = [_standard("first"), _standard("second")]
        result = snap_placement(Vector3(50, 0, 2), "standard", 8, 0, twins)
        assert result.snapped_block_id == "first"

    def test_order_decides(self) -> None:
        """The same tie resolves the other way when the list is reversed."""
        twins = [_standard("second"), _standard("first")]
        result = snap_placement(Vector3(50, 0, 2), "standard", 8, 0, twins)
        assert result.snapped_block_id == "second"

    def test_gap_between_two_blocks(self) -> None:
        """A 48\" gap fits the new block against either neighbour."""
        left, right = _standard("left", x=0), _standard("right", x=96)
        result = snap_placement(Vector3(48, 0, 0), "standard", 8, 0, [left, right])
        assert result.snapped_block_id == "left"
        assert result.snap_edge is SnapEdge.LEFT

        result = snap_placement(Vector3(48, 0, 0), "standard", 8, 0, [right, left])
        assert result.snapped_block_id == "right"
        assert result.snap_edge is SnapEdge.RIGHT
        assert result.position == Vector3(48, 0, 0)


class TestSnapProperties:
    """Properties that hold for every block type and rotation."""

    CURSORS = [Vector3(60, 0, 3), Vector3(-60, 0, -3), Vector3(2, 0, 40), Vector3(-2, 0, -40)]

    @pytest.mark.parametrize("rotation", ROTATIONS)
    @pytest.mark.parametrize("block_type", ALL_TYPES)
    def test_faces_coincide_after_snap(
        self, standard_block: PlacedBlock, block_type: str, rotation: int
    ) -> None:
        """The touching faces share a plane and a midpoint."""
        existing_faces = get_snap_faces(standard_block)
        for cursor in self.CURSORS:
            result = snap_placement(cursor, block_type, 8, rotation, [standard_block])
            assert result.snapped_to_block is True
            assert result.snap_edge is not None

            placed = PlacedBlock(
                id="new",
                block_type=block_type,
                core_thickness=8,
                position=result.position,
                rotation=rotation,
            )
            orientation = ORIENTATION_BY_EDGE[result.snap_edge]
            new_face = next(
                f for f in get_snap_faces(placed) if f.orientation is orientation
            )
            matches = [
                f
                for f in existing_faces
                if f.orientation is orientation.opposite
                and abs(f.plane - new_face.plane) < 1e-6
                and abs(f.center_x - new_face.center_x) < 1e-6
                and abs(f.center_z - new_face.center_z) < 1e-6
            ]
            assert matches, f"{block_type}@{rotation} from {cursor}"

    @pytest.mark.parametrize("block_type", ["standard", "corner_90", "corner_45"])
    def test_snapping_again_is_stable(
        self, standard_block: PlacedBlock, block_type: str
    ) -> None:
        """A cursor already on a snapped position stays there."""
        first = snap_placement(Vector3(55, 0, 9), block_type, 8, 90, [standard_block])
        second = snap_placement(first.position, block_type, 8, 90, [standard_block])
        assert second.position == first.position
        assert second.distance == pytest.approx(0.0)

    def test_existing_blocks_not_modified(self) -> None:
        blocks = [_standard("A"), _standard("B", x=300)]
        before = list(blocks)
        snap_placement(Vector3(50, 0, 2), "standard", 8, 0, blocks)
        assert blocks == before

    def test_accepts_any_sequence(self, standard_block: PlacedBlock) -> None:
        result = snap_placement(Vector3(50, 0, 2), "standard", 8, 0, (standard_block,))
        assert result.snapped_block_id == "A"


class TestPlacementSnapper:
    """Tests for PlacementSnapper configuration."""

    def test_defaults(self) -> None:
        snapper = PlacementSnapper()
        assert snapper.snap_threshold == 150
        assert snapper.grid_size == 8
        assert snapper.vertical_module == 16

    @pytest.mark.parametrize(
        "kwargs",
        [{"snap_threshold": 0}, {"grid_size": -1}, {"vertical_module": 0}],
    )
    def test_rejects_non_positive_settings(self, kwargs: dict[str, float]) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            PlacementSnapper(**kwargs)

    def test_custom_vertical_module(self) -> None:
        snapper = PlacementSnapper(vertical_module=4)
        assert snapper.snap_to_grid(Vector3(0, 9, 0)) == Vector3(0, 8, 0)
