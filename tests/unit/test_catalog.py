"""Unit tests for the block catalog."""

import pytest

from blocklayout.domain import (
    BLOCK_CATALOG,
    BlockSpec,
    BlockType,
    ShapeCategory,
    get_block_spec,
    shape_category,
)


class TestBlockCatalog:
    """Tests for catalog lookups and block widths."""

    def test_every_block_type_has_a_spec(self) -> None:
        assert set(BLOCK_CATALOG) == set(BlockType)

    @pytest.mark.parametrize(
        "core,width",
        [(4, 9.5), (6, 11.5), (8, 13.5), (10, 15.5), (12, 17.5)],
    )
    def test_standard_width_is_foam_plus_core(self, core: int, width: float) -> None:
        """Two 2.75\" foam panels around the core."""
        assert BLOCK_CATALOG[BlockType.STANDARD].width_for(core) == width

    def test_taper_top_adds_bearing_width(self) -> None:
        assert BLOCK_CATALOG[BlockType.TAPER_TOP].width_for(8) == 17.5

    def test_brick_ledge_width_is_fixed(self) -> None:
        spec = BLOCK_CATALOG[BlockType.BRICK_LEDGE]
        assert spec.width_for(4) == 17.375
        assert spec.width_for(12) == 17.375

    def test_corner_legs(self) -> None:
        corner_90 = BLOCK_CATALOG[BlockType.CORNER_90]
        assert corner_90.long_leg == 38.5
        assert corner_90.short_leg == 22.5
        corner_45 = BLOCK_CATALOG[BlockType.CORNER_45]
        assert corner_45.long_leg == 32.0

    def test_height_adjuster_is_short(self) -> None:
        assert BLOCK_CATALOG[BlockType.HEIGHT_ADJUSTER].height == 4.0

    def test_get_block_spec_accepts_strings(self) -> None:
        spec = get_block_spec("corner_90")
        assert spec is not None
        assert spec.block_type is BlockType.CORNER_90

    def test_get_block_spec_unknown(self) -> None:
        assert get_block_spec("window_buck") is None

    @pytest.mark.parametrize(
        "block_type,category",
        [
            ("standard", ShapeCategory.RECTANGULAR),
            ("taper_top", ShapeCategory.RECTANGULAR),
            ("brick_ledge", ShapeCategory.RECTANGULAR),
            ("height_adjuster", ShapeCategory.RECTANGULAR),
            ("corner_90", ShapeCategory.CORNER_90),
            ("corner_45", ShapeCategory.CORNER_45),
            ("window_buck", ShapeCategory.UNRECOGNIZED),
        ],
    )
    def test_shape_category(self, block_type: str, category: ShapeCategory) -> None:
        assert shape_category(block_type) is category


class TestBlockSpec:
    """Tests for BlockSpec validation."""

    def test_non_positive_length_rejected(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            BlockSpec(
                block_type=BlockType.STANDARD,
                name="Bad",
                category=ShapeCategory.RECTANGULAR,
                height=16,
                length=0,
            )

    def test_corner_requires_legs(self) -> None:
        with pytest.raises(ValueError, match="long_leg and short_leg"):
            BlockSpec(
                block_type=BlockType.CORNER_90,
                name="Bad corner",
                category=ShapeCategory.CORNER_90,
                height=16,
                length=38.5,
                long_leg=38.5,
            )
