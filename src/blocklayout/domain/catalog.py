"""ICF block catalog.

Physical dimensions of every block product, in inches. Block widths are
two 2.75" foam panels around the concrete core, so a standard block with an
8" core is 13.5" wide.
"""

from __future__ import annotations

from dataclasses import dataclass

from .value_objects import BlockType, ShapeCategory

# Two 2.75" foam panels
FOAM_PANELS_WIDTH = 5.5


@dataclass(frozen=True)
class BlockSpec:
    """Dimensions of one block product.

    Attributes:
        block_type: Catalog key.
        name: Display name.
        category: Footprint shape used for bounds and snapping.
        height: Course height in inches.
        length: Overall length in inches (long leg for corners).
        long_leg: Long leg length for corner blocks.
        short_leg: Short leg length for corner blocks.
        extra_width: Width added on top of foam + core (taper top bearing).
        fixed_width: Width that does not depend on the core, if any.
        description: Short product description.
    """

    block_type: BlockType
    name: str
    category: ShapeCategory
    height: float
    length: float
    long_leg: float | None = None
    short_leg: float | None = None
    extra_width: float = 0.0
    fixed_width: float | None = None
    description: str = ""

    def __post_init__(self) -> None:
        if self.height <= 0 or self.length <= 0:
            raise ValueError("Block height and length must be positive")
        if self.category in (ShapeCategory.CORNER_90, ShapeCategory.CORNER_45):
            if self.long_leg is None or self.short_leg is None:
                raise ValueError("Corner blocks need long_leg and short_leg")

    def width_for(self, core_thickness: float) -> float:
        """Overall wall width of this block for a given core thickness."""
        if self.fixed_width is not None:
            return self.fixed_width
        return FOAM_PANELS_WIDTH + core_thickness + self.extra_width


BLOCK_CATALOG: dict[BlockType, BlockSpec] = {
    BlockType.STANDARD: BlockSpec(
        block_type=BlockType.STANDARD,
        name="Standard Block",
        category=ShapeCategory.RECTANGULAR,
        height=16.0,
        length=48.0,
        description='16" x 48" standard straight wall block',
    ),
    BlockType.CORNER_90: BlockSpec(
        block_type=BlockType.CORNER_90,
        name="90° Corner",
        category=ShapeCategory.CORNER_90,
        height=16.0,
        length=38.5,
        long_leg=38.5,
        short_leg=22.5,
        description='90-degree corner block - long leg 38.5", short leg 22.5"',
    ),
    BlockType.CORNER_45: BlockSpec(
        block_type=BlockType.CORNER_45,
        name="45° Corner",
        category=ShapeCategory.CORNER_45,
        height=16.0,
        length=32.0,
        long_leg=32.0,
        short_leg=32.0,
        description="45-degree angled corner block",
    ),
    BlockType.TAPER_TOP: BlockSpec(
        block_type=BlockType.TAPER_TOP,
        name="Taper Top",
        category=ShapeCategory.RECTANGULAR,
        height=16.0,
        length=48.0,
        extra_width=4.0,
        description="Top course block with increased bearing area for roof/floor",
    ),
    BlockType.BRICK_LEDGE: BlockSpec(
        block_type=BlockType.BRICK_LEDGE,
        name="Brick Ledge",
        category=ShapeCategory.RECTANGULAR,
        height=16.0,
        length=48.0,
        fixed_width=17.375,
        description='Forms 4" ledge for brick veneer support',
    ),
    BlockType.HEIGHT_ADJUSTER: BlockSpec(
        block_type=BlockType.HEIGHT_ADJUSTER,
        name="Height Adjuster",
        category=ShapeCategory.RECTANGULAR,
        height=4.0,
        length=48.0,
        description='4" height adjuster for custom wall heights',
    ),
}


def get_block_spec(block_type: BlockType | str) -> BlockSpec | None:
    """Look up a block spec, returning None for unknown block types."""
    try:
        key = BlockType(block_type)
    except ValueError:
        return None
    return BLOCK_CATALOG.get(key)


def shape_category(block_type: BlockType | str) -> ShapeCategory:
    """Shape category of a block type; unknown types are UNRECOGNIZED."""
    spec = get_block_spec(block_type)
    if spec is None:
        return ShapeCategory.UNRECOGNIZED
    return spec.category
