"""Conversion between layout configuration models and domain objects."""

from blocklayout.application.config.schema import (
    BlockConfig,
    LayoutConfiguration,
    PositionConfig,
)
from blocklayout.domain.entities import PlacedBlock
from blocklayout.domain.services import PlacementSnapper
from blocklayout.domain.value_objects import BlockType, Vector3


def config_to_blocks(config: LayoutConfiguration) -> list[PlacedBlock]:
    """Convert the configured blocks to domain entities, keeping their order.

    Order matters: the snapper breaks exact distance ties in favour of the
    block listed first.
    """
    return [
        PlacedBlock(
            id=block.id,
            block_type=block.type,
            core_thickness=float(block.core_thickness),
            position=Vector3(block.position.x, block.position.y, block.position.z),
            rotation=block.rotation,
        )
        for block in config.blocks
    ]


def config_to_snapper(config: LayoutConfiguration) -> PlacementSnapper:
    """Build a snapper from the configured snap settings."""
    settings = config.settings
    return PlacementSnapper(
        snap_threshold=settings.snap_threshold,
        grid_size=settings.grid_size,
        vertical_module=settings.vertical_module,
    )


def block_to_config(block: PlacedBlock) -> BlockConfig:
    """Convert a placed block back to its configuration model.

    Raises:
        ValueError: If the block type is not a catalog block type.
    """
    return BlockConfig(
        id=block.id,
        type=BlockType(block.block_type),
        core_thickness=int(block.core_thickness),
        position=PositionConfig(
            x=block.position.x, y=block.position.y, z=block.position.z
        ),
        rotation=block.rotation,
    )


def append_block(config: LayoutConfiguration, block: PlacedBlock) -> LayoutConfiguration:
    """Return a copy of the layout with ``block`` appended."""
    return config.model_copy(
        update={"blocks": [*config.blocks, block_to_config(block)]}
    )
