"""Conversions between API schemas and domain objects."""

from blocklayout.application.dtos import PlacementInput
from blocklayout.domain import PlacedBlock, SnapResult, Vector3
from blocklayout.web.schemas import (
    BlockSchema,
    PositionSchema,
    SnapRequest,
    SnapResultSchema,
)


def schema_to_block(block: BlockSchema) -> PlacedBlock:
    return PlacedBlock(
        id=block.id,
        block_type=block.type,
        core_thickness=block.core_thickness,
        position=Vector3(block.position.x, block.position.y, block.position.z),
        rotation=block.rotation,
    )


def request_to_placement(request: SnapRequest) -> PlacementInput:
    return PlacementInput(
        x=request.position.x,
        y=request.position.y,
        z=request.position.z,
        block_type=request.block_type,
        core_thickness=request.core_thickness,
        rotation=request.rotation,
    )


def result_to_schema(result: SnapResult) -> SnapResultSchema:
    p = result.position
    return SnapResultSchema(
        position=PositionSchema(x=p.x, y=p.y, z=p.z),
        snapped_to_block=result.snapped_to_block,
        snapped_block_id=result.snapped_block_id,
        snap_edge=result.snap_edge.value if result.snap_edge else None,
        distance=result.distance,
    )
