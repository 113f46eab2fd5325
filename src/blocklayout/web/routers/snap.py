"""Placement snapping endpoints."""

from fastapi import APIRouter

from blocklayout.web.dependencies import PlaceCommandDep, SnapCommandDep
from blocklayout.web.exceptions import PlacementRejectedError
from blocklayout.web.routers._convert import (
    request_to_placement,
    result_to_schema,
    schema_to_block,
)
from blocklayout.web.schemas import BlockSchema, PositionSchema, SnapRequest
from blocklayout.web.schemas.responses import PlaceResponseSchema, SnapResultSchema

router = APIRouter(tags=["snap"])


@router.post("/snap", response_model=SnapResultSchema)
async def snap(request: SnapRequest, command: SnapCommandDep) -> SnapResultSchema:
    """Resolve where a block would land for a cursor position.

    Args:
        request: Cursor position, block being placed and existing blocks.
        command: Injected SnapPlacementCommand.

    Returns:
        The snapped position and what it snapped to.

    Raises:
        PlacementRejectedError: If the placement input is invalid.
    """
    blocks = [schema_to_block(b) for b in request.blocks]
    output = command.execute(request_to_placement(request), blocks, request.grid_size)
    if not output.is_valid or output.result is None:
        raise PlacementRejectedError(output.errors)
    return result_to_schema(output.result)


@router.post("/place", response_model=PlaceResponseSchema)
async def place(request: SnapRequest, command: PlaceCommandDep) -> PlaceResponseSchema:
    """Snap a block and return it as a new placed block.

    The server keeps no layout; the client appends the returned block.
    """
    blocks = [schema_to_block(b) for b in request.blocks]
    output = command.execute(request_to_placement(request), blocks, request.grid_size)
    if not output.is_valid or output.result is None or output.block is None:
        raise PlacementRejectedError(output.errors)

    block = output.block
    return PlaceResponseSchema(
        result=result_to_schema(output.result),
        block=BlockSchema(
            id=block.id,
            type=str(getattr(block.block_type, "value", block.block_type)),
            core_thickness=block.core_thickness,
            position=PositionSchema(
                x=block.position.x, y=block.position.y, z=block.position.z
            ),
            rotation=block.rotation,
        ),
    )
