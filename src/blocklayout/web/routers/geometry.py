"""Block bounds and snap face endpoints."""

from fastapi import APIRouter

from blocklayout.domain import compute_bounds, get_snap_faces, shape_category
from blocklayout.web.routers._convert import schema_to_block
from blocklayout.web.schemas import (
    BlockGeometrySchema,
    BoundsRequest,
    BoundsResponseSchema,
    BoundsSchema,
    SnapFaceSchema,
)

router = APIRouter(prefix="/bounds", tags=["geometry"])


@router.post("", response_model=BoundsResponseSchema)
async def bounds(request: BoundsRequest) -> BoundsResponseSchema:
    """Compute bounding rectangles and snap faces for blocks.

    Unknown block types are not rejected; they resolve to the fallback
    footprint, as they do during snapping.
    """
    results = []
    for item in request.blocks:
        block = schema_to_block(item)
        rect = compute_bounds(block)
        faces = [
            SnapFaceSchema(
                orientation=face.orientation.value,
                plane=face.plane,
                center_x=face.center_x,
                center_z=face.center_z,
            )
            for face in get_snap_faces(block)
        ]
        results.append(
            BlockGeometrySchema(
                id=block.id,
                category=shape_category(block.block_type).value,
                bounds=BoundsSchema(
                    min_x=rect.min_x,
                    max_x=rect.max_x,
                    min_z=rect.min_z,
                    max_z=rect.max_z,
                    rotation=rect.rotation,
                ),
                faces=faces,
            )
        )
    return BoundsResponseSchema(blocks=results)
