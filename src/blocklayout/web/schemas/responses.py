"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from blocklayout.web.schemas.common import BlockSchema, PositionSchema


class SnapResultSchema(BaseModel):
    """Response for a snap request."""

    position: PositionSchema = Field(..., description="Resolved block center")
    snapped_to_block: bool = Field(..., description="True if aligned to a block")
    snapped_block_id: str | None = Field(default=None, description="Block aligned to")
    snap_edge: str | None = Field(
        default=None, description="Edge of the new block that touches: left/right/front/back"
    )
    distance: float | None = Field(
        default=None, description="Distance moved from the cursor for a block snap"
    )


class BoundsSchema(BaseModel):
    """Axis-aligned bounding rectangle."""

    min_x: float
    max_x: float
    min_z: float
    max_z: float
    rotation: int


class SnapFaceSchema(BaseModel):
    """A snap face in world coordinates."""

    orientation: str = Field(..., description="min_x, max_x, min_z or max_z")
    plane: float = Field(..., description="Constant coordinate of the face plane")
    center_x: float
    center_z: float


class BlockGeometrySchema(BaseModel):
    """Bounds and faces of one block."""

    id: str
    category: str = Field(..., description="Resolved shape category")
    bounds: BoundsSchema
    faces: list[SnapFaceSchema]


class BoundsResponseSchema(BaseModel):
    """Response for a bounds request."""

    blocks: list[BlockGeometrySchema]


class CatalogEntrySchema(BaseModel):
    """One block type from the catalog."""

    type: str
    name: str
    category: str
    length: float
    height: float
    long_leg: float | None = None
    short_leg: float | None = None
    width: float = Field(..., description="Width for the requested core thickness")
    description: str = ""


class ValidationResultSchema(BaseModel):
    """Response for layout validation."""

    is_valid: bool
    errors: list[dict[str, Any]] = Field(default_factory=list)
    warnings: list[dict[str, Any]] = Field(default_factory=list)


class PlaceResponseSchema(BaseModel):
    """Response for a place request."""

    result: SnapResultSchema
    block: BlockSchema = Field(..., description="The new block to append to the layout")
