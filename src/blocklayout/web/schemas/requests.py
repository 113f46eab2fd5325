"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from blocklayout.web.schemas.common import BlockSchema, PositionSchema


class SnapRequest(BaseModel):
    """Request for snapping a block being placed."""

    model_config = ConfigDict(allow_inf_nan=False)

    position: PositionSchema = Field(..., description="Raw cursor position")
    block_type: str = Field(default="standard", description="Block type being placed")
    core_thickness: float = Field(default=8.0, description="Core thickness in inches")
    rotation: int = Field(default=0, description="Rotation in degrees")
    blocks: list[BlockSchema] = Field(
        default_factory=list, description="Blocks already placed, in placement order"
    )
    grid_size: float = Field(default=8.0, gt=0, description="Grid size in inches")


class BoundsRequest(BaseModel):
    """Request for block bounds and snap faces."""

    blocks: list[BlockSchema] = Field(..., description="Blocks to resolve")


class LayoutValidateRequest(BaseModel):
    """Request for validating a layout."""

    layout: dict[str, Any] = Field(..., description="Layout JSON")
