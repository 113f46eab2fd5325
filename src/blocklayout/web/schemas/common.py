"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, ConfigDict, Field


class PositionSchema(BaseModel):
    """World position in inches."""

    model_config = ConfigDict(allow_inf_nan=False)

    x: float = Field(..., description="X in inches")
    y: float = Field(default=0.0, description="Y (vertical) in inches")
    z: float = Field(..., description="Z in inches")


class BlockSchema(BaseModel):
    """A placed block as sent by the client.

    Unlike the layout file schema, any block type string is accepted here;
    unknown types resolve to the fallback footprint.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    id: str = Field(..., min_length=1, description="Block identifier")
    type: str = Field(..., description="Block type")
    core_thickness: float = Field(default=8.0, gt=0, description="Core thickness in inches")
    position: PositionSchema
    rotation: int = Field(default=0, description="Rotation in degrees")
