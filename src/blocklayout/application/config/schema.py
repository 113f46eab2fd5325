"""Pydantic models for block layout configuration files.

A layout file lists the blocks already placed and, optionally, the snap
settings to use when placing new ones.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from blocklayout.domain.value_objects import (
    BlockType,
    CORE_THICKNESS_OPTIONS,
    RIGHT_ANGLE_ROTATIONS,
)

# Supported schema versions for layout files
# Version 1.0: Initial schema with placed blocks and snap settings
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class PositionConfig(BaseModel):
    """World position of a block center in inches."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    x: float
    y: float = 0.0
    z: float


class SnapSettingsConfig(BaseModel):
    """Snap behaviour for new placements.

    Attributes:
        grid_size: Horizontal grid for the fallback, in inches.
        snap_threshold: Max cursor distance for face alignment, in inches.
        vertical_module: Vertical grid for the fallback, in inches.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    grid_size: float = Field(default=8.0, gt=0, description="Horizontal grid size")
    snap_threshold: float = Field(
        default=150.0, gt=0, description="Face snap distance threshold"
    )
    vertical_module: float = Field(
        default=16.0, gt=0, description="Vertical course module"
    )


class BlockConfig(BaseModel):
    """A placed block.

    Attributes:
        id: Unique block identifier.
        type: Catalog block type.
        core_thickness: Concrete core thickness in inches (4, 6, 8, 10 or 12).
        position: Center of the block's footprint bounding box.
        rotation: Rotation in degrees (0, 90, 180 or 270).
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    type: BlockType
    core_thickness: int = Field(default=8, description="Core thickness in inches")
    position: PositionConfig
    rotation: int = Field(default=0, description="Rotation in degrees")

    @field_validator("core_thickness")
    @classmethod
    def validate_core_thickness(cls, v: int) -> int:
        """Validate that the core thickness is a catalog option."""
        if v not in CORE_THICKNESS_OPTIONS:
            raise ValueError(
                f"core_thickness must be one of {list(CORE_THICKNESS_OPTIONS)}"
            )
        return v

    @field_validator("rotation")
    @classmethod
    def validate_rotation(cls, v: int) -> int:
        """Validate that the rotation is a right angle."""
        if v not in RIGHT_ANGLE_ROTATIONS:
            raise ValueError(f"rotation must be one of {list(RIGHT_ANGLE_ROTATIONS)}")
        return v


class LayoutConfiguration(BaseModel):
    """Root configuration model for a block layout.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        settings: Snap settings
        blocks: Blocks already placed, in placement order

    Example:
        >>> config = LayoutConfiguration(
        ...     schema_version="1.0",
        ...     blocks=[BlockConfig(id="a", type="standard", position={"x": 0, "z": 0})],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    settings: SnapSettingsConfig = Field(default_factory=SnapSettingsConfig)
    blocks: list[BlockConfig] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "LayoutConfiguration":
        """Validate that block ids are unique."""
        seen: set[str] = set()
        duplicates: list[str] = []
        for block in self.blocks:
            if block.id in seen and block.id not in duplicates:
                duplicates.append(block.id)
            seen.add(block.id)
        if duplicates:
            raise ValueError(f"Duplicate block ids: {', '.join(duplicates)}")
        return self
