"""FastAPI dependency injection for placement commands."""

from typing import Annotated

from fastapi import Depends

from blocklayout.application.commands import PlaceBlockCommand, SnapPlacementCommand


def get_snap_command() -> SnapPlacementCommand:
    """Dependency for SnapPlacementCommand."""
    return SnapPlacementCommand()


def get_place_command() -> PlaceBlockCommand:
    """Dependency for PlaceBlockCommand."""
    return PlaceBlockCommand()


# Type aliases for cleaner endpoint signatures
SnapCommandDep = Annotated[SnapPlacementCommand, Depends(get_snap_command)]
PlaceCommandDep = Annotated[PlaceBlockCommand, Depends(get_place_command)]
