"""Application layer - use cases and orchestration."""

from .commands import PlaceBlockCommand, SnapPlacementCommand
from .dtos import PlacementInput, PlacementOutput

__all__ = [
    "PlaceBlockCommand",
    "PlacementInput",
    "PlacementOutput",
    "SnapPlacementCommand",
]
