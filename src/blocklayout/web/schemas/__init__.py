"""Pydantic schemas for the REST API."""

from blocklayout.web.schemas.common import BlockSchema, PositionSchema
from blocklayout.web.schemas.requests import (
    BoundsRequest,
    LayoutValidateRequest,
    SnapRequest,
)
from blocklayout.web.schemas.responses import (
    BlockGeometrySchema,
    BoundsResponseSchema,
    BoundsSchema,
    CatalogEntrySchema,
    PlaceResponseSchema,
    SnapFaceSchema,
    SnapResultSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "BlockSchema",
    "PositionSchema",
    # Requests
    "BoundsRequest",
    "LayoutValidateRequest",
    "SnapRequest",
    # Responses
    "BlockGeometrySchema",
    "BoundsResponseSchema",
    "BoundsSchema",
    "CatalogEntrySchema",
    "PlaceResponseSchema",
    "SnapFaceSchema",
    "SnapResultSchema",
    "ValidationResultSchema",
]
