"""API routers for the REST API."""

from blocklayout.web.routers.catalog import router as catalog_router
from blocklayout.web.routers.geometry import router as geometry_router
from blocklayout.web.routers.snap import router as snap_router
from blocklayout.web.routers.validate import router as validate_router

__all__ = [
    "catalog_router",
    "geometry_router",
    "snap_router",
    "validate_router",
]
