"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blocklayout.web.exceptions import register_exception_handlers
from blocklayout.web.routers import (
    catalog_router,
    geometry_router,
    snap_router,
    validate_router,
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Block Layout API",
        description="REST API for ICF block footprints and placement snapping",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # The editor runs in a browser on another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(snap_router, prefix="/api/v1")
    app.include_router(geometry_router, prefix="/api/v1")
    app.include_router(catalog_router, prefix="/api/v1")
    app.include_router(validate_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
