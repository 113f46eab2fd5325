"""FastAPI REST API for block placement.

This module provides a REST API for snapping block placements, resolving
block footprints, listing the catalog and validating layouts.

Usage:
    uvicorn blocklayout.web:app --reload
"""

from blocklayout.web.app import app, create_app

__all__ = ["app", "create_app"]
