"""Custom exceptions and error handlers for the REST API."""

import math
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blocklayout.application.config import ConfigError


class PlacementRejectedError(Exception):
    """Raised when a snap or place request has invalid placement input."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Placement rejected: {errors}")


def _json_safe(value: Any) -> Any:
    """Replace NaN and infinities, which strict JSON cannot carry, with strings."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    return value


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Request validation failed",
                "error_type": "request_validation",
                "details": [
                    {
                        "path": ".".join(str(part) for part in err.get("loc", ())),
                        "message": err.get("msg", ""),
                        "value": _json_safe(err.get("input")),
                    }
                    for err in exc.errors()
                ],
            },
        )

    @app.exception_handler(PlacementRejectedError)
    async def placement_rejected_handler(
        request: Request, exc: PlacementRejectedError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Placement rejected",
                "error_type": "placement",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": _json_safe(exc.details),
            },
        )
