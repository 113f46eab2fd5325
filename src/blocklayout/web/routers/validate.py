"""Layout validation endpoints."""

from fastapi import APIRouter

from blocklayout.application.config import load_config_from_dict, validate_config
from blocklayout.web.schemas import LayoutValidateRequest, ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_layout(request: LayoutValidateRequest) -> ValidationResultSchema:
    """Validate a layout without placing anything.

    Raises:
        ConfigError: If the layout does not match the schema (handled by
            the exception handler).
    """
    config = load_config_from_dict(request.layout)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[{"message": w.message, "path": w.path} for w in result.warnings],
    )
