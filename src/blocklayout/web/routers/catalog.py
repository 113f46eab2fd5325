"""Block catalog endpoints."""

from fastapi import APIRouter, Query

from blocklayout.domain import BLOCK_CATALOG
from blocklayout.web.schemas import CatalogEntrySchema

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("", response_model=list[CatalogEntrySchema])
async def list_catalog(
    core_thickness: float = Query(default=8.0, gt=0, description="Core thickness in inches"),
) -> list[CatalogEntrySchema]:
    """List every block type with its dimensions for a core thickness."""
    return [
        CatalogEntrySchema(
            type=spec.block_type.value,
            name=spec.name,
            category=spec.category.value,
            length=spec.length,
            height=spec.height,
            long_leg=spec.long_leg,
            short_leg=spec.short_leg,
            width=spec.width_for(core_thickness),
            description=spec.description,
        )
        for spec in BLOCK_CATALOG.values()
    ]
