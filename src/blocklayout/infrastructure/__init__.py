"""Infrastructure layer - output formatting for layouts and snap results."""

from .formatters import (
    BoundsReportFormatter,
    CatalogFormatter,
    JsonExporter,
    SnapResultFormatter,
)

__all__ = [
    "BoundsReportFormatter",
    "CatalogFormatter",
    "JsonExporter",
    "SnapResultFormatter",
]
