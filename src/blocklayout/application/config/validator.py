"""Layout validation beyond the schema.

The schema rejects malformed layouts. The checks here reject blocks placed
twice and warn about layouts that load fine but are probably not what the
user meant.
"""

import math
from dataclasses import dataclass, field
from typing import Any

from blocklayout.application.config.adapter import config_to_blocks
from blocklayout.application.config.schema import LayoutConfiguration
from blocklayout.domain import (
    BoundingRectangle,
    ShapeCategory,
    compute_bounds,
    shape_category,
)

# Overlaps thinner than this are treated as touching faces
OVERLAP_TOLERANCE: float = 1e-6


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "blocks[2].rotation")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Collected validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the layout has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def _check_courses(config: LayoutConfiguration, result: ValidationResult) -> None:
    module = config.settings.vertical_module
    for i, block in enumerate(config.blocks):
        y = block.position.y
        if not math.isclose(y / module, round(y / module), abs_tol=1e-9):
            result.add_warning(
                path=f"blocks[{i}].position.y",
                message=f"Block '{block.id}' is not on a {module:g}\" course (y={y:g})",
                suggestion=f"Use a multiple of {module:g} for y",
            )


def _same_footprint(a: BoundingRectangle, b: BoundingRectangle) -> bool:
    return all(
        math.isclose(p, q, abs_tol=OVERLAP_TOLERANCE)
        for p, q in (
            (a.min_x, b.min_x),
            (a.max_x, b.max_x),
            (a.min_z, b.min_z),
            (a.max_z, b.max_z),
        )
    )


def _check_duplicates(config: LayoutConfiguration, result: ValidationResult) -> None:
    """Reject a block placed exactly on top of an earlier one.

    Same course, same type and the same footprint means the block was
    dropped twice.
    """
    blocks = config_to_blocks(config)
    footprints = [compute_bounds(block) for block in blocks]
    for j, b in enumerate(blocks):
        for i in range(j):
            a = blocks[i]
            if (
                a.block_type == b.block_type
                and math.isclose(a.position.y, b.position.y)
                and _same_footprint(footprints[i], footprints[j])
            ):
                result.add_error(
                    path=f"blocks[{j}]",
                    message=f"Block '{b.id}' duplicates block '{a.id}' (blocks[{i}])",
                    value=b.id,
                )
                break


def _check_overlaps(config: LayoutConfiguration, result: ValidationResult) -> None:
    """Warn about straight blocks on the same course whose footprints overlap.

    Corner blocks are skipped: their bounding rectangles include empty
    space, so rectangle overlap says nothing about the blocks themselves.
    """
    blocks = config_to_blocks(config)
    straight = [
        (i, block, compute_bounds(block))
        for i, block in enumerate(blocks)
        if shape_category(block.block_type) is ShapeCategory.RECTANGULAR
    ]
    for n, (i, a, a_bounds) in enumerate(straight):
        for j, b, b_bounds in straight[n + 1 :]:
            if not math.isclose(a.position.y, b.position.y):
                continue
            if a.block_type == b.block_type and _same_footprint(a_bounds, b_bounds):
                # reported by _check_duplicates
                continue
            overlap_x = min(a_bounds.max_x, b_bounds.max_x) - max(a_bounds.min_x, b_bounds.min_x)
            overlap_z = min(a_bounds.max_z, b_bounds.max_z) - max(a_bounds.min_z, b_bounds.min_z)
            if overlap_x > OVERLAP_TOLERANCE and overlap_z > OVERLAP_TOLERANCE:
                result.add_warning(
                    path=f"blocks[{j}]",
                    message=f"Block '{b.id}' overlaps block '{a.id}' (blocks[{i}])",
                    suggestion="Move or remove one of the blocks",
                )


def validate_config(config: LayoutConfiguration) -> ValidationResult:
    """Run layout checks on an already schema-valid configuration."""
    result = ValidationResult()
    _check_duplicates(config, result)
    _check_courses(config, result)
    _check_overlaps(config, result)
    return result
