"""Output formatters for block layouts and snap results."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from blocklayout.application.dtos import PlacementOutput
from blocklayout.domain import (
    BLOCK_CATALOG,
    BoundingRectangle,
    PlacedBlock,
    SnapFace,
    SnapResult,
    compute_bounds,
    get_snap_faces,
    shape_category,
)
from blocklayout.domain.catalog import FOAM_PANELS_WIDTH


class SnapResultFormatter:
    """Formats a snap decision as a one-line position readout."""

    def format(self, result: SnapResult) -> str:
        p = result.position
        line = f'X: {p.x:g}" Y: {p.y:g}" Z: {p.z:g}"'
        if result.snapped_to_block:
            edge = result.snap_edge.value if result.snap_edge else "?"
            line += f" [SNAP] {edge} edge -> block {result.snapped_block_id}"
            if result.distance is not None:
                line += f" (moved {result.distance:.2f}\")"
        else:
            line += " [GRID]"
        return line


class BoundsReportFormatter:
    """Formats bounding rectangles and snap faces for every placed block."""

    def format(self, blocks: Sequence[PlacedBlock]) -> str:
        if not blocks:
            return "No blocks placed."

        lines = [
            "BLOCK BOUNDS",
            "=" * 86,
            f"{'Id':<14} {'Type':<16} {'Rot':>4} {'Min X':>10} {'Max X':>10} "
            f"{'Min Z':>10} {'Max Z':>10}",
            "-" * 86,
        ]
        for block in blocks:
            b = compute_bounds(block)
            lines.append(
                f"{block.id:<14} {str(_type_value(block.block_type)):<16} {b.rotation:>4} "
                f"{b.min_x:>10.3f} {b.max_x:>10.3f} {b.min_z:>10.3f} {b.max_z:>10.3f}"
            )
        lines.append("")
        lines.append("SNAP FACES")
        lines.append("=" * 86)
        for block in blocks:
            lines.append(f"{block.id} ({shape_category(block.block_type).value})")
            for face in get_snap_faces(block):
                lines.append(
                    f"  {face.orientation.value:<6} plane {face.plane:>10.3f}  "
                    f"center ({face.center_x:.3f}, {face.center_z:.3f})"
                )
        return "\n".join(lines)


class CatalogFormatter:
    """Formats the block catalog with widths for a given core."""

    def format(self, core_thickness: float) -> str:
        lines = [
            f'BLOCK CATALOG ({core_thickness:g}" core, {FOAM_PANELS_WIDTH}" foam)',
            "=" * 72,
            f"{'Type':<16} {'Shape':<12} {'Length':>8} {'Legs':>14} {'Width':>8} {'Height':>7}",
            "-" * 72,
        ]
        for spec in BLOCK_CATALOG.values():
            legs = (
                f"{spec.long_leg:g}/{spec.short_leg:g}"
                if spec.long_leg is not None and spec.short_leg is not None
                else "-"
            )
            lines.append(
                f"{spec.block_type.value:<16} {spec.category.value:<12} "
                f"{spec.length:>8g} {legs:>14} {spec.width_for(core_thickness):>8g} "
                f"{spec.height:>7g}"
            )
        return "\n".join(lines)


class JsonExporter:
    """Exports snap results and block geometry as JSON-ready data."""

    def snap_result_to_dict(self, result: SnapResult) -> dict[str, Any]:
        return {
            "position": {
                "x": result.position.x,
                "y": result.position.y,
                "z": result.position.z,
            },
            "snapped_to_block": result.snapped_to_block,
            "snapped_block_id": result.snapped_block_id,
            "snap_edge": result.snap_edge.value if result.snap_edge else None,
            "distance": result.distance,
        }

    def bounds_to_dict(self, bounds: BoundingRectangle) -> dict[str, Any]:
        return {
            "min_x": bounds.min_x,
            "max_x": bounds.max_x,
            "min_z": bounds.min_z,
            "max_z": bounds.max_z,
            "rotation": bounds.rotation,
        }

    def face_to_dict(self, face: SnapFace) -> dict[str, Any]:
        return {
            "orientation": face.orientation.value,
            "plane": face.plane,
            "center_x": face.center_x,
            "center_z": face.center_z,
        }

    def export_placement(self, output: PlacementOutput) -> str:
        """Export a placement output as a JSON string."""
        if not output.is_valid or output.result is None:
            return json.dumps({"errors": output.errors}, indent=2)

        data: dict[str, Any] = {"result": self.snap_result_to_dict(output.result)}
        if output.block is not None:
            data["block_id"] = output.block.id
        return json.dumps(data, indent=2)

    def export_geometry(self, blocks: Sequence[PlacedBlock]) -> str:
        """Export bounds and faces of every block as a JSON string."""
        data = [
            {
                "id": block.id,
                "type": _type_value(block.block_type),
                "category": shape_category(block.block_type).value,
                "bounds": self.bounds_to_dict(compute_bounds(block)),
                "faces": [self.face_to_dict(f) for f in get_snap_faces(block)],
            }
            for block in blocks
        ]
        return json.dumps(data, indent=2)


def _type_value(block_type: Any) -> str:
    return getattr(block_type, "value", str(block_type))
