"""Output formatters for furnished rooms."""

from __future__ import annotations

import json
import math
from typing import Any

from furnishing.application.dtos import FurnishRoomOutput
from furnishing.domain import FittingLayout, RoomConfiguration


class LayoutSummaryFormatter:
    """Formats a fitting layout as a text table.

    Each row shows the largest share of the fitting's footprint covered by
    another fitting. When cost terms are included, each row also lists the
    individual cost terms behind the fitting's total.
    """

    def __init__(self, include_cost_terms: bool = False) -> None:
        """Initialize formatter.

        Args:
            include_cost_terms: Whether to add one column per cost term.
        """
        self._include_cost_terms = include_cost_terms

    def format(self, layout: FittingLayout) -> str:
        """Format layout as a table with one row per fitting."""
        description = layout.room.description
        if not layout.placed_fittings:
            return "No fittings placed."

        width = 117 if self._include_cost_terms else 79
        header = (
            f"{'Category':<20} {'Name':<24} {'X (m)':>7} {'Z (m)':>7} "
            f"{'Angle':>6} {'Ovl%':>6} {'Cost':>7}"
        )
        if self._include_cost_terms:
            header += f" {'Ovl':>6} {'Clr':>6} {'Wall':>6} {'Dist':>6} {'Ornt':>6} {'Rel':>6}"

        lines = [
            "FITTING LAYOUT",
            "=" * width,
            f"Room: {description.room_category.value}, "
            f"{description.width_in_meters:.2f}m x {description.depth_in_meters:.2f}m",
            "-" * width,
            header,
            "-" * width,
        ]

        for fitting, breakdown in layout.cost_breakdown():
            row = (
                f"{fitting.category:<20} {_truncate(fitting.fitting_model.listing.name, 24):<24} "
                f"{fitting.position.x:>7.2f} {fitting.position.z:>7.2f} "
                f"{math.degrees(fitting.orientation):>6.0f} "
                f"{layout.max_relative_overlap(fitting) * 100:>6.1f} {breakdown.total:>7.4f}"
            )
            if self._include_cost_terms:
                row += (
                    f" {breakdown.overlap:>6.3f} {breakdown.clearance_overlap:>6.3f}"
                    f" {breakdown.wall_overlap:>6.3f} {breakdown.wall_distance:>6.3f}"
                    f" {breakdown.wall_orientation:>6.3f} {breakdown.relation:>6.3f}"
                )
            lines.append(row)

        lines.extend(
            [
                "-" * width,
                f"Fittings: {len(layout)}    Layout cost: {layout.get_cost():.4f}",
            ]
        )
        return "\n".join(lines)


class RoomConfigurationJsonExporter:
    """Exports furnished rooms in the room configuration JSON format."""

    def export(self, room_configuration: RoomConfiguration) -> str:
        """Export a room configuration as a JSON string."""
        return json.dumps(room_configuration.to_dict(), indent=2)

    def export_output(self, output: FurnishRoomOutput) -> str:
        """Export a command output, with run statistics or errors."""
        if not output.is_valid or output.room_configuration is None:
            return json.dumps({"errors": output.errors}, indent=2)

        data: dict[str, Any] = output.room_configuration.to_dict()
        if output.result is not None:
            data["furnishing"] = {
                "initial_cost": output.result.initial_cost,
                "best_cost": output.result.best_cost,
                "iterations": output.result.iterations,
                "elapsed_seconds": round(output.result.elapsed_seconds, 3),
                "timed_out": output.result.timed_out,
            }
        if output.skipped_categories:
            data["skipped_categories"] = list(output.skipped_categories)
        return json.dumps(data, indent=2)


def _truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[: width - 3] + "..."
