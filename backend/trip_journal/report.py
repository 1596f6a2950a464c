"""
Report generators for trip reports.

Formats reports for console and JSON output.
"""

import json
from pathlib import Path

from trip_journal.features.trips import TripReport, TripReportSchema
from trip_journal.shared.formatters import (
    format_distance_mi,
    format_elevation_ft,
    format_vert_per_mile,
)


class ReportGenerator:
    """Generate trip reports in various formats."""

    def generate_console(self, report: TripReport) -> str:
        """Generate ASCII report for console output."""
        meta = report.meta
        totals = report.totals

        lines = [
            "",
            "=" * 60,
            f"  {report.title}",
            "=" * 60,
            "",
        ]
        if meta.description:
            lines.extend([meta.description, ""])

        lines.extend([
            f"Start:          {meta.start_date} {meta.start_time}".rstrip(),
            f"End:            {meta.end_date} {meta.end_time}".rstrip(),
            f"Distance:       {format_distance_mi(totals.total_distance)}",
            f"Elevation gain: {format_elevation_ft(totals.total_elevation)}",
            f"Vert per mile:  {format_vert_per_mile(totals.vert_per_mile)}",
            "",
            "-" * 60,
            f"{'Day':<10} | {'Distance':>10} | {'Gain':>10} | Status",
            "-" * 60,
        ])

        for day in report.days:
            label = f"Day {day.day_number}"
            if day.ok:
                lines.append(
                    f"{label:<10} | {format_distance_mi(day.distance):>10} | "
                    f"{format_elevation_ft(day.elevation, signed=True):>10} | ok"
                )
            else:
                lines.append(
                    f"{label:<10} | {'':>10} | {'':>10} | "
                    f"Failed to load ({day.error or 'unknown error'})"
                )

        if report.map_error:
            lines.extend(["", f"Map: {report.map_error}"])

        lines.append("")
        return "\n".join(lines)

    def generate_json(self, report: TripReport, include_geometry: bool = False) -> dict:
        """Report as a JSON-serializable dict (same shape as the API)."""
        schema = TripReportSchema.from_report(report, include_geometry=include_geometry)
        return schema.model_dump(mode="json")

    def save_json(self, report: TripReport, path: Path, include_geometry: bool = False) -> None:
        """Save report as JSON file."""
        data = self.generate_json(report, include_geometry=include_geometry)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
