"""Output formatters for year statistics."""

import json
import math

from precip_compare.core.models import ComparisonResult, SeriesPoint, YearStats
from precip_compare.utils.constants import MISSING_LABEL, month_label


def fmt(value) -> str:
    if value is None or not math.isfinite(value):
        return MISSING_LABEL
    return f"{value:.2f}"


def header_text(label: str, year: int) -> str:
    return f"Model {label} — {year}"


def tooltip_text(point: SeriesPoint, year: int, unit: str = "mm/day") -> str:
    return f"{point.month.upper()} — {year}<br>{fmt(point.value)} {unit}"


def _month(month: str) -> str:
    return month if month == MISSING_LABEL else month_label(month)


def _neighbor(year, avg) -> str:
    if year is None:
        return MISSING_LABEL
    return f"{year} ({fmt(avg)})"


class StatsCardFormatter:
    """Markdown stats card shown under each chart."""

    def __init__(self, unit: str = "mm/day"):
        self.unit = unit

    def rows(self, stats: YearStats) -> list:
        return [
            ("Year Avg", f"{fmt(stats.avg)} {self.unit}"),
            ("Lowest", f"{_month(stats.min.month)}: {fmt(stats.min.value)}"),
            ("Highest", f"{_month(stats.max.month)}: {fmt(stats.max.value)}"),
            ("Prev Year", _neighbor(stats.prev_year, stats.prev_avg)),
            ("Next Year", _neighbor(stats.next_year, stats.next_avg)),
        ]

    def format(self, stats: YearStats, label: str) -> str:
        lines = [f"**{label} — {stats.year}**", ""]
        lines.extend(f"- **{key}:** {value}" for key, value in self.rows(stats))
        return "\n".join(lines)


class ResearcherFormatter:
    """JSON with full details."""

    def format(self, result: ComparisonResult) -> dict:
        return result.to_dict()

    def to_json(self, result: ComparisonResult) -> str:
        return json.dumps(self.format(result), indent=2, ensure_ascii=False)


def format_output(result: ComparisonResult, style: str = "markdown", unit: str = "mm/day") -> str:
    if style == "json":
        return ResearcherFormatter().to_json(result)

    card = StatsCardFormatter(unit)
    return "\n\n".join(card.format(p.stats, p.label) for p in result.panels)
