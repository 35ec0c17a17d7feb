"""Data models for precipitation comparison."""

import math
from dataclasses import dataclass
from typing import Optional

from precip_compare.utils.constants import MISSING_LABEL


def _json_float(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


@dataclass(frozen=True)
class Observation:
    """One (model, year, month, value) precipitation data point."""
    model: str
    year: int
    month: str
    value: float


@dataclass(frozen=True)
class MonthValue:
    """Month key paired with its value; month is MISSING_LABEL when absent."""
    month: str
    value: float

    @classmethod
    def missing(cls) -> "MonthValue":
        return cls(month=MISSING_LABEL, value=math.nan)

    def to_dict(self) -> dict:
        return {"month": self.month, "value": _json_float(self.value)}


@dataclass(frozen=True)
class YearStats:
    """Aggregate and neighbour-year statistics for one model and year."""
    year: int
    avg: float
    min: MonthValue
    max: MonthValue
    prev_year: Optional[int] = None
    next_year: Optional[int] = None
    prev_avg: float = math.nan
    next_avg: float = math.nan

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "avg": _json_float(self.avg),
            "min": self.min.to_dict(),
            "max": self.max.to_dict(),
            "prev_year": self.prev_year,
            "next_year": self.next_year,
            "prev_avg": _json_float(self.prev_avg),
            "next_avg": _json_float(self.next_avg),
        }


@dataclass(frozen=True)
class SeriesPoint:
    """One bar of a monthly chart."""
    month: str
    value: float
    season: str

    def to_dict(self) -> dict:
        return {"month": self.month, "value": _json_float(self.value), "season": self.season}


@dataclass(frozen=True)
class PanelData:
    """Everything one chart panel needs for the selected year."""
    model: str
    label: str
    header: str
    series: tuple
    stats: YearStats
    y_max: float

    def to_dict(self) -> dict:
        return {
            "model": self.model,
            "label": self.label,
            "header": self.header,
            "series": [p.to_dict() for p in self.series],
            "stats": self.stats.to_dict(),
            "y_max": self.y_max,
        }


@dataclass(frozen=True)
class ComparisonResult:
    """Side-by-side output for both tracked models."""
    year: int
    left: PanelData
    right: PanelData

    @property
    def panels(self) -> tuple:
        return (self.left, self.right)

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "left": self.left.to_dict(),
            "right": self.right.to_dict(),
        }
