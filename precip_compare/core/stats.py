"""Per-year descriptive statistics."""

import math
from typing import Sequence

import numpy as np
from loguru import logger

from precip_compare.core.dataset import PrecipDataset
from precip_compare.core.models import MonthValue, YearStats


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; NaN for an empty sequence. NaN inputs propagate."""
    if not len(values):
        return math.nan
    return float(np.mean(values))


def _min_observation(rows):
    # "<=" keeps the earlier month on ties
    best = rows[0]
    for obs in rows[1:]:
        best = best if best.value <= obs.value else obs
    return best


def _max_observation(rows):
    # Strict ">" on the kept row: ties and a held NaN both move to the later month
    best = rows[0]
    for obs in rows[1:]:
        best = best if best.value > obs.value else obs
    return best


def neighbor_years(years: Sequence[int], year: int) -> tuple:
    """Years immediately before and after ``year`` in ``years``.

    A year that is not in the list has no neighbours on either side.
    """
    try:
        idx = years.index(year)
    except ValueError:
        return None, None

    prev_year = years[idx - 1] if idx > 0 else None
    next_year = years[idx + 1] if idx < len(years) - 1 else None
    return prev_year, next_year


def compute_year_stats(dataset: PrecipDataset, model: str, year: int) -> YearStats:
    """Average, extreme months and neighbour-year averages for one model/year."""
    rows = dataset.observations_for(model, year)

    if not rows:
        logger.debug(f"No observations for {model} {year}")
        return YearStats(
            year=year,
            avg=math.nan,
            min=MonthValue.missing(),
            max=MonthValue.missing(),
        )

    avg = mean([obs.value for obs in rows])
    low = _min_observation(rows)
    high = _max_observation(rows)

    prev_year, next_year = neighbor_years(dataset.years_for_model(model), year)
    prev_avg = mean(dataset.values_for(model, prev_year)) if prev_year is not None else math.nan
    next_avg = mean(dataset.values_for(model, next_year)) if next_year is not None else math.nan

    return YearStats(
        year=year,
        avg=avg,
        min=MonthValue(month=low.month, value=low.value),
        max=MonthValue(month=high.month, value=high.value),
        prev_year=prev_year,
        next_year=next_year,
        prev_avg=prev_avg,
        next_avg=next_avg,
    )
