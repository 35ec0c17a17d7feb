"""Immutable precipitation dataset with year indexes."""

import math
from collections import defaultdict
from typing import Iterable, Optional

import pandas as pd
from loguru import logger

from precip_compare.core.models import Observation
from precip_compare.utils.constants import MONTHS


def _parse_year(raw) -> Optional[int]:
    """Accept ints, integral floats and numeric strings."""
    try:
        year = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(year) or not year.is_integer():
        return None
    return int(year)


def _parse_value(raw) -> float:
    """Coerce a monthly value; anything unusable becomes NaN."""
    if raw is None or isinstance(raw, bool):
        return math.nan
    try:
        return float(raw)
    except (TypeError, ValueError):
        return math.nan


def build_observations(records: Iterable[dict]) -> tuple:
    """Flatten per-model/per-year records into one Observation per month.

    Each record looks like ``{"model": ..., "year": ..., "mean_pr": {"jan": ...}}``.
    Months missing from ``mean_pr`` become NaN observations rather than
    errors, so they surface as the display sentinel later on.
    """
    observations = []
    skipped = 0
    missing = 0

    for record in records:
        if not isinstance(record, dict):
            skipped += 1
            logger.warning(f"Skipping non-object record: {record!r}")
            continue

        year = _parse_year(record.get("year"))
        if year is None:
            skipped += 1
            logger.warning(f"Skipping record with unparseable year: {record.get('year')!r}")
            continue

        model = str(record.get("model"))
        monthly = record.get("mean_pr") or {}
        for month in MONTHS:
            value = _parse_value(monthly.get(month))
            if math.isnan(value):
                missing += 1
            observations.append(Observation(model=model, year=year, month=month, value=value))

    if missing:
        logger.warning(f"{missing} monthly values missing or non-numeric")
    if skipped:
        logger.warning(f"{skipped} records skipped")

    return tuple(observations)


class PrecipDataset:
    """Flattened observations plus the global and per-model year indexes.

    Built once at load time and never mutated afterwards.
    """

    def __init__(self, observations: Iterable[Observation]):
        self._observations = tuple(observations)

        groups = defaultdict(list)
        model_years = defaultdict(set)
        for obs in self._observations:
            groups[(obs.model, obs.year)].append(obs)
            model_years[obs.model].add(obs.year)

        self._groups = {key: tuple(rows) for key, rows in groups.items()}
        self._models = tuple(dict.fromkeys(obs.model for obs in self._observations))
        self._years = tuple(sorted({obs.year for obs in self._observations}))
        self._years_by_model = {
            model: tuple(sorted(years)) for model, years in model_years.items()
        }

        logger.info(
            f"Dataset built: {len(self._observations)} observations, "
            f"{len(self._models)} models, {len(self._years)} years"
        )

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> "PrecipDataset":
        return cls(build_observations(records))

    @property
    def observations(self) -> tuple:
        return self._observations

    def __len__(self) -> int:
        return len(self._observations)

    def models(self) -> tuple:
        return self._models

    def all_years(self) -> tuple:
        return self._years

    def years_for_model(self, model: str) -> tuple:
        """Sorted years for ``model``; unknown models fall back to all years."""
        return self._years_by_model.get(model, self._years)

    def observations_for(self, model: str, year: int) -> tuple:
        return self._groups.get((model, year), ())

    def values_for(self, model: str, year: int) -> list:
        return [obs.value for obs in self.observations_for(model, year)]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [
                {"model": o.model, "year": o.year, "month": o.month, "value": o.value}
                for o in self._observations
            ],
            columns=["model", "year", "month", "value"],
        )
