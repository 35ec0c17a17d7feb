"""Chart series selection."""

import math

from precip_compare.core.dataset import PrecipDataset
from precip_compare.core.models import SeriesPoint
from precip_compare.utils.constants import MONTHS, SEASON


def series_for(dataset: PrecipDataset, model: str, year: int) -> tuple:
    """Monthly points for one model/year, jan..dec; shorter when months are absent."""
    return tuple(
        SeriesPoint(month=obs.month, value=obs.value, season=SEASON[obs.month])
        for obs in dataset.observations_for(model, year)
    )


def y_axis_max(series, floor: float = 11.0) -> float:
    finite = [p.value for p in series if math.isfinite(p.value)]
    return max(floor, max(finite)) if finite else floor


def season_bands() -> list:
    return [(month, SEASON[month]) for month in MONTHS]
