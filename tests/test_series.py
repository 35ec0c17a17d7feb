from __future__ import annotations

from precip_compare.core.dataset import PrecipDataset
from precip_compare.core.series import season_bands, series_for, y_axis_max
from precip_compare.core.stats import compute_year_stats, mean
from precip_compare.utils.constants import MONTHS

from conftest import SSP245_2050


def test_series_end_to_end(dataset) -> None:
    series = series_for(dataset, "ssp2-45", 2050)

    assert [(p.month, p.value) for p in series] == list(zip(MONTHS, SSP245_2050))
    assert compute_year_stats(dataset, "ssp2-45", 2050).avg == mean(SSP245_2050)


def test_series_tags_seasons(dataset) -> None:
    seasons = {p.month: p.season for p in series_for(dataset, "ssp2-45", 2050)}

    assert seasons["jan"] == "wet"
    assert seasons["jul"] == "dry"
    assert seasons["nov"] == "wet"


def test_series_for_absent_pair_is_empty(dataset) -> None:
    assert series_for(dataset, "ssp1-26", 2030) == ()


def test_series_shorter_with_partial_records() -> None:
    dataset = PrecipDataset.from_records(
        [{"model": "m", "year": 2000, "mean_pr": {"jan": 1.0}}]
    )
    # Observations are still produced for every month
    assert len(series_for(dataset, "m", 2000)) == 12
    assert series_for(dataset, "m", 2001) == ()


def test_series_is_repeatable(dataset) -> None:
    assert series_for(dataset, "ssp2-45", 2025) == series_for(dataset, "ssp2-45", 2025)


def test_y_axis_max_has_floor(dataset) -> None:
    assert y_axis_max(series_for(dataset, "ssp2-45", 2050)) == 11.0
    assert y_axis_max(()) == 11.0


def test_y_axis_max_grows_with_data() -> None:
    dataset = PrecipDataset.from_records(
        [{"model": "m", "year": 2000, "mean_pr": {"jan": 14.5, "feb": 2.0}}]
    )

    assert y_axis_max(series_for(dataset, "m", 2000), floor=11.0) == 14.5


def test_season_bands_cover_all_months() -> None:
    bands = season_bands()

    assert [m for m, _ in bands] == list(MONTHS)
    assert {s for _, s in bands} == {"wet", "dry"}
