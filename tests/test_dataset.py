from __future__ import annotations

import math

from precip_compare.core.dataset import PrecipDataset, build_observations
from precip_compare.utils.constants import MONTHS


def test_build_observations_cross_products_months(records) -> None:
    observations = build_observations(records)

    assert len(observations) == len(records) * 12
    assert [o.month for o in observations[:12]] == list(MONTHS)
    assert observations[0].model == "ssp2-45"
    assert observations[0].year == 2020


def test_numeric_string_years_are_parsed() -> None:
    observations = build_observations([{"model": "m", "year": "2040", "mean_pr": {}}])

    assert {o.year for o in observations} == {2040}


def test_missing_months_become_nan() -> None:
    observations = build_observations(
        [{"model": "m", "year": 2040, "mean_pr": {"jan": 1.5, "feb": "oops", "mar": None}}]
    )

    by_month = {o.month: o.value for o in observations}
    assert by_month["jan"] == 1.5
    assert math.isnan(by_month["feb"])
    assert math.isnan(by_month["mar"])
    assert math.isnan(by_month["dec"])


def test_unparseable_years_are_skipped() -> None:
    observations = build_observations(
        [
            {"model": "m", "year": "n/a", "mean_pr": {}},
            {"model": "m", "year": 2040.5, "mean_pr": {}},
            "not a record",
            {"model": "m", "year": 2041, "mean_pr": {}},
        ]
    )

    assert {o.year for o in observations} == {2041}


def test_all_years_sorted_and_distinct(dataset) -> None:
    assert dataset.all_years() == (2020, 2022, 2025, 2030, 2050)


def test_years_for_model_is_subset_of_all_years(dataset) -> None:
    all_years = set(dataset.all_years())
    for model in dataset.models():
        years = dataset.years_for_model(model)
        assert set(years) <= all_years
        assert list(years) == sorted(set(years))

    assert dataset.years_for_model("ssp2-45") == (2020, 2025, 2030, 2050)
    assert dataset.years_for_model("ssp1-26") == (2020, 2022, 2050)


def test_unknown_model_falls_back_to_all_years(dataset) -> None:
    assert dataset.years_for_model("ssp5-85") == dataset.all_years()


def test_models_in_first_seen_order(dataset) -> None:
    assert dataset.models() == ("ssp2-45", "ssp1-26")


def test_observations_for_absent_pair_is_empty(dataset) -> None:
    assert dataset.observations_for("ssp1-26", 2025) == ()
    assert dataset.values_for("nope", 2020) == []


def test_to_frame(dataset) -> None:
    frame = dataset.to_frame()

    assert list(frame.columns) == ["model", "year", "month", "value"]
    assert len(frame) == len(dataset)
    assert frame.loc[frame["model"] == "ssp1-26", "year"].nunique() == 3


def test_empty_dataset() -> None:
    dataset = PrecipDataset.from_records([])

    assert dataset.all_years() == ()
    assert dataset.years_for_model("anything") == ()
