from __future__ import annotations

import pytest

from precip_compare.core.dataset import PrecipDataset
from precip_compare.utils.config import Settings
from precip_compare.utils.constants import MONTHS


def monthly(*values: float) -> dict:
    return dict(zip(MONTHS, values))


def flat(value: float) -> dict:
    return {m: value for m in MONTHS}


SSP245_2050 = [3.1, 2.0, 2.4, 1.1, 0.6, 0.2, 0.05, 0.07, 0.3, 0.8, 1.7, 1.5]


@pytest.fixture
def records() -> list[dict]:
    return [
        {"model": "ssp2-45", "year": 2020, "mean_pr": flat(1.0)},
        {"model": "ssp2-45", "year": "2025", "mean_pr": flat(2.0)},
        {"model": "ssp2-45", "year": 2030, "mean_pr": flat(4.0)},
        {"model": "ssp2-45", "year": 2050, "mean_pr": monthly(*SSP245_2050)},
        {"model": "ssp1-26", "year": 2020, "mean_pr": flat(0.5)},
        {"model": "ssp1-26", "year": 2022, "mean_pr": flat(0.7)},
        {"model": "ssp1-26", "year": 2050, "mean_pr": flat(0.9)},
    ]


@pytest.fixture
def dataset(records) -> PrecipDataset:
    return PrecipDataset.from_records(records)


@pytest.fixture
def settings() -> Settings:
    return Settings()
