"""Side-by-side comparison of the two tracked models."""

from typing import Optional

from loguru import logger

from precip_compare.core.dataset import PrecipDataset
from precip_compare.core.formatter import header_text
from precip_compare.core.models import ComparisonResult, PanelData
from precip_compare.core.series import series_for, y_axis_max
from precip_compare.core.stats import compute_year_stats
from precip_compare.utils.config import Settings, TrackedModel, settings as default_settings


class YearSlider:
    """Maps slider positions onto the global year index."""

    def __init__(self, years, step: int = 5):
        self.years = tuple(years)
        self.step = step

    @property
    def max_position(self) -> int:
        return max(0, len(self.years) - 1)

    def positions(self) -> list:
        """Positions reachable from 0 in increments of ``step``."""
        return list(range(0, self.max_position + 1, max(1, self.step)))

    def year_at(self, position: int) -> Optional[int]:
        """Year at ``position``, clamped to the index; None when there are no years."""
        if not self.years:
            return None
        idx = max(0, min(int(position), len(self.years) - 1))
        return self.years[idx]


class Comparator:
    """Derives chart series and statistics for both tracked models."""

    def __init__(self, dataset: PrecipDataset, settings: Optional[Settings] = None):
        self.dataset = dataset
        self.settings = settings or default_settings
        self.slider = YearSlider(dataset.all_years(), self.settings.comparison.slider_step)

        for tracked in self.settings.comparison.tracked:
            if tracked.model not in dataset.models():
                logger.warning(f"Tracked model {tracked.model!r} not in dataset")

    def panel(self, tracked: TrackedModel, year: int) -> PanelData:
        series = series_for(self.dataset, tracked.model, year)
        stats = compute_year_stats(self.dataset, tracked.model, year)
        return PanelData(
            model=tracked.model,
            label=tracked.display_label,
            header=header_text(tracked.display_label, year),
            series=series,
            stats=stats,
            y_max=y_axis_max(series, self.settings.chart.y_axis_floor),
        )

    def compare(self, year: int) -> ComparisonResult:
        logger.debug(f"Comparing models for {year}")
        cfg = self.settings.comparison
        return ComparisonResult(
            year=year,
            left=self.panel(cfg.model_a, year),
            right=self.panel(cfg.model_b, year),
        )

    def compare_position(self, position: int) -> Optional[ComparisonResult]:
        year = self.slider.year_at(position)
        if year is None:
            return None
        return self.compare(year)
