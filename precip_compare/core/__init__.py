"""Core module."""
from precip_compare.core.comparator import Comparator, YearSlider
from precip_compare.core.dataset import PrecipDataset, build_observations
from precip_compare.core.formatter import StatsCardFormatter, fmt, format_output
from precip_compare.core.series import season_bands, series_for, y_axis_max
from precip_compare.core.stats import compute_year_stats, mean
