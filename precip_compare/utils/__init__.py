"""Utilities module."""
from precip_compare.utils.config import Settings, get_settings, settings
from precip_compare.utils.constants import MISSING_LABEL, MONTHS, SEASON, month_label
