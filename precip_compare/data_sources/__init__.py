"""Data sources module."""

from precip_compare.data_sources.cmip_client import CMIPClient, DatasetLoadError, load_dataset

__all__ = ["CMIPClient", "DatasetLoadError", "load_dataset"]
