"""CMIP precipitation dataset loader."""

import asyncio
import json
from pathlib import Path
from typing import Optional

import httpx
from loguru import logger

from precip_compare.core.dataset import PrecipDataset
from precip_compare.utils.config import get_project_root, settings


class DatasetLoadError(RuntimeError):
    """The raw dataset could not be fetched or parsed."""


class CMIPClient:
    """Loads the per-model/per-year monthly precipitation JSON once."""

    def __init__(
        self,
        source: Optional[str] = None,
        timeout: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.source = source or settings.data.source
        self.timeout = timeout or settings.data.timeout_seconds
        self.transport = transport

    @property
    def is_remote(self) -> bool:
        return self.source.startswith(("http://", "https://"))

    def _resolve_path(self) -> Path:
        path = Path(self.source)
        if not path.is_absolute() and not path.exists():
            path = get_project_root() / path
        return path

    async def _fetch_remote(self) -> object:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            resp = await client.get(self.source)
            resp.raise_for_status()
            return resp.json()

    def _read_local(self) -> object:
        with open(self._resolve_path()) as f:
            return json.load(f)

    async def fetch_records(self) -> list:
        try:
            data = await self._fetch_remote() if self.is_remote else self._read_local()
        except (httpx.HTTPError, httpx.InvalidURL, OSError, ValueError) as e:
            logger.error(f"Dataset load failed ({self.source}): {e}")
            raise DatasetLoadError(f"Could not load {self.source}: {e}") from e

        if not isinstance(data, list):
            logger.error(f"Dataset at {self.source} is not a JSON array")
            raise DatasetLoadError(f"Expected a JSON array in {self.source}")

        logger.info(f"Loaded {len(data)} records from {self.source}")
        return data

    async def load(self) -> PrecipDataset:
        return PrecipDataset.from_records(await self.fetch_records())


def load_dataset(source: Optional[str] = None) -> PrecipDataset:
    """Synchronous wrapper for scripts and the CLI."""
    return asyncio.run(CMIPClient(source).load())
