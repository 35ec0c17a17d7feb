"""Logging configuration using Loguru."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from precip_compare.utils.config import LoggingConfig, get_project_root, settings


def setup_logging(config: Optional[LoggingConfig] = None, log_dir: Optional[Path] = None) -> Path:
    """Route loguru to stderr plus rotating files; returns the log directory."""
    config = config or settings.logging
    log_dir = Path(log_dir) if log_dir else get_project_root() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    logger.remove()

    # Console
    logger.add(sys.stderr, format=config.format, level=config.level, colorize=True)

    # File
    logger.add(
        log_dir / f"{settings.app.name}.log",
        format=config.format,
        level=config.level,
        rotation=config.rotation,
        retention=config.retention,
        compression="zip",
    )

    # Errors only
    logger.add(
        log_dir / "errors.log",
        format=config.format,
        level="ERROR",
        rotation=config.rotation,
        retention=config.retention,
        compression="zip",
    )

    logger.info(f"Logging initialized - Level: {config.level}")
    return log_dir
