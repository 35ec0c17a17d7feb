"""Configuration loader for Precip Compare."""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


class DataConfig(BaseModel):
    source: str = "data/cmip_california_precip.json"
    timeout_seconds: int = 30


class TrackedModel(BaseModel):
    model: str
    label: str = ""

    @property
    def display_label(self) -> str:
        return self.label or self.model


class ComparisonConfig(BaseModel):
    model_a: TrackedModel = TrackedModel(model="ssp2-45", label="SSP2.45")
    model_b: TrackedModel = TrackedModel(model="ssp1-26", label="SSP1.26")
    slider_step: int = 5

    @property
    def tracked(self) -> list[TrackedModel]:
        return [self.model_a, self.model_b]


class ChartConfig(BaseModel):
    y_axis_floor: float = 11.0
    unit: str = "mm/day"
    bar_color: str = "#3b5f9a"
    wet_band_color: str = "rgba(59, 130, 246, 0.10)"
    dry_band_color: str = "rgba(245, 158, 11, 0.12)"
    height: int = 360


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
    rotation: str = "10 MB"
    retention: str = "7 days"


class AppConfig(BaseModel):
    name: str = "precip_compare"
    version: str = "0.1.0"
    environment: str = "development"
    debug: bool = False


class Settings(BaseModel):
    app: AppConfig = AppConfig()
    logging: LoggingConfig = LoggingConfig()
    data: DataConfig = DataConfig()
    comparison: ComparisonConfig = ComparisonConfig()
    chart: ChartConfig = ChartConfig()


def get_project_root() -> Path:
    return Path(__file__).parent.parent.parent


def load_yaml_config(env: str = "development") -> dict[str, Any]:
    config_path = get_project_root() / "config" / "environments" / f"{env}.yaml"
    if not config_path.exists():
        return {}
    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def get_settings(env: Optional[str] = None) -> Settings:
    env = env or os.getenv("APP_ENV", "development")
    yaml_config = load_yaml_config(env)

    # Override with env vars
    if os.getenv("PRECIP_DATA_SOURCE"):
        yaml_config.setdefault("data", {})["source"] = os.getenv("PRECIP_DATA_SOURCE")
    if os.getenv("PRECIP_MODEL_A"):
        yaml_config.setdefault("comparison", {}).setdefault("model_a", {})["model"] = os.getenv("PRECIP_MODEL_A")
    if os.getenv("PRECIP_MODEL_B"):
        yaml_config.setdefault("comparison", {}).setdefault("model_b", {})["model"] = os.getenv("PRECIP_MODEL_B")
    if os.getenv("LOG_LEVEL"):
        yaml_config.setdefault("logging", {})["level"] = os.getenv("LOG_LEVEL")

    return Settings(**yaml_config) if yaml_config else Settings()


settings = get_settings()
