"""
FitGauge configuration.

All tunable parameters live here so the sizing heuristics
can be adjusted without touching algorithmic code.
"""

from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic import Field

_DATA_DIR = Path(__file__).resolve().parent / "data"


class SizingConfig(BaseSettings):
    """Size matching parameters."""

    # ± window around a single-value guide measurement (same unit as the table)
    point_tolerance: float = 2.0
    # a size is acceptable if at most this share of its measurements are "larger"
    max_larger_ratio: float = 0.5


class ItemConfig(BaseSettings):
    """Keyword rules used to classify catalog items."""

    bottom_keywords: list[str] = ["pant", "jogger", "short", "legging", "tight"]
    sweater_brands: list[str] = ["duke", "duke university"]
    numeric_size_brands: list[str] = ["lululemon"]


class DataConfig(BaseSettings):
    """Bundled reference tables."""

    size_guides_cm_path: Path = _DATA_DIR / "size_guides_cm.json"
    size_guides_inch_path: Path = _DATA_DIR / "size_guides_inch.json"


class AppConfig(BaseSettings):
    """Top-level application configuration."""

    app_name: str = "FitGauge"
    version: str = "0.1.0"
    debug: bool = False
    api_key_header: str = "X-API-Key"
    cors_origins: list[str] = ["*"]

    sizing: SizingConfig = Field(default_factory=SizingConfig)
    items: ItemConfig = Field(default_factory=ItemConfig)
    data: DataConfig = Field(default_factory=DataConfig)


config = AppConfig()
