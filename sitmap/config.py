"""
Configuration module for sitmap.

Centralizes configuration management and environment variable handling.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


MAPTILER_STYLE_TEMPLATE = "https://api.maptiler.com/maps/dataviz-dark/style.json?key={key}"
DEFAULT_STYLE = "https://basemaps.cartocdn.com/gl/dark-matter-gl-style/style.json"


def _optional_env(name: str) -> Optional[str]:
    value = os.getenv(name, "").strip()
    return value or None


@dataclass
class MapConfig:
    """Base map configuration."""
    maptiler_key: Optional[str] = field(default_factory=lambda: _optional_env("MAPTILER_KEY"))
    height: int = field(default_factory=lambda: int(os.getenv("SITMAP_MAP_HEIGHT", "600")))
    width: int = field(default_factory=lambda: int(os.getenv("SITMAP_MAP_WIDTH", "1200")))

    @property
    def style_url(self) -> str:
        """MapTiler dark style when a key is configured, public Carto style otherwise."""
        if self.maptiler_key:
            return MAPTILER_STYLE_TEMPLATE.format(key=self.maptiler_key)
        return DEFAULT_STYLE


@dataclass
class AnimationConfig:
    """Pulsing animation configuration."""
    step: float = field(default_factory=lambda: float(os.getenv("SITMAP_PULSE_STEP", "0.02")))
    lower: float = 0.8
    upper: float = 1.2
    frame_interval_s: float = field(
        default_factory=lambda: float(os.getenv("SITMAP_FRAME_INTERVAL", "0.1"))
    )


@dataclass
class DataConfig:
    """Reference data and analytical result locations."""
    countries_path: Optional[str] = field(
        default_factory=lambda: _optional_env("SITMAP_COUNTRIES_PATH")
    )
    results_path: Optional[str] = field(
        default_factory=lambda: _optional_env("SITMAP_RESULTS_PATH")
    )


@dataclass
class SitmapConfig:
    """Main configuration class for sitmap."""
    map: MapConfig = field(default_factory=MapConfig)
    animation: AnimationConfig = field(default_factory=AnimationConfig)
    data: DataConfig = field(default_factory=DataConfig)


_config: Optional[SitmapConfig] = None


def get_config() -> SitmapConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = SitmapConfig()
    return _config


def reload_config() -> SitmapConfig:
    """Re-read the environment and replace the global configuration."""
    global _config
    _config = SitmapConfig()
    return _config
