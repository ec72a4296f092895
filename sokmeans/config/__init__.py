"""Configuration management for sokmeans."""

from .loader import DEFAULT_CONFIG_PATH, Config, load_config, save_config
from .models import DEFAULT_LANGUAGES, ConfigModel, KMeansConfig

__all__ = [
    "Config",
    "ConfigModel",
    "KMeansConfig",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_LANGUAGES",
    "load_config",
    "save_config",
]
