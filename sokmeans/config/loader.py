"""Configuration loader."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .models import ConfigModel

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "sokmeans" / "config.yaml"


class Config:
    """Configuration manager."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initialize config manager."""
        self._explicit = config_path is not None or "SOKMEANS_CONFIG" in os.environ
        if config_path is None:
            config_path = Path(os.environ.get("SOKMEANS_CONFIG", DEFAULT_CONFIG_PATH))
        self.config_path = Path(config_path).expanduser()
        self._config: Optional[ConfigModel] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config."""
        if self._config is None:
            if not self._explicit and not self.config_path.exists():
                # No config written yet: run with built-in defaults
                self._config = ConfigModel()
            else:
                self._config = load_config(self.config_path)
        return self._config

    @property
    def workspace_root(self) -> Path:
        """Get workspace root path."""
        path = Path(self.config.workspace_root).expanduser()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def get_run_dir(self, run_date: str) -> Path:
        """Get run directory path."""
        run_dir = self.workspace_root / "runs" / run_date
        run_dir.mkdir(parents=True, exist_ok=True)
        return run_dir


def load_config(config_path: Path) -> ConfigModel:
    """Load configuration from YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}")


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
