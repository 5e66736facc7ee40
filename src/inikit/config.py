"""Settings accessor with dot-path key support."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from inikit.errors import ConfigError, ConfigNotFoundError

__all__ = ["Config"]


class Config:
    """Nested settings dict addressed by dot-path keys such as ``loader.encoding``."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Load settings from a YAML mapping file."""
        file_path = Path(path)
        if not file_path.exists():
            raise ConfigNotFoundError(config_path=str(file_path))

        try:
            data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(message=f"Invalid YAML in settings file '{file_path}': {e}", cause=e) from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(message=f"Settings file '{file_path}' must contain a mapping")
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a settings value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current
