"""Runtime configuration for the gridmath kernel.

Settings live in a small YAML document, e.g. ::

    default_precision: 15
    max_alloc_tries: 3
    plot_marker: "*"
    legacy_less_than: false
    log_level: WARNING

Keys that are left out keep their defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from threading import RLock
from typing import Any, Dict

import yaml

# double precision carries 15 reliable decimal digits
DBL_PRECISION = 15

# bound on storage allocation attempts for ellipse sampling
MAX_ALLOC_TRIES = 3


@dataclass(frozen=True)
class GridmathConfig:
    default_precision: int = DBL_PRECISION
    max_alloc_tries: int = MAX_ALLOC_TRIES
    plot_marker: str = "*"
    legacy_less_than: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if isinstance(self.default_precision, bool) or not isinstance(self.default_precision, int):
            raise ValueError(f"default_precision must be an int, got {self.default_precision!r}")
        if self.default_precision < 1:
            raise ValueError("default_precision must be at least 1")
        if isinstance(self.max_alloc_tries, bool) or not isinstance(self.max_alloc_tries, int):
            raise ValueError(f"max_alloc_tries must be an int, got {self.max_alloc_tries!r}")
        if self.max_alloc_tries < 1:
            raise ValueError("max_alloc_tries must be at least 1")
        if not isinstance(self.plot_marker, str) or len(self.plot_marker) != 1:
            raise ValueError(f"plot_marker must be a single character, got {self.plot_marker!r}")
        if not isinstance(self.legacy_less_than, bool):
            raise ValueError("legacy_less_than must be a boolean")
        if not isinstance(self.log_level, str):
            raise ValueError("log_level must be a level name")

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "GridmathConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)

    def to_mapping(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_config(path: Path | str) -> GridmathConfig:
    """Read a :class:`GridmathConfig` from a YAML file."""

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"configuration not found: {config_path}")
    with config_path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, dict):
        raise ValueError(f"configuration must be a mapping: {config_path}")
    return GridmathConfig.from_mapping(data)


def save_config(config: GridmathConfig, path: Path | str) -> None:
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with config_path.open("w", encoding="utf-8") as fp:
        yaml.safe_dump(config.to_mapping(), fp, sort_keys=False)


_config_lock = RLock()
_active_config = GridmathConfig()


def get_config() -> GridmathConfig:
    with _config_lock:
        return _active_config


def set_config(config: GridmathConfig) -> None:
    global _active_config
    with _config_lock:
        _active_config = config


def update_config(**changes: Any) -> GridmathConfig:
    """Replace selected settings on the active configuration."""

    global _active_config
    with _config_lock:
        _active_config = replace(_active_config, **changes)
        return _active_config


__all__ = [
    "DBL_PRECISION",
    "MAX_ALLOC_TRIES",
    "GridmathConfig",
    "load_config",
    "save_config",
    "get_config",
    "set_config",
    "update_config",
]
