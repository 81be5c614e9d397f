"""Application configuration and defaults."""

from __future__ import annotations

import os
import platform
from dataclasses import dataclass, field
from pathlib import Path


def _default_config_dir() -> Path:
    """Return the directory holding catalogs.yaml for the current platform.

    CHART_CATALOG_CONFIG_HOME wins over the platform defaults.
    """
    config_home = os.environ.get("CHART_CATALOG_CONFIG_HOME", "")
    if config_home:
        return Path(config_home)
    system = platform.system()
    if system == "Windows":
        appdata = os.environ.get("APPDATA", "")
        if appdata:
            return Path(appdata) / "chart-catalog"
        return Path.home() / "AppData" / "Roaming" / "chart-catalog"
    # Linux / macOS
    xdg = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg:
        return Path(xdg) / "chart-catalog"
    return Path.home() / ".config" / "chart-catalog"


def _default_schema_registry_dir() -> Path | None:
    registry = os.environ.get("CHART_CATALOG_SCHEMA_REGISTRY", "")
    return Path(registry) if registry else None


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "")
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "")
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


@dataclass
class Settings:
    config_dir: Path = field(default_factory=_default_config_dir)
    schema_registry_dir: Path | None = field(default_factory=_default_schema_registry_dir)
    refresh_workers: int = field(default_factory=lambda: _env_int("CHART_CATALOG_WORKERS", 8))
    http_timeout: float = field(default_factory=lambda: _env_float("CHART_CATALOG_HTTP_TIMEOUT", 30.0))
    helm_binary: str = "helm"
    helm_timeout: float = 10.0
    default_output: str = "table"

    @property
    def catalogs_file(self) -> Path:
        return self.config_dir / "catalogs.yaml"


# Global singleton
settings = Settings()
