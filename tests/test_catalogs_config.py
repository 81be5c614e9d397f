"""Tests for catalog definition loading and settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from chart_catalog.config.catalogs import load_catalogs
from chart_catalog.config.settings import Settings
from chart_catalog.core.errors import CatalogConfigError
from chart_catalog.models import MultipleServicesMode


def test_load_catalogs(tmp_path: Path) -> None:
    path = tmp_path / "catalogs.yaml"
    path.write_text(
        """
catalogs:
  - id: ide
    name: Interactive services
    location: https://inseefrlab.github.io/helm-charts-interactive-services/
    multipleServicesMode: SKIP_PATCHES
    excludedCharts: [Legacy]
  - id: db
    location: /srv/charts
    multiple_services_mode: max_number
    max_number_of_versions: 3
""",
        encoding="utf-8",
    )
    ide, db = load_catalogs(path)

    assert ide.id == "ide"
    assert ide.display_name == "Interactive services"
    assert ide.location == "https://inseefrlab.github.io/helm-charts-interactive-services"
    assert ide.multiple_services_mode == MultipleServicesMode.SKIP_PATCHES
    assert ide.is_excluded("legacy")
    assert not ide.is_excluded("jupyter")
    assert ide.type == "helm"

    assert db.display_name == "db"
    assert db.policy.mode == MultipleServicesMode.MAX_NUMBER
    assert db.policy.max_number_of_versions == 3


def test_empty_file_has_no_catalogs(tmp_path: Path) -> None:
    path = tmp_path / "catalogs.yaml"
    path.write_text("", encoding="utf-8")
    assert load_catalogs(path) == []


def test_catalog_without_location_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "catalogs.yaml"
    path.write_text("catalogs:\n  - id: ide\n", encoding="utf-8")
    with pytest.raises(CatalogConfigError, match="location"):
        load_catalogs(path)


def test_missing_file_is_a_config_error(tmp_path: Path) -> None:
    with pytest.raises(CatalogConfigError):
        load_catalogs(tmp_path / "nope.yaml")


def test_unknown_mode_defaults_to_all() -> None:
    assert MultipleServicesMode.from_str("whatever") == MultipleServicesMode.ALL
    assert MultipleServicesMode.from_str(None) == MultipleServicesMode.ALL
    assert MultipleServicesMode.from_str("skip-patches") == MultipleServicesMode.SKIP_PATCHES


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CHART_CATALOG_CONFIG_HOME", str(tmp_path))
    monkeypatch.setenv("CHART_CATALOG_WORKERS", "3")
    monkeypatch.setenv("CHART_CATALOG_HTTP_TIMEOUT", "bogus")
    monkeypatch.setenv("CHART_CATALOG_SCHEMA_REGISTRY", str(tmp_path / "schemas"))

    s = Settings()

    assert s.catalogs_file == tmp_path / "catalogs.yaml"
    assert s.refresh_workers == 3
    assert s.http_timeout == 30.0
    assert s.schema_registry_dir == tmp_path / "schemas"
