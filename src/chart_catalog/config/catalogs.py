"""Load catalog definitions from catalogs.yaml."""

from __future__ import annotations

from pathlib import Path

import yaml

from chart_catalog.core.errors import CatalogConfigError
from chart_catalog.models.catalog import CatalogWrapper


def load_catalogs(path: Path) -> list[CatalogWrapper]:
    """Parse a catalogs file.

    Expected layout::

        catalogs:
          - id: ide
            name: Interactive services
            location: https://inseefrlab.github.io/helm-charts-interactive-services
            multipleServicesMode: SKIP_PATCHES
            excludedCharts: [legacy-chart]
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise CatalogConfigError(f"Cannot read catalogs file {path}: {e}") from e

    if not data or "catalogs" not in data:
        return []
    raw = data["catalogs"]
    if not isinstance(raw, list):
        raise CatalogConfigError(f"'catalogs' in {path} must be a list")

    catalogs: list[CatalogWrapper] = []
    for i, entry in enumerate(raw):
        if not isinstance(entry, dict) or not entry.get("id") or not entry.get("location"):
            raise CatalogConfigError(f"Catalog #{i} in {path} needs an id and a location")
        try:
            catalogs.append(CatalogWrapper.from_dict(entry))
        except (TypeError, ValueError) as e:
            raise CatalogConfigError(f"Catalog {entry.get('id')} in {path}: {e}") from e
    return catalogs
