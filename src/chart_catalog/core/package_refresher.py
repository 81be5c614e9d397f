"""Fetch one chart version's archive and attach its schema and default values."""

from __future__ import annotations

import logging
import tarfile
from pathlib import Path
from urllib.parse import urljoin

import httpx

from chart_catalog.core.errors import CatalogLoaderError
from chart_catalog.core.resource_loader import ResourceLoader, is_remote
from chart_catalog.models.catalog import CatalogWrapper
from chart_catalog.models.chart import Chart
from chart_catalog.utils.archive import extract_chart_files

logger = logging.getLogger(__name__)


def resolve_chart_url(chart_url: str, location: str) -> str:
    """Return ``chart_url`` as is when absolute, else relative to the catalog location."""
    if is_remote(chart_url):
        return chart_url
    if is_remote(location) or location.startswith("file:"):
        return urljoin(location.rstrip("/") + "/", chart_url)
    return str(Path(location) / chart_url)


def refresh_package(chart: Chart, catalog: CatalogWrapper, loader: ResourceLoader) -> None:
    """Populate ``chart.config`` and ``chart.default_values`` from the chart archive.

    Raises CatalogLoaderError when the chart has no URL or its archive cannot
    be fetched or read.
    """
    logger.info(
        "Refreshing package %s version %s in catalog %s",
        chart.name, chart.version, catalog.display_name,
    )
    # Only the first URL is used
    if not chart.urls:
        raise CatalogLoaderError(f"Package {chart.name} has no urls")

    absolute_url = resolve_chart_url(chart.urls[0], catalog.location)
    description = loader.describe(absolute_url)
    try:
        with loader.open(absolute_url) as stream:
            files = extract_chart_files(stream, chart.name)
    except (OSError, EOFError, tarfile.TarError, ValueError, httpx.HTTPError, httpx.InvalidURL) as e:
        raise CatalogLoaderError(f"Exception occurred during loading resource: {description}") from e

    chart.config = files.schema
    chart.default_values = files.default_values
