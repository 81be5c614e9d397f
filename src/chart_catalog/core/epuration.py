"""Trim the version list of a package according to a catalog policy."""

from __future__ import annotations

from packaging.version import Version

from chart_catalog.models import MultipleServicesMode
from chart_catalog.models.catalog import VersionPolicy
from chart_catalog.models.chart import Chart
from chart_catalog.utils.version_compare import parse_version, same_major_minor


def epurate_charts(charts: list[Chart], policy: VersionPolicy) -> list[Chart]:
    """Remove the versions ``policy`` does not retain, in place.

    ``charts`` is expected newest first, as listed by the repository index.
    The same list is returned for convenience.
    """
    mode = policy.mode
    if mode == MultipleServicesMode.LATEST:
        del charts[1:]
    elif mode == MultipleServicesMode.MAX_NUMBER:
        del charts[max(policy.max_number_of_versions, 0):]
    elif mode == MultipleServicesMode.SKIP_PATCHES:
        charts[:] = _skip_patches(charts)
    return charts


def _skip_patches(charts: list[Chart]) -> list[Chart]:
    kept: list[Chart] = []
    previous: Version | None = None
    for chart in charts:
        version = parse_version(chart.version)
        if version is None:
            # Unparseable versions are kept and leave the baseline alone
            kept.append(chart)
            continue
        if previous is not None and same_major_minor(version, previous):
            continue
        kept.append(chart)
        previous = version
    return kept
