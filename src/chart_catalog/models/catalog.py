"""Catalog definition and committed snapshot."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from chart_catalog.models import MultipleServicesMode
from chart_catalog.models.repository import TYPE_HELM, Repository


@dataclass(frozen=True)
class VersionPolicy:
    """Which versions of a package survive a refresh."""

    mode: MultipleServicesMode = MultipleServicesMode.ALL
    max_number_of_versions: int = 0


@dataclass
class CatalogWrapper:
    """A catalog definition plus the last repository committed for it.

    The definition fields are read-only during a refresh cycle. ``catalog``
    and ``last_update_time`` only change together through ``commit``.
    """

    id: str
    location: str
    name: str = ""
    type: str = TYPE_HELM
    multiple_services_mode: MultipleServicesMode = MultipleServicesMode.ALL
    max_number_of_versions: int = 0
    excluded_charts: list[str] = field(default_factory=list)
    catalog: Repository | None = field(default=None, compare=False)
    last_update_time: int = field(default=0, compare=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    @property
    def policy(self) -> VersionPolicy:
        return VersionPolicy(self.multiple_services_mode, self.max_number_of_versions)

    @property
    def display_name(self) -> str:
        return self.name or self.id

    def is_excluded(self, chart_name: str) -> bool:
        lowered = chart_name.lower()
        return any(excluded.lower() == lowered for excluded in self.excluded_charts)

    def commit(self, repository: Repository, timestamp: int) -> None:
        """Swap in a fully populated repository."""
        with self._lock:
            self.catalog = repository
            self.last_update_time = timestamp

    def snapshot(self) -> tuple[Repository | None, int]:
        with self._lock:
            return self.catalog, self.last_update_time

    @classmethod
    def from_dict(cls, d: dict) -> CatalogWrapper:
        def pick(camel: str, snake: str, default=None):
            if camel in d:
                return d[camel]
            return d.get(snake, default)

        excluded = pick("excludedCharts", "excluded_charts") or []
        if isinstance(excluded, str):
            excluded = [excluded]
        return cls(
            id=str(d.get("id", "")),
            location=str(d.get("location", "")).rstrip("/"),
            name=d.get("name", "") or "",
            type=d.get("type", TYPE_HELM) or TYPE_HELM,
            multiple_services_mode=MultipleServicesMode.from_str(
                pick("multipleServicesMode", "multiple_services_mode")
            ),
            max_number_of_versions=int(pick("maxNumberOfVersions", "max_number_of_versions", 0) or 0),
            excluded_charts=[str(e) for e in excluded],
        )
