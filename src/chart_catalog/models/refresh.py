"""Refresh cycle result models."""

from __future__ import annotations

from dataclasses import dataclass, field

from chart_catalog.models import RefreshOutcome


@dataclass
class RefreshResult:
    chart: str
    version: str
    outcome: RefreshOutcome
    error: str = ""

    @property
    def failed(self) -> bool:
        return self.outcome == RefreshOutcome.FAILED


@dataclass
class RefreshSummary:
    catalog_id: str
    committed: bool = False
    packages: int = 0
    excluded: list[str] = field(default_factory=list)
    removed_versions: int = 0
    results: list[RefreshResult] = field(default_factory=list)
    error: str = ""

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if not r.failed)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if r.failed)
