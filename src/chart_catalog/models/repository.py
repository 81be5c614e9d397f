"""Helm repository snapshot model."""

from __future__ import annotations

from dataclasses import dataclass, field

from chart_catalog.models.chart import Chart

TYPE_HELM = "helm"


@dataclass
class Repository:
    entries: dict[str, list[Chart]] = field(default_factory=dict)
    api_version: str = ""
    generated: str = ""
    type: str = TYPE_HELM

    @property
    def chart_count(self) -> int:
        return sum(len(charts) for charts in self.entries.values())

    def latest(self, name: str) -> Chart | None:
        """Return the first listed version of a package, if any."""
        charts = self.entries.get(name)
        return charts[0] if charts else None

    def get_chart(self, name: str, version: str) -> Chart | None:
        for chart in self.entries.get(name, []):
            if chart.version == version:
                return chart
        return None

    @classmethod
    def from_dict(cls, d: dict) -> Repository:
        """Build a repository from a parsed ``index.yaml`` document."""
        if not isinstance(d, dict):
            raise ValueError("Repository index must be a mapping")
        entries = d.get("entries") or {}
        if not isinstance(entries, dict):
            raise ValueError("Repository index 'entries' must be a mapping")
        return cls(
            entries={
                name: [Chart.from_dict(e) for e in chart_entries or [] if isinstance(e, dict)]
                for name, chart_entries in entries.items()
            },
            api_version=d.get("apiVersion", "") or "",
            generated=str(d.get("generated", "") or ""),
        )
