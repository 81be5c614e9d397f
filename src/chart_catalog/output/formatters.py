"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from chart_catalog.models.catalog import CatalogWrapper
from chart_catalog.models.refresh import RefreshSummary

console = Console()


def _summary_to_dict(s: RefreshSummary, cw: CatalogWrapper | None = None) -> dict[str, Any]:
    data: dict[str, Any] = {
        "catalog": s.catalog_id,
        "committed": s.committed,
        "packages": s.packages,
        "excluded": s.excluded,
        "removed_versions": s.removed_versions,
        "succeeded": s.succeeded,
        "failed": s.failed,
        "failures": [
            {"chart": r.chart, "version": r.version, "error": r.error}
            for r in s.results if r.failed
        ],
    }
    if s.error:
        data["error"] = s.error
    if cw is not None:
        repository, last_update = cw.snapshot()
        data["last_update_time"] = last_update
        if repository is not None:
            data["charts"] = {
                name: [c.version for c in charts]
                for name, charts in sorted(repository.entries.items())
            }
    return data


def output_refresh(summaries: list[RefreshSummary], catalogs: list[CatalogWrapper], fmt: str) -> None:
    by_id = {cw.id: cw for cw in catalogs}
    if fmt == "json":
        data = [_summary_to_dict(s, by_id.get(s.catalog_id)) for s in summaries]
        console.print_json(json.dumps(data, indent=2))
    elif fmt == "yaml":
        data = [_summary_to_dict(s, by_id.get(s.catalog_id)) for s in summaries]
        console.print(yaml.dump(data, default_flow_style=False), markup=False)
    else:
        from chart_catalog.output.tables import catalog_charts_table, failures_table, refresh_summary_table
        console.print(refresh_summary_table(summaries))
        if any(s.failed for s in summaries):
            console.print(failures_table(summaries))
        for cw in catalogs:
            if cw.catalog is not None:
                console.print(catalog_charts_table(cw))


def output_schema(schema: Any, fmt: str) -> None:
    if fmt == "yaml":
        console.print(yaml.dump(schema, default_flow_style=False, sort_keys=False), markup=False)
    else:
        console.print_json(json.dumps(schema, indent=2))
