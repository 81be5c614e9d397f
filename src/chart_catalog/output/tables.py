"""Rich table builders for each command."""

from __future__ import annotations

from rich.table import Table

from chart_catalog.models.catalog import CatalogWrapper
from chart_catalog.models.refresh import RefreshSummary
from chart_catalog.output.themes import styled_committed, styled_outcome


def refresh_summary_table(summaries: list[RefreshSummary]) -> Table:
    table = Table(title="Catalog Refresh", expand=True)
    table.add_column("Catalog", style="cyan", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("Packages", justify="right")
    table.add_column("Excluded", justify="right", style="dim")
    table.add_column("Trimmed", justify="right", style="dim")
    table.add_column("OK", justify="right", style="green")
    table.add_column("Failed", justify="right", style="red")
    table.add_column("Error", style="dim", max_width=40)

    for s in summaries:
        table.add_row(
            s.catalog_id,
            styled_committed(s.committed),
            str(s.packages),
            str(len(s.excluded)),
            str(s.removed_versions),
            str(s.succeeded),
            str(s.failed),
            s.error or "",
        )
    return table


def failures_table(summaries: list[RefreshSummary]) -> Table:
    table = Table(title="Failed Chart Versions", expand=True)
    table.add_column("Catalog", style="cyan", no_wrap=True)
    table.add_column("Chart", style="magenta", no_wrap=True)
    table.add_column("Version", style="magenta")
    table.add_column("Outcome", no_wrap=True)
    table.add_column("Error", max_width=60)

    for s in summaries:
        for r in s.results:
            if r.failed:
                table.add_row(s.catalog_id, r.chart, r.version, styled_outcome(r.outcome), r.error)
    return table


def catalog_charts_table(cw: CatalogWrapper) -> Table:
    repository, _ = cw.snapshot()
    table = Table(title=f"Charts in {cw.display_name}", expand=True)
    table.add_column("Chart", style="magenta", no_wrap=True)
    table.add_column("Versions")
    table.add_column("Schema", justify="center")
    table.add_column("Values", justify="center")

    if repository is None:
        return table
    for name, charts in sorted(repository.entries.items()):
        versions = ", ".join(c.version for c in charts)
        with_schema = sum(1 for c in charts if c.config is not None)
        with_values = sum(1 for c in charts if c.default_values is not None)
        table.add_row(name, versions, f"{with_schema}/{len(charts)}", f"{with_values}/{len(charts)}")
    return table
