"""chartcat refresh - Refresh catalogs from their Helm repositories."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from chart_catalog.cli.options import OutputOption, VerboseOption
from chart_catalog.config.catalogs import load_catalogs
from chart_catalog.config.log_setup import configure_logging
from chart_catalog.config.settings import settings
from chart_catalog.core.catalog_loader import CatalogLoader
from chart_catalog.core.errors import CatalogConfigError
from chart_catalog.core.resource_loader import ResourceLoader
from chart_catalog.models import MultipleServicesMode
from chart_catalog.models.catalog import CatalogWrapper
from chart_catalog.output.formatters import output_refresh

app = typer.Typer()
console = Console(stderr=True)


def _ad_hoc_catalog(
    location: str,
    catalog_id: Optional[str],
    mode: str,
    max_versions: int,
    exclude: List[str],
) -> CatalogWrapper:
    return CatalogWrapper(
        id=catalog_id or location.rstrip("/").rsplit("/", 1)[-1] or "default",
        location=location.rstrip("/"),
        multiple_services_mode=MultipleServicesMode.from_str(mode),
        max_number_of_versions=max_versions,
        excluded_charts=list(exclude),
    )


@app.callback(invoke_without_command=True)
def refresh(
    catalogs_file: Optional[Path] = typer.Option(None, "--catalogs", "-c", help="Catalog definitions file"),
    location: Optional[str] = typer.Option(None, "--location", "-l", help="Refresh a single repository URL or path"),
    catalog_id: Optional[str] = typer.Option(None, "--id", help="Catalog id used with --location"),
    mode: str = typer.Option("all", "--mode", "-m", help="Versions to keep: all, latest, max_number, skip_patches"),
    max_versions: int = typer.Option(0, "--max-versions", help="Versions kept per chart with --mode max_number"),
    exclude: List[str] = typer.Option([], "--exclude", "-x", help="Chart to leave out (repeatable)"),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", help="Parallel downloads"),
    output: str = OutputOption,
    verbose: bool = VerboseOption,
) -> None:
    """Download each catalog's index and chart archives and report what was read."""
    configure_logging(verbose)

    if location:
        catalogs = [_ad_hoc_catalog(location, catalog_id, mode, max_versions, exclude)]
    else:
        path = catalogs_file or settings.catalogs_file
        if not path.exists():
            typer.echo(f"Catalogs file '{path}' not found. Use --catalogs or --location.", err=True)
            raise typer.Exit(code=1)
        try:
            catalogs = load_catalogs(path)
        except CatalogConfigError as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(code=1)

    if not catalogs:
        typer.echo("No catalogs defined.", err=True)
        raise typer.Exit(code=1)

    with ResourceLoader() as resources, console.status("[bold cyan]Refreshing catalogs…") as status:
        def on_progress(i: int, total: int, chart: str) -> None:
            status.update(f"[bold cyan]Reading charts… [dim]({i}/{total})[/dim] {chart}")

        loader = CatalogLoader(resources, max_workers=workers, on_progress=on_progress)
        summaries = loader.update_catalogs(catalogs)

    output_refresh(summaries, catalogs, output)

    if not all(s.committed for s in summaries):
        raise typer.Exit(code=1)
