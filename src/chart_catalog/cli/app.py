"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import typer

app = typer.Typer(
    name="chartcat",
    help="Chart Catalog - Refresh Helm catalogs and resolve their values schemas.",
    no_args_is_help=True,
)


def _register_commands() -> None:
    from chart_catalog.cli.commands.refresh_cmd import app as refresh_app
    from chart_catalog.cli.commands.resolve_cmd import app as resolve_app
    from chart_catalog.cli.commands.version_cmd import app as version_app

    app.add_typer(refresh_app, name="refresh", help="Refresh catalogs from their Helm repositories")
    app.add_typer(resolve_app, name="resolve", help="Resolve references in a values schema")
    app.add_typer(version_app, name="helm-version", help="Show the helm binary version")


_register_commands()


def main() -> None:
    app()
