"""chartcat helm-version - Show the helm binary version."""

from __future__ import annotations

from typing import Optional

import typer

from chart_catalog.core.errors import HelmCommandError
from chart_catalog.core.helm_version import get_helm_version

app = typer.Typer()


@app.callback(invoke_without_command=True)
def helm_version(
    binary: Optional[str] = typer.Option(None, "--helm", help="helm executable (default: helm on PATH)"),
) -> None:
    """Print the version reported by helm."""
    try:
        typer.echo(get_helm_version(binary))
    except HelmCommandError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
