"""Shared CLI options."""

from __future__ import annotations

import typer

from chart_catalog.config.settings import settings

OutputOption = typer.Option(settings.default_output, "--output", "-o", help="Output format: table, json, yaml")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Log progress and per-chart failures")
