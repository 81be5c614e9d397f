"""chartcat resolve <schema> - Resolve references in a values schema."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from chart_catalog.cli.options import VerboseOption
from chart_catalog.config.log_setup import configure_logging
from chart_catalog.config.settings import settings
from chart_catalog.core.schema_registry import DirectorySchemaRegistry
from chart_catalog.core.schema_resolver import SchemaResolver
from chart_catalog.output.formatters import output_schema

app = typer.Typer()


@app.callback(invoke_without_command=True)
def resolve(
    schema: Path = typer.Argument(help="values.schema.json to resolve"),
    registry: Optional[Path] = typer.Option(None, "--registry", "-r", help="Directory of named schemas"),
    definitions_only: bool = typer.Option(False, "--definitions-only", help="Only inline #/definitions/ pointers"),
    output: str = typer.Option("json", "--output", "-o", help="Output format: json, yaml"),
    verbose: bool = VerboseOption,
) -> None:
    """Print the schema with $ref and x-onyxia overrides inlined."""
    configure_logging(verbose)

    try:
        document = json.loads(schema.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        typer.echo(f"Cannot read schema '{schema}': {e}", err=True)
        raise typer.Exit(code=1)

    registry_dir = registry or settings.schema_registry_dir
    if definitions_only or registry_dir is None:
        resolver = SchemaResolver()
    else:
        if not registry_dir.is_dir():
            typer.echo(f"Schema registry '{registry_dir}' is not a directory.", err=True)
            raise typer.Exit(code=1)
        resolver = SchemaResolver(DirectorySchemaRegistry(registry_dir))

    output_schema(resolver.resolve(document), output)
