"""Read values.schema.json / values.yaml out of a packaged chart (.tgz)."""

from __future__ import annotations

import json
import tarfile
from dataclasses import dataclass
from typing import IO, Any

SCHEMA_FILE = "values.schema.json"
VALUES_FILE = "values.yaml"


@dataclass
class ChartFiles:
    schema: dict[str, Any] | None = None
    default_values: str | None = None


def _is_own_file(entry_name: str, chart_name: str, filename: str) -> bool:
    """True for ``<chart>/<file>`` but not for a nested ``charts/<chart>/<file>``."""
    return (
        entry_name.endswith(f"{chart_name}/{filename}")
        and not entry_name.endswith(f"charts/{chart_name}/{filename}")
    )


def extract_chart_files(stream: IO[bytes], chart_name: str) -> ChartFiles:
    """Scan a gzip tar stream once and pull out the chart's own schema and values.

    The stream is read sequentially, it does not need to be seekable.
    """
    files = ChartFiles()
    with tarfile.open(fileobj=stream, mode="r|gz") as tar:
        for member in tar:
            if not member.isfile():
                continue
            if _is_own_file(member.name, chart_name, SCHEMA_FILE):
                files.schema = json.loads(_read_member(tar, member).decode("utf-8"))
            elif _is_own_file(member.name, chart_name, VALUES_FILE):
                files.default_values = _read_member(tar, member).decode("utf-8")
    return files


def _read_member(tar: tarfile.TarFile, member: tarfile.TarInfo) -> bytes:
    fh = tar.extractfile(member)
    if fh is None:
        return b""
    return fh.read()
