"""Shared pytest fixtures."""

from __future__ import annotations

import io
import json
import tarfile
from pathlib import Path
from typing import Callable

import pytest
import yaml


def build_archive(files: dict[str, str | bytes]) -> bytes:
    """Return a .tgz holding ``files`` (path -> content) in insertion order."""
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w:gz") as tar:
        for name, content in files.items():
            data = content.encode("utf-8") if isinstance(content, str) else content
            info = tarfile.TarInfo(name)
            info.size = len(data)
            tar.addfile(info, io.BytesIO(data))
    return buf.getvalue()


def chart_archive(name: str, version: str, schema: dict | None = None, values: str | None = None) -> bytes:
    files: dict[str, str | bytes] = {
        f"{name}/Chart.yaml": yaml.safe_dump({"apiVersion": "v2", "name": name, "version": version}),
    }
    if values is not None:
        files[f"{name}/values.yaml"] = values
    if schema is not None:
        files[f"{name}/values.schema.json"] = json.dumps(schema)
    return build_archive(files)


def index_entry(name: str, version: str, urls: list[str] | None = None) -> dict:
    return {
        "apiVersion": "v2",
        "name": name,
        "version": version,
        "urls": urls if urls is not None else [f"{name}-{version}.tgz"],
    }


@pytest.fixture
def make_repo(tmp_path: Path) -> Callable[..., Path]:
    """Write ``index.yaml`` plus one archive per version into a directory.

    ``charts`` maps chart name to a list of versions, newest first.
    """

    def _make(charts: dict[str, list[str]], broken: set[str] | None = None) -> Path:
        repo = tmp_path / "repo"
        repo.mkdir(exist_ok=True)
        entries: dict[str, list[dict]] = {}
        for name, versions in charts.items():
            entries[name] = []
            for version in versions:
                entries[name].append(index_entry(name, version))
                archive = repo / f"{name}-{version}.tgz"
                if broken and f"{name}-{version}" in broken:
                    archive.write_bytes(b"not a tarball")
                    continue
                archive.write_bytes(chart_archive(
                    name,
                    version,
                    schema={"type": "object", "title": f"{name} {version}"},
                    values=f"# {name} {version}\nreplicas: 1\n",
                ))
        index = {"apiVersion": "v1", "entries": entries, "generated": "2024-01-01T00:00:00Z"}
        (repo / "index.yaml").write_text(yaml.safe_dump(index), encoding="utf-8")
        return repo

    return _make
