"""Tests for reading a chart's own files out of its archive."""

from __future__ import annotations

import io
import json
import tarfile

import pytest

from conftest import build_archive
from chart_catalog.utils.archive import extract_chart_files


class _NonSeekable(io.RawIOBase):
    """Byte stream that refuses to seek, like an HTTP body."""

    def __init__(self, data: bytes):
        self._inner = io.BytesIO(data)

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return False

    def readinto(self, b) -> int:
        chunk = self._inner.read(len(b))
        b[:len(chunk)] = chunk
        return len(chunk)


def test_extracts_schema_and_values() -> None:
    data = build_archive({
        "mychart/Chart.yaml": "name: mychart\n",
        "mychart/values.yaml": "replicas: 2\n",
        "mychart/values.schema.json": json.dumps({"type": "object"}),
    })
    files = extract_chart_files(io.BytesIO(data), "mychart")
    assert files.schema == {"type": "object"}
    assert files.default_values == "replicas: 2\n"


def test_nested_chart_files_are_ignored() -> None:
    data = build_archive({
        "mychart/charts/dep/values.schema.json": json.dumps({"title": "dep"}),
        "mychart/values.schema.json": json.dumps({"title": "mine"}),
        "mychart/charts/dep/values.yaml": "dep: true\n",
    })
    files = extract_chart_files(io.BytesIO(data), "mychart")
    assert files.schema == {"title": "mine"}
    assert files.default_values is None


def test_subchart_with_same_name_is_skipped() -> None:
    data = build_archive({
        "mychart/charts/mychart/values.schema.json": json.dumps({"title": "nested"}),
        "mychart/charts/mychart/values.yaml": "nested: true\n",
    })
    files = extract_chart_files(io.BytesIO(data), "mychart")
    assert files.schema is None
    assert files.default_values is None


def test_missing_files_are_not_an_error() -> None:
    data = build_archive({"mychart/Chart.yaml": "name: mychart\n"})
    files = extract_chart_files(io.BytesIO(data), "mychart")
    assert files.schema is None
    assert files.default_values is None


def test_other_chart_names_do_not_match() -> None:
    data = build_archive({"otherchart/values.yaml": "x: 1\n"})
    files = extract_chart_files(io.BytesIO(data), "mychart")
    assert files.default_values is None


def test_reads_non_seekable_stream() -> None:
    data = build_archive({"mychart/values.yaml": "a: b\n"})
    stream = io.BufferedReader(_NonSeekable(data))
    files = extract_chart_files(stream, "mychart")
    assert files.default_values == "a: b\n"


def test_corrupt_archive_raises() -> None:
    with pytest.raises(tarfile.TarError):
        extract_chart_files(io.BytesIO(b"definitely not gzip"), "mychart")


def test_malformed_schema_raises_value_error() -> None:
    data = build_archive({"mychart/values.schema.json": "{not json"})
    with pytest.raises(ValueError):
        extract_chart_files(io.BytesIO(data), "mychart")
