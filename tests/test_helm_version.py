"""Tests for the helm version check."""

from __future__ import annotations

import subprocess

import pytest

from chart_catalog.core import helm_version
from chart_catalog.core.errors import HelmCommandError


def _fake_run(returncode: int = 0, stdout: str = "", exc: Exception | None = None):
    calls: list[list[str]] = []

    def run(cmd, **kwargs):
        calls.append(cmd)
        if exc is not None:
            raise exc
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr="")

    return run, calls


def test_returns_stripped_version(monkeypatch: pytest.MonkeyPatch) -> None:
    run, calls = _fake_run(stdout="v3.14.2\n")
    monkeypatch.setattr(helm_version.subprocess, "run", run)
    assert helm_version.get_helm_version() == "v3.14.2"
    assert calls == [["helm", "version", "--template={{.Version}}"]]


def test_custom_binary(monkeypatch: pytest.MonkeyPatch) -> None:
    run, calls = _fake_run(stdout="v3.0.0")
    monkeypatch.setattr(helm_version.subprocess, "run", run)
    helm_version.get_helm_version("/opt/helm/bin/helm")
    assert calls[0][0] == "/opt/helm/bin/helm"


def test_non_zero_exit(monkeypatch: pytest.MonkeyPatch) -> None:
    run, _ = _fake_run(returncode=2)
    monkeypatch.setattr(helm_version.subprocess, "run", run)
    with pytest.raises(HelmCommandError, match="code 2"):
        helm_version.get_helm_version()


@pytest.mark.parametrize(
    "exc",
    [FileNotFoundError("helm"), subprocess.TimeoutExpired("helm", 10), PermissionError("denied")],
)
def test_execution_failures(monkeypatch: pytest.MonkeyPatch, exc: Exception) -> None:
    run, _ = _fake_run(exc=exc)
    monkeypatch.setattr(helm_version.subprocess, "run", run)
    with pytest.raises(HelmCommandError):
        helm_version.get_helm_version()
