"""Report the version of the helm binary found on PATH."""

from __future__ import annotations

import logging
import subprocess

from chart_catalog.config.settings import settings
from chart_catalog.core.errors import HelmCommandError

logger = logging.getLogger(__name__)


def get_helm_version(binary: str | None = None, timeout: float | None = None) -> str:
    """Return the output of ``helm version --template={{.Version}}``, e.g. ``v3.14.2``."""
    cmd = [binary or settings.helm_binary, "version", "--template={{.Version}}"]
    try:
        proc = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout if timeout is not None else settings.helm_timeout,
            check=False,
        )
    except FileNotFoundError as e:
        raise HelmCommandError(f"{cmd[0]} not found") from e
    except subprocess.TimeoutExpired as e:
        raise HelmCommandError(f"{cmd[0]} version timed out") from e
    except OSError as e:
        raise HelmCommandError(f"Failed to run {cmd[0]}: {e}") from e

    if proc.returncode != 0:
        logger.debug("helm version stderr: %s", proc.stderr)
        raise HelmCommandError(f"{cmd[0]} version exited with code {proc.returncode}")
    return proc.stdout.strip()
