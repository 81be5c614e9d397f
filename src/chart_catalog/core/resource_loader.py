"""Fetch repository indexes and chart archives from HTTP or the local filesystem."""

from __future__ import annotations

import io
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator
from urllib.parse import unquote, urlparse

import httpx

from chart_catalog.config.settings import settings

logger = logging.getLogger(__name__)


def is_remote(location: str) -> bool:
    return location.startswith("http://") or location.startswith("https://")


def _local_path(location: str) -> Path:
    if location.startswith("file:"):
        return Path(unquote(urlparse(location).path))
    return Path(location)


class ResourceLoader:
    """Opens ``http(s)://``, ``file://`` and plain path locations as byte streams.

    One ``httpx.Client`` is shared by every worker thread.
    """

    def __init__(self, client: httpx.Client | None = None, timeout: float | None = None):
        self._owns_client = client is None
        self._client = client or httpx.Client(
            follow_redirects=True,
            timeout=timeout if timeout is not None else settings.http_timeout,
        )

    def __enter__(self) -> ResourceLoader:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    @staticmethod
    def describe(location: str) -> str:
        if is_remote(location):
            return f"URL [{location}]"
        return f"file [{_local_path(location)}]"

    def read_bytes(self, location: str) -> bytes:
        if is_remote(location):
            logger.debug("GET %s", location)
            response = self._client.get(location)
            response.raise_for_status()
            return response.content
        return _local_path(location).read_bytes()

    def read_text(self, location: str, encoding: str = "utf-8") -> str:
        return self.read_bytes(location).decode(encoding)

    @contextmanager
    def open(self, location: str) -> Iterator[IO[bytes]]:
        """Yield a binary stream over the resource at ``location``."""
        if is_remote(location):
            stream: IO[bytes] = io.BytesIO(self.read_bytes(location))
        else:
            stream = _local_path(location).open("rb")
        try:
            yield stream
        finally:
            stream.close()
