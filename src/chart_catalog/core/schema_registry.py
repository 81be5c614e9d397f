"""Named JSON schemas that charts can reference by ``$ref`` or ``overwriteSchemaWith``."""

from __future__ import annotations

import copy
import json
import logging
import threading
from pathlib import Path
from typing import Any, Mapping, Protocol

logger = logging.getLogger(__name__)


class SchemaRegistry(Protocol):
    def get(self, name: str) -> dict[str, Any] | None:
        ...


class InMemorySchemaRegistry:
    def __init__(self, schemas: Mapping[str, dict[str, Any]] | None = None):
        self._schemas = dict(schemas or {})

    def get(self, name: str) -> dict[str, Any] | None:
        schema = self._schemas.get(name)
        return copy.deepcopy(schema) if schema is not None else None


class DirectorySchemaRegistry:
    """Schemas stored as JSON files below a root directory.

    ``get("ide/resources.json")`` reads ``<root>/ide/resources.json``; the
    ``.json`` suffix may be omitted. Files are parsed once and cached.
    """

    def __init__(self, root: Path):
        self.root = Path(root).resolve()
        self._cache: dict[str, dict[str, Any] | None] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> dict[str, Any] | None:
        with self._lock:
            if name not in self._cache:
                self._cache[name] = self._load(name)
            schema = self._cache[name]
        return copy.deepcopy(schema) if schema is not None else None

    def _candidate(self, name: str) -> Path | None:
        for candidate in (self.root / name, self.root / f"{name}.json"):
            resolved = candidate.resolve()
            # Never read outside the registry root
            if not resolved.is_relative_to(self.root):
                return None
            if resolved.is_file():
                return resolved
        return None

    def _load(self, name: str) -> dict[str, Any] | None:
        path = self._candidate(name.lstrip("/"))
        if path is None:
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.debug("Failed to load schema %s from %s", name, path, exc_info=True)
            return None
        if not isinstance(data, dict):
            logger.debug("Schema %s is not a JSON object", name)
            return None
        return data
