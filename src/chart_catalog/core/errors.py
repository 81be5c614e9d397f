"""Custom exceptions raised by catalog operations."""

from __future__ import annotations


class CatalogLoaderError(Exception):
    """Raised when a chart version cannot be fetched or read."""


class CatalogConfigError(ValueError):
    """Raised when a catalog definitions file is malformed."""


class HelmCommandError(RuntimeError):
    """Raised when the helm binary cannot report its version."""


__all__ = ("CatalogConfigError", "CatalogLoaderError", "HelmCommandError")
