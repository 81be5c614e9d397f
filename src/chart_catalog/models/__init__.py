"""Data models for Chart Catalog."""

from __future__ import annotations

import enum


class MultipleServicesMode(enum.Enum):
    ALL = "all"
    LATEST = "latest"
    MAX_NUMBER = "max_number"
    SKIP_PATCHES = "skip_patches"

    @classmethod
    def from_str(cls, s: str | None) -> MultipleServicesMode:
        """Accept both ``SKIP_PATCHES`` and ``skip-patches`` spellings; default to ALL."""
        if not s:
            return cls.ALL
        normalized = s.strip().lower().replace("-", "_")
        for member in cls:
            if member.value == normalized:
                return member
        return cls.ALL


class RefreshOutcome(enum.Enum):
    SUCCESS = "success"
    FAILED = "failed"
