"""Semver comparison utilities."""

from __future__ import annotations

import re

from packaging.version import InvalidVersion, Version

# major.minor.patch, optionally followed by a prerelease/build suffix
_SEMVER = re.compile(r"^v?(\d+\.\d+\.\d+)([-+].*)?$")


def parse_version(v: str) -> Version | None:
    """Parse a semantic version string, returning None on failure.

    ``1.2`` or ``1.2.3.4`` are not semantic versions and give None even though
    PEP 440 would accept them.
    """
    match = _SEMVER.match(v)
    if match is None:
        return None
    try:
        return Version(v[1:] if v.startswith("v") else v)
    except InvalidVersion:
        # 1.0.0-SNAPSHOT and friends: keep the numeric core
        return Version(match.group(1))


def same_major_minor(a: Version, b: Version) -> bool:
    return a.major == b.major and a.minor == b.minor
