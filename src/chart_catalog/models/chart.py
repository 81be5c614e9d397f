"""Chart models parsed from a Helm repository index."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Maintainer:
    name: str = ""
    email: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, d: dict) -> Maintainer:
        return cls(
            name=d.get("name", ""),
            email=d.get("email", ""),
            url=d.get("url", ""),
        )


@dataclass
class ChartDependency:
    name: str = ""
    version: str = ""
    repository: str = ""
    condition: str = ""
    alias: str = ""

    @classmethod
    def from_dict(cls, d: dict) -> ChartDependency:
        return cls(
            name=d.get("name", ""),
            version=d.get("version", ""),
            repository=d.get("repository", ""),
            condition=d.get("condition", ""),
            alias=d.get("alias", ""),
        )


@dataclass
class Chart:
    """One version of a package as listed in ``index.yaml``.

    ``config`` and ``default_values`` stay ``None`` until the package archive
    has been fetched and read.
    """

    name: str = ""
    version: str = ""
    urls: list[str] = field(default_factory=list)
    app_version: str = ""
    description: str = ""
    api_version: str = ""
    chart_type: str = ""
    home: str = ""
    icon: str = ""
    created: str = ""
    digest: str = ""
    deprecated: bool = False
    keywords: list[str] = field(default_factory=list)
    sources: list[str] = field(default_factory=list)
    maintainers: list[Maintainer] = field(default_factory=list)
    dependencies: list[ChartDependency] = field(default_factory=list)
    annotations: dict[str, str] = field(default_factory=dict)
    config: dict[str, Any] | None = None
    default_values: str | None = None

    @classmethod
    def from_dict(cls, d: dict) -> Chart:
        if not d:
            return cls()
        return cls(
            name=d.get("name", ""),
            # index.yaml written by hand sometimes carries unquoted numeric versions
            version=str(d.get("version", "")),
            urls=list(d.get("urls") or []),
            app_version=str(d.get("appVersion", "") or ""),
            description=d.get("description", "") or "",
            api_version=d.get("apiVersion", "") or "",
            chart_type=d.get("type", "") or "",
            home=d.get("home", "") or "",
            icon=d.get("icon", "") or "",
            created=str(d.get("created", "") or ""),
            digest=d.get("digest", "") or "",
            deprecated=bool(d.get("deprecated", False)),
            keywords=d.get("keywords") or [],
            sources=d.get("sources") or [],
            maintainers=[Maintainer.from_dict(m) for m in d.get("maintainers") or []],
            dependencies=[ChartDependency.from_dict(dep) for dep in d.get("dependencies") or []],
            annotations=d.get("annotations") or {},
        )
