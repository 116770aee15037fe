"""Typed domain objects built from raw service payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from spineapi.types import RawPackage, RawProject


@dataclass(frozen=True, slots=True)
class Project:
    """A catalog project with its packages and the caller's played state."""

    data: RawProject
    packages: tuple[RawPackage, ...]
    already_played: bool = False

    @property
    def project_id(self) -> int:
        """Return the service-side project ID."""
        return self.data["ProjectID"]

    @property
    def name(self) -> str | None:
        """Return the project name if the payload carries one."""
        return self.data.get("Name")

    def __getitem__(self, key: str) -> Any:
        """Provide mapping-like access to the raw project fields."""
        return self.data[key]


@dataclass(frozen=True, slots=True)
class ProjectInfo:
    """Typed wrapper over a project detail payload."""

    data: Mapping[str, Any]

    def __getitem__(self, key: str) -> Any:
        """Provide mapping-like access to the raw detail fields."""
        return self.data[key]

    def get(self, key: str, default: Any = None) -> Any:
        """Return a raw detail field or ``default``."""
        return self.data.get(key, default)
