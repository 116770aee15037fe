"""Pure transforms from raw service responses to domain objects."""

from __future__ import annotations

from collections import defaultdict
from typing import Mapping

from spineapi.domain.models import Project, ProjectInfo
from spineapi.types import RawPackage, RequestAllProjectsResponse


def _group_packages(packages: list[RawPackage]) -> dict[int, list[RawPackage]]:
    """Index packages by the project they belong to, keeping response order."""
    grouped: dict[int, list[RawPackage]] = defaultdict(list)
    for package in packages:
        grouped[package.get("ProjectID")].append(package)
    return grouped


def build_projects(response: RequestAllProjectsResponse) -> list[Project]:
    """
    Attach packages and played state to every project of a catalog response.

    A missing ``PlayedProjects`` list marks every project as not played.
    """
    packages_by_project = _group_packages(response.get("Packages") or [])
    played_ids = {played["ID"] for played in response.get("PlayedProjects") or []}

    return [
        Project(
            data=project,
            packages=tuple(packages_by_project.get(project["ProjectID"], ())),
            already_played=project["ProjectID"] in played_ids,
        )
        for project in response.get("Projects") or []
    ]


def build_project_info(raw: Mapping[str, object]) -> ProjectInfo:
    """Wrap a project detail payload without changing its structure."""
    return ProjectInfo(data=raw)
