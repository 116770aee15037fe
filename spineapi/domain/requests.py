"""Immutable request payloads sent to the Spine service."""

from __future__ import annotations

from dataclasses import dataclass, field

from spineapi.constants import Language
from spineapi.language import normalize_wire_code

ProjectId = str | int


@dataclass(frozen=True, slots=True)
class RequestAllNewsDto:
    """Body of ``requestAllNews``."""

    language: Language | str

    def as_payload(self) -> dict[str, object]:
        """Return the JSON body with the language normalized to its wire code."""
        return {"Language": normalize_wire_code(self.language)}


@dataclass(frozen=True, slots=True)
class RequestAllProjectsDto:
    """Body of ``requestAllProjects``."""

    username: str
    password: str = field(repr=False)
    language: Language | str

    def as_payload(self) -> dict[str, object]:
        """Return the JSON body with credentials and the language wire code."""
        return {
            "Username": self.username,
            "Password": self.password,
            "Language": normalize_wire_code(self.language),
        }


@dataclass(frozen=True, slots=True)
class RequestProjectInfoDto:
    """Body of ``requestInfoPage``."""

    project_id: ProjectId
    username: str
    password: str = field(repr=False)
    language: Language | str

    def as_payload(self) -> dict[str, object]:
        """Return the project detail body; the project ID is sent as given."""
        payload = RequestAllProjectsDto(self.username, self.password, self.language).as_payload()
        payload["ProjectID"] = self.project_id
        return payload


@dataclass(frozen=True, slots=True)
class ProjectIdDto:
    """Body shared by ``getRatings`` and ``getReviews``."""

    project_id: ProjectId

    def as_payload(self) -> dict[str, object]:
        """Return the body carrying only the project ID."""
        return {"ProjectID": self.project_id}
