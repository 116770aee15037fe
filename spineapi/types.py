"""Response shapes and transport contracts shared across runtime components."""

from __future__ import annotations

from typing import Any, Mapping, NotRequired, Protocol, TypedDict


class RawProject(TypedDict, total=False):
    """One entry of ``Projects`` in the catalog response."""

    ProjectID: int
    Name: str
    Type: int
    Languages: int
    Enabled: bool


class RawPackage(TypedDict, total=False):
    """One optional package belonging to a project."""

    PackageID: int
    ProjectID: int
    Name: str
    Languages: int


class PlayedProject(TypedDict):
    """Entry of ``PlayedProjects``; ``ID`` is a project ID."""

    ID: int


class RequestAllProjectsResponse(TypedDict):
    """Body returned by ``requestAllProjects``."""

    Projects: list[RawProject]
    Packages: list[RawPackage]
    PlayedProjects: NotRequired[list[PlayedProject]]


RawProjectInfo = dict[str, Any]
RequestAllNewsResponse = dict[str, Any]
GetRatingsResponse = dict[str, Any]
GetReviewsResponse = dict[str, Any]


class ResponseLike(Protocol):
    """Minimal HTTP response contract used by the transport code."""

    content: bytes

    def raise_for_status(self) -> None:
        """Raise for non-successful HTTP responses."""

    def json(self) -> Any:
        """Decode the response body as JSON."""


class SessionLike(Protocol):
    """Minimal HTTP session contract used by the request functions."""

    def post(
        self,
        url: str,
        json: Mapping[str, object] | None = None,
        headers: Mapping[str, str] | None = None,
        timeout: tuple[float, float] | float | None = None,
    ) -> ResponseLike:
        """Perform an HTTP POST request with a JSON body."""

    def get(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        timeout: tuple[float, float] | float | None = None,
    ) -> ResponseLike:
        """Perform an HTTP GET request."""
