"""HTTP session handling shared by the request and image functions."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from requests import Session

from spineapi import __version__ as about
from spineapi.constants import USER_AGENT
from spineapi.types import SessionLike

Timeout = tuple[float, float] | float | None


def default_headers() -> dict[str, str]:
    """Headers attached to every outgoing request."""
    return {"User-Agent": USER_AGENT.format(version=about.__version__)}


@contextmanager
def session_scope(session: SessionLike | None) -> Iterator[SessionLike]:
    """
    Yield the caller's session, or a fresh one closed when the call ends.

    A caller-provided session is never closed here.
    """
    if session is not None:
        yield session
        return
    with Session() as owned:
        yield owned


def build_url(server_url: str, path: str) -> str:
    """Join the configured server URL and an endpoint path."""
    return f"{server_url.rstrip('/')}/{path}"
