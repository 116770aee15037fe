"""Tests for the SpineApi convenience client."""

from __future__ import annotations

from typing import Any

import pytest

from spineapi.client import api, images
from spineapi.client.init import SpineApi
from spineapi.config import DEFAULT_CONFIG, Credentials, SpineConfig
from spineapi.constants import DEFAULT_TIMEOUT, Language


def test_default_client_uses_library_defaults() -> None:
    """Verify an unconfigured client carries the default configuration."""
    client = SpineApi()

    assert client.config == DEFAULT_CONFIG
    assert client.session is None
    assert client.timeout == DEFAULT_TIMEOUT


def test_client_resolves_partial_config_once() -> None:
    """Verify the constructor merges overrides onto the defaults."""
    client = SpineApi({"credentials": {"username": "alice"}, "language": Language.ENGLISH})

    assert client.config == SpineConfig(
        credentials=Credentials(username="alice"),
        language=Language.ENGLISH,
    )
    assert DEFAULT_CONFIG == SpineConfig()


def test_clients_do_not_share_configuration() -> None:
    """Verify two clients with different overrides stay independent."""
    first = SpineApi({"server_url": "https://one"})
    second = SpineApi({"server_url": "https://two"})

    assert first.config.server_url == "https://one"
    assert second.config.server_url == "https://two"


def test_with_config_returns_new_client() -> None:
    """Verify derived clients resolve on top of the current configuration."""
    session = object()
    client = SpineApi({"credentials": {"username": "alice", "password": "p"}}, session=session)

    derived = client.with_config(credentials={"password": "q"})

    assert derived is not client
    assert derived.session is session
    assert derived.config.credentials == Credentials(username="alice", password="q")
    assert client.config.credentials == Credentials(username="alice", password="p")


@pytest.mark.parametrize(
    ("method", "args"),
    [
        ("request_all_projects", ()),
        ("get_projects", ()),
        ("request_project_info", (4,)),
        ("get_project_info", (4,)),
        ("request_all_news", ()),
        ("get_ratings", (4,)),
        ("get_reviews", (4,)),
    ],
)
def test_methods_delegate_with_stored_config(
    monkeypatch: pytest.MonkeyPatch,
    method: str,
    args: tuple[Any, ...],
) -> None:
    """Verify each method forwards its stored config, session and timeout."""
    observed: dict[str, Any] = {}

    def _operation(*call_args: Any, **kwargs: Any) -> str:
        observed["args"] = call_args
        observed.update(kwargs)
        return "result"

    monkeypatch.setattr(api, method, _operation)
    session = object()
    client = SpineApi({"server_url": "https://stored"}, session=session, timeout=9.0)

    assert getattr(client, method)(*args) == "result"
    assert observed["args"] == args
    assert observed["base"] is client.config
    assert observed["session"] is session
    assert observed["timeout"] == 9.0


def test_load_image_delegates_to_image_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify image loading uses the client's session and timeout."""
    observed: dict[str, Any] = {}

    def _load_image(url: str, **kwargs: Any) -> bytes:
        observed["url"] = url
        observed.update(kwargs)
        return b"image"

    monkeypatch.setattr(images, "load_image", _load_image)
    client = SpineApi(timeout=1.5)

    assert client.load_image("https://cdn.example/a.png") == b"image"
    assert observed == {"url": "https://cdn.example/a.png", "session": None, "timeout": 1.5}
