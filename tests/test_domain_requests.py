"""Tests for immutable request payload models."""

from __future__ import annotations

import dataclasses

import pytest

from spineapi.constants import Language
from spineapi.domain.requests import (
    ProjectIdDto,
    RequestAllNewsDto,
    RequestAllProjectsDto,
    RequestProjectInfoDto,
)
from spineapi.errors import UnknownLanguageCodeError


def test_all_projects_payload_uses_service_field_names() -> None:
    """Verify credentials and language are rendered with service casing."""
    dto = RequestAllProjectsDto(username="alice", password="secret", language=Language.GERMAN)

    assert dto.as_payload() == {"Username": "alice", "Password": "secret", "Language": "Deutsch"}


def test_project_info_payload_extends_catalog_payload() -> None:
    """Verify the info payload adds the project ID to the catalog fields."""
    dto = RequestProjectInfoDto(project_id="12", username="", password="", language="English")

    assert dto.as_payload() == {
        "Username": "",
        "Password": "",
        "Language": "English",
        "ProjectID": "12",
    }


def test_news_payload_normalizes_language() -> None:
    """Verify members and wire codes render to the same payload."""
    assert RequestAllNewsDto(Language.RUSSIAN).as_payload() == RequestAllNewsDto("Russian").as_payload()


def test_payload_rejects_unknown_wire_code() -> None:
    """Verify invalid wire codes fail when the payload is built."""
    with pytest.raises(UnknownLanguageCodeError):
        RequestAllNewsDto("Elvish").as_payload()


def test_project_id_payload() -> None:
    """Verify ratings and reviews send only the project ID."""
    assert ProjectIdDto(99).as_payload() == {"ProjectID": 99}


def test_request_models_are_frozen_and_hide_passwords() -> None:
    """Verify payload models cannot be modified and keep passwords out of repr."""
    dto = RequestAllProjectsDto(username="alice", password="hunter2", language=Language.ENGLISH)

    with pytest.raises(dataclasses.FrozenInstanceError):
        dto.username = "bob"  # type: ignore[misc]
    assert "hunter2" not in repr(dto)
