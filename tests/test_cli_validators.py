"""Tests for CLI parameter validators."""

from __future__ import annotations

import click
import pytest

from spineapi.cli.validators import validate_language, validate_project_id
from spineapi.constants import Language


def test_validate_language_accepts_names_and_wire_codes() -> None:
    """Verify both spellings resolve to the same member."""
    assert validate_language(None, None, "german") is Language.GERMAN
    assert validate_language(None, None, "Deutsch") is Language.GERMAN


def test_validate_language_passes_missing_value() -> None:
    """Verify an omitted option stays unset."""
    assert validate_language(None, None, None) is None


def test_validate_language_rejects_unknown_values() -> None:
    """Verify unknown languages become click parameter errors."""
    with pytest.raises(click.BadParameter, match="german"):
        validate_language(None, None, "Latin")


def test_validate_project_id_converts_numeric_ids() -> None:
    """Verify numeric IDs are sent as integers and others as strings."""
    assert validate_project_id(None, None, " 42 ") == 42
    assert validate_project_id(None, None, "abc-1") == "abc-1"


def test_validate_project_id_rejects_blank_values() -> None:
    """Verify blank IDs are rejected."""
    with pytest.raises(click.BadParameter):
        validate_project_id(None, None, "  ")
