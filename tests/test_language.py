"""Tests for language wire-code and bit-flag conversions."""

from __future__ import annotations

import pytest

from spineapi import language as codec
from spineapi.constants import LANGUAGE_TABLE, Language
from spineapi.errors import InvalidLanguageFlagError, UnknownLanguageCodeError


@pytest.mark.parametrize("member", list(Language))
def test_wire_code_and_bit_flag_roundtrip_for_every_language(member: Language) -> None:
    """Verify both encodings decode back to the original language."""
    assert codec.from_wire_code(codec.to_wire_code(member)) is member
    assert codec.from_bit_flag(codec.to_bit_flag(member)) is member


def test_table_covers_every_language_with_unique_encodings() -> None:
    """Verify the language table is a bijection for both encodings."""
    wire_codes = [encoding.wire_code for encoding in LANGUAGE_TABLE.values()]
    flags = [encoding.bit_flag for encoding in LANGUAGE_TABLE.values()]

    assert set(LANGUAGE_TABLE) == set(Language)
    assert len(set(wire_codes)) == len(wire_codes)
    assert len(set(flags)) == len(flags)
    assert all(flag > 0 and flag & (flag - 1) == 0 for flag in flags)


def test_known_encodings_match_service_values() -> None:
    """Verify the concrete values the service expects."""
    assert codec.to_wire_code(Language.GERMAN) == "Deutsch"
    assert codec.to_wire_code(Language.ENGLISH) == "English"
    assert codec.to_bit_flag(Language.GERMAN) == 1
    assert codec.to_bit_flag(Language.RUSSIAN) == 8


def test_from_bit_flag_roundtrips_assigned_flags() -> None:
    """Verify every assigned flag maps back to itself."""
    for encoding in LANGUAGE_TABLE.values():
        assert codec.to_bit_flag(codec.from_bit_flag(encoding.bit_flag)) == encoding.bit_flag


@pytest.mark.parametrize("flag", [0, 3, 6, -1, 1 << 10, True, "1", 1.0])
def test_from_bit_flag_rejects_invalid_flags(flag: object) -> None:
    """Verify zero, composite, unassigned and non-integer flags are rejected."""
    with pytest.raises(InvalidLanguageFlagError):
        codec.from_bit_flag(flag)  # type: ignore[arg-type]


@pytest.mark.parametrize("code", ["not-a-real-code", "", "deutsch", "GERMAN", None])
def test_from_wire_code_rejects_unknown_codes(code: object) -> None:
    """Verify unknown or differently cased codes are not guessed."""
    with pytest.raises(UnknownLanguageCodeError) as excinfo:
        codec.from_wire_code(code)  # type: ignore[arg-type]

    assert excinfo.value.code == code


def test_normalize_wire_code_accepts_language_or_wire_code() -> None:
    """Verify members are encoded and valid wire codes pass through."""
    assert codec.normalize_wire_code(Language.POLISH) == "Polish"
    assert codec.normalize_wire_code("English") == "English"


def test_normalize_wire_code_rejects_unknown_strings() -> None:
    """Verify pass-through still validates the wire code."""
    with pytest.raises(UnknownLanguageCodeError):
        codec.normalize_wire_code("Klingon")


def test_compose_and_split_bit_flags() -> None:
    """Verify filter composition and decomposition are inverse operations."""
    flags = codec.compose_bit_flags([Language.RUSSIAN, Language.GERMAN])

    assert flags == 9
    assert codec.languages_from_bit_flags(flags) == (Language.GERMAN, Language.RUSSIAN)
    assert codec.languages_from_bit_flags(0) == ()
    assert codec.compose_bit_flags([]) == 0


def test_languages_from_bit_flags_rejects_unassigned_bits() -> None:
    """Verify composite filters with unknown bits are rejected."""
    with pytest.raises(InvalidLanguageFlagError):
        codec.languages_from_bit_flags(codec.ALL_LANGUAGES_FLAG | (1 << 12))
    with pytest.raises(InvalidLanguageFlagError):
        codec.languages_from_bit_flags(-2)


def test_parse_language_accepts_members_wire_codes_and_names() -> None:
    """Verify user input parsing for configuration and CLI values."""
    assert codec.parse_language(Language.ENGLISH) is Language.ENGLISH
    assert codec.parse_language("Deutsch") is Language.GERMAN
    assert codec.parse_language("russian") is Language.RUSSIAN

    with pytest.raises(UnknownLanguageCodeError):
        codec.parse_language("french")


def test_display_name_comes_from_table() -> None:
    """Verify display names are read from the language table."""
    assert codec.display_name(Language.POLISH) == "Polski"
