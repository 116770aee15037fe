"""Conversions between ``Language`` members, bit flags and wire codes."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from spineapi.constants import LANGUAGE_TABLE, Language
from spineapi.errors import InvalidLanguageFlagError, UnknownLanguageCodeError

_WIRE_CODES: Mapping[Language, str] = MappingProxyType(
    {language: encoding.wire_code for language, encoding in LANGUAGE_TABLE.items()}
)
_BIT_FLAGS: Mapping[Language, int] = MappingProxyType(
    {language: encoding.bit_flag for language, encoding in LANGUAGE_TABLE.items()}
)
_LANGUAGES_BY_WIRE_CODE: Mapping[str, Language] = MappingProxyType(
    {code: language for language, code in _WIRE_CODES.items()}
)
_LANGUAGES_BY_BIT_FLAG: Mapping[int, Language] = MappingProxyType(
    {flag: language for language, flag in _BIT_FLAGS.items()}
)


def _is_single_bit(value: int) -> bool:
    """Return whether ``value`` is a positive power of two."""
    return value > 0 and value & (value - 1) == 0


def _check_tables() -> None:
    """Fail at import time if the language table is not a pair of bijections."""
    missing = set(Language) - set(LANGUAGE_TABLE)
    if missing:
        raise RuntimeError(f"Languages without encoding: {sorted(m.name for m in missing)}")
    if len(_LANGUAGES_BY_WIRE_CODE) != len(_WIRE_CODES):
        raise RuntimeError("Language wire codes are not unique")
    if len(_LANGUAGES_BY_BIT_FLAG) != len(_BIT_FLAGS):
        raise RuntimeError("Language bit flags are not unique")
    for flag in _BIT_FLAGS.values():
        if not _is_single_bit(flag):
            raise RuntimeError(f"Language bit flag {flag:#x} is not a single bit")


_check_tables()

ALL_LANGUAGES_FLAG = 0
for _flag in _BIT_FLAGS.values():
    ALL_LANGUAGES_FLAG |= _flag


def to_wire_code(language: Language) -> str:
    """Return the wire code the service expects for ``language``."""
    return _WIRE_CODES[language]


def from_wire_code(code: str) -> Language:
    """
    Return the language named by a wire code.

    Raises:
        UnknownLanguageCodeError: If ``code`` is not an exact, known wire code.
    """
    try:
        return _LANGUAGES_BY_WIRE_CODE[code]
    except (KeyError, TypeError):
        raise UnknownLanguageCodeError(code) from None


def to_bit_flag(language: Language) -> int:
    """Return the single-bit flag assigned to ``language``."""
    return _BIT_FLAGS[language]


def from_bit_flag(flag: int) -> Language:
    """
    Return the language owning a single-bit flag.

    Composite filters are not accepted here; use ``languages_from_bit_flags``.

    Raises:
        InvalidLanguageFlagError: If ``flag`` is zero, not a power of two or unassigned.
    """
    if isinstance(flag, bool) or not isinstance(flag, int) or not _is_single_bit(flag):
        raise InvalidLanguageFlagError(flag)
    try:
        return _LANGUAGES_BY_BIT_FLAG[flag]
    except KeyError:
        raise InvalidLanguageFlagError(flag) from None


def normalize_wire_code(value: Language | str) -> str:
    """
    Return a wire code for either a ``Language`` or an already-encoded wire code.

    Wire codes are validated and passed through unchanged.
    """
    if isinstance(value, Language):
        return to_wire_code(value)
    return to_wire_code(from_wire_code(value))


def compose_bit_flags(languages: Iterable[Language]) -> int:
    """Combine languages into one filter value with bitwise OR."""
    flags = 0
    for language in languages:
        flags |= to_bit_flag(language)
    return flags


def languages_from_bit_flags(flags: int) -> tuple[Language, ...]:
    """
    Split a composite filter into its languages, in table order.

    Raises:
        InvalidLanguageFlagError: If ``flags`` is negative or has an unassigned bit set.
    """
    if isinstance(flags, bool) or not isinstance(flags, int) or flags < 0:
        raise InvalidLanguageFlagError(flags)
    if flags & ~ALL_LANGUAGES_FLAG:
        raise InvalidLanguageFlagError(flags)
    return tuple(language for language, flag in _BIT_FLAGS.items() if flags & flag)


def display_name(language: Language) -> str:
    """Return the human readable name of ``language``."""
    return LANGUAGE_TABLE[language].display_name


def parse_language(value: Language | str) -> Language:
    """
    Resolve user input to a ``Language``.

    Accepts a member, an exact wire code or a member name such as ``"ENGLISH"``.
    """
    if isinstance(value, Language):
        return value
    if value in _LANGUAGES_BY_WIRE_CODE:
        return _LANGUAGES_BY_WIRE_CODE[value]
    try:
        return Language[value.upper()]
    except (KeyError, AttributeError):
        raise UnknownLanguageCodeError(value) from None
