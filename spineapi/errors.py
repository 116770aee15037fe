"""Domain-specific exceptions raised by spineapi runtime components."""

from __future__ import annotations


class SpineError(Exception):
    """Base exception for spineapi-specific failures."""


class LanguageEncodingError(SpineError):
    """Base exception for failed language conversions."""


class UnknownLanguageCodeError(LanguageEncodingError):
    """Raised when a wire code does not name any supported language."""

    def __init__(self, code: object) -> None:
        super().__init__(f"Unknown language code: {code!r}")
        self.code = code


class InvalidLanguageFlagError(LanguageEncodingError):
    """Raised when an integer is not the bit flag of exactly one language."""

    def __init__(self, flag: object) -> None:
        super().__init__(f"Invalid language flag: {flag!r}")
        self.flag = flag


class ImageDecodeError(SpineError):
    """Base exception for preview images that cannot be decoded."""


class TruncatedImageBufferError(ImageDecodeError):
    """Raised when an image buffer is shorter than its fixed header."""


class MalformedCompressedStreamError(ImageDecodeError):
    """Raised when an image payload is not a valid raw DEFLATE stream."""
