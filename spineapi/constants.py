from dataclasses import dataclass
from enum import Enum


class Language(Enum):
    """Represents supported languages."""
    GERMAN = "german"
    ENGLISH = "english"
    POLISH = "polish"
    RUSSIAN = "russian"


@dataclass(frozen=True)
class LanguageEncoding:
    """Every representation of one language known to the service."""

    wire_code: str
    bit_flag: int
    display_name: str


# Single source of truth; wire code and bit flag lookups are derived from it.
LANGUAGE_TABLE: dict[Language, LanguageEncoding] = {
    Language.GERMAN: LanguageEncoding(wire_code="Deutsch", bit_flag=1 << 0, display_name="Deutsch"),
    Language.ENGLISH: LanguageEncoding(wire_code="English", bit_flag=1 << 1, display_name="English"),
    Language.POLISH: LanguageEncoding(wire_code="Polish", bit_flag=1 << 2, display_name="Polski"),
    Language.RUSSIAN: LanguageEncoding(wire_code="Russian", bit_flag=1 << 3, display_name="Русский"),
}

DEFAULT_SERVER_URL = "https://clockwork-origins.com:19181"
DEFAULT_LANGUAGE = Language.GERMAN
# (connect, read) seconds
DEFAULT_TIMEOUT = (5.0, 30.0)
USER_AGENT = "spineapi/{version}"

# Format assumption: preview images carry a 2-byte marker ahead of the raw
# DEFLATE stream. It is dropped unread; a fixture test pins this layout.
IMAGE_HEADER_SIZE = 2


class Endpoint(str, Enum):
    """Remote operation paths relative to the configured server URL."""
    ALL_PROJECTS = "requestAllProjects"
    PROJECT_INFO = "requestInfoPage"
    ALL_NEWS = "requestAllNews"
    RATINGS = "getRatings"
    REVIEWS = "getReviews"
