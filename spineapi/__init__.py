"""Client library for the Spine content service."""

from spineapi.client.api import (
    get_project_info,
    get_projects,
    get_ratings,
    get_reviews,
    request_all_news,
    request_all_projects,
    request_project_info,
)
from spineapi.client.images import decode_image, load_image
from spineapi.client.init import SpineApi
from spineapi.config import DEFAULT_CONFIG, Credentials, SpineConfig, load_config_from_env, resolve_config
from spineapi.constants import Language
from spineapi.domain.models import Project, ProjectInfo
from spineapi.errors import (
    InvalidLanguageFlagError,
    MalformedCompressedStreamError,
    SpineError,
    TruncatedImageBufferError,
    UnknownLanguageCodeError,
)
from spineapi.language import from_bit_flag, from_wire_code, to_bit_flag, to_wire_code

__all__ = [
    "DEFAULT_CONFIG",
    "Credentials",
    "InvalidLanguageFlagError",
    "Language",
    "MalformedCompressedStreamError",
    "Project",
    "ProjectInfo",
    "SpineApi",
    "SpineConfig",
    "SpineError",
    "TruncatedImageBufferError",
    "UnknownLanguageCodeError",
    "decode_image",
    "from_bit_flag",
    "from_wire_code",
    "get_project_info",
    "get_projects",
    "get_ratings",
    "get_reviews",
    "load_config_from_env",
    "load_image",
    "request_all_news",
    "request_all_projects",
    "request_project_info",
    "resolve_config",
    "to_bit_flag",
    "to_wire_code",
]
