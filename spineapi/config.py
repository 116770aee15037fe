"""Immutable client configuration and per-call override resolution."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Mapping

from dotenv import load_dotenv

from spineapi.constants import DEFAULT_LANGUAGE, DEFAULT_SERVER_URL, Language
from spineapi.language import parse_language

# Load environment variables from .env file
load_dotenv()

ENV_SERVER_URL = "SPINE_SERVER_URL"
ENV_USERNAME = "SPINE_USERNAME"
ENV_PASSWORD = "SPINE_PASSWORD"
ENV_LANGUAGE = "SPINE_LANGUAGE"


@dataclass(frozen=True, slots=True)
class Credentials:
    """Static account credentials sent in request bodies."""

    username: str = ""
    password: str = field(default="", repr=False)


@dataclass(frozen=True, slots=True)
class SpineConfig:
    """Fully resolved configuration for one call."""

    server_url: str = DEFAULT_SERVER_URL
    credentials: Credentials = field(default_factory=Credentials)
    language: Language = DEFAULT_LANGUAGE


DEFAULT_CONFIG = SpineConfig()

ConfigOverride = Mapping[str, Any] | SpineConfig


def _as_mapping(override: ConfigOverride) -> Mapping[str, Any]:
    """Return the override as a field-name mapping."""
    if isinstance(override, SpineConfig):
        return {
            "server_url": override.server_url,
            "credentials": override.credentials,
            "language": override.language,
        }
    return override


def _resolve_credentials(base: Credentials, override: Credentials | Mapping[str, Any]) -> Credentials:
    """Merge a full or partial credentials override onto ``base``."""
    if isinstance(override, Credentials):
        return Credentials(username=override.username, password=override.password)
    return Credentials(
        username=override.get("username", base.username),
        password=override.get("password", base.password),
    )


def resolve_config(
    base: SpineConfig = DEFAULT_CONFIG,
    override: ConfigOverride | None = None,
    **fields: Any,
) -> SpineConfig:
    """
    Merge a partial override onto ``base`` and return a new configuration.

    Present keys replace the base value, absent keys keep it. ``credentials``
    is merged one level deep so ``{"credentials": {"username": "u"}}`` keeps
    the base password. Unknown keys are ignored. Keyword arguments are applied
    after ``override``. Neither input is modified.

    Parameters:
        base (SpineConfig): Configuration supplying every value not overridden.
        override (Mapping | SpineConfig | None): Partial or complete override.

    Returns:
        SpineConfig: A freshly built configuration.
    """
    merged: dict[str, Any] = {}
    for source in (override, fields):
        if source:
            merged.update(_as_mapping(source))

    credentials = base.credentials
    if merged.get("credentials") is not None:
        credentials = _resolve_credentials(base.credentials, merged["credentials"])

    return SpineConfig(
        server_url=merged.get("server_url", base.server_url),
        credentials=Credentials(username=credentials.username, password=credentials.password),
        language=merged.get("language", base.language),
    )


def load_config_from_env(
    environ: Mapping[str, str] | None = None,
    base: SpineConfig = DEFAULT_CONFIG,
) -> SpineConfig:
    """
    Build a configuration from ``SPINE_*`` environment variables.

    Unset variables keep the value from ``base``. ``SPINE_LANGUAGE`` accepts
    a wire code or a language name.

    Raises:
        UnknownLanguageCodeError: If ``SPINE_LANGUAGE`` names no language.
    """
    env = os.environ if environ is None else environ
    override: dict[str, Any] = {}
    credentials: dict[str, str] = {}

    if env.get(ENV_SERVER_URL):
        override["server_url"] = env[ENV_SERVER_URL]
    if ENV_USERNAME in env:
        credentials["username"] = env[ENV_USERNAME]
    if ENV_PASSWORD in env:
        credentials["password"] = env[ENV_PASSWORD]
    if credentials:
        override["credentials"] = credentials
    if env.get(ENV_LANGUAGE):
        override["language"] = parse_language(env[ENV_LANGUAGE])

    return resolve_config(base, override)
