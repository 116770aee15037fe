"""One function per remote Spine operation.

Every function resolves ``config`` onto ``base``, builds its JSON body,
performs exactly one request and returns the decoded body unmodified.
Transport and JSON errors propagate from ``requests`` as raised.
"""

from __future__ import annotations

import logging
from typing import Any

from spineapi.client.transport import Timeout, build_url, default_headers, session_scope
from spineapi.config import DEFAULT_CONFIG, ConfigOverride, SpineConfig, resolve_config
from spineapi.constants import DEFAULT_TIMEOUT, Endpoint
from spineapi.domain.mapping import build_project_info, build_projects
from spineapi.domain.models import Project, ProjectInfo
from spineapi.domain.requests import (
    ProjectId,
    ProjectIdDto,
    RequestAllNewsDto,
    RequestAllProjectsDto,
    RequestProjectInfoDto,
)
from spineapi.types import (
    GetRatingsResponse,
    GetReviewsResponse,
    RawProjectInfo,
    RequestAllNewsResponse,
    RequestAllProjectsResponse,
    SessionLike,
)

log = logging.getLogger(__name__)


def _post(
    config: SpineConfig,
    endpoint: Endpoint,
    payload: dict[str, object],
    session: SessionLike | None,
    timeout: Timeout,
) -> Any:
    """POST ``payload`` to ``endpoint`` and return the decoded JSON body."""
    url = build_url(config.server_url, endpoint.value)
    log.debug("POST %s with fields %s", url, sorted(payload))
    with session_scope(session) as active:
        response = active.post(url, json=payload, headers=default_headers(), timeout=timeout)
        response.raise_for_status()
        return response.json()


def request_all_projects(
    *,
    config: ConfigOverride | None = None,
    base: SpineConfig = DEFAULT_CONFIG,
    session: SessionLike | None = None,
    timeout: Timeout = DEFAULT_TIMEOUT,
) -> RequestAllProjectsResponse:
    """Fetch the raw catalog: projects, packages and optionally played projects."""
    effective = resolve_config(base, config)
    dto = RequestAllProjectsDto(
        username=effective.credentials.username,
        password=effective.credentials.password,
        language=effective.language,
    )
    return _post(effective, Endpoint.ALL_PROJECTS, dto.as_payload(), session, timeout)


def get_projects(
    *,
    config: ConfigOverride | None = None,
    base: SpineConfig = DEFAULT_CONFIG,
    session: SessionLike | None = None,
    timeout: Timeout = DEFAULT_TIMEOUT,
) -> list[Project]:
    """Fetch the catalog and attach packages and played state to each project."""
    response = request_all_projects(config=config, base=base, session=session, timeout=timeout)
    return build_projects(response)


def request_project_info(
    project_id: ProjectId,
    *,
    config: ConfigOverride | None = None,
    base: SpineConfig = DEFAULT_CONFIG,
    session: SessionLike | None = None,
    timeout: Timeout = DEFAULT_TIMEOUT,
) -> RawProjectInfo:
    """Fetch the raw info page of one project."""
    effective = resolve_config(base, config)
    dto = RequestProjectInfoDto(
        project_id=project_id,
        username=effective.credentials.username,
        password=effective.credentials.password,
        language=effective.language,
    )
    return _post(effective, Endpoint.PROJECT_INFO, dto.as_payload(), session, timeout)


def get_project_info(
    project_id: ProjectId,
    *,
    config: ConfigOverride | None = None,
    base: SpineConfig = DEFAULT_CONFIG,
    session: SessionLike | None = None,
    timeout: Timeout = DEFAULT_TIMEOUT,
) -> ProjectInfo:
    """Fetch the info page of one project as a ``ProjectInfo``."""
    raw = request_project_info(project_id, config=config, base=base, session=session, timeout=timeout)
    return build_project_info(raw)


def request_all_news(
    *,
    config: ConfigOverride | None = None,
    base: SpineConfig = DEFAULT_CONFIG,
    session: SessionLike | None = None,
    timeout: Timeout = DEFAULT_TIMEOUT,
) -> RequestAllNewsResponse:
    """Fetch the news feed in the configured language."""
    effective = resolve_config(base, config)
    dto = RequestAllNewsDto(language=effective.language)
    return _post(effective, Endpoint.ALL_NEWS, dto.as_payload(), session, timeout)


def get_ratings(
    project_id: ProjectId,
    *,
    config: ConfigOverride | None = None,
    base: SpineConfig = DEFAULT_CONFIG,
    session: SessionLike | None = None,
    timeout: Timeout = DEFAULT_TIMEOUT,
) -> GetRatingsResponse:
    """Fetch the ratings of one project."""
    effective = resolve_config(base, config)
    return _post(effective, Endpoint.RATINGS, ProjectIdDto(project_id).as_payload(), session, timeout)


def get_reviews(
    project_id: ProjectId,
    *,
    config: ConfigOverride | None = None,
    base: SpineConfig = DEFAULT_CONFIG,
    session: SessionLike | None = None,
    timeout: Timeout = DEFAULT_TIMEOUT,
) -> GetReviewsResponse:
    """Fetch the reviews of one project."""
    effective = resolve_config(base, config)
    return _post(effective, Endpoint.REVIEWS, ProjectIdDto(project_id).as_payload(), session, timeout)
