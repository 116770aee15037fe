from __future__ import annotations

from typing import Any

from spineapi.client import api, images
from spineapi.client.transport import Timeout
from spineapi.config import DEFAULT_CONFIG, ConfigOverride, SpineConfig, resolve_config
from spineapi.constants import DEFAULT_TIMEOUT
from spineapi.domain.models import Project, ProjectInfo
from spineapi.domain.requests import ProjectId
from spineapi.types import (
    GetRatingsResponse,
    GetReviewsResponse,
    RawProjectInfo,
    RequestAllNewsResponse,
    RequestAllProjectsResponse,
    SessionLike,
)


class SpineApi:
    """
    Convenience client bound to one resolved configuration.

    Every method delegates to the module-level functions in
    ``spineapi.client.api`` and ``spineapi.client.images`` with the stored
    configuration. The optional session is shared by all calls and is never
    closed by the client.
    """

    def __init__(
        self,
        config: ConfigOverride | None = None,
        *,
        session: SessionLike | None = None,
        timeout: Timeout = DEFAULT_TIMEOUT,
    ) -> None:
        self.config: SpineConfig = resolve_config(DEFAULT_CONFIG, config)
        self.session = session
        self.timeout = timeout

    def with_config(self, override: ConfigOverride | None = None, **fields: Any) -> SpineApi:
        """Return a new client whose configuration is resolved on top of this one."""
        client = SpineApi(session=self.session, timeout=self.timeout)
        client.config = resolve_config(self.config, override, **fields)
        return client

    def _call_options(self) -> dict[str, Any]:
        return {"base": self.config, "session": self.session, "timeout": self.timeout}

    def request_all_projects(self) -> RequestAllProjectsResponse:
        return api.request_all_projects(**self._call_options())

    def get_projects(self) -> list[Project]:
        return api.get_projects(**self._call_options())

    def request_project_info(self, project_id: ProjectId) -> RawProjectInfo:
        return api.request_project_info(project_id, **self._call_options())

    def get_project_info(self, project_id: ProjectId) -> ProjectInfo:
        return api.get_project_info(project_id, **self._call_options())

    def request_all_news(self) -> RequestAllNewsResponse:
        return api.request_all_news(**self._call_options())

    def get_ratings(self, project_id: ProjectId) -> GetRatingsResponse:
        return api.get_ratings(project_id, **self._call_options())

    def get_reviews(self, project_id: ProjectId) -> GetReviewsResponse:
        return api.get_reviews(project_id, **self._call_options())

    def load_image(self, url: str) -> bytes:
        return images.load_image(url, session=self.session, timeout=self.timeout)
