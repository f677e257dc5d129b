"""Port: GitHub REST API client."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from github_scm.models import ApiOutcome


class RemoteApiPort(Protocol):
    """Port for issuing GET requests against the configured GitHub API."""

    async def get(
        self,
        path: str,
        params: Mapping[str, str | int] | None = None,
    ) -> ApiOutcome:
        """GET a path relative to the API base URL and classify the outcome."""
        ...
