"""HTTP client for the GitHub REST API.

API docs: https://docs.github.com/en/rest
Base URL is per-deployment (GitHub.com or a GitHub Enterprise ``/api/v3``).
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping

import httpx

from github_scm.models import (
    ApiClientError,
    ApiDecodeError,
    ApiNetworkError,
    ApiOutcome,
    ApiServerError,
    ApiSuccess,
)

logger = logging.getLogger(__name__)

_ACCEPT = "application/vnd.github+json"


class GithubApiClient:
    """Async GET-only client bound to one base URL and optional token.

    Every call returns one of the ``ApiOutcome`` variants -- transport
    exceptions never escape. There is no retry: the caller decides
    whether a failure is recoverable.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        *,
        auth_key: str | None = None,
    ) -> None:
        self._http = http_client
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self._headers = {"Accept": _ACCEPT}
        if auth_key:
            self._headers["Authorization"] = f"Bearer {auth_key}"

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path.lstrip('/')}"

    async def get(
        self,
        path: str,
        params: Mapping[str, str | int] | None = None,
    ) -> ApiOutcome:
        url = self.url_for(path)
        try:
            response = await self._http.get(url, params=params, headers=self._headers)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("GitHub API unreachable for %s: %s", url, exc)
            return ApiNetworkError(message=f"{type(exc).__name__}: {exc}")

        return classify_response(response)


def classify_response(response: httpx.Response) -> ApiOutcome:
    """Map an HTTP response onto the closed set of outcome variants."""
    status = response.status_code
    if 200 <= status < 300:
        if not response.content:
            return ApiSuccess(status=status, body=None)
        try:
            return ApiSuccess(status=status, body=response.json())
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            return ApiDecodeError(status=status, message=f"Invalid JSON body: {exc}")

    message = _error_message(response)
    if 400 <= status < 500:
        return ApiClientError(status=status, message=message)
    return ApiServerError(status=status, message=message)


def _error_message(response: httpx.Response) -> str:
    """Extract GitHub's ``message`` field, falling back to the reason phrase."""
    try:
        data = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        data = None
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    return f"HTTP {response.status_code} {response.reason_phrase}".strip()
