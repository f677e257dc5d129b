"""Resolve a repository reference into its detail counters."""

from __future__ import annotations

import logging

from github_scm.models import (
    ApiClientError,
    ApiSuccess,
    RemoteFailure,
    RepositoryDetail,
    RepositoryNotFound,
    RepositoryReference,
)
from github_scm.remote.base import RemoteApiPort

logger = logging.getLogger(__name__)


async def resolve_detail(
    api: RemoteApiPort,
    reference: RepositoryReference,
) -> RepositoryDetail | RepositoryNotFound | RemoteFailure:
    """Fetch ``/repos/{owner}/{repo}`` and extract watcher, star and issue counts.

    Any 4xx maps to RepositoryNotFound. Missing counters default to zero;
    a body that is not an object, or a counter that is not a non-negative
    integer, is a decode failure.
    """
    outcome = await api.get(reference.api_path)

    if isinstance(outcome, ApiClientError):
        logger.info(
            "Repository %s not found (HTTP %d)", reference.full_name, outcome.status
        )
        return RepositoryNotFound(reference=reference, status=outcome.status)
    if not isinstance(outcome, ApiSuccess):
        failure = RemoteFailure.from_outcome(outcome)
        logger.warning(
            "Repository detail for %s failed: %s %s",
            reference.full_name,
            failure.kind,
            failure.message,
        )
        return failure

    body = outcome.body
    if not isinstance(body, dict):
        return RemoteFailure.decode(
            f"Expected a JSON object for {reference.full_name}, got {type(body).__name__}",
            outcome.status,
        )

    try:
        return RepositoryDetail(
            watchers=_count(body, "watchers_count"),
            stars=_count(body, "stargazers_count"),
            open_issues=_count(body, "open_issues_count"),
        )
    except ValueError as exc:
        return RemoteFailure.decode(str(exc), outcome.status)


async def check_exists(api: RemoteApiPort, reference: RepositoryReference) -> bool:
    """Return True iff the repository detail can be resolved."""
    return isinstance(await resolve_detail(api, reference), RepositoryDetail)


def _count(body: dict, key: str) -> int:
    value = body.get(key)
    if value is None:
        return 0
    # bool is an int subclass -- a boolean counter is malformed
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"Field '{key}' is not a non-negative integer: {value!r}")
    return value
