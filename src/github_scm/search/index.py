"""Search repositories of one owner by name fragment."""

from __future__ import annotations

import logging

from github_scm.models import ApiSuccess, RemoteFailure, SearchCandidate
from github_scm.remote.base import RemoteApiPort

logger = logging.getLogger(__name__)

SEARCH_PAGE_SIZE = 30


def build_query(prefix: str, owner: str) -> str:
    """Combine the name fragment with the owner scope qualifier."""
    return f"{prefix.strip()} in:name user:{owner}"


async def find_by_prefix(
    api: RemoteApiPort,
    prefix: str,
    owner: str,
) -> list[SearchCandidate]:
    """Query ``/search/repositories`` and return the first page of matches.

    Search is a non-critical lookup: remote failures and malformed bodies
    yield an empty list rather than an error.
    """
    outcome = await api.get(
        "search/repositories",
        params={"q": build_query(prefix, owner), "per_page": SEARCH_PAGE_SIZE, "page": 1},
    )
    if not isinstance(outcome, ApiSuccess):
        failure = RemoteFailure.from_outcome(outcome)
        logger.warning(
            "Repository search for '%s' failed: %s %s", prefix, failure.kind, failure.message
        )
        return []

    body = outcome.body
    items = body.get("items") if isinstance(body, dict) else None
    if not isinstance(items, list):
        logger.warning("Repository search for '%s' returned no item list", prefix)
        return []

    candidates: list[SearchCandidate] = []
    for item in items:
        full_name = item.get("full_name") if isinstance(item, dict) else None
        if isinstance(full_name, str) and full_name:
            candidates.append(SearchCandidate(id=full_name, name=full_name))
    return candidates
