"""Fetch the contributor list of a repository."""

from __future__ import annotations

import logging

from github_scm.models import ApiSuccess, Contributor, RemoteFailure, RepositoryReference
from github_scm.remote.base import RemoteApiPort

logger = logging.getLogger(__name__)


async def list_contributors(
    api: RemoteApiPort,
    reference: RepositoryReference,
) -> list[Contributor] | RemoteFailure:
    """Fetch ``/repos/{owner}/{repo}/contributors`` in remote order.

    Entries with a missing or malformed required field are dropped;
    the rest of the list is kept. Only the first page is read.
    """
    outcome = await api.get(f"{reference.api_path}/contributors")
    if not isinstance(outcome, ApiSuccess):
        failure = RemoteFailure.from_outcome(outcome)
        logger.warning(
            "Contributors for %s unavailable: %s %s",
            reference.full_name,
            failure.kind,
            failure.message,
        )
        return failure

    # 204 No Content is GitHub's answer for an empty repository
    if outcome.body is None:
        return []
    if not isinstance(outcome.body, list):
        return RemoteFailure.decode(
            f"Expected a JSON array of contributors for {reference.full_name}",
            outcome.status,
        )

    contributors: list[Contributor] = []
    for entry in outcome.body:
        contributor = _parse_contributor(entry)
        if contributor is None:
            logger.debug("Dropping malformed contributor entry: %r", entry)
            continue
        contributors.append(contributor)
    return contributors


def _parse_contributor(entry: object) -> Contributor | None:
    if not isinstance(entry, dict):
        return None
    login = entry.get("login")
    contributions = entry.get("contributions")
    avatar_url = entry.get("avatar_url")
    if not isinstance(login, str) or not login:
        return None
    if isinstance(contributions, bool) or not isinstance(contributions, int):
        return None
    if contributions < 0 or not isinstance(avatar_url, str):
        return None
    return Contributor(login=login, contributions=contributions, avatar_url=avatar_url)
