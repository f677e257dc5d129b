"""GithubScmPlugin -- binds subscriptions to GitHub repositories and reports their status."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import quote as urlquote

import httpx

from github_scm.errors import RemoteUnavailableError, ValidationFailure
from github_scm.models import (
    ApiDecodeError,
    ApiOutcome,
    ApiSuccess,
    RemoteFailure,
    RepositoryDetail,
    RepositoryNotFound,
    SearchCandidate,
    StatusSnapshot,
)
from github_scm.parameters.base import ConfigurationPort, ParameterStorePort
from github_scm.parameters.keys import CODE_REPOSITORY, KEY, PARAMETER_REPOSITORY
from github_scm.parameters.settings import (
    GithubSettings,
    resolve_api_url,
    resolve_auth_key,
    resolve_login,
    resolve_owner,
    resolve_settings,
)
from github_scm.remote.client import GithubApiClient
from github_scm.repository.contributors import list_contributors
from github_scm.repository.resolver import check_exists, resolve_detail
from github_scm.search.index import find_by_prefix

logger = logging.getLogger(__name__)


@dataclass
class GithubScmPlugin:
    """Status orchestrator for the ``service:scm:github`` service.

    Stateless between calls: every operation resolves its parameters at
    entry and builds a fresh API client bound to the configured base URL.

    Args:
        http: Shared transport; owns timeouts and connection pooling.
        parameters: Source of subscription and node parameter bags.
        configuration: Source of global configuration (API base URL).
    """

    http: httpx.AsyncClient
    parameters: ParameterStorePort
    configuration: ConfigurationPort

    @property
    def key(self) -> str:
        return KEY

    async def get_version(self, parameters: Mapping[str, str]) -> str | None:
        """A repository binding carries no tool version."""
        return None

    async def get_last_version(self) -> str | None:
        return None

    # ── Liveness ──────────────────────────────────────────────

    async def check_status(self, parameters: Mapping[str, str]) -> bool:
        """Probe ``/users/{login}`` with the configured credentials.

        Returns False when the service is unreachable or answers with an
        error status. Raises ValidationFailure only when no login can be
        resolved from the parameters.
        """
        login = resolve_login(parameters)
        api = GithubApiClient(
            self.http,
            resolve_api_url(self.configuration),
            auth_key=resolve_auth_key(parameters),
        )
        outcome = await api.get(f"users/{urlquote(login, safe='')}")
        up = _is_up(outcome)
        if not up:
            logger.warning("GitHub liveness probe for '%s' failed: %r", login, outcome)
        return up

    # ── Link-time validation ──────────────────────────────────

    async def check_exists(self, parameters: Mapping[str, str]) -> bool:
        """Return True iff the configured repository resolves on the remote."""
        settings = resolve_settings(parameters, self.configuration)
        return await check_exists(self._api(settings), settings.reference)

    async def link(self, subscription: int) -> None:
        """Validate the repository of a subscription before it is bound.

        Raises:
            ValidationFailure: If the repository parameter is missing,
                malformed, or reported absent by the remote.
            RemoteUnavailableError: If the remote could not answer.
        """
        settings = resolve_settings(
            self.parameters.get_subscription_parameters(subscription),
            self.configuration,
        )
        detail = await resolve_detail(self._api(settings), settings.reference)
        if isinstance(detail, RepositoryNotFound):
            raise ValidationFailure(
                PARAMETER_REPOSITORY,
                CODE_REPOSITORY,
                f"Repository '{settings.reference.full_name}' not found.",
            )
        if isinstance(detail, RemoteFailure):
            raise RemoteUnavailableError(
                f"Cannot verify repository '{settings.reference.full_name}': "
                f"{detail.kind} {detail.message}".strip(),
                kind=detail.kind,
                status=detail.status,
            )
        logger.info(
            "Subscription %s linked to %s", subscription, settings.reference.full_name
        )

    # ── Status snapshot ───────────────────────────────────────

    async def check_subscription_status(self, parameters: Mapping[str, str]) -> StatusSnapshot:
        """Aggregate repository detail and contributors into one snapshot.

        Detail is fetched first and decides ``up``. Contributors are fetched
        only after a successful detail; their failure leaves ``contribs``
        empty without bringing the snapshot down.
        """
        settings = resolve_settings(parameters, self.configuration)
        api = self._api(settings)

        detail = await resolve_detail(api, settings.reference)
        if not isinstance(detail, RepositoryDetail):
            return StatusSnapshot(up=False, detail_failure=detail)

        contributors = await list_contributors(api, settings.reference)
        contributors_failure = None
        if not isinstance(contributors, list):
            contributors_failure = contributors
            contributors = []

        return StatusSnapshot(
            up=True,
            data={
                "watchers": detail.watchers,
                "stars": detail.stars,
                "issues": detail.open_issues,
                "contribs": contributors,
            },
            contributors_failure=contributors_failure,
        )

    # ── Search ────────────────────────────────────────────────

    async def find_repos_by_name(self, node: str, criteria: str) -> list[SearchCandidate]:
        """Search the repositories of the node's owner whose name matches ``criteria``."""
        node_parameters = self.parameters.get_node_parameters(node)
        owner = resolve_owner(node_parameters, node)
        api = GithubApiClient(
            self.http,
            resolve_api_url(self.configuration),
            auth_key=resolve_auth_key(node_parameters),
        )
        return await find_by_prefix(api, criteria, owner)

    def _api(self, settings: GithubSettings) -> GithubApiClient:
        return GithubApiClient(self.http, settings.api_url, auth_key=settings.auth_key)


def _is_up(outcome: ApiOutcome) -> bool:
    """A 2xx answers the probe even when its body does not decode."""
    return isinstance(outcome, (ApiSuccess, ApiDecodeError))
