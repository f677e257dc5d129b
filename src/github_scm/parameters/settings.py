"""Resolve the typed settings of one call from raw parameter bags.

Every public operation resolves its settings once, at entry, so the rest
of the core never looks up raw string keys.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from github_scm.errors import InvalidReferenceError, ValidationFailure
from github_scm.models import RepositoryReference
from github_scm.parameters.base import ConfigurationPort
from github_scm.parameters.keys import (
    CODE_REPOSITORY,
    CODE_REQUIRED,
    CONF_API_URL,
    DEFAULT_API_URL,
    PARAMETER_AUTH_KEY,
    PARAMETER_REPOSITORY,
    PARAMETER_USER,
)


@dataclass(frozen=True, slots=True)
class GithubSettings:
    api_url: str
    reference: RepositoryReference
    user: str | None = None
    auth_key: str | None = None


def resolve_api_url(configuration: ConfigurationPort) -> str:
    return configuration.get(CONF_API_URL) or DEFAULT_API_URL


def resolve_settings(
    parameters: Mapping[str, str],
    configuration: ConfigurationPort,
) -> GithubSettings:
    """Build the settings of a subscription-scoped call.

    Raises:
        ValidationFailure: If the repository parameter is missing or
            does not resolve to an owner/repo pair.
    """
    user = _optional(parameters, PARAMETER_USER)
    raw_repository = _optional(parameters, PARAMETER_REPOSITORY)
    if raw_repository is None:
        raise ValidationFailure(
            PARAMETER_REPOSITORY,
            CODE_REQUIRED,
            f"Parameter '{PARAMETER_REPOSITORY}' is required.",
        )
    try:
        reference = RepositoryReference.parse(raw_repository, default_owner=user)
    except InvalidReferenceError as exc:
        raise ValidationFailure(PARAMETER_REPOSITORY, CODE_REPOSITORY, str(exc)) from exc

    return GithubSettings(
        api_url=resolve_api_url(configuration),
        reference=reference,
        user=user,
        auth_key=resolve_auth_key(parameters),
    )


def resolve_login(parameters: Mapping[str, str]) -> str:
    """Return the login used by the liveness probe.

    The ``user`` parameter wins; otherwise the owner of an ``owner/repo``
    repository parameter is used.

    Raises:
        ValidationFailure: If neither yields a login, or the repository
            parameter is malformed.
    """
    user = _optional(parameters, PARAMETER_USER)
    if user:
        return user
    raw_repository = _optional(parameters, PARAMETER_REPOSITORY)
    if raw_repository:
        try:
            return RepositoryReference.parse(raw_repository).owner
        except InvalidReferenceError as exc:
            raise ValidationFailure(PARAMETER_REPOSITORY, CODE_REPOSITORY, str(exc)) from exc
    raise ValidationFailure(
        PARAMETER_USER,
        CODE_REQUIRED,
        f"Parameter '{PARAMETER_USER}' is required to check the GitHub service.",
    )


def resolve_auth_key(parameters: Mapping[str, str]) -> str | None:
    """Return the stripped auth key, or None when blank or absent."""
    return _optional(parameters, PARAMETER_AUTH_KEY)


def resolve_owner(parameters: Mapping[str, str], node: str) -> str:
    """Return the owner that scopes a node's repository search.

    Raises:
        ValidationFailure: If the node has no ``user`` parameter.
    """
    owner = _optional(parameters, PARAMETER_USER)
    if owner is None:
        raise ValidationFailure(
            PARAMETER_USER,
            CODE_REQUIRED,
            f"Node '{node}' has no '{PARAMETER_USER}' parameter to scope the search.",
        )
    return owner


def _optional(parameters: Mapping[str, str], key: str) -> str | None:
    value = parameters.get(key)
    if value is None:
        return None
    text = str(value).strip()
    return text or None
