"""Exception hierarchy for github-scm.

All exceptions inherit from GithubScmError (single catch point).
Remote failures are not exceptions: they travel as outcome values
(see ``github_scm.models``) and are never raised across the core boundary.
"""

from __future__ import annotations


class GithubScmError(Exception):
    """Base exception for all github-scm errors."""


class ValidationFailure(GithubScmError):
    """A business rule was violated by a configured parameter.

    Carries the offending parameter key and a stable error code so the
    caller can localize the message.
    """

    def __init__(self, parameter: str, code: str, message: str = "") -> None:
        self.parameter = parameter
        self.code = code
        super().__init__(message or f"Invalid value for '{parameter}': {code}")

    def to_dict(self) -> dict[str, object]:
        return {"errors": {self.parameter: [{"rule": self.code}]}}


class RemoteUnavailableError(GithubScmError):
    """The remote could not confirm or deny a repository (unreachable, 5xx, bad body).

    Never a validation failure: it reflects a transient external condition,
    not a configuration mistake.
    """

    def __init__(self, message: str, kind: str = "", status: int | None = None) -> None:
        self.kind = kind
        self.status = status
        super().__init__(message)


class InvalidReferenceError(ValueError):
    """A repository identifier does not split into owner and name."""


class ParameterStoreError(GithubScmError):
    """Error reading subscription or node parameters."""


class SubscriptionNotFoundError(ParameterStoreError):
    """Subscription id not found in the parameter store."""


class NodeNotFoundError(ParameterStoreError):
    """Node id not found in the parameter store."""
