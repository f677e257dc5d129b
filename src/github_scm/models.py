"""Domain models for github-scm. Frozen dataclasses, except the per-call status snapshot."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import StrEnum
from urllib.parse import quote as urlquote

from github_scm.errors import InvalidReferenceError

# ─── Remote outcomes ──────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ApiSuccess:
    """A 2xx response with its decoded JSON body (None for an empty body)."""

    status: int
    body: object = None


@dataclass(frozen=True, slots=True)
class ApiClientError:
    """A 4xx response."""

    status: int
    message: str = ""


@dataclass(frozen=True, slots=True)
class ApiServerError:
    """A 5xx (or otherwise unexpected non-2xx) response."""

    status: int
    message: str = ""


@dataclass(frozen=True, slots=True)
class ApiNetworkError:
    """No response at all: connection refused, timeout, protocol error."""

    message: str = ""


@dataclass(frozen=True, slots=True)
class ApiDecodeError:
    """A 2xx response whose body is not valid JSON."""

    status: int
    message: str = ""


ApiOutcome = ApiSuccess | ApiClientError | ApiServerError | ApiNetworkError | ApiDecodeError


class FailureKind(StrEnum):
    UNREACHABLE = "remote-unreachable"
    CLIENT_ERROR = "remote-client-error"
    SERVER_ERROR = "remote-server-error"
    DECODE_ERROR = "decode-error"


@dataclass(frozen=True, slots=True)
class RemoteFailure:
    """A normalized failed remote call, as seen by the orchestrator."""

    kind: FailureKind
    message: str = ""
    status: int | None = None

    @classmethod
    def from_outcome(cls, outcome: ApiOutcome) -> RemoteFailure:
        if isinstance(outcome, ApiNetworkError):
            return cls(kind=FailureKind.UNREACHABLE, message=outcome.message)
        if isinstance(outcome, ApiClientError):
            return cls(FailureKind.CLIENT_ERROR, outcome.message, outcome.status)
        if isinstance(outcome, ApiDecodeError):
            return cls(FailureKind.DECODE_ERROR, outcome.message, outcome.status)
        if isinstance(outcome, ApiServerError):
            return cls(FailureKind.SERVER_ERROR, outcome.message, outcome.status)
        msg = f"Cannot build a failure from a successful outcome (HTTP {outcome.status})"
        raise TypeError(msg)

    @classmethod
    def decode(cls, message: str, status: int | None = None) -> RemoteFailure:
        return cls(kind=FailureKind.DECODE_ERROR, message=message, status=status)


# ─── Repository Models ────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class RepositoryReference:
    """The owner/repo pair identifying a single remote repository."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def api_path(self) -> str:
        """The ``repos/{owner}/{repo}`` path with both segments URL-encoded."""
        return f"repos/{urlquote(self.owner, safe='')}/{urlquote(self.name, safe='')}"

    @classmethod
    def parse(cls, value: str, default_owner: str | None = None) -> RepositoryReference:
        """Parse an ``owner/repo`` identifier.

        A bare ``repo`` is accepted when ``default_owner`` is given, so a
        subscription can store the owner in its own parameter. Segments are
        limited to the characters GitHub allows in names.

        Raises:
            InvalidReferenceError: If the value does not resolve to exactly
                two valid segments.
        """
        text = (value or "").strip()
        if "/" not in text:
            segments = [(default_owner or "").strip(), text]
        else:
            segments = [segment.strip() for segment in text.split("/")]
        if len(segments) != 2 or not all(_is_valid_segment(s) for s in segments):
            raise InvalidReferenceError(f"Invalid repository reference: {value!r}")
        return cls(owner=segments[0], name=segments[1])


_SEGMENT_RE = re.compile(r"[A-Za-z0-9._-]+")


def _is_valid_segment(segment: str) -> bool:
    return bool(_SEGMENT_RE.fullmatch(segment)) and segment not in (".", "..")


@dataclass(frozen=True, slots=True)
class RepositoryDetail:
    """Counters read from a repository detail response."""

    watchers: int = 0
    stars: int = 0
    open_issues: int = 0


@dataclass(frozen=True, slots=True)
class RepositoryNotFound:
    """The remote reported the repository as absent (any 4xx)."""

    reference: RepositoryReference
    status: int = 404


@dataclass(frozen=True, slots=True)
class Contributor:
    login: str
    contributions: int
    avatar_url: str


@dataclass(frozen=True, slots=True)
class SearchCandidate:
    """A repository returned by a name search."""

    id: str
    name: str


# ─── Status Models ────────────────────────────────────────────


@dataclass(slots=True)
class StatusSnapshot:
    """Aggregated point-in-time status of a subscription.

    Built once per call and not frozen: ``data`` is a plain dict.

    ``data`` holds ``watchers``, ``stars``, ``issues`` and ``contribs`` when
    ``up`` is True, and nothing otherwise. The failure fields record which
    sub-fetch failed.
    """

    up: bool
    data: dict[str, object] = field(default_factory=dict)
    detail_failure: RemoteFailure | RepositoryNotFound | None = None
    contributors_failure: RemoteFailure | None = None
