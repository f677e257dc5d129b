"""github-scm: bind project subscriptions to GitHub repositories and report their status."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _distribution_version

_LOCAL_VERSION_FALLBACK = "0.0.0+local"


def _resolve_version() -> str:
    """Resolve package version from installed metadata with deterministic fallback."""
    try:
        return _distribution_version("github-scm-plugin")
    except PackageNotFoundError:
        return _LOCAL_VERSION_FALLBACK


__version__ = _resolve_version()


def main() -> None:
    """Entry point for `github-scm` CLI."""
    from github_scm.server import mcp

    mcp.run(transport="stdio")
