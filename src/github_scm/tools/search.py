"""find_repos_by_name tool -- repository lookup scoped to a node's owner."""

from __future__ import annotations

from dataclasses import asdict

from mcp.server.fastmcp import Context

from github_scm.errors import GithubScmError
from github_scm.tools._helpers import error_result, get_context


async def find_repos_by_name(node: str, criteria: str, ctx: Context) -> dict[str, object]:
    """Find repositories whose name contains ``criteria``.

    Only the first page of GitHub's search results is returned, in
    GitHub's order. No match is an empty list, not an error.

    Args:
        node: Node whose ``user`` parameter scopes the search.
        criteria: Name fragment, e.g. ``"plugin-"``.
    """
    try:
        app = get_context(ctx)
        candidates = await app.plugin.find_repos_by_name(node, criteria)
        return {
            "success": True,
            "total": len(candidates),
            "repositories": [asdict(c) for c in candidates],
        }
    except GithubScmError as exc:
        return error_result(exc)
    except Exception as exc:
        await ctx.error(f"Unexpected error in find_repos_by_name: {exc}")
        return {"success": False, "error": f"Internal error: {type(exc).__name__}"}
