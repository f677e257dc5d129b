"""link_subscription tool -- validate a subscription's repository before binding."""

from __future__ import annotations

from mcp.server.fastmcp import Context

from github_scm.errors import GithubScmError
from github_scm.tools._helpers import error_result, get_context


async def link_subscription(subscription: int, ctx: Context) -> dict[str, object]:
    """Validate that the repository configured on a subscription exists on GitHub.

    Nothing is written to GitHub. A missing repository is reported with the
    offending parameter and the ``github-repository`` rule.

    Args:
        subscription: Identifier of the subscription to validate.
    """
    try:
        app = get_context(ctx)
        await app.plugin.link(subscription)
        return {"success": True, "subscription": subscription}
    except GithubScmError as exc:
        return error_result(exc)
    except Exception as exc:
        await ctx.error(f"Unexpected error in link_subscription: {exc}")
        return {"success": False, "error": f"Internal error: {type(exc).__name__}"}
