"""check_status and check_subscription_status tools."""

from __future__ import annotations

from dataclasses import asdict

from mcp.server.fastmcp import Context

from github_scm.errors import GithubScmError
from github_scm.tools._helpers import error_result, get_context


async def check_status(subscription: int, ctx: Context) -> dict[str, object]:
    """Check that the GitHub API answers with the subscription's credentials.

    Probes the user/organization profile of the subscription. A down
    service is a normal answer (``up=False``), not an error.

    Args:
        subscription: Identifier of the subscription to probe.

    Returns:
        ``{"success": True, "subscription": ..., "up": bool}``.
    """
    try:
        app = get_context(ctx)
        parameters = app.parameters.get_subscription_parameters(subscription)
        up = await app.plugin.check_status(parameters)
        return {"success": True, "subscription": subscription, "up": up}
    except GithubScmError as exc:
        return error_result(exc)
    except Exception as exc:
        await ctx.error(f"Unexpected error in check_status: {exc}")
        return {"success": False, "error": f"Internal error: {type(exc).__name__}"}


async def check_subscription_status(subscription: int, ctx: Context) -> dict[str, object]:
    """Report watchers, stars, open issues and contributors of a subscription's repository.

    ``up`` reflects only the repository detail fetch. When contributors
    cannot be fetched, ``contribs`` is empty and ``contributors_failure``
    says why.

    Args:
        subscription: Identifier of the subscription to inspect.

    Returns:
        The status snapshot: ``up``, ``data`` and the per-fetch failures.
    """
    try:
        app = get_context(ctx)
        parameters = app.parameters.get_subscription_parameters(subscription)
        snapshot = await app.plugin.check_subscription_status(parameters)
        return {"success": True, "subscription": subscription} | asdict(snapshot)
    except GithubScmError as exc:
        return error_result(exc)
    except Exception as exc:
        await ctx.error(f"Unexpected error in check_subscription_status: {exc}")
        return {"success": False, "error": f"Internal error: {type(exc).__name__}"}
