"""Helpers shared by the MCP tools."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcp.server.fastmcp import Context

from github_scm.errors import GithubScmError, ValidationFailure

if TYPE_CHECKING:
    from github_scm.server import AppContext


def get_context(ctx: Context) -> AppContext:
    """Extract AppContext from FastMCP's lifespan context.

    Raises TypeError if the lifespan context is not an AppContext instance.
    """
    from github_scm.server import AppContext

    app = ctx.request_context.lifespan_context
    if not isinstance(app, AppContext):
        msg = (
            f"Expected AppContext in lifespan_context, got {type(app).__name__}. "
            "Is the server configured with app_lifespan?"
        )
        raise TypeError(msg)
    return app


def error_result(exc: GithubScmError) -> dict[str, object]:
    """Render a domain error as a tool result."""
    result: dict[str, object] = {"success": False, "error": str(exc)}
    if isinstance(exc, ValidationFailure):
        result.update(exc.to_dict())
    return result
