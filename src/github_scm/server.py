"""MCP server exposing the GitHub SCM connector operations."""

from __future__ import annotations

import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx
from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from github_scm.parameters.base import ConfigurationPort, ParameterStorePort
from github_scm.parameters.configuration import EnvConfiguration
from github_scm.parameters.store import YamlParameterStore
from github_scm.status.orchestrator import GithubScmPlugin
from github_scm.tools.link import link_subscription
from github_scm.tools.search import find_repos_by_name
from github_scm.tools.status import check_status, check_subscription_status

_DEFAULT_PARAMETERS_FILE = "github-scm.yaml"


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared state across all tool invocations."""

    http_client: httpx.AsyncClient
    parameters: ParameterStorePort
    configuration: ConfigurationPort
    plugin: GithubScmPlugin


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[AppContext]:
    """Manage shared adapter lifecycle: the composition root."""
    async with httpx.AsyncClient(
        timeout=httpx.Timeout(30.0, connect=10.0),
        follow_redirects=True,
        limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
    ) as http_client:
        parameters = YamlParameterStore(
            os.environ.get("GITHUB_SCM_PARAMETERS", _DEFAULT_PARAMETERS_FILE)
        )
        configuration = EnvConfiguration()
        plugin = GithubScmPlugin(
            http=http_client,
            parameters=parameters,
            configuration=configuration,
        )

        yield AppContext(
            http_client=http_client,
            parameters=parameters,
            configuration=configuration,
            plugin=plugin,
        )


mcp = FastMCP(
    "github-scm",
    instructions=(
        "github-scm checks the GitHub repositories bound to project subscriptions.\n\n"
        "- **check_status** — Is the GitHub API reachable with this subscription's "
        "credentials?\n"
        "- **link_subscription** — Validate that a subscription's repository exists "
        "before binding it.\n"
        "- **check_subscription_status** — Watchers, stars, open issues and "
        "contributors of a subscription's repository.\n"
        "- **find_repos_by_name** — Repositories of a node's owner matching a name "
        "fragment.\n\n"
        "All tools are read-only: nothing is ever written to GitHub."
    ),
    lifespan=app_lifespan,
)

mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))(check_status)
mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))(check_subscription_status)
mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))(link_subscription)
mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))(find_repos_by_name)
