"""Shared test fixtures: recorded GitHub bodies and an in-process fake API."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from github_scm.parameters.configuration import MappingConfiguration
from github_scm.parameters.keys import (
    CONF_API_URL,
    PARAMETER_REPOSITORY,
    PARAMETER_USER,
)
from github_scm.parameters.store import InMemoryParameterStore
from github_scm.status.orchestrator import GithubScmPlugin

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "github"
API_URL = "http://github.test/api/"
NODE = "service:scm:github:dig"
SUBSCRIPTION = 1

Route = httpx.Response | Callable[[httpx.Request], httpx.Response]


def load_fixture(name: str) -> object:
    return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))


class FakeGitHub:
    """Routes requests by URL path, answering 404 to anything unrouted.

    Every request is recorded so tests can assert on what was (not) called.
    """

    def __init__(self) -> None:
        self.routes: dict[str, Route] = {}
        self.requests: list[httpx.Request] = []

    def stub(self, path: str, route: Route) -> None:
        self.routes[path] = route

    def stub_json(self, path: str, body: object, status: int = 200) -> None:
        self.routes[path] = httpx.Response(status, json=body)

    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": "Not Found"})
        if callable(route):
            return route(request)
        return route


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
async def http_client(fake_github: FakeGitHub):
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_github.handler)) as client:
        yield client


@pytest.fixture
def store() -> InMemoryParameterStore:
    return InMemoryParameterStore(
        nodes={NODE: {PARAMETER_USER: "junit"}},
        subscriptions={
            SUBSCRIPTION: {
                "node": NODE,
                "parameters": {PARAMETER_REPOSITORY: "gfi-gstack"},
            },
        },
    )


@pytest.fixture
def plugin(http_client: httpx.AsyncClient, store: InMemoryParameterStore) -> GithubScmPlugin:
    return GithubScmPlugin(
        http=http_client,
        parameters=store,
        configuration=MappingConfiguration({CONF_API_URL: API_URL}),
    )


@pytest.fixture
def stub_repo_detail(fake_github: FakeGitHub) -> None:
    fake_github.stub_json("/api/repos/junit/gfi-gstack", load_fixture("repo-detail.json"))


@pytest.fixture
def stub_contributors(fake_github: FakeGitHub) -> None:
    fake_github.stub_json("/api/repos/junit/gfi-gstack/contributors", load_fixture("contribs.json"))


@pytest.fixture
def stub_user(fake_github: FakeGitHub) -> None:
    fake_github.stub_json("/api/users/junit", load_fixture("user.json"))


@pytest.fixture
def stub_search(fake_github: FakeGitHub) -> None:
    fake_github.stub_json("/api/search/repositories", load_fixture("search.json"))
