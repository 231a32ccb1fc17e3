"""Shared fixtures. Only the HTTP layer is faked: the gateway runs for real
against an in-process httpx.MockTransport."""

import httpx
import pytest

from gitlab_repo_reader.models import GitLabConfig


@pytest.fixture
def config():
    return GitLabConfig(base_url="https://gitlab.example.com", token="test-token")


@pytest.fixture
def gitlab(monkeypatch):
    """Route every gateway request to a handler. Returns the recorded requests.

    Usage: requests = gitlab(lambda request: httpx.Response(200, json=[...]))
    """
    real_client = httpx.AsyncClient

    def install(handler):
        requests = []

        def record(request: httpx.Request):
            requests.append(request)
            return handler(request)

        transport = httpx.MockTransport(record)
        monkeypatch.setattr(httpx, "AsyncClient", lambda **kwargs: real_client(transport=transport, **kwargs))
        return requests

    return install
