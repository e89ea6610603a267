"""Tests for the FastAPI dependencies."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Annotated

import pytest
from asgi_lifespan import LifespanManager
from fastapi import Depends, FastAPI
from httpx import ASGITransport, AsyncClient
from safir.dependencies.http_client import http_client_dependency

from ghadmin import AdminMessage, GitHubClient, MockGitHubAdmin
from ghadmin.dependencies.client import github_client_dependency


@pytest.mark.asyncio
async def test_dependency(mock_github: MockGitHubAdmin) -> None:
    mock_github.add_user("octocat")
    cached_client = None

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        yield
        await http_client_dependency.aclose()

    app = FastAPI(lifespan=lifespan)

    @app.post("/rename/{old}/{new}")
    async def post_rename(
        old: str,
        new: str,
        github: Annotated[GitHubClient, Depends(github_client_dependency)],
    ) -> dict[str, str]:
        nonlocal cached_client
        if cached_client is None:
            cached_client = github
        assert github == cached_client
        message = await github.admin.rename_user(old, new)
        assert isinstance(message, AdminMessage)
        return {"url": message.get_value("url")}

    async with LifespanManager(app):
        async with AsyncClient(
            base_url="https://example.com/", transport=ASGITransport(app=app)
        ) as client:
            r = await client.post("/rename/octocat/monalisa")
            assert r.status_code == 200
            r = await client.post("/rename/monalisa/hubot")
            assert r.status_code == 200
    assert mock_github.get_user("hubot")

    # When the HTTPX client dependency is shut down and recreated, this should
    # result in a new GitHub client. Otherwise, the GitHub client would try
    # to use the closed HTTPX client.
    old_client = cached_client
    cached_client = None
    async with LifespanManager(app):
        async with AsyncClient(
            base_url="https://example.com/", transport=ASGITransport(app=app)
        ) as client:
            r = await client.post("/rename/hubot/octocat")
            assert r.status_code == 200
            assert cached_client != old_client
    assert mock_github.get_user("octocat")
