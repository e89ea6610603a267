"""Test fixtures."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

import pytest
import pytest_asyncio
import respx

from ghadmin import GitHubClient, MockGitHubAdmin, register_mock_github_admin
from ghadmin.dependencies.config import config_dependency

from .support.constants import TEST_BASE_URL, TEST_TOKEN


@pytest.fixture(autouse=True)
def environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point configuration loaded from the environment at the mock."""
    monkeypatch.delenv("GHADMIN_CONFIG_PATH", raising=False)
    monkeypatch.delenv("GHADMIN_TIMEOUT", raising=False)
    monkeypatch.delenv("GHADMIN_USER_AGENT", raising=False)
    monkeypatch.delenv("GHADMIN_LOG_LEVEL", raising=False)
    monkeypatch.setenv("GHADMIN_BASE_URL", TEST_BASE_URL)
    monkeypatch.setenv("GHADMIN_TOKEN", TEST_TOKEN)
    config_dependency.reset()
    yield
    config_dependency.reset()


@pytest_asyncio.fixture
async def github() -> AsyncIterator[GitHubClient]:
    async with GitHubClient(TEST_TOKEN, base_url=TEST_BASE_URL) as client:
        yield client


@pytest.fixture
def mock_github(respx_mock: respx.Router) -> MockGitHubAdmin:
    return register_mock_github_admin(respx_mock, TEST_TOKEN, TEST_BASE_URL)
