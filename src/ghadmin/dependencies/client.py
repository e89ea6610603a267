"""FastAPI dependency providing a GitHub client."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from httpx import AsyncClient
from safir.dependencies.http_client import http_client_dependency

from ..client import GitHubClient
from ..config import GitHubAdminConfig
from .config import config_dependency

__all__ = ["GitHubClientDependency", "github_client_dependency"]


class GitHubClientDependency:
    """Maintain a global GitHub client.

    This is structured as a dependency that creates and caches the client on
    first use to delay client creation until runtime so that the test suite
    has a chance to initialize environment variables. A new client is
    created whenever the underlying HTTPX client changes, since the old one
    will have been closed.
    """

    def __init__(self) -> None:
        self._http_client: AsyncClient | None = None
        self._client: GitHubClient | None = None

    async def __call__(
        self,
        config: Annotated[GitHubAdminConfig, Depends(config_dependency)],
        http_client: Annotated[AsyncClient, Depends(http_client_dependency)],
    ) -> GitHubClient:
        if not self._client or self._http_client != http_client:
            self._client = GitHubClient.from_config(config, http_client)
            self._http_client = http_client
        return self._client


github_client_dependency = GitHubClientDependency()
"""The cached GitHub client as a FastAPI dependency."""
