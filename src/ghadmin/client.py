"""Client for the GitHub REST API."""

from __future__ import annotations

from datetime import timedelta
from json import JSONDecodeError
from types import TracebackType
from typing import Self

import structlog
from httpx import (
    AsyncClient,
    HTTPError,
    HTTPStatusError,
    InvalidURL,
    Request,
    Timeout,
)
from pydantic import BaseModel, ValidationError
from structlog.stdlib import BoundLogger

from .config import GitHubAdminConfig
from .constants import (
    DEFAULT_BASE_URL,
    GITHUB_API_VERSION,
    GITHUB_MEDIA_TYPE,
    HTTP_TIMEOUT,
    USER_AGENT,
)
from .exceptions import (
    GitHubNotFoundError,
    GitHubRequestError,
    GitHubValidationError,
    GitHubWebError,
)
from .models.optional import OptionalFieldsModel
from .services.admin import AdminService

__all__ = ["GitHubClient"]


class GitHubClient:
    """Client for the GitHub REST API.

    This holds everything shared by the API operations: the base URL, the
    authentication token, the headers GitHub expects, and the underlying
    HTTP connection pool. The operations themselves are grouped by API area
    into services, such as `admin`, which use this client to make their
    requests.

    Parameters
    ----------
    token
        Token used to authenticate to GitHub. Administrative operations
        require a token for a site administrator.
    http_client
        Existing ``httpx.AsyncClient`` to use instead of creating a new one.
        This allows the caller to reuse an existing client and connection
        pool.
    base_url
        Base URL of the API. For GitHub Enterprise Server, this is
        ``https://<hostname>/api/v3``.
    logger
        Logger to use. If not given, the ``ghadmin`` structlog logger will be
        used.
    timeout
        Timeout for GitHub operations. If not given, defaults to the timeout
        of the underlying HTTPX_ client.
    user_agent
        Value of the ``User-Agent`` header.
    """

    def __init__(
        self,
        token: str,
        http_client: AsyncClient | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        logger: BoundLogger | None = None,
        timeout: timedelta | None = None,
        user_agent: str = USER_AGENT,
    ) -> None:
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._user_agent = user_agent
        self._logger = logger or structlog.get_logger("ghadmin")

        # Whether the HTTP client needs to be explicitly closed because we
        # created it.
        self._close_client = http_client is None
        if http_client is not None:
            self._client = http_client
        else:
            self._client = AsyncClient(timeout=HTTP_TIMEOUT.total_seconds())

        # The default timeout is the underlying timeout of the HTTPX client.
        if timeout is not None:
            self._timeout: float | Timeout = timeout.total_seconds()
        else:
            self._timeout = self._client.timeout

    @classmethod
    def from_config(
        cls,
        config: GitHubAdminConfig,
        http_client: AsyncClient | None = None,
        *,
        logger: BoundLogger | None = None,
    ) -> Self:
        """Create a client from the ghadmin configuration.

        Parameters
        ----------
        config
            ghadmin configuration.
        http_client
            Existing ``httpx.AsyncClient`` to use, if any.
        logger
            Logger to use, if any.

        Returns
        -------
        GitHubClient
            Newly-created client.
        """
        return cls(
            config.token.get_secret_value(),
            http_client,
            base_url=str(config.base_url),
            logger=logger,
            timeout=config.timeout,
            user_agent=config.user_agent,
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    @property
    def admin(self) -> AdminService:
        """Operations on the GitHub Enterprise administration API."""
        return AdminService(self, self._logger)

    @property
    def base_url(self) -> str:
        """Base URL of the GitHub API, without a trailing slash."""
        return self._base_url

    async def aclose(self) -> None:
        """Close the HTTP connection pool, if one wasn't provided.

        Only closes the pool if a new one was created. Does nothing if an
        external HTTP connection pool was passed into the constructor. The
        object must not be used after calling this method.
        """
        if self._close_client:
            await self._client.aclose()

    def new_request(
        self,
        method: str,
        path: str,
        body: OptionalFieldsModel | None = None,
    ) -> Request:
        """Construct a request to the GitHub API.

        Parameters
        ----------
        method
            HTTP method.
        path
            Route relative to the API base URL. Must not start with ``/``.
        body
            If given, record to send as the JSON body of the request. Only
            the fields present in the record are sent.

        Returns
        -------
        httpx.Request
            Request ready to pass to `send`.

        Raises
        ------
        GitHubRequestError
            Raised if the path is not relative or the request could not
            otherwise be constructed.
        """
        if path.startswith("/") or "://" in path:
            msg = f"API path must be relative to the base URL: {path}"
            raise GitHubRequestError(msg)
        url = f"{self._base_url}/{path}"
        headers = {
            "Accept": GITHUB_MEDIA_TYPE,
            "Authorization": f"Bearer {self._token}",
            "User-Agent": self._user_agent,
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }
        payload = body.to_payload() if body is not None else None
        try:
            return self._client.build_request(
                method,
                url,
                headers=headers,
                json=payload,
                timeout=self._timeout,
            )
        except (InvalidURL, TypeError, ValueError) as e:
            msg = f"Cannot construct {method} request for {url}: {e!s}"
            raise GitHubRequestError(msg) from e

    async def send[T: BaseModel](self, request: Request, model: type[T]) -> T:
        """Send a request and validate the response.

        Parameters
        ----------
        request
            Request constructed by `new_request`.
        model
            Expected type of the response.

        Returns
        -------
        pydantic.BaseModel
            Validated model of the requested type.

        Raises
        ------
        GitHubNotFoundError
            Raised if GitHub returned a 404 response.
        GitHubValidationError
            Raised if the response from GitHub is invalid.
        GitHubWebError
            Raised if there is some problem talking to GitHub, such as an
            invalid token, a non-success status, or a network failure.
        """
        self._logger.debug(
            "Sending request to GitHub",
            method=request.method,
            url=str(request.url),
        )
        try:
            r = await self._client.send(request)
            r.raise_for_status()
            return model.model_validate(r.json())
        except HTTPError as e:
            if isinstance(e, HTTPStatusError):
                if e.response.status_code == 404:
                    raise GitHubNotFoundError.from_exception(e) from e
            raise GitHubWebError.from_exception(e) from e
        except (JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
            msg = f"GitHub response is invalid: {type(e).__name__}: {e!s}"
            raise GitHubValidationError(msg) from e
