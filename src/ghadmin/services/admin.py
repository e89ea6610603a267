"""Operations on the GitHub Enterprise administration API."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

from structlog.stdlib import BoundLogger

from ..models.admin import AdminMessage, TeamLDAPMapping, UserLDAPMapping
from ..models.user import User

if TYPE_CHECKING:
    from ..client import GitHubClient

__all__ = ["AdminService"]


class AdminService:
    """Administrative operations on a GitHub Enterprise installation.

    These API routes are normally only available on GitHub Enterprise
    Server and require a token for a site administrator. Obtain an instance
    from `~ghadmin.GitHubClient.admin` rather than constructing one directly.

    Every operation makes exactly one request. Failures are reported as
    exceptions from the underlying client and are never retried.

    Parameters
    ----------
    client
        Client used to make requests.
    logger
        Logger to use for messages.
    """

    def __init__(self, client: GitHubClient, logger: BoundLogger) -> None:
        self._client = client
        self._logger = logger

    async def create_user(self, user: User) -> User:
        """Create a new user.

        The ``login`` and ``email`` fields are required by GitHub, but they
        are not checked here.

        Parameters
        ----------
        user
            User to create. Only the fields that are set are sent.

        Returns
        -------
        User
            The new user as returned by GitHub.

        Raises
        ------
        GitHubRequestError
            Raised if the request could not be constructed.
        GitHubValidationError
            Raised if the response from GitHub is invalid.
        GitHubWebError
            Raised if there is some problem talking to GitHub, including the
            rejection of invalid or duplicate user data.
        """
        request = self._client.new_request("POST", "admin/users", user)
        self._logger.debug("Creating GitHub user", login=user.login)
        return await self._client.send(request, User)

    async def rename_user(
        self, old_login: str, new_login: str
    ) -> AdminMessage:
        """Rename an existing user.

        GitHub performs the rename as a background job. The returned message
        only says that the job was queued; whether and when it completes has
        to be checked separately using the URL in the message.

        Parameters
        ----------
        old_login
            Current login of the user.
        new_login
            New login for the user.

        Returns
        -------
        AdminMessage
            Status message and URL for the queued job.

        Raises
        ------
        GitHubNotFoundError
            Raised if the user does not exist.
        GitHubRequestError
            Raised if the request could not be constructed.
        GitHubValidationError
            Raised if the response from GitHub is invalid.
        GitHubWebError
            Raised if there is some problem talking to GitHub.
        """
        path = f"admin/users/{quote(old_login, safe='')}"
        body = User(login=new_login)
        request = self._client.new_request("PATCH", path, body)
        self._logger.debug(
            "Renaming GitHub user", login=old_login, new_login=new_login
        )
        return await self._client.send(request, AdminMessage)

    async def update_team_ldap_mapping(
        self, team: int, mapping: TeamLDAPMapping
    ) -> TeamLDAPMapping:
        """Update the mapping between a team and an LDAP group.

        Parameters
        ----------
        team
            Numeric ID of the team.
        mapping
            New mapping. Usually only ``ldap_dn`` is set. Fields that are not
            set are left unchanged.

        Returns
        -------
        TeamLDAPMapping
            Updated mapping as returned by GitHub.

        Raises
        ------
        GitHubNotFoundError
            Raised if the team does not exist.
        GitHubRequestError
            Raised if the request could not be constructed.
        GitHubValidationError
            Raised if the response from GitHub is invalid.
        GitHubWebError
            Raised if there is some problem talking to GitHub.
        """
        path = f"admin/ldap/teams/{quote(str(team), safe='')}/mapping"
        request = self._client.new_request("PATCH", path, mapping)
        self._logger.debug(
            "Updating LDAP mapping for GitHub team",
            team=team,
            ldap_dn=mapping.ldap_dn,
        )
        return await self._client.send(request, TeamLDAPMapping)

    async def update_user_ldap_mapping(
        self, user: str, mapping: UserLDAPMapping
    ) -> UserLDAPMapping:
        """Update the mapping between a user and an LDAP user.

        Parameters
        ----------
        user
            Login of the user.
        mapping
            New mapping. Usually only ``ldap_dn`` is set. Fields that are not
            set are left unchanged.

        Returns
        -------
        UserLDAPMapping
            Updated mapping as returned by GitHub.

        Raises
        ------
        GitHubNotFoundError
            Raised if the user does not exist.
        GitHubRequestError
            Raised if the request could not be constructed.
        GitHubValidationError
            Raised if the response from GitHub is invalid.
        GitHubWebError
            Raised if there is some problem talking to GitHub.
        """
        path = f"admin/ldap/users/{quote(user, safe='')}/mapping"
        request = self._client.new_request("PATCH", path, mapping)
        self._logger.debug(
            "Updating LDAP mapping for GitHub user",
            login=user,
            ldap_dn=mapping.ldap_dn,
        )
        return await self._client.send(request, UserLDAPMapping)
