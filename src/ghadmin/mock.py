"""Mock for the parts of the GitHub admin API used by the client."""

from __future__ import annotations

import json
import re
from collections.abc import Callable, Iterable
from enum import Enum
from functools import wraps
from typing import Concatenate
from urllib.parse import unquote

import respx
from httpx import Request, Response

from .constants import DEFAULT_BASE_URL, GITHUB_MEDIA_TYPE
from .models.admin import AdminMessage, TeamLDAPMapping, UserLDAPMapping
from .models.user import User

__all__ = [
    "MockGitHubAdmin",
    "MockGitHubAdminAction",
    "register_mock_github_admin",
]

_RENAME_MESSAGE = (
    "Job queued to rename user. It may take a few minutes to complete."
)
"""Message GitHub returns when a rename job is queued."""


class MockGitHubAdminAction(Enum):
    """Possible actions that could fail."""

    CREATE_USER = "create_user"
    RENAME_USER = "rename_user"
    UPDATE_TEAM_MAPPING = "update_team_mapping"
    UPDATE_USER_MAPPING = "update_user_mapping"


class MockGitHubAdmin:
    """Mock for the parts of the GitHub admin API used by the client.

    Users and teams known to the mock are created with `add_user` and
    `add_team`, or through the API with the create user route. Renames are
    applied immediately even though GitHub performs them asynchronously.

    Parameters
    ----------
    token
        Token that requests must present.
    base_url
        Base URL of the mocked API, used to construct URLs in responses.
    """

    def __init__(self, token: str, base_url: str = DEFAULT_BASE_URL) -> None:
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._fail: set[MockGitHubAdminAction] = set()
        self._next_id = 1
        self._users: dict[str, User] = {}
        self._user_mappings: dict[str, UserLDAPMapping] = {}
        self._teams: dict[int, TeamLDAPMapping] = {}

    def add_team(self, team_id: int, name: str) -> TeamLDAPMapping:
        """Add a team with no LDAP mapping.

        Parameters
        ----------
        team_id
            Numeric ID of the team.
        name
            Name of the team. The slug is derived from it.

        Returns
        -------
        TeamLDAPMapping
            Stored team information.
        """
        url = f"{self._base_url}/teams/{team_id}"
        team = TeamLDAPMapping(
            id=team_id,
            url=url,
            name=name,
            slug=re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-"),
            privacy="closed",
            permission="pull",
            members_url=f"{url}/members{{/member}}",
            repositories_url=f"{url}/repos",
        )
        self._teams[team_id] = team
        return team

    def add_user(self, login: str, *, email: str | None = None) -> User:
        """Add a user.

        Parameters
        ----------
        login
            Login of the user.
        email
            Email address of the user, if any.

        Returns
        -------
        User
            Stored user information.
        """
        user = self._build_user(login, self._next_id, email=email)
        self._next_id += 1
        self._users[login] = user
        return user

    def fail_on(
        self, actions: MockGitHubAdminAction | Iterable[MockGitHubAdminAction]
    ) -> None:
        """Configure the API to fail with a 500 error on some actions.

        Parameters
        ----------
        actions
            An action or iterable of actions that should fail. Pass in the
            empty list to restore regular operations.
        """
        if isinstance(actions, MockGitHubAdminAction):
            self._fail = {actions}
        else:
            self._fail = set(actions)

    def get_team_mapping(self, team_id: int) -> TeamLDAPMapping | None:
        """Return the stored information for a team, if any."""
        return self._teams.get(team_id)

    def get_user(self, login: str) -> User | None:
        """Return the stored information for a user, if any."""
        return self._users.get(login)

    def get_user_mapping(self, login: str) -> UserLDAPMapping | None:
        """Return the LDAP mapping for a user, if one was set."""
        return self._user_mappings.get(login)

    def install_routes(self, respx_mock: respx.Router) -> None:
        """Install the mock routes for the GitHub admin API.

        Parameters
        ----------
        respx_mock
            Mock router to use to install routes.
        """
        base_regex = re.escape(self._base_url)
        respx_mock.post(f"{self._base_url}/admin/users").mock(
            side_effect=self._handle_create_user
        )
        regex = base_regex + "/admin/users/(?P<login>[^/]+)$"
        respx_mock.patch(url__regex=regex).mock(
            side_effect=self._handle_rename_user
        )
        regex = base_regex + "/admin/ldap/users/(?P<login>[^/]+)/mapping$"
        respx_mock.patch(url__regex=regex).mock(
            side_effect=self._handle_user_mapping
        )
        regex = base_regex + "/admin/ldap/teams/(?P<team>[0-9]+)/mapping$"
        respx_mock.patch(url__regex=regex).mock(
            side_effect=self._handle_team_mapping
        )

    def _build_user(
        self, login: str, user_id: int, *, email: str | None = None
    ) -> User:
        """Construct the full user record GitHub would return."""
        url = f"{self._base_url}/users/{login}"
        return User(
            login=login,
            id=user_id,
            email=email,
            avatar_url=f"https://avatars.example.com/u/{user_id}",
            gravatar_id="",
            url=url,
            events_url=f"{url}/events{{/privacy}}",
            following_url=f"{url}/following{{/other_user}}",
            followers_url=f"{url}/followers",
            gists_url=f"{url}/gists{{/gist_id}}",
            organizations_url=f"{url}/orgs",
            received_events_url=f"{url}/received_events",
            repos_url=f"{url}/repos",
            starred_url=f"{url}/starred{{/owner}}{{/repo}}",
            subscriptions_url=f"{url}/subscriptions",
            type="User",
            site_admin=False,
        )

    @staticmethod
    def _check[**P](
        action: MockGitHubAdminAction,
    ) -> Callable[
        [Callable[Concatenate[MockGitHubAdmin, Request, P], Response]],
        Callable[Concatenate[MockGitHubAdmin, Request, P], Response],
    ]:
        """Wrap `MockGitHubAdmin` methods to perform common checks.

        Every request must carry the expected token and media type, and may
        be configured to fail.

        Parameters
        ----------
        action
            Action performed by the wrapped handler. If the mock is
            configured to fail on this action, return a failure rather than
            calling the underlying handler.

        Returns
        -------
        typing.Callable
            Decorator to wrap `MockGitHubAdmin` methods.
        """

        def decorator(
            f: Callable[Concatenate[MockGitHubAdmin, Request, P], Response],
        ) -> Callable[Concatenate[MockGitHubAdmin, Request, P], Response]:
            @wraps(f)
            def wrapper(
                mock: MockGitHubAdmin,
                request: Request,
                *args: P.args,
                **kwargs: P.kwargs,
            ) -> Response:
                authorization = request.headers.get("Authorization", "")
                if authorization != f"Bearer {mock._token}":
                    return Response(401, json={"message": "Bad credentials"})
                if request.headers.get("Accept") != GITHUB_MEDIA_TYPE:
                    return Response(415)
                if action in mock._fail:
                    return Response(500)
                return f(mock, request, *args, **kwargs)

            return wrapper

        return decorator

    @_check(MockGitHubAdminAction.CREATE_USER)
    def _handle_create_user(self, request: Request) -> Response:
        body = User.model_validate(json.loads(request.content))
        if not body.login or not body.email:
            return Response(422, json={"message": "Validation Failed"})
        if body.login in self._users:
            return Response(422, json={"message": "Validation Failed"})
        user = self.add_user(body.login, email=body.email)
        return Response(201, json=user.to_payload())

    @_check(MockGitHubAdminAction.RENAME_USER)
    def _handle_rename_user(self, request: Request, *, login: str) -> Response:
        login = unquote(login)
        body = User.model_validate(json.loads(request.content))
        user = self._users.get(login)
        if not user:
            return Response(404, json={"message": "Not Found"})
        if not body.login or body.login in self._users:
            return Response(422, json={"message": "Validation Failed"})
        assert user.id is not None
        del self._users[login]
        email = user.email
        self._users[body.login] = self._build_user(
            body.login, user.id, email=email
        )
        if mapping := self._user_mappings.pop(login, None):
            mapping.login = body.login
            self._user_mappings[body.login] = mapping
        result = AdminMessage(
            message=_RENAME_MESSAGE, url=f"{self._base_url}/user/{user.id}"
        )
        return Response(202, json=result.to_payload())

    @_check(MockGitHubAdminAction.UPDATE_TEAM_MAPPING)
    def _handle_team_mapping(self, request: Request, *, team: str) -> Response:
        team_id = int(team)
        body = TeamLDAPMapping.model_validate(json.loads(request.content))
        mapping = self._teams.get(team_id)
        if not mapping:
            return Response(404, json={"message": "Not Found"})
        if body.ldap_dn is not None:
            mapping.ldap_dn = body.ldap_dn
        return Response(200, json=mapping.to_payload())

    @_check(MockGitHubAdminAction.UPDATE_USER_MAPPING)
    def _handle_user_mapping(
        self, request: Request, *, login: str
    ) -> Response:
        login = unquote(login)
        body = UserLDAPMapping.model_validate(json.loads(request.content))
        user = self._users.get(login)
        if not user:
            return Response(404, json={"message": "Not Found"})
        mapping = self._user_mappings.get(login)
        if not mapping:
            mapping = UserLDAPMapping.model_validate(user.to_payload())
            self._user_mappings[login] = mapping
        if body.ldap_dn is not None:
            mapping.ldap_dn = body.ldap_dn
        return Response(200, json=mapping.to_payload())


def register_mock_github_admin(
    respx_mock: respx.Router, token: str, base_url: str = DEFAULT_BASE_URL
) -> MockGitHubAdmin:
    """Mock out the GitHub admin API.

    Parameters
    ----------
    respx_mock
        Mock router.
    token
        Token that requests must present.
    base_url
        Base URL of the mocked API.

    Returns
    -------
    MockGitHubAdmin
        Mock GitHub admin API object.
    """
    mock = MockGitHubAdmin(token, base_url)
    mock.install_routes(respx_mock)
    return mock
