"""Models for GitHub user accounts."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import Field

from .optional import OptionalFieldsModel

__all__ = ["Plan", "User"]


class Plan(OptionalFieldsModel):
    """The GitHub plan of a user account."""

    name: Annotated[str | None, Field(title="Plan name")] = None
    space: Annotated[int | None, Field(title="Disk space")] = None
    collaborators: Annotated[
        int | None, Field(title="Allowed collaborators")
    ] = None
    private_repos: Annotated[
        int | None, Field(title="Allowed private repositories")
    ] = None


class User(OptionalFieldsModel):
    """A GitHub user account.

    The same model is used for request bodies and responses. Requests
    usually carry only one or two fields, such as ``login`` and ``email``
    when creating a user, while responses carry many more. Which fields are
    present in a response depends on the API endpoint and the privileges of
    the caller.
    """

    login: Annotated[
        str | None, Field(title="GitHub login", examples=["octocat"])
    ] = None

    id: Annotated[int | None, Field(title="User ID", examples=[1])] = None

    node_id: Annotated[str | None, Field(title="GraphQL node ID")] = None

    avatar_url: Annotated[str | None, Field(title="Avatar URL")] = None

    html_url: Annotated[str | None, Field(title="Profile URL")] = None

    gravatar_id: Annotated[str | None, Field(title="Gravatar ID")] = None

    name: Annotated[
        str | None, Field(title="Full name", examples=["The Octocat"])
    ] = None

    company: str | None = None
    blog: str | None = None
    location: str | None = None

    email: Annotated[
        str | None,
        Field(title="Email address", examples=["octocat@github.com"]),
    ] = None

    hireable: bool | None = None
    bio: str | None = None
    public_repos: int | None = None
    public_gists: int | None = None
    followers: int | None = None
    following: int | None = None

    created_at: Annotated[datetime | None, Field(title="Creation time")] = (
        None
    )

    updated_at: Annotated[
        datetime | None, Field(title="Last modification time")
    ] = None

    suspended_at: Annotated[
        datetime | None,
        Field(
            title="Suspension time",
            description="When the account was suspended, if it is suspended",
        ),
    ] = None

    type: Annotated[
        str | None, Field(title="Account type", examples=["User"])
    ] = None

    site_admin: Annotated[
        bool | None,
        Field(
            title="Site administrator",
            description="Whether the user is a site administrator",
        ),
    ] = None

    total_private_repos: int | None = None
    owned_private_repos: int | None = None
    private_gists: int | None = None
    disk_usage: int | None = None
    collaborators: int | None = None
    two_factor_authentication: bool | None = None

    plan: Annotated[Plan | None, Field(title="Plan")] = None

    ldap_dn: Annotated[
        str | None,
        Field(
            title="LDAP DN",
            description=(
                "Distinguished name of the linked LDAP user, only returned by"
                " GitHub Enterprise installations using LDAP"
            ),
        ),
    ] = None

    url: Annotated[str | None, Field(title="API URL of the user")] = None
    events_url: str | None = None
    following_url: str | None = None
    followers_url: str | None = None
    gists_url: str | None = None
    organizations_url: str | None = None
    received_events_url: str | None = None
    repos_url: str | None = None
    starred_url: str | None = None
    subscriptions_url: str | None = None
