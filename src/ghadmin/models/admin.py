"""Models for the GitHub Enterprise administration API."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from .optional import OptionalFieldsModel

__all__ = [
    "AdminMessage",
    "TeamLDAPMapping",
    "UserLDAPMapping",
]


class TeamLDAPMapping(OptionalFieldsModel):
    """Mapping between a GitHub team and an LDAP group."""

    id: Annotated[int | None, Field(title="Team ID", examples=[1])] = None

    ldap_dn: Annotated[
        str | None,
        Field(
            title="LDAP DN",
            description="Distinguished name of the LDAP group",
            examples=["cn=Enterprise Ops,ou=teams,dc=github,dc=com"],
        ),
    ] = None

    url: Annotated[str | None, Field(title="API URL of the team")] = None

    name: Annotated[
        str | None, Field(title="Team name", examples=["Enterprise Ops"])
    ] = None

    slug: Annotated[
        str | None, Field(title="Team slug", examples=["enterprise-ops"])
    ] = None

    description: Annotated[str | None, Field(title="Team description")] = None

    privacy: Annotated[
        str | None,
        Field(title="Team privacy", examples=["closed", "secret"]),
    ] = None

    permission: Annotated[
        str | None,
        Field(
            title="Default permission",
            description="Permission granted to team members on team repos",
            examples=["pull"],
        ),
    ] = None

    members_url: Annotated[str | None, Field(title="Members URL")] = None

    repositories_url: Annotated[
        str | None, Field(title="Repositories URL")
    ] = None


class UserLDAPMapping(OptionalFieldsModel):
    """Mapping between a GitHub user and an LDAP user."""

    id: Annotated[int | None, Field(title="User ID", examples=[1])] = None

    ldap_dn: Annotated[
        str | None,
        Field(
            title="LDAP DN",
            description="Distinguished name of the LDAP user",
            examples=["uid=asdf,ou=users,dc=github,dc=com"],
        ),
    ] = None

    login: Annotated[
        str | None, Field(title="GitHub login", examples=["octocat"])
    ] = None

    avatar_url: Annotated[str | None, Field(title="Avatar URL")] = None

    gravatar_id: Annotated[str | None, Field(title="Gravatar ID")] = None

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


class AdminMessage(OptionalFieldsModel):
    """Message returned by administrative operations queued as jobs.

    Renaming a user happens asynchronously on the GitHub side. The response
    only says that the job was queued and gives a URL that can be checked
    later to see whether the rename has completed.
    """

    message: Annotated[
        str | None,
        Field(
            title="Status message",
            examples=[
                "Job queued to rename user. It may take a few minutes to"
                " complete."
            ],
        ),
    ] = None

    url: Annotated[
        str | None,
        Field(
            title="Status URL",
            description="URL at which to check the progress of the job",
            examples=["https://api.github.com/user/1"],
        ),
    ] = None
