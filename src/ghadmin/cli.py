"""Command-line interface for GitHub Enterprise administration."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
import structlog
from pydantic import ValidationError
from safir.asyncio import run_with_asyncio
from safir.click import display_help

from .client import GitHubClient
from .dependencies.config import config_dependency
from .exceptions import GitHubError
from .models.admin import TeamLDAPMapping, UserLDAPMapping
from .models.optional import OptionalFieldsModel
from .models.user import User

__all__ = [
    "create_user",
    "help",
    "main",
    "rename_user",
    "update_team_mapping",
    "update_user_mapping",
]

_config_path_option = click.option(
    "--config-path",
    envvar="GHADMIN_CONFIG_PATH",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file (default: environment variables only).",
)


def _load_client(config_path: Path | None) -> GitHubClient:
    """Load the configuration and create a GitHub client from it."""
    try:
        if config_path:
            config_dependency.set_config_path(config_path)
        config = config_dependency.config()
    except ValidationError as e:
        raise click.ClickException(f"Invalid configuration: {e!s}") from e
    logger = structlog.get_logger("ghadmin")
    return GitHubClient.from_config(config, logger=logger)


def _print_record(record: OptionalFieldsModel) -> None:
    """Print a record as JSON, omitting absent fields."""
    sys.stdout.write(json.dumps(record.to_payload(), indent=2) + "\n")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(message="%(version)s")
def main() -> None:
    """Administrative command-line interface for GitHub Enterprise."""


@main.command()
@click.argument("topic", default=None, required=False, nargs=1)
@click.pass_context
def help(ctx: click.Context, topic: str | None) -> None:
    """Show help for any command."""
    display_help(main, ctx, topic)


@main.command()
@click.argument("login")
@click.argument("email")
@_config_path_option
@run_with_asyncio
async def create_user(
    login: str, email: str, *, config_path: Path | None
) -> None:
    """Create a new user with the given login and email address."""
    async with _load_client(config_path) as github:
        try:
            user = await github.admin.create_user(
                User(login=login, email=email)
            )
        except GitHubError as e:
            raise click.ClickException(str(e)) from e
    _print_record(user)


@main.command()
@click.argument("old_login")
@click.argument("new_login")
@_config_path_option
@run_with_asyncio
async def rename_user(
    old_login: str, new_login: str, *, config_path: Path | None
) -> None:
    """Rename a user.

    The rename is performed by GitHub in the background. The output
    contains a URL that can be checked to see whether it has completed.
    """
    async with _load_client(config_path) as github:
        try:
            message = await github.admin.rename_user(old_login, new_login)
        except GitHubError as e:
            raise click.ClickException(str(e)) from e
    _print_record(message)


@main.command()
@click.argument("team", type=int)
@click.argument("ldap_dn")
@_config_path_option
@run_with_asyncio
async def update_team_mapping(
    team: int, ldap_dn: str, *, config_path: Path | None
) -> None:
    """Map a team, given by numeric ID, to an LDAP group."""
    mapping = TeamLDAPMapping(ldap_dn=ldap_dn)
    async with _load_client(config_path) as github:
        try:
            result = await github.admin.update_team_ldap_mapping(team, mapping)
        except GitHubError as e:
            raise click.ClickException(str(e)) from e
    _print_record(result)


@main.command()
@click.argument("user")
@click.argument("ldap_dn")
@_config_path_option
@run_with_asyncio
async def update_user_mapping(
    user: str, ldap_dn: str, *, config_path: Path | None
) -> None:
    """Map a user, given by login, to an LDAP user."""
    mapping = UserLDAPMapping(ldap_dn=ldap_dn)
    async with _load_client(config_path) as github:
        try:
            result = await github.admin.update_user_ldap_mapping(user, mapping)
        except GitHubError as e:
            raise click.ClickException(str(e)) from e
    _print_record(result)
