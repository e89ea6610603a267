"""Tests for the command-line interface.

Be careful when writing tests in this framework because the click command
handling code runs its own event loop. None of these tests can therefore be
async.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import respx
from click.testing import CliRunner

from ghadmin import MockGitHubAdmin, MockGitHubAdminAction
from ghadmin.cli import main
from ghadmin.mock import register_mock_github_admin

from .support.constants import TEST_BASE_URL, TEST_TOKEN


def test_help() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["help"], catch_exceptions=False)
    assert result.exit_code == 0
    assert "Commands:" in result.output

    runner = CliRunner()
    result = runner.invoke(
        main, ["help", "rename-user"], catch_exceptions=False
    )
    assert result.exit_code == 0
    assert "Commands:" not in result.output

    runner = CliRunner()
    result = runner.invoke(main, ["help", "unknown-command"])
    assert result.exit_code != 0


def test_create_user(mock_github: MockGitHubAdmin) -> None:
    runner = CliRunner()
    result = runner.invoke(
        main,
        ["create-user", "octocat", "octocat@github.com"],
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    user = json.loads(result.output)
    assert user["login"] == "octocat"
    assert user["email"] == "octocat@github.com"
    assert user["site_admin"] is False
    assert "name" not in user
    assert mock_github.get_user("octocat")


def test_rename_user(mock_github: MockGitHubAdmin) -> None:
    user = mock_github.add_user("octocat")
    runner = CliRunner()
    result = runner.invoke(
        main, ["rename-user", "octocat", "monalisa"], catch_exceptions=False
    )
    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "message": (
            "Job queued to rename user. It may take a few minutes to"
            " complete."
        ),
        "url": f"{TEST_BASE_URL}/user/{user.id}",
    }
    assert mock_github.get_user("monalisa")


def test_update_team_mapping(mock_github: MockGitHubAdmin) -> None:
    ldap_dn = "cn=Enterprise Ops,ou=teams,dc=github,dc=com"
    mock_github.add_team(1, "Enterprise Ops")
    runner = CliRunner()
    result = runner.invoke(
        main, ["update-team-mapping", "1", ldap_dn], catch_exceptions=False
    )
    assert result.exit_code == 0
    mapping = json.loads(result.output)
    assert mapping["id"] == 1
    assert mapping["ldap_dn"] == ldap_dn
    assert "description" not in mapping

    runner = CliRunner()
    result = runner.invoke(main, ["update-team-mapping", "ops", ldap_dn])
    assert result.exit_code == 2


def test_update_user_mapping(mock_github: MockGitHubAdmin) -> None:
    ldap_dn = "uid=asdf,ou=users,dc=github,dc=com"
    mock_github.add_user("u")
    runner = CliRunner()
    result = runner.invoke(
        main, ["update-user-mapping", "u", ldap_dn], catch_exceptions=False
    )
    assert result.exit_code == 0
    mapping = json.loads(result.output)
    assert mapping["login"] == "u"
    assert mapping["ldap_dn"] == ldap_dn
    user_mapping = mock_github.get_user_mapping("u")
    assert user_mapping
    assert user_mapping.ldap_dn == ldap_dn


def test_errors(mock_github: MockGitHubAdmin) -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["rename-user", "octocat", "monalisa"])
    assert result.exit_code == 1
    assert "Error:" in result.output

    mock_github.add_user("octocat")
    mock_github.fail_on(MockGitHubAdminAction.RENAME_USER)
    runner = CliRunner()
    result = runner.invoke(main, ["rename-user", "octocat", "monalisa"])
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert mock_github.get_user("octocat")


def test_config_path(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    respx_mock: respx.Router,
) -> None:
    base_url = "https://ghe.example.org/api/v3"
    monkeypatch.delenv("GHADMIN_BASE_URL")
    config_path = tmp_path / "ghadmin.yaml"
    config_path.write_text(f"baseUrl: {base_url}\n")
    mock = register_mock_github_admin(respx_mock, TEST_TOKEN, base_url)
    mock.add_user("octocat")

    runner = CliRunner()
    result = runner.invoke(
        main,
        [
            "rename-user",
            "--config-path",
            str(config_path),
            "octocat",
            "monalisa",
        ],
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    assert json.loads(result.output)["url"] == f"{base_url}/user/1"
    assert mock.get_user("monalisa")


def test_missing_config_path(
    tmp_path: Path, mock_github: MockGitHubAdmin
) -> None:
    mock_github.add_user("octocat")
    config_path = tmp_path / "missing.yaml"

    runner = CliRunner()
    result = runner.invoke(
        main,
        [
            "rename-user",
            "--config-path",
            str(config_path),
            "octocat",
            "monalisa",
        ],
    )
    assert result.exit_code == 2
    assert mock_github.get_user("octocat")
    assert mock_github.get_user("monalisa") is None


def test_invalid_config(
    monkeypatch: pytest.MonkeyPatch, mock_github: MockGitHubAdmin
) -> None:
    monkeypatch.delenv("GHADMIN_TOKEN")
    mock_github.add_user("octocat")

    runner = CliRunner()
    result = runner.invoke(main, ["rename-user", "octocat", "monalisa"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
    assert mock_github.get_user("octocat")
