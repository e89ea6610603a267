"""Configuration for ghadmin.

ghadmin can be configured by a YAML file, by environment variables, or
both. Environment variables take precedence over the configuration file so
that secrets such as the GitHub token can be injected separately from the
rest of the configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Self, override

import yaml
from pydantic import AliasChoices, Field, HttpUrl, SecretStr
from pydantic.alias_generators import to_camel
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)
from safir.logging import LogLevel, configure_logging
from safir.pydantic import HumanTimedelta

from .constants import DEFAULT_BASE_URL, HTTP_TIMEOUT, USER_AGENT

__all__ = ["GitHubAdminConfig"]


class GitHubAdminConfig(BaseSettings):
    """Configuration for ghadmin.

    Settings in the configuration file use camel-case. Each setting may also
    be given by an environment variable starting with ``GHADMIN_``.
    Environment variables take precedence over the configuration file.
    """

    model_config = SettingsConfigDict(
        alias_generator=to_camel, extra="forbid", populate_by_name=True
    )

    base_url: HttpUrl = Field(
        HttpUrl(DEFAULT_BASE_URL),
        title="GitHub API base URL",
        description=(
            "Base URL of the GitHub REST API. For GitHub Enterprise Server,"
            " this is https://<hostname>/api/v3."
        ),
        validation_alias=AliasChoices("GHADMIN_BASE_URL", "baseUrl"),
    )

    token: SecretStr = Field(
        ...,
        title="GitHub token",
        description="Token of a site administrator, used for all requests",
        validation_alias=AliasChoices("GHADMIN_TOKEN", "token"),
    )

    timeout: HumanTimedelta = Field(
        HTTP_TIMEOUT,
        title="Request timeout",
        description="Timeout for each request to GitHub",
        validation_alias=AliasChoices("GHADMIN_TIMEOUT", "timeout"),
    )

    user_agent: str = Field(
        USER_AGENT,
        title="User-Agent header",
        description="Value of the User-Agent header sent to GitHub",
        validation_alias=AliasChoices("GHADMIN_USER_AGENT", "userAgent"),
    )

    log_level: LogLevel = Field(
        LogLevel.INFO,
        title="Logging level",
        description="Python logging level",
        validation_alias=AliasChoices("GHADMIN_LOG_LEVEL", "logLevel"),
    )

    @override
    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Override the sources of settings.

        Deactivate :file:`.env` and secret file support. Allow environment
        variables to override init parameters, since init parameters come
        from the YAML configuration file and environment variables should
        take precedence.
        """
        return (env_settings, init_settings)

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Construct a configuration object from a configuration file.

        Parameters
        ----------
        path
            Path to the configuration file in YAML.

        Returns
        -------
        GitHubAdminConfig
            The corresponding configuration.
        """
        with path.open("r") as f:
            return cls.model_validate(yaml.safe_load(f) or {})

    def configure_logging(self) -> None:
        """Configure logging based on the configuration."""
        configure_logging(name="ghadmin", log_level=self.log_level)
