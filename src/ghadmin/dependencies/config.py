"""Config dependency for FastAPI."""

from __future__ import annotations

import os
from pathlib import Path

from ..config import GitHubAdminConfig
from ..constants import CONFIG_PATH

__all__ = ["ConfigDependency", "config_dependency"]


class ConfigDependency:
    """Provides the configuration as a dependency.

    The configuration is loaded when it's first requested and reloaded
    whenever the configuration path is changed. If there is no file at the
    default configuration path, the configuration is taken from environment
    variables alone.
    """

    def __init__(self) -> None:
        self._config_path = self._default_path()
        self._config: GitHubAdminConfig | None = None

    async def __call__(self) -> GitHubAdminConfig:
        """Load the configuration if necessary and return it."""
        return self.config()

    @property
    def config_path(self) -> Path:
        """Path to the configuration file."""
        return self._config_path

    def config(self) -> GitHubAdminConfig:
        """Load the configuration if necessary and return it.

        This is equivalent to using the dependency as a callable except that
        it's not async and can therefore be used from non-async functions.
        """
        if not self._config:
            self._config = self._load()
        return self._config

    def set_config_path(self, path: Path) -> None:
        """Change the configuration path and reload the config.

        Unlike the default path, an explicitly set path must exist.

        Parameters
        ----------
        path
            The new configuration path.

        Raises
        ------
        FileNotFoundError
            Raised if there is no file at that path.
        """
        config = GitHubAdminConfig.from_file(path)
        config.configure_logging()
        self._config_path = path
        self._config = config

    def reset(self) -> None:
        """Discard the loaded configuration and restore the default path.

        The next request for the configuration will load it again. Used by
        the test suite after changing environment variables.
        """
        self._config_path = self._default_path()
        self._config = None

    def _default_path(self) -> Path:
        return Path(os.getenv("GHADMIN_CONFIG_PATH", CONFIG_PATH))

    def _load(self) -> GitHubAdminConfig:
        if self._config_path.exists():
            config = GitHubAdminConfig.from_file(self._config_path)
        else:
            config = GitHubAdminConfig()
        config.configure_logging()
        return config


config_dependency = ConfigDependency()
"""The dependency that will return the current configuration."""
