"""Constants for ghadmin."""

from datetime import timedelta

__all__ = [
    "CONFIG_PATH",
    "DEFAULT_BASE_URL",
    "GITHUB_API_VERSION",
    "GITHUB_MEDIA_TYPE",
    "HTTP_TIMEOUT",
    "USER_AGENT",
]

CONFIG_PATH = "/etc/ghadmin/ghadmin.yaml"
"""Default configuration path."""

DEFAULT_BASE_URL = "https://api.github.com"
"""Base URL of the GitHub REST API.

GitHub Enterprise Server installations serve the API under
``https://<hostname>/api/v3`` instead.
"""

GITHUB_API_VERSION = "2022-11-28"
"""Version of the GitHub REST API to request."""

GITHUB_MEDIA_TYPE = "application/vnd.github+json"
"""Media type sent in the ``Accept`` header of every request."""

HTTP_TIMEOUT = timedelta(seconds=20)
"""Timeout for outbound HTTP requests to GitHub."""

USER_AGENT = "ghadmin"
"""Default ``User-Agent`` header value. GitHub rejects requests without one."""
