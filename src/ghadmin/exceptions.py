"""Exceptions for ghadmin."""

from __future__ import annotations

from safir.slack.blockkit import SlackException, SlackWebException

__all__ = [
    "GitHubError",
    "GitHubNotFoundError",
    "GitHubRequestError",
    "GitHubValidationError",
    "GitHubWebError",
]


class GitHubError(SlackException):
    """Base class for ghadmin exceptions."""


class GitHubRequestError(GitHubError):
    """A request to the GitHub API could not be constructed."""


class GitHubValidationError(GitHubError):
    """GitHub response did not validate against the expected model."""


class GitHubWebError(SlackWebException, GitHubError):
    """A web request to GitHub failed.

    This covers both network failures and responses with a non-success
    status code. The ``status`` attribute is `None` for network failures.
    """


class GitHubNotFoundError(GitHubWebError):
    """A web request to GitHub failed with a 404 response."""
