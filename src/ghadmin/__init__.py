"""Client for the GitHub Enterprise administration API."""

from .client import GitHubClient
from .config import GitHubAdminConfig
from .exceptions import (
    GitHubError,
    GitHubNotFoundError,
    GitHubRequestError,
    GitHubValidationError,
    GitHubWebError,
)
from .mock import (
    MockGitHubAdmin,
    MockGitHubAdminAction,
    register_mock_github_admin,
)
from .models import (
    AdminMessage,
    OptionalFieldsModel,
    Plan,
    TeamLDAPMapping,
    User,
    UserLDAPMapping,
)
from .services.admin import AdminService

__all__ = [
    "AdminMessage",
    "AdminService",
    "GitHubAdminConfig",
    "GitHubClient",
    "GitHubError",
    "GitHubNotFoundError",
    "GitHubRequestError",
    "GitHubValidationError",
    "GitHubWebError",
    "MockGitHubAdmin",
    "MockGitHubAdminAction",
    "OptionalFieldsModel",
    "Plan",
    "TeamLDAPMapping",
    "User",
    "UserLDAPMapping",
    "register_mock_github_admin",
]
