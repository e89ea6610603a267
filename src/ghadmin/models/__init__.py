"""Models for GitHub API records."""

from .admin import AdminMessage, TeamLDAPMapping, UserLDAPMapping
from .optional import OptionalFieldsModel
from .user import Plan, User

__all__ = [
    "AdminMessage",
    "OptionalFieldsModel",
    "Plan",
    "TeamLDAPMapping",
    "User",
    "UserLDAPMapping",
]
