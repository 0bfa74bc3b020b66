"""Clean auth module init."""

from .jwt import create_access_token, verify_token
from .permissions import (
    get_current_user,
    require_roles,
    reviewer_required,
    is_reviewer,
)

__all__ = [
    "create_access_token",
    "verify_token",
    "get_current_user",
    "require_roles",
    "reviewer_required",
    "is_reviewer",
]
