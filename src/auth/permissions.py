"""Authorization dan permission checking berbasis claim token (single role)."""

from typing import List, Dict, Optional
from fastapi import Depends, HTTPException, status, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
import logging

from src.auth.jwt import verify_token
from src.models.enums import UserRole

logger = logging.getLogger(__name__)


class JWTBearer(HTTPBearer):
    """JWT Bearer handler - token hanya dari Authorization header."""

    def __init__(self, auto_error: bool = True):
        super(JWTBearer, self).__init__(auto_error=auto_error)

    async def __call__(self, request: Request) -> Optional[str]:
        try:
            credentials: HTTPAuthorizationCredentials = await super(
                JWTBearer, self
            ).__call__(request)
        except HTTPException:
            if self.auto_error:
                raise HTTPException(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    detail="Not authenticated. Token required in Authorization header.",
                    headers={"WWW-Authenticate": "Bearer"},
                )
            return None

        if not credentials:
            return None
        if credentials.scheme != "Bearer":
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Invalid authentication scheme.",
            )
        return credentials.credentials


jwt_bearer = JWTBearer()


async def get_current_user(token: str = Depends(jwt_bearer)) -> Dict:
    """Get the current user from JWT claims (sub, role, nama)."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = verify_token(token)
    except JWTError:
        raise credentials_exception

    user_id = payload.get("sub")
    if not user_id or payload.get("type", "access") != "access":
        raise credentials_exception

    user_role = payload.get("role") or ""
    return {
        "id": str(user_id),
        "nama": payload.get("nama"),
        "role": user_role,
        "roles": [user_role],
        "instansi_id": payload.get("instansi_id"),
    }


def require_roles(required_roles: List[str]):
    """
    Dependency factory to require specific roles - SINGLE ROLE SYSTEM.

    Args:
        required_roles: List of role names that are allowed access

    Returns:
        Dependency function that checks user roles
    """
    async def _check_roles(
        current_user: Dict = Depends(get_current_user),
    ) -> Dict:
        user_role = current_user.get("role")

        if user_role not in required_roles:
            logger.warning(f"Access denied for user {current_user.get('id')} with role {user_role}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied. Required roles: {', '.join(required_roles)}. Your role: {user_role}",
            )

        return current_user

    return _check_roles


# Reviewer: boleh verifikasi/tolak/hapus submission dan kelola template
reviewer_required = require_roles(UserRole.reviewer_values())


def has_any_role(user: Dict, roles: List[str]) -> bool:
    """Check if user has any of the specified roles - SINGLE ROLE SYSTEM."""
    return user.get("role") in roles


def is_reviewer(user: Dict) -> bool:
    """Check if user is SUPER_ADMIN atau ADMIN."""
    return has_any_role(user, UserRole.reviewer_values())
