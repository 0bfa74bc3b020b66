"""JWT token handling. Token diterbitkan oleh layanan auth; service ini hanya memverifikasi."""

from datetime import datetime, timedelta
from typing import Dict, Optional, Any
from jose import jwt

from src.core.config import settings


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token (dipakai tooling internal dan test)."""
    to_encode = {
        "sub": data.get("sub", ""),
        "role": data.get("role", ""),
        "type": data.get("type", "access")
    }
    to_encode.update({k: v for k, v in data.items() if k not in to_encode})

    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode["exp"] = expire

    return jwt.encode(
        to_encode,
        settings.JWT_SECRET_KEY,
        algorithm=settings.ALGORITHM
    )


def verify_token(token: str) -> Dict[str, Any]:
    """Verify and decode a JWT token."""
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.ALGORITHM]
        )
    except jwt.ExpiredSignatureError:
        raise jwt.ExpiredSignatureError("Token has expired")
    except jwt.JWTError as e:
        raise jwt.JWTError(f"Token validation failed: {str(e)}")
