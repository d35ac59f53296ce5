"""
JWT bearer authentication for the user service routers.

Tokens are HS256-signed and must carry the configured issuer and audience
and an expiry.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings
from .logging_config import get_logger

logger = get_logger(__name__)
security = HTTPBearer(auto_error=False)


class Principal:
    """
    Caller identity taken from a validated token.

    Attributes:
        subject: Token subject (user identifier)
        role: Optional role claim
    """

    def __init__(self, subject: str, role: Optional[str] = None):
        self.subject = subject
        self.role = role

    def __repr__(self) -> str:
        return f"Principal(subject={self.subject}, role={self.role})"


def create_access_token(
    subject: str,
    role: Optional[str] = None,
    expires_minutes: int = 60,
) -> str:
    """
    Create a signed access token.

    Args:
        subject: Token subject
        role: Optional role claim
        expires_minutes: Lifetime of the token

    Returns:
        Encoded JWT
    """
    now = datetime.now(timezone.utc)
    payload: Dict[str, Any] = {
        "sub": subject,
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "iat": now,
        "exp": now + timedelta(minutes=expires_minutes),
    }
    if role:
        payload["role"] = role

    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Decode and validate an access token.

    Args:
        token: JWT token string

    Returns:
        Decoded payload if valid, None otherwise
    """
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            issuer=settings.JWT_ISSUER,
            audience=settings.JWT_AUDIENCE,
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        logger.warning("Token has expired")
        return None
    except jwt.InvalidTokenError as e:
        logger.warning("Invalid token", error=str(e))
        return None


async def require_authentication(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Principal:
    """
    Require a valid bearer token.

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_access_token(credentials.credentials)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return Principal(subject=str(payload["sub"]), role=payload.get("role"))
