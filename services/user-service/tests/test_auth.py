"""
Tests for JWT bearer authentication.
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials

from app.auth import create_access_token, decode_access_token, require_authentication
from app.config import settings


def bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestTokens:
    """Tests for token creation and decoding."""

    def test_round_trip(self):
        """Test a created token decodes with its claims."""
        token = create_access_token("42", role="Admin")

        payload = decode_access_token(token)

        assert payload["sub"] == "42"
        assert payload["role"] == "Admin"
        assert payload["iss"] == settings.JWT_ISSUER

    def test_expired_token(self):
        """Test an expired token is rejected."""
        token = create_access_token("42", expires_minutes=-1)
        assert decode_access_token(token) is None

    def test_wrong_secret(self):
        """Test a token signed with another key is rejected."""
        token = jwt.encode(
            {
                "sub": "42",
                "iss": settings.JWT_ISSUER,
                "aud": settings.JWT_AUDIENCE,
                "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
            },
            "another-secret-key-that-is-long-enough",
            algorithm="HS256",
        )
        assert decode_access_token(token) is None

    def test_wrong_audience(self):
        """Test a token for another audience is rejected."""
        token = jwt.encode(
            {
                "sub": "42",
                "iss": settings.JWT_ISSUER,
                "aud": "someone-else",
                "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
            },
            settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
        assert decode_access_token(token) is None

    def test_garbage_token(self):
        """Test a malformed token is rejected."""
        assert decode_access_token("not.a.jwt") is None


class TestRequireAuthentication:
    """Tests for the authentication dependency."""

    @pytest.mark.asyncio
    async def test_missing_credentials(self):
        """Test requests without a token get 401."""
        with pytest.raises(HTTPException) as exc_info:
            await require_authentication(None)
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_invalid_token(self):
        """Test requests with a bad token get 401."""
        with pytest.raises(HTTPException) as exc_info:
            await require_authentication(bearer("bad"))
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_valid_token(self):
        """Test a valid token yields the principal."""
        principal = await require_authentication(bearer(create_access_token("7", role="Manager")))

        assert principal.subject == "7"
        assert principal.role == "Manager"
