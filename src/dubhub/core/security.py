"""Supabase access-token helpers built on python-jose."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import jwt

from dubhub.core.settings import settings


def decode_access_token(token: str) -> dict[str, Any]:
    """Verify a Supabase access token and return its claims.

    Raises:
        jose.JWTError: If the signature, expiry or audience check fails.
    """
    return jwt.decode(
        token,
        settings.supabase_jwt_secret,
        algorithms=[settings.jwt_algorithm],
        audience=settings.jwt_audience,
    )


def create_access_token(subject: str, expires_minutes: int = 60) -> str:
    """Mint a token shaped like Supabase's, for local tooling and tests."""
    expire = datetime.now(UTC) + timedelta(minutes=expires_minutes)
    to_encode: dict[str, object] = {
        "sub": subject,
        "aud": settings.jwt_audience,
        "role": "authenticated",
        "exp": expire,
    }
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.supabase_jwt_secret,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt
