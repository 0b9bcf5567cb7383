# app/core/security.py
"""
Password hashing and access-token handling.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
from jose import jwt, JWTError

from app.core.config import get_settings

# bcrypt cost factor
BCRYPT_ROUNDS = 10

BEARER_SCHEME = "Bearer"

# bcrypt only reads the first 72 bytes of a secret
BCRYPT_MAX_BYTES = 72


class InvalidToken(Exception):
    """Raised when a token fails signature, expiry or payload checks."""


@dataclass
class TokenClaims:
    """Identity carried by a verified access token."""

    id: str
    roles: Any = None
    exp: int | None = None


def _secret_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(_secret_bytes(password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against its bcrypt hash.

    A malformed stored hash never matches.
    """
    try:
        return bcrypt.checkpw(
            _secret_bytes(plain_password),
            hashed_password.encode("utf-8"),
        )
    except ValueError:
        return False


def issue_token(
    identity: str,
    roles: list[str],
    secret: str | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Sign an access token carrying `{id, roles}`.

    Args:
        identity: user id.
        roles: role names of the user.
        secret: signing secret; defaults to settings.JWT_SECRET.
        expires_delta: lifetime; defaults to ACCESS_TOKEN_EXPIRE_MINUTES.
    """
    settings = get_settings()
    now = datetime.now(timezone.utc)
    expire = now + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode = {
        "id": identity,
        "roles": list(roles),
        "iat": int(now.timestamp()),
        "exp": expire,
    }
    return jwt.encode(
        to_encode,
        secret or settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
    )


def verify_token(token: str, secret: str | None = None) -> TokenClaims:
    """
    Decode and verify an access token.

    Verification:
      - signature (HMAC with `secret` or settings.JWT_SECRET)
      - expiration time (exp)
      - payload carries a string `id`

    Raises:
        InvalidToken: on any of the above failing.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            secret or settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except JWTError as exc:
        raise InvalidToken(str(exc)) from exc

    identity = payload.get("id")
    if not isinstance(identity, str) or not identity:
        raise InvalidToken("Token missing id")

    return TokenClaims(
        id=identity,
        roles=payload.get("roles"),
        exp=payload.get("exp"),
    )


def extract_bearer_token(authorization: str | None) -> str | None:
    """
    Return the token part of an `Authorization: Bearer <token>` header.

    The scheme is matched case-sensitively. Missing header, other schemes
    and a blank token all yield None.
    """
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) < 2 or parts[0] != BEARER_SCHEME:
        return None
    return parts[1]
