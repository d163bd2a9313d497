"""Security utilities for hashing passwords, issuing random tokens and signing session cookies."""

import asyncio
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
from fastapi import Response

from literacy.constants.constants import TOKEN_BYTES
from literacy.core.config import settings

logger = logging.getLogger(__name__)

BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    # bcrypt only looks at the first 72 bytes and newer releases refuse longer input
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password_sync(password: str, rounds: Optional[int] = None) -> str:
    """Hash a password with a fresh bcrypt salt."""
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password_sync(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False


async def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """bcrypt is CPU bound, so hashing runs in a worker thread."""
    return await asyncio.to_thread(hash_password_sync, password, rounds)


async def verify_password(password: str, password_hash: str) -> bool:
    return await asyncio.to_thread(verify_password_sync, password, password_hash)


def generate_token() -> str:
    """Random high-entropy token for email verification and password reset."""
    return secrets.token_hex(TOKEN_BYTES)


def create_jwt_token(data: dict, expires_delta: timedelta = timedelta(days=7)) -> str:
    """
    Creates a JWT (JSON Web Token) with the provided data and expiration time.

    Args:
        data (dict): The payload data to be encoded in the JWT.
        expires_delta (timedelta, optional): The time until the token expires.
            Defaults to 7 days.

    Returns:
        str: The encoded JWT string.

    Example:
        >>> token = create_jwt_token({"sub": "user-id", "sid": "session-id"})

    Note:
        The token includes standard JWT claims:
        - exp (expiration time)
        - iat (issued at time)
    """
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    to_encode.update({
        "exp": now + expires_delta,
        "iat": now
    })
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_jwt_token(token: str, verify_exp: bool = True) -> dict:
    """Decodes and validates a JWT token.

    Args:
        token (str): The JWT token string to decode.
        verify_exp (bool): Reject tokens past their exp claim. Defaults to True.

    Returns:
        dict: The decoded token payload containing the claims.

    Raises:
        jwt.InvalidTokenError: If the token is invalid, expired, or improperly formatted.
    """
    return jwt.decode(
        token,
        settings.SECRET_KEY,
        algorithms=[settings.ALGORITHM],
        options={"verify_exp": verify_exp}
    )


# -----------------------------
# Cookie Helpers
# -----------------------------
def set_auth_cookie(response: Response, token: str, expires: timedelta):
    """Set the HTTP-only session cookie."""
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE,
        path="/",
        max_age=int(expires.total_seconds())
    )
    if settings.COOKIE_SECURE:
        existing_cookie = response.headers.get("set-cookie", "")
        if existing_cookie and "Partitioned" not in existing_cookie:
            response.headers["set-cookie"] = existing_cookie + "; Partitioned"


def clear_auth_cookie(response: Response):
    """Clear the session cookie."""
    set_auth_cookie(response, "", timedelta(0))
