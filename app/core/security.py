"""Password hashing and session token helpers."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from app.core.config import settings
from app.core.exceptions import AuthenticationError

BCRYPT_ROUNDS = 12
MIN_PASSWORD_LENGTH = 6


def hash_password(password: str) -> str:
    """Hash a password with bcrypt."""
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored bcrypt hash.

    Malformed hashes never verify.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def create_session_token(
    user_id: int,
    secret: str | None = None,
    expire_days: int | None = None,
    algorithm: str | None = None,
) -> str:
    """Sign a session token for a user.

    Args:
        user_id: Id of the authenticated user
        secret: Signing key, defaults to ``JWT_SECRET``
        expire_days: Token lifetime, defaults to ``JWT_EXPIRE_DAYS``
        algorithm: Signing algorithm, defaults to ``JWT_ALGORITHM``

    Returns:
        Encoded JWT
    """
    now = datetime.now(UTC)
    payload = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + timedelta(days=expire_days or settings.JWT_EXPIRE_DAYS),
    }
    return jwt.encode(
        payload,
        secret or settings.JWT_SECRET,
        algorithm=algorithm or settings.JWT_ALGORITHM,
    )


def decode_session_token(
    token: str, secret: str | None = None, algorithm: str | None = None
) -> int:
    """Verify a session token and return the user id it was issued for.

    Raises:
        AuthenticationError: If the token is expired, tampered with or malformed
    """
    try:
        payload: dict[str, Any] = jwt.decode(
            token,
            secret or settings.JWT_SECRET,
            algorithms=[algorithm or settings.JWT_ALGORITHM],
            options={"require": ["sub", "exp"]},
        )
        return int(payload["sub"])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Session expired") from None
    except (jwt.InvalidTokenError, ValueError):
        raise AuthenticationError("Invalid token") from None
