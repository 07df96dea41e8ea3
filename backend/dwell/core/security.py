"""Access token verification.

Tokens are issued by the external auth service and signed with the shared
``SECRET_KEY``; the subject claim carries the user id.
"""
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from dwell.config.base import BaseSettings
from dwell.core.exceptions import AuthenticationError


def create_access_token(
    settings: BaseSettings, user_id: int, expires_delta: timedelta | None = None
) -> str:
    """Create a signed access token for ``user_id``."""
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(hours=1))
    to_encode = {"sub": str(user_id), "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(settings: BaseSettings, token: str) -> int:
    """Verify a token and return the user id it was issued for."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        raise AuthenticationError("Could not validate credentials") from e

    subject = payload.get("sub")
    try:
        return int(subject)
    except (TypeError, ValueError) as e:
        raise AuthenticationError("Could not validate credentials") from e
