"""Bearer token helpers used by the JWT actor resolution strategy."""
from __future__ import annotations

from datetime import timedelta

from jose import JWTError, jwt

from dopameter.core.settings import Settings
from dopameter.db.time import utcnow


class InvalidTokenError(Exception):
    """Raised when a bearer token cannot be decoded into an actor id."""


def create_access_token(
    subject: str,
    settings: Settings,
    extra_claims: dict[str, str] | None = None,
) -> str:
    """Create a signed JWT whose ``sub`` claim is the actor id."""
    to_encode: dict[str, object] = {"sub": subject}
    if extra_claims:
        to_encode.update(extra_claims)
    to_encode["exp"] = utcnow() + timedelta(minutes=settings.access_token_expire_minutes)
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def decode_access_token(token: str, settings: Settings) -> str:
    """Return the actor id carried by ``token``.

    Raises:
        InvalidTokenError: If the signature, expiry or ``sub`` claim is invalid.
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as err:
        raise InvalidTokenError("Could not validate credentials") from err

    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        raise InvalidTokenError("Could not validate credentials")
    return subject
