"""Caller identity resolution.

The identity provider signs bearer tokens; this module only verifies them and
turns the claims into a :class:`Caller`. The resulting object is passed
explicitly into every service call.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt

from park_locator.core.settings import settings


class InvalidToken(ValueError):
    """Raised when a bearer token cannot be verified."""


@dataclass(frozen=True)
class Caller:
    """Identity and capability of whoever issued the current request."""

    user_id: str | None = None
    is_admin: bool = False

    @classmethod
    def anonymous(cls) -> Caller:
        return cls()

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    def owns(self, owner_id: str | None) -> bool:
        """Return True when the caller is the given owner identity."""
        return self.user_id is not None and owner_id == self.user_id


def decode_caller(token: str) -> Caller:
    """Verify a bearer token and return the caller it identifies.

    Raises:
        InvalidToken: If the signature, expiry or subject is invalid.
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as err:
        raise InvalidToken("Could not validate credentials") from err

    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        raise InvalidToken("Could not validate credentials")
    return Caller(user_id=subject, is_admin=payload.get(settings.admin_claim) is True)


def create_access_token(
    subject: str,
    *,
    is_admin: bool = False,
    expires_minutes: int = 60,
    extra_claims: dict[str, Any] | None = None,
) -> str:
    """Create a signed token in the identity provider's format.

    Used by local tooling and tests; production tokens come from the provider.
    """
    to_encode: dict[str, Any] = {"sub": subject, settings.admin_claim: is_admin}
    if extra_claims:
        to_encode.update(extra_claims)
    to_encode["exp"] = datetime.now(UTC) + timedelta(minutes=expires_minutes)
    encoded_jwt: str = jwt.encode(to_encode, settings.secret_key, algorithm=settings.jwt_algorithm)
    return encoded_jwt
