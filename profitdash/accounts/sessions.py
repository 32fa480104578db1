"""Mini README: Signed session tokens issued at login.

Structure:
    * SessionSigner - issues and verifies HS256 JWTs carrying the display name.

A token is handed back from ``POST /api/auth`` and must accompany write
requests, so the ``addedBy`` name on a transaction comes from a verified
login instead of the request body.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from ..errors import SessionError
from ..logging_utils import get_logger
from .credentials import Account

LOGGER = get_logger(__name__)

ALGORITHM = "HS256"


class SessionSigner:
    """Create and check session tokens with a shared secret."""

    def __init__(self, secret: str, *, ttl_minutes: int = 720) -> None:
        if not secret:
            raise ValueError("A session secret is required to sign tokens.")
        self._secret = secret
        self._ttl = timedelta(minutes=ttl_minutes)

    def issue(self, account: Account, *, now: Optional[datetime] = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "sub": account.username,
            "name": account.display_name,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._ttl).timestamp()),
        }
        return jwt.encode(claims, self._secret, algorithm=ALGORITHM)

    def verify(self, token: Optional[str]) -> str:
        """Return the display name embedded in a valid token."""

        if not token:
            raise SessionError("Missing session token")
        try:
            claims = jwt.decode(token, self._secret, algorithms=[ALGORITHM])
        except JWTError as error:
            LOGGER.warning("Rejected session token: %s", error)
            raise SessionError("Invalid or expired session token") from error
        name = claims.get("name")
        if not isinstance(name, str) or not name:
            raise SessionError("Session token carries no user name")
        return name

    @staticmethod
    def token_from_header(authorization: Optional[str]) -> Optional[str]:
        """Extract the token from an ``Authorization: Bearer`` header value."""

        if not authorization:
            return None
        scheme, _, value = authorization.partition(" ")
        if scheme.lower() != "bearer" or not value.strip():
            return None
        return value.strip()
