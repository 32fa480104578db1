"""Mini README: Exception hierarchy shared by the Profit Dashboard services.

Structure:
    * ProfitDashError - base class for every domain failure.
    * InvalidCredentials - login rejected; deliberately carries no cause.
    * SessionError - session token missing, expired, or tampered with.
    * StorageError - the transaction file could not be read or written.

The web layer maps these onto HTTP status codes; services raise them without
knowing anything about HTTP.
"""

from __future__ import annotations


class ProfitDashError(Exception):
    """Base class for Profit Dashboard failures."""


class InvalidCredentials(ProfitDashError):
    """Raised when a username/password pair does not authenticate."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class SessionError(ProfitDashError):
    """Raised when a session token cannot be verified."""


class StorageError(ProfitDashError):
    """Raised when the transaction store cannot be read or written."""
