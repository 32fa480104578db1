"""Mini README: Account table and login verification.

Structure:
    * Account - immutable username/password/display-name record.
    * DEFAULT_ACCOUNTS - the built-in manager and staff logins.
    * CredentialStore - ordered lookup with an optional override account.

The store is built once at application start (see ``from_settings``) and is
never modified afterwards. Passwords are plaintext and compared exactly; a
failed login never reveals whether the username exists.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from ..configuration import DashboardSettings
from ..errors import InvalidCredentials
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Account:
    """A login permitted to use the dashboard."""

    username: str
    password: str
    display_name: str


DEFAULT_ACCOUNTS: Tuple[Account, ...] = (
    Account(username="manager", password="pass123", display_name="Manager"),
    Account(username="staff", password="pass456", display_name="Staff Member"),
)


class CredentialStore:
    """Verify submitted credentials against a fixed set of accounts."""

    def __init__(
        self,
        accounts: Iterable[Account] = DEFAULT_ACCOUNTS,
        *,
        override: Optional[Account] = None,
    ) -> None:
        self._accounts: Dict[str, Account] = {account.username: account for account in accounts}
        self._override = override
        LOGGER.debug(
            "Credential store initialised with %s accounts (override=%s)",
            len(self._accounts),
            override is not None,
        )

    @classmethod
    def from_settings(
        cls,
        settings: DashboardSettings,
        accounts: Iterable[Account] = DEFAULT_ACCOUNTS,
    ) -> "CredentialStore":
        """Build the store, adding the override pair when both halves are set."""

        override = None
        if settings.auth_username and settings.auth_password:
            override = Account(
                username=settings.auth_username,
                password=settings.auth_password,
                display_name=settings.auth_username,
            )
        return cls(accounts, override=override)

    @property
    def override(self) -> Optional[Account]:
        return self._override

    def authenticate(self, username: str, password: str) -> Account:
        """Return the matching account or raise ``InvalidCredentials``."""

        if self._override is not None:
            if username == self._override.username:
                if password == self._override.password:
                    LOGGER.info("Override account '%s' authenticated", username)
                    return self._override
                # The override shadows any built-in account with the same name.
                LOGGER.warning("Rejected login for '%s'", username)
                raise InvalidCredentials()

        account = self._accounts.get(username)
        if account is None or account.password != password:
            LOGGER.warning("Rejected login for '%s'", username)
            raise InvalidCredentials()
        LOGGER.info("Account '%s' authenticated", username)
        return account
