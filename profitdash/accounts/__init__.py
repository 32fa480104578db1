"""Mini README: Login handling for the Profit Dashboard.

Groups the fixed account table, the credential check used by ``/api/auth``
and the signed session tokens that protect write requests.
"""

from .credentials import DEFAULT_ACCOUNTS, Account, CredentialStore
from .sessions import SessionSigner

__all__ = ["Account", "CredentialStore", "DEFAULT_ACCOUNTS", "SessionSigner"]
