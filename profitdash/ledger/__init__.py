"""Mini README: Revenue and expense ledger for the Profit Dashboard.

Modules:
    * models - transaction types, validated input and stored records.
    * store - append-only JSON document persistence.
    * summary - monthly rollups and the dashboard overview.
"""

from .models import Transaction, TransactionInput, TransactionType
from .store import StoreSnapshot, TransactionStore
from .summary import DashboardOverview, MonthlySummary, aggregate_monthly, build_overview

__all__ = [
    "DashboardOverview",
    "MonthlySummary",
    "StoreSnapshot",
    "Transaction",
    "TransactionInput",
    "TransactionStore",
    "TransactionType",
    "aggregate_monthly",
    "build_overview",
]
