"""Mini README: Monthly rollups and dashboard overview figures.

Structure:
    * MonthlySummary - revenue by channel, expenses and profit for one month.
    * aggregate_monthly - group transactions by the month of their business date.
    * DashboardOverview / build_overview - latest month, margin and revenue mix.

Summaries are derived on every read and never stored. Totals and profit are
computed from the accumulated channel figures so they cannot drift from them.
Rows whose date cannot be parsed are grouped under an ``Invalid Date`` bucket
that sorts after every real month; rows with an unrecognised type count
towards no figure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

from ..logging_utils import get_logger
from .models import Transaction, TransactionType

LOGGER = get_logger(__name__)

INVALID_DATE_LABEL = "Invalid Date"
ZERO = Decimal("0")


@dataclass(slots=True)
class MonthlySummary:
    """Aggregated figures for a single calendar month.

    Amounts are accumulated as ``Decimal`` so the totals do not depend on the
    order transactions arrive in; they become floats only in ``as_dict``.
    """

    key: str
    month: str
    online_revenue: Decimal = ZERO
    cash_revenue: Decimal = ZERO
    expenses: Decimal = ZERO

    @property
    def total_revenue(self) -> Decimal:
        return self.online_revenue + self.cash_revenue

    @property
    def profit(self) -> Decimal:
        return self.total_revenue - self.expenses

    def add(self, transaction: Transaction) -> None:
        """Fold one transaction's amount into the matching figure."""

        kind = transaction.kind
        amount = Decimal(str(transaction.amount))
        if kind is TransactionType.ONLINE_REVENUE:
            self.online_revenue += amount
        elif kind is TransactionType.CASH_REVENUE:
            self.cash_revenue += amount
        elif kind is TransactionType.EXPENSE:
            self.expenses += amount
        else:
            LOGGER.debug(
                "Ignoring transaction %s with unrecognised type '%s'",
                transaction.id,
                transaction.type,
            )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "month": self.month,
            "onlineRevenue": float(self.online_revenue),
            "cashRevenue": float(self.cash_revenue),
            "totalRevenue": float(self.total_revenue),
            "expenses": float(self.expenses),
            "profit": float(self.profit),
        }


def _parse_business_date(value: str) -> Optional[date]:
    """Parse an ISO date (or datetime) string, returning ``None`` when invalid."""

    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None


def _month_bucket(value: str) -> tuple[str, str]:
    """Return ``(sort key, display label)`` for a transaction date."""

    parsed = _parse_business_date(value)
    if parsed is None:
        return INVALID_DATE_LABEL, INVALID_DATE_LABEL
    return f"{parsed.year:04d}-{parsed.month:02d}", parsed.strftime("%b %Y")


def aggregate_monthly(transactions: Iterable[Transaction]) -> List[MonthlySummary]:
    """Group transactions into per-month summaries ordered oldest first."""

    buckets: Dict[str, MonthlySummary] = {}
    for transaction in transactions:
        key, label = _month_bucket(transaction.date)
        summary = buckets.get(key)
        if summary is None:
            summary = buckets[key] = MonthlySummary(key=key, month=label)
        summary.add(transaction)
    # Zero-padded keys compare lexically in calendar order; digits sort before
    # letters so the invalid bucket lands last.
    return [buckets[key] for key in sorted(buckets)]


@dataclass(slots=True)
class DashboardOverview:
    """Headline figures shown at the top of the dashboard."""

    current_month: MonthlySummary
    history: List[MonthlySummary] = field(default_factory=list)

    @property
    def profit_margin(self) -> float:
        """Profit as a percentage of revenue, rounded to one decimal place."""

        revenue = self.current_month.total_revenue
        if revenue <= 0:
            return 0.0
        return round(float(self.current_month.profit / revenue * 100), 1)

    @property
    def revenue_mix(self) -> List[Dict[str, Any]]:
        return [
            {"name": "Online", "value": float(self.current_month.online_revenue)},
            {"name": "Cash", "value": float(self.current_month.cash_revenue)},
        ]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "currentMonth": self.current_month.as_dict(),
            "profitMargin": self.profit_margin,
            "revenueMix": self.revenue_mix,
            "history": [summary.as_dict() for summary in self.history],
        }


def build_overview(summaries: List[MonthlySummary]) -> DashboardOverview:
    """Pick the most recent real month, falling back to an empty placeholder."""

    dated = [summary for summary in summaries if summary.key != INVALID_DATE_LABEL]
    if dated:
        current = dated[-1]
    else:
        current = MonthlySummary(key="", month="Current")
    return DashboardOverview(current_month=current, history=list(summaries))
