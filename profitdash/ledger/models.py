"""Mini README: Transaction records for the revenue/expense ledger.

Structure:
    * TransactionType - enum of the three recognised entry kinds.
    * TransactionInput - validated payload submitted by a logged-in user.
    * Transaction - stored record with server-assigned id and timestamp.

Stored rows keep the raw ``date`` and ``type`` strings exactly as written so
that older rows with unexpected values still load; ``Transaction.kind`` and
the aggregator decide how to treat them. New rows always pass through
``TransactionInput`` and are therefore well formed.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date as calendar_date
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TransactionType(str, Enum):
    """Enumerate the supported transaction categories."""

    ONLINE_REVENUE = "online-revenue"
    CASH_REVENUE = "cash-revenue"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction type: {value}") from error


class TransactionInput(BaseModel):
    """Fields a user supplies when recording a transaction."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    date: calendar_date
    type: TransactionType
    amount: float = Field(..., gt=0, allow_inf_nan=False)
    description: str = ""
    added_by: Optional[str] = Field(None, alias="addedBy")

    @field_validator("type", mode="before")
    @classmethod
    def _normalise_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return TransactionType.from_str(value)
        return value

    @field_validator("amount", mode="before")
    @classmethod
    def _reject_boolean_amount(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("Amount must be a number")
        return value

    @field_validator("description", mode="before")
    @classmethod
    def _blank_description(cls, value: Any) -> Any:
        return "" if value is None else value


@dataclass(frozen=True, slots=True)
class Transaction:
    """A stored ledger entry; never modified after it is written."""

    id: str
    date: str
    type: str
    amount: float
    description: str
    added_by: str
    timestamp: str

    @classmethod
    def create(
        cls,
        candidate: TransactionInput,
        *,
        added_by: str,
        now: Optional[datetime] = None,
    ) -> "Transaction":
        """Stamp a validated input with a fresh id and receipt time."""

        received = now or datetime.now(timezone.utc)
        return cls(
            id=str(uuid.uuid4()),
            date=candidate.date.isoformat(),
            type=candidate.type.value,
            amount=float(candidate.amount),
            description=candidate.description,
            added_by=added_by,
            timestamp=received.isoformat(timespec="microseconds").replace("+00:00", "Z"),
        )

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Transaction":
        """Rebuild a stored row, raising ``ValueError`` when it is unusable."""

        try:
            return cls(
                id=str(payload["id"]),
                date=str(payload["date"]),
                type=str(payload["type"]),
                amount=float(payload["amount"]),
                description=str(payload.get("description") or ""),
                added_by=str(payload.get("addedBy") or ""),
                timestamp=str(payload["timestamp"]),
            )
        except (KeyError, TypeError, ValueError) as error:
            raise ValueError(f"Malformed transaction row: {error}") from error

    @property
    def kind(self) -> Optional[TransactionType]:
        """The recognised transaction type, or ``None`` for unknown values."""

        try:
            return TransactionType(self.type)
        except ValueError:
            return None

    @property
    def received_at(self) -> datetime:
        """Timestamp as an aware datetime, used for newest-first ordering."""

        try:
            parsed = datetime.fromisoformat(self.timestamp.replace("Z", "+00:00"))
        except ValueError:
            return datetime.min.replace(tzinfo=timezone.utc)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

    def as_dict(self) -> Dict[str, Any]:
        """Export the transaction with the JSON field names clients expect."""

        return {
            "id": self.id,
            "date": self.date,
            "type": self.type,
            "amount": self.amount,
            "description": self.description,
            "addedBy": self.added_by,
            "timestamp": self.timestamp,
        }
