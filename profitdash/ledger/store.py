"""Mini README: JSON-file backed, append-only transaction store.

Structure:
    * StoreSnapshot - result of a read, flagging whether storage was usable.
    * TransactionStore - lazily initialised store exposing list and append.

The whole collection lives in one document shaped ``{"sales": [...]}``.
Appends rewrite the full document while holding the store's lock, so two
requests in the same process can no longer drop each other's rows. Writes go
to a temporary sibling file that replaces the original in one step, which
keeps readers from ever seeing a partially written document.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..errors import StorageError
from ..logging_utils import get_logger
from .models import Transaction, TransactionInput

LOGGER = get_logger(__name__)

COLLECTION_KEY = "sales"


@dataclass(slots=True)
class StoreSnapshot:
    """Transactions read from storage plus the health of that read."""

    transactions: List[Transaction] = field(default_factory=list)
    available: bool = True
    error: Optional[str] = None


class TransactionStore:
    """Persist transactions to a single JSON document."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._lock = threading.RLock()
        LOGGER.debug("Transaction store bound to %s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_document(self) -> None:
        """Create the directory and an empty collection on first access."""

        with self._lock:
            if self._path.exists():
                return
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._write_document({COLLECTION_KEY: []})
        LOGGER.info("Initialised empty transaction store at %s", self._path)

    def _read_document(self) -> Dict[str, Any]:
        try:
            self._ensure_document()
            with self._path.open("r", encoding="utf-8") as handle:
                document = json.load(handle)
        except (OSError, json.JSONDecodeError) as error:
            raise StorageError(f"Unable to read {self._path}: {error}") from error
        if not isinstance(document, dict) or not isinstance(document.get(COLLECTION_KEY), list):
            raise StorageError(f"{self._path} does not contain a '{COLLECTION_KEY}' list")
        return document

    def _write_document(self, document: Dict[str, Any]) -> None:
        descriptor, temp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.", suffix=".tmp", dir=str(self._path.parent)
        )
        try:
            with os.fdopen(descriptor, "w", encoding="utf-8") as handle:
                json.dump(document, handle, indent=2)
                handle.write("\n")
            os.replace(temp_name, self._path)
        except OSError as error:
            Path(temp_name).unlink(missing_ok=True)
            raise StorageError(f"Unable to write {self._path}: {error}") from error

    def load(self) -> StoreSnapshot:
        """Read every transaction, newest first, reporting unusable storage."""

        try:
            document = self._read_document()
        except StorageError as error:
            LOGGER.error("Transaction storage unavailable: %s", error)
            return StoreSnapshot(available=False, error=str(error))

        transactions: List[Transaction] = []
        for row in document[COLLECTION_KEY]:
            try:
                transactions.append(Transaction.from_dict(row))
            except ValueError as error:
                LOGGER.warning("Skipping stored row: %s", error)
        transactions.sort(key=lambda transaction: transaction.received_at, reverse=True)
        return StoreSnapshot(transactions=transactions)

    def list_all(self) -> List[Transaction]:
        """Return transactions ordered by most recent receipt first."""

        return self.load().transactions

    def append(
        self,
        candidate: TransactionInput,
        *,
        added_by: str,
        now: Optional[datetime] = None,
    ) -> Transaction:
        """Store a new transaction alongside every existing one."""

        transaction = Transaction.create(candidate, added_by=added_by, now=now)
        with self._lock:
            document = self._read_document()
            document[COLLECTION_KEY].append(transaction.as_dict())
            self._write_document(document)
        LOGGER.info(
            "Recorded %s transaction %s (%.2f) for %s",
            transaction.type,
            transaction.id,
            transaction.amount,
            added_by,
        )
        return transaction
