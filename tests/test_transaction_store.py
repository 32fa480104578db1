"""Mini README: Tests for the JSON-file transaction store.

Structure:
    * empty and freshly created stores list nothing without raising.
    * appends keep earlier rows, assign unique ids and newest-first order.
    * corrupt storage reads as unavailable and refuses to be overwritten.
"""

from __future__ import annotations

import json
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone

import pytest

from profitdash.errors import StorageError
from profitdash.ledger import TransactionInput, TransactionStore


def _input(**overrides) -> TransactionInput:
    payload = {"date": "2024-01-05", "type": "online-revenue", "amount": 100}
    payload.update(overrides)
    return TransactionInput.model_validate(payload)


def test_fresh_store_lists_nothing_and_creates_document(store: TransactionStore) -> None:
    """First access creates the directory and an empty collection."""

    assert not store.path.exists()
    assert store.list_all() == []
    assert json.loads(store.path.read_text(encoding="utf-8")) == {"sales": []}


def test_append_preserves_rows_and_orders_newest_first(store: TransactionStore) -> None:
    """Every appended row survives with its id, newest timestamp first."""

    start = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)
    appended = [
        store.append(_input(amount=amount), added_by="Manager", now=start + timedelta(minutes=offset))
        for offset, amount in enumerate([10, 20, 30])
    ]

    listed = store.list_all()
    assert [transaction.id for transaction in listed] == [t.id for t in reversed(appended)]
    assert len({transaction.id for transaction in listed}) == 3
    assert listed[0].amount == pytest.approx(30)
    assert all(transaction.added_by == "Manager" for transaction in listed)


def test_append_keeps_existing_rows_written_elsewhere(store: TransactionStore) -> None:
    store.path.parent.mkdir(parents=True, exist_ok=True)
    existing = {
        "id": "legacy-1",
        "date": "2023-12-31",
        "type": "expense",
        "amount": 5,
        "description": "",
        "addedBy": "Staff Member",
        "timestamp": "2023-12-31T10:00:00.000Z",
    }
    store.path.write_text(json.dumps({"sales": [existing]}), encoding="utf-8")

    created = store.append(_input(), added_by="Manager")

    ids = [transaction.id for transaction in store.list_all()]
    assert ids == [created.id, "legacy-1"]


def test_append_assigns_receipt_timestamp(store: TransactionStore) -> None:
    """The stored timestamp is server time, independent of the business date."""

    before = datetime.now(timezone.utc)
    created = store.append(_input(date="2020-01-01"), added_by="Manager")

    assert created.date == "2020-01-01"
    assert created.received_at >= before.replace(microsecond=0)


def test_corrupt_document_reads_as_unavailable(store: TransactionStore) -> None:
    store.path.parent.mkdir(parents=True, exist_ok=True)
    store.path.write_text("{not json", encoding="utf-8")

    snapshot = store.load()
    assert snapshot.transactions == []
    assert snapshot.available is False
    assert store.list_all() == []

    with pytest.raises(StorageError):
        store.append(_input(), added_by="Manager")
    assert store.path.read_text(encoding="utf-8") == "{not json"


def test_malformed_rows_are_skipped(store: TransactionStore) -> None:
    store.path.parent.mkdir(parents=True, exist_ok=True)
    store.path.write_text(json.dumps({"sales": [{"id": "broken"}]}), encoding="utf-8")

    snapshot = store.load()
    assert snapshot.available is True
    assert snapshot.transactions == []


def test_input_rejects_non_positive_amounts_and_unknown_types() -> None:
    with pytest.raises(ValueError):
        _input(amount=0)
    with pytest.raises(ValueError):
        _input(amount=-5)
    with pytest.raises(ValueError):
        _input(type="refund")
    assert _input(type="Cash-Revenue").type.value == "cash-revenue"


def test_concurrent_appends_all_survive(store: TransactionStore) -> None:
    """Appends from many threads are serialised, so no row is lost."""

    with ThreadPoolExecutor(max_workers=8) as pool:
        created = list(
            pool.map(
                lambda amount: store.append(_input(amount=amount), added_by="Staff Member"),
                range(1, 21),
            )
        )

    listed = store.list_all()
    assert len(listed) == 20
    assert {transaction.id for transaction in listed} == {t.id for t in created}


def test_first_reads_racing_an_append_keep_the_row(store: TransactionStore) -> None:
    """Lazy creation of the empty document never replaces a fresh append."""

    def read(_: int) -> int:
        return len(store.list_all())

    with ThreadPoolExecutor(max_workers=8) as pool:
        reads = [pool.submit(read, index) for index in range(10)]
        written = pool.submit(store.append, _input(), added_by="Manager")
        for future in reads:
            future.result()
        created = written.result()

    assert [transaction.id for transaction in store.list_all()] == [created.id]


def test_input_rejects_boolean_amounts() -> None:
    with pytest.raises(ValueError):
        _input(amount=True)
