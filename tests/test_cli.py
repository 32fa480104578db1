"""Mini README: Tests for the ``summary`` command of the CLI."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from profitdash.configuration import get_settings
from profitdash.ledger import TransactionInput, TransactionStore
from run_dashboard import cli


@pytest.fixture
def configured_store(monkeypatch, tmp_path):
    monkeypatch.setenv("PROFITDASH_DATA_DIRECTORY", str(tmp_path))
    get_settings.cache_clear()
    yield TransactionStore(get_settings().data_file)
    get_settings.cache_clear()


def test_summary_prints_each_month(configured_store: TransactionStore) -> None:
    for payload in (
        {"date": "2024-01-05", "type": "online-revenue", "amount": 100},
        {"date": "2024-02-01", "type": "expense", "amount": 40},
    ):
        configured_store.append(TransactionInput.model_validate(payload), added_by="Manager")

    result = CliRunner().invoke(cli, ["summary"])

    assert result.exit_code == 0
    assert "Jan 2024" in result.output
    assert "Feb 2024" in result.output
    assert "Latest margin: 0.0%" in result.output


def test_summary_with_empty_store(configured_store: TransactionStore) -> None:
    result = CliRunner().invoke(cli, ["summary"])

    assert result.exit_code == 0
    assert "No transactions recorded yet." in result.output
