"""Mini README: Shared pytest fixtures for the Profit Dashboard tests.

Fixtures build isolated settings and stores rooted in ``tmp_path`` so no test
touches the real data directory or the developer's environment.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from profitdash.configuration import DashboardSettings
from profitdash.ledger import TransactionStore


@pytest.fixture
def settings(tmp_path: Path) -> DashboardSettings:
    return DashboardSettings(
        _env_file=None,
        data_directory=tmp_path / "data",
        session_secret="test-secret",
        auth_username=None,
        auth_password=None,
    )


@pytest.fixture
def store(settings: DashboardSettings) -> TransactionStore:
    return TransactionStore(settings.data_file)
