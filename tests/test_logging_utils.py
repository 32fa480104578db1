"""Mini README: Tests for environment-driven logging levels."""

from __future__ import annotations

import logging

from profitdash.configuration import DashboardSettings
from profitdash.interface import create_application
from profitdash.logging_utils import level_for_environment


def test_environment_labels_map_to_levels() -> None:
    assert level_for_environment("development") == logging.DEBUG
    assert level_for_environment(" Production ") == logging.INFO
    assert level_for_environment("test") == logging.WARNING
    assert level_for_environment("staging") == logging.INFO


def test_application_applies_configured_level(tmp_path) -> None:
    """Creating the app sets the root level from the settings' environment."""

    root_logger = logging.getLogger()
    previous = root_logger.level
    try:
        settings = DashboardSettings(
            _env_file=None, data_directory=tmp_path, session_secret="x", environment="test"
        )
        create_application(settings)
        assert root_logger.level == logging.WARNING
    finally:
        root_logger.setLevel(previous)
