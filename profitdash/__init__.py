"""Mini README: Core package initializer for the Profit Dashboard service.

This module exposes the logging helper so scripts and tests can obtain a
configured logger without knowing the module layout. Domain services live in
the ``accounts`` and ``ledger`` subpackages; the HTTP surface lives in
``interface``.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
