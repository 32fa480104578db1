"""Mini README: Interactive interfaces for the Profit Dashboard.

Exports the FastAPI application factory that serves the dashboard's JSON
API. The command line entry point lives in ``run_dashboard.py`` at the
repository root.
"""

from .web_app import create_application

__all__ = ["create_application"]
