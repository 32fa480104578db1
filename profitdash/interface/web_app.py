"""Mini README: FastAPI JSON API powering the Profit Dashboard.

Structure:
    * create_application - application factory wiring services and routes.
    * LoginRequest - body accepted by ``POST /api/auth``.

Routes:
    * ``POST /api/auth`` - check credentials, return display name and token.
    * ``GET /api/sales`` - every transaction, newest first; never fails.
    * ``POST /api/sales`` - record a transaction for the logged-in user.
    * ``GET /api/summary`` - monthly rollups plus the headline overview.
    * ``GET /health`` - liveness probe.

Services are built once per application from ``DashboardSettings`` and kept
on ``app.state`` so tests can inject temporary stores and settings.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, ValidationError

from ..accounts import CredentialStore, SessionSigner
from ..configuration import DashboardSettings, get_settings
from ..errors import InvalidCredentials, SessionError, StorageError
from ..ledger import TransactionInput, TransactionStore, aggregate_monthly, build_overview
from ..logging_utils import configure_root_logger, get_logger, level_for_environment

LOGGER = get_logger(__name__)

STORAGE_STATUS_HEADER = "X-Storage-Status"


class LoginRequest(BaseModel):
    """Credentials submitted from the login form."""

    model_config = ConfigDict(strict=True)

    username: str
    password: str


def _describe_validation_error(error: ValidationError) -> List[Dict[str, str]]:
    return [
        {
            "field": ".".join(str(part) for part in detail["loc"]) or "body",
            "message": detail["msg"],
        }
        for detail in error.errors()
    ]


def create_application(
    settings: Optional[DashboardSettings] = None,
    *,
    store: Optional[TransactionStore] = None,
    credentials: Optional[CredentialStore] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = settings or get_settings()
    configure_root_logger(level_for_environment(settings.environment))
    store = store or TransactionStore(settings.data_file)
    credentials = credentials or CredentialStore.from_settings(settings)
    signer = SessionSigner(settings.session_secret, ttl_minutes=settings.session_ttl_minutes)

    app = FastAPI(title="Profit Dashboard", version="0.1.0")
    app.state.settings = settings
    app.state.store = store
    app.state.credentials = credentials
    app.state.signer = signer

    @app.get("/health")
    async def health() -> JSONResponse:
        return JSONResponse({"status": "ok"})

    @app.post("/api/auth")
    async def authenticate(request: Request) -> JSONResponse:
        """Verify credentials and hand back the display name with a token."""

        try:
            payload: Any = await request.json()
        except ValueError as error:
            LOGGER.warning("Unparsable login request: %s", error)
            return JSONResponse({"message": "Authentication failed"}, status_code=500)

        try:
            login = LoginRequest.model_validate(payload)
        except ValidationError as error:
            # Missing or non-string fields can never match an account.
            LOGGER.warning("Login request with %s unusable fields", error.error_count())
            return JSONResponse({"message": str(InvalidCredentials())}, status_code=401)

        try:
            account = credentials.authenticate(login.username, login.password)
        except InvalidCredentials as error:
            return JSONResponse({"message": str(error)}, status_code=401)

        return JSONResponse(
            {"success": True, "name": account.display_name, "token": signer.issue(account)}
        )

    @app.get("/api/sales")
    async def list_sales() -> JSONResponse:
        """Return every transaction, newest first, even when storage is down."""

        snapshot = store.load()
        LOGGER.debug("Returning %s transactions", len(snapshot.transactions))
        return JSONResponse(
            {"sales": [transaction.as_dict() for transaction in snapshot.transactions]},
            headers={STORAGE_STATUS_HEADER: "ok" if snapshot.available else "unavailable"},
        )

    @app.post("/api/sales")
    async def record_sale(request: Request) -> JSONResponse:
        """Validate and persist a new transaction."""

        session_name: Optional[str] = None
        if settings.require_session:
            token = SessionSigner.token_from_header(request.headers.get("Authorization"))
            try:
                session_name = signer.verify(token)
            except SessionError as error:
                return JSONResponse({"message": str(error)}, status_code=401)

        try:
            payload: Any = await request.json()
        except ValueError as error:
            LOGGER.warning("Unparsable transaction body: %s", error)
            return JSONResponse({"message": "Failed to save transaction"}, status_code=500)

        try:
            candidate = TransactionInput.model_validate(payload)
        except ValidationError as error:
            LOGGER.warning("Rejected transaction payload: %s", error)
            return JSONResponse(
                {"message": "Invalid transaction", "errors": _describe_validation_error(error)},
                status_code=422,
            )

        added_by = session_name or candidate.added_by
        if not added_by:
            return JSONResponse(
                {
                    "message": "Invalid transaction",
                    "errors": [{"field": "addedBy", "message": "Field required"}],
                },
                status_code=422,
            )

        try:
            sale = store.append(candidate, added_by=added_by)
        except StorageError:
            LOGGER.exception("Failed to persist transaction")
            return JSONResponse({"message": "Failed to save transaction"}, status_code=500)
        return JSONResponse({"sale": sale.as_dict()}, status_code=201)

    @app.get("/api/summary")
    async def summary() -> JSONResponse:
        """Return monthly rollups and the overview used by the charts."""

        snapshot = store.load()
        months = aggregate_monthly(snapshot.transactions)
        overview = build_overview(months)
        return JSONResponse(
            {
                "months": [month.as_dict() for month in months],
                "overview": overview.as_dict(),
                "storage": "ok" if snapshot.available else "unavailable",
            }
        )

    return app
