"""FastAPI application setup."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from auctionauth.account_store import AccountConflictError, AccountStoreError
from auctionauth.api.dependencies import (
    close_account_store,
    close_session_manager,
    close_settings,
    init_account_store,
    init_session_manager,
    init_settings,
)
from auctionauth.api.models import APIResponse
from auctionauth.api.routes import auth, main
from auctionauth.auth import (
    AccessDeniedError,
    FailureReason,
    InvalidCredentialsError,
    ValidationError,
)
from auctionauth.config import Settings
from auctionauth.logging import sanitize_for_log

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from fastapi import Response

logger = logging.getLogger(__name__)


def _error(status_code: int, reason: FailureReason) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIResponse[None](data=None, error=reason.message).model_dump(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings

    # Startup
    init_settings(settings)
    init_account_store(settings.db_path, timeout=settings.store_timeout_seconds)
    init_session_manager(ttl_seconds=settings.session_ttl_seconds)

    yield
    # Shutdown
    close_session_manager()
    close_account_store()
    close_settings()


def install_exception_handlers(app: FastAPI) -> None:
    """Map auth and store failures to responses.

    Denied requests are redirected to the login surface with an empty body.
    """

    @app.exception_handler(ValidationError)
    async def validation_error_handler(_request: Request, exc: ValidationError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, exc.reason)

    @app.exception_handler(InvalidCredentialsError)
    async def invalid_credentials_handler(
        _request: Request, _exc: InvalidCredentialsError
    ) -> JSONResponse:
        return _error(status.HTTP_401_UNAUTHORIZED, FailureReason.INVALID_CREDENTIALS)

    @app.exception_handler(AccountConflictError)
    async def account_conflict_handler(
        _request: Request, _exc: AccountConflictError
    ) -> JSONResponse:
        return _error(status.HTTP_409_CONFLICT, FailureReason.ID_ALREADY_REGISTERED)

    @app.exception_handler(AccountStoreError)
    async def account_store_error_handler(
        _request: Request, _exc: AccountStoreError
    ) -> JSONResponse:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, FailureReason.STORAGE_FAILURE)

    @app.exception_handler(AccessDeniedError)
    async def access_denied_handler(
        _request: Request, _exc: AccessDeniedError
    ) -> RedirectResponse:
        return RedirectResponse(url=auth.LOGIN_PATH, status_code=status.HTTP_302_FOUND)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="auctionauth API",
        description="Student registration, login and session-gated access",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.settings = settings if settings is not None else Settings.from_env()

    install_exception_handlers(app)

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        logger.info(
            "%s %s -> %d (%.1fms)",
            request.method,
            sanitize_for_log(target),
            response.status_code,
            (time.monotonic() - start) * 1000,
        )
        return response

    app.include_router(auth.router)
    app.include_router(main.router)

    return app
