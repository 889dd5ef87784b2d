"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status

from personal_tracker.api.dashboard import router as dashboard_router
from personal_tracker.api.schemas import (
    LoginRequest,
    LoginResult,
    SessionStatus,
    SyncStatus,
)
from personal_tracker.app_logging import configure_logging
from personal_tracker.containers import AppContainer
from personal_tracker.domain.auth import LoginCredentials
from personal_tracker.domain.errors import RemoteError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app serving one container's state."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(dashboard_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/session")
    async def session_status(request: Request) -> SessionStatus:
        state_container: AppContainer = request.app.state.container
        session = state_container.session_service
        return SessionStatus(
            authenticated=session.is_authenticated, username=session.username
        )

    @app.post("/session/login")
    async def login(payload: LoginRequest, request: Request) -> LoginResult:
        """Sign in and load the initial collections."""
        state_container: AppContainer = request.app.state.container
        session = state_container.session_service
        ok = await session.login(
            LoginCredentials(username=payload.username, password=payload.password)
        )
        if ok:
            await state_container.health_service.fetch_targets()
            await state_container.health_service.fetch_today_data()
            await state_container.inventory_service.fetch_items()
            await state_container.inventory_service.fetch_summary()
            await state_container.reminders_service.fetch_all_reminders()
        return LoginResult(ok=ok, error=session.error)

    @app.post("/session/logout")
    async def logout(request: Request) -> dict[str, str]:
        state_container: AppContainer = request.app.state.container
        await state_container.session_service.logout()
        return {"status": "ok"}

    @app.post("/reminders/sync")
    async def sync_reminders(request: Request) -> SyncStatus:
        """Sync reminders with the source; failures map to 502."""
        state_container: AppContainer = request.app.state.container
        try:
            result = await state_container.reminders_service.sync_with_apple()
        except RemoteError as exc:
            logger.warning("Reminder sync failed: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=exc.message or "Reminder sync failed",
            ) from exc
        return SyncStatus(last_synced=result.last_synced)

    return app
