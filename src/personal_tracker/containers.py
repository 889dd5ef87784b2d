"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from personal_tracker.adapters.auth_api import HttpxAuthApi
from personal_tracker.adapters.health_api import HttpxHealthApi
from personal_tracker.adapters.inventory_api import HttpxInventoryApi
from personal_tracker.adapters.reminders_api import HttpxRemindersApi
from personal_tracker.adapters.remote_client import HttpxRemoteClient
from personal_tracker.config import Settings
from personal_tracker.services.credentials import (
    CredentialStore,
    InMemoryCredentialStore,
)
from personal_tracker.services.health import HealthService
from personal_tracker.services.inventory import InventoryService
from personal_tracker.services.reminders import RemindersService
from personal_tracker.services.session import SessionService


@dataclass
class AppContainer:
    """Holds one session's state managers and their shared dependencies."""

    settings: Settings
    credentials: CredentialStore
    session_service: SessionService
    health_service: HealthService
    inventory_service: InventoryService
    reminders_service: RemindersService
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None,
    credentials: CredentialStore | None = None,
    on_unauthorized: Callable[[], None] | None = None,
) -> AppContainer:
    """Create the default dependency container.

    `on_unauthorized` runs after any request is rejected with 401, once the
    stored tokens have been cleared.
    """
    resolved_settings = settings or Settings()
    resolved_credentials = (
        credentials if credentials is not None else InMemoryCredentialStore()
    )
    session_service: SessionService | None = None

    def sign_out() -> None:
        if session_service is not None:
            session_service.user = None
        if on_unauthorized is not None:
            on_unauthorized()

    remote = HttpxRemoteClient.create(
        base_url=resolved_settings.api_base_url,
        credentials=resolved_credentials,
        timeout=resolved_settings.request_timeout_seconds,
        on_unauthorized=sign_out,
    )
    session_service = SessionService(
        api=HttpxAuthApi(remote), credentials=resolved_credentials
    )

    async def close_resources() -> None:
        await remote.close()

    return AppContainer(
        settings=resolved_settings,
        credentials=resolved_credentials,
        session_service=session_service,
        health_service=HealthService(HttpxHealthApi(remote)),
        inventory_service=InventoryService(HttpxInventoryApi(remote)),
        reminders_service=RemindersService(HttpxRemindersApi(remote)),
        close_resources=close_resources,
    )
