"""Session state: the signed-in user and their credentials."""

import logging
from dataclasses import dataclass
from typing import Protocol

from personal_tracker.domain.auth import AuthResponse, LoginCredentials, User
from personal_tracker.domain.errors import RemoteError
from personal_tracker.services.credentials import (
    CredentialStore,
    clear_tokens,
    get_refresh_token,
    get_token,
    save_tokens,
)

DEFAULT_LOGIN_ERROR = "Login failed, please check your username and password"

_logger = logging.getLogger(__name__)


class AuthApi(Protocol):
    """Remote interface for authentication."""

    async def login(self, credentials: LoginCredentials) -> AuthResponse:
        """Exchange credentials for a token pair and user."""

    async def logout(self) -> None:
        """End the remote session."""

    async def refresh(self, refresh_token: str) -> AuthResponse:
        """Exchange a refresh token for a new token pair."""

    async def get_current_user(self) -> User:
        """Return the user the current token belongs to."""

    async def update_profile(self, changes: dict[str, object]) -> User:
        """Apply profile changes and return the user."""


@dataclass
class SessionService:
    """Tracks the current user; authentication also requires a stored token."""

    api: AuthApi
    credentials: CredentialStore
    user: User | None = None
    loading: bool = False
    error: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None and bool(get_token(self.credentials))

    @property
    def username(self) -> str:
        return self.user.username if self.user else ""

    async def login(self, credentials: LoginCredentials) -> bool:
        """Sign in and store the token pair; errors land in `error`."""
        self.loading = True
        self.error = None
        try:
            response = await self.api.login(credentials)
        except Exception as exc:
            _logger.info("Login failed for %s", credentials.username)
            self.error = _login_error(exc)
            return False
        finally:
            self.loading = False
        save_tokens(self.credentials, response.token, response.refresh_token)
        self.user = response.user
        return True

    async def logout(self) -> None:
        """Sign out remotely if possible; local state is always cleared."""
        try:
            await self.api.logout()
        except Exception:
            _logger.debug("Ignoring logout failure", exc_info=True)
        finally:
            self.user = None
            clear_tokens(self.credentials)

    async def fetch_current_user(self) -> None:
        """Load the user for the stored token; an unusable token ends the session."""
        if not get_token(self.credentials):
            return
        self.loading = True
        try:
            self.user = await self.api.get_current_user()
        except Exception:
            _logger.warning("Failed to fetch current user", exc_info=True)
            self.user = None
            clear_tokens(self.credentials)
        finally:
            self.loading = False

    async def refresh_session(self) -> bool:
        refresh_token = get_refresh_token(self.credentials)
        if not refresh_token:
            return False
        try:
            response = await self.api.refresh(refresh_token)
        except Exception:
            _logger.warning("Failed to refresh session", exc_info=True)
            self.user = None
            clear_tokens(self.credentials)
            return False
        save_tokens(self.credentials, response.token, response.refresh_token)
        self.user = response.user
        return True

    async def update_profile(self, changes: dict[str, object]) -> User:
        try:
            user = await self.api.update_profile(changes)
        except Exception:
            _logger.exception("Failed to update profile")
            raise
        self.user = user
        return user

    def clear_error(self) -> None:
        self.error = None


def _login_error(exc: Exception) -> str:
    if isinstance(exc, RemoteError) and exc.message:
        return exc.message
    return DEFAULT_LOGIN_ERROR
