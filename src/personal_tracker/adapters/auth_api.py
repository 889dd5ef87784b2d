"""HTTP adapter for the auth endpoints."""

from dataclasses import dataclass

from personal_tracker.adapters.remote_client import HttpxRemoteClient, parse
from personal_tracker.adapters.wire_models import (
    AuthResponsePayload,
    UserPayload,
    to_wire,
)
from personal_tracker.domain.auth import AuthResponse, LoginCredentials, User
from personal_tracker.services.session import AuthApi


@dataclass
class HttpxAuthApi(AuthApi):
    """Auth API backed by the shared remote client."""

    remote: HttpxRemoteClient

    async def login(self, credentials: LoginCredentials) -> AuthResponse:
        payload = await self.remote.request(
            "POST",
            "/auth/login",
            json={"username": credentials.username, "password": credentials.password},
        )
        return parse(AuthResponsePayload, payload).to_domain()

    async def logout(self) -> None:
        await self.remote.request("POST", "/auth/logout")

    async def refresh(self, refresh_token: str) -> AuthResponse:
        payload = await self.remote.request(
            "POST", "/auth/refresh", json={"refreshToken": refresh_token}
        )
        return parse(AuthResponsePayload, payload).to_domain()

    async def get_current_user(self) -> User:
        payload = await self.remote.request("GET", "/auth/me")
        return parse(UserPayload, payload).to_domain()

    async def update_profile(self, changes: dict[str, object]) -> User:
        payload = await self.remote.request(
            "PUT", "/auth/profile", json=to_wire(changes, skip_none=False)
        )
        return parse(UserPayload, payload).to_domain()
