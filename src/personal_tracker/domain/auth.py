"""Domain models for the signed-in user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class User:
    """The account the session belongs to."""

    id: str
    username: str
    email: str
    avatar: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class LoginCredentials:
    """Username and password submitted on login."""

    username: str
    password: str


@dataclass(frozen=True)
class AuthResponse:
    """Token pair and user returned by login or refresh."""

    token: str
    refresh_token: str
    user: User
