"""Credential storage for the access and refresh tokens."""

from dataclasses import dataclass, field
from typing import Protocol

TOKEN_KEY = "personal_tracker_token"
REFRESH_TOKEN_KEY = "personal_tracker_refresh_token"


class CredentialStore(Protocol):
    """Key-value storage for session credentials."""

    def get(self, key: str) -> str | None:
        """Return the stored value for a key, if any."""

    def set(self, key: str, value: str) -> None:
        """Store a value under a key."""

    def remove(self, key: str) -> None:
        """Remove a key if present."""


@dataclass
class InMemoryCredentialStore(CredentialStore):
    """Process-local credential store; nothing survives a restart."""

    _values: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)


def get_token(store: CredentialStore) -> str | None:
    """Return the access token."""
    return store.get(TOKEN_KEY)


def get_refresh_token(store: CredentialStore) -> str | None:
    """Return the refresh token."""
    return store.get(REFRESH_TOKEN_KEY)


def save_tokens(store: CredentialStore, token: str, refresh_token: str) -> None:
    """Store a fresh token pair."""
    store.set(TOKEN_KEY, token)
    store.set(REFRESH_TOKEN_KEY, refresh_token)


def clear_tokens(store: CredentialStore) -> None:
    """Remove both tokens."""
    store.remove(TOKEN_KEY)
    store.remove(REFRESH_TOKEN_KEY)
