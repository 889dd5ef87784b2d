"""Shared HTTP plumbing for the tracker service."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from personal_tracker.domain.errors import AuthFailure, RemoteFailure, TransportFailure
from personal_tracker.services.credentials import (
    CredentialStore,
    clear_tokens,
    get_token,
)

_logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class HttpxRemoteClient:
    """Sends one authenticated request per call and maps failures to errors.

    A 401 response clears the stored credentials and fires `on_unauthorized`
    before `AuthFailure` is raised, whichever resource issued the request.
    """

    base_url: str
    credentials: CredentialStore
    http_client: httpx.AsyncClient
    timeout: float = 10
    on_unauthorized: Callable[[], None] | None = None

    @classmethod
    def create(
        cls,
        base_url: str,
        credentials: CredentialStore,
        timeout: float = 10,
        on_unauthorized: Callable[[], None] | None = None,
    ) -> "HttpxRemoteClient":
        """Create a remote client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            credentials=credentials,
            http_client=httpx.AsyncClient(),
            timeout=timeout,
            on_unauthorized=on_unauthorized,
        )

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, object] | None = None,
        json: dict[str, object] | None = None,
    ) -> object:
        """Send a request and return the decoded JSON body, or None if empty."""
        headers = {"Content-Type": "application/json"}
        token = get_token(self.credentials)
        if token:
            headers["Authorization"] = f"Bearer {token}"
        query = {k: v for k, v in (params or {}).items() if v is not None}
        try:
            response = await self.http_client.request(
                method,
                f"{self.base_url}{path}",
                params=query or None,
                json=json,
                headers=headers,
                timeout=self.timeout,
            )
        except httpx.TransportError as exc:
            raise TransportFailure(detail=str(exc) or exc.__class__.__name__) from exc

        if response.status_code == httpx.codes.UNAUTHORIZED:
            _logger.warning("Unauthorized response for %s %s", method, path)
            clear_tokens(self.credentials)
            if self.on_unauthorized is not None:
                self.on_unauthorized()
            raise AuthFailure(_error_message(response))
        if not response.is_success:
            raise RemoteFailure(response.status_code, _error_message(response))
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise RemoteFailure(
                response.status_code, detail="Invalid JSON response"
            ) from exc

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def parse(model: type[ModelT], payload: object) -> ModelT:
    """Validate a response body against a wire model."""
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise RemoteFailure(
            None, detail=f"Unexpected {model.__name__} payload"
        ) from exc


def parse_list(model: type[ModelT], payload: object) -> list[ModelT]:
    """Validate a list response body against a wire model."""
    if not isinstance(payload, list):
        raise RemoteFailure(None, detail=f"Expected a list of {model.__name__}")
    return [parse(model, entry) for entry in payload]


def _error_message(response: httpx.Response) -> str | None:
    """Extract the human-readable `message` field from an error body."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return None
