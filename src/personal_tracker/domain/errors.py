"""Errors raised by the remote access layer."""


class RemoteError(Exception):
    """Base error for any failed remote call.

    `message` only ever holds text the service sent in a response body.
    Client-side context goes into `detail` and shows up in `str(error)`.
    """

    def __init__(self, message: str | None = None, detail: str | None = None) -> None:
        super().__init__(message or detail or self.__class__.__name__)
        self.message = message
        self.detail = detail


class TransportFailure(RemoteError):
    """The request could not be completed."""


class AuthFailure(RemoteError):
    """The service rejected the credentials attached to the request."""


class RemoteFailure(RemoteError):
    """The service answered with a non-success status or an unreadable body."""

    def __init__(
        self,
        status_code: int | None,
        message: str | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(message, detail)
        self.status_code = status_code
