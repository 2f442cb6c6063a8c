"""Exceptions raised by the face recognition client."""

from __future__ import annotations

from typing import Any


class FrsError(RuntimeError):
    """Base class for every error raised by this package."""


class TransportError(FrsError):
    """Raised when no HTTP response could be obtained from the service."""


class ServiceError(FrsError):
    """Raised when the service responds with a non-success status code."""

    def __init__(
        self,
        status_code: int,
        error_code: str | None = None,
        error_msg: str | None = None,
        body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.error_msg = error_msg
        self.body = body
        detail = error_msg or (body if isinstance(body, str) and body else "no error message")
        if error_code:
            detail = f"{error_code}: {detail}"
        super().__init__(f"Service returned HTTP {status_code} ({detail})")


class DecodingError(FrsError):
    """Raised when a successful response does not match the expected payload shape."""

    def __init__(self, message: str, status_code: int, body: Any = None) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)
