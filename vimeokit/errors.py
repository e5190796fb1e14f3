"""Exception hierarchy raised by the API client."""

from __future__ import annotations

from typing import Any, Mapping


class VimeoError(RuntimeError):
    """Base class for every error surfaced by vimeokit calls."""


class TransportError(VimeoError):
    """Raised when the HTTP exchange itself fails (DNS, connect, timeout)."""

    def __init__(self, message: str, *, method: str | None = None, path: str | None = None) -> None:
        super().__init__(message)
        self.method = method
        self.path = path


class APIError(VimeoError):
    """Raised for non-2xx responses; carries the status and decoded error body."""

    def __init__(
        self,
        status_code: int,
        payload: Mapping[str, Any] | None = None,
        *,
        method: str | None = None,
        path: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.status_code = status_code
        self.payload: dict[str, Any] = dict(payload or {})
        self.method = method
        self.path = path
        self.headers: dict[str, str] = dict(headers or {})
        super().__init__(self._describe())

    @property
    def message(self) -> str | None:
        """Human readable error text returned by the service, if any."""
        return self.payload.get("error") or self.payload.get("developer_message")

    @property
    def error_code(self) -> int | None:
        return self.payload.get("error_code")

    def _describe(self) -> str:
        target = f"{self.method} {self.path}: " if self.method and self.path else ""
        detail = self.message or "no error body"
        return f"{target}{self.status_code} {detail}"


class DecodeError(VimeoError):
    """Raised when a successful response body is not the JSON shape we expect."""

    def __init__(self, message: str, *, body: bytes = b"") -> None:
        super().__init__(message)
        self.body = body
