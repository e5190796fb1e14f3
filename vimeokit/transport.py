"""HTTP transport wrapping httpx with authentication and optional retries."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from .config import ClientConfig
from .errors import TransportError

logger = logging.getLogger(__name__)

IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "PUT", "DELETE", "OPTIONS"})


@dataclass(frozen=True, slots=True)
class RawResponse:
    """Undecoded result of a single HTTP exchange."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class HTTPTransport:
    """Executes one request per call against the configured API base URL."""

    def __init__(self, config: ClientConfig, transport: httpx.BaseTransport | None = None) -> None:
        self.config = config
        headers = {
            "Accept": config.accept_header,
            "User-Agent": config.user_agent,
        }
        token = config.token
        if token:
            headers["Authorization"] = f"bearer {token}"
        self._client = httpx.Client(
            base_url=config.base_url,
            headers=headers,
            timeout=httpx.Timeout(config.timeout_seconds),
            transport=transport,
        )

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def do(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> RawResponse:
        """Send the request and return status, headers and body bytes."""
        method = method.upper()
        attempts = self.config.retry_attempts if method in IDEMPOTENT_METHODS else 1
        retrying = Retrying(
            stop=stop_after_attempt(attempts),
            wait=wait_exponential(multiplier=self.config.retry_backoff_seconds, max=30),
            retry=retry_if_exception_type(httpx.TransportError),
            before_sleep=self._log_retry,
            reraise=True,
        )
        try:
            response = retrying(self._send, method, path, params, body)
            content = response.content
        except httpx.RequestError as exc:
            logger.warning(
                "HTTP %s %s failed: %s",
                method,
                path,
                exc,
                extra={"event": "http.transport_error", "method": method, "path": path},
            )
            raise TransportError(f"{method} {path} failed: {exc}", method=method, path=path) from exc

        return RawResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            content=content,
        )

    def _send(self, method: str, path: str, params: Mapping[str, str] | None, body: Any) -> httpx.Response:
        kwargs: dict[str, Any] = {}
        if params:
            kwargs["params"] = dict(params)
        if body is not None:
            kwargs["content"] = json.dumps(body, separators=(",", ":")).encode("utf-8")
            kwargs["headers"] = {"Content-Type": "application/json"}
        logger.debug(
            "HTTP %s %s",
            method,
            path,
            extra={"event": "http.request", "method": method, "path": path, "params": dict(params or {})},
        )
        return self._client.request(method, path, **kwargs)

    @staticmethod
    def _log_retry(retry_state) -> None:
        logger.info(
            "Retrying HTTP call after transport failure (attempt %s)",
            retry_state.attempt_number,
            extra={"event": "http.retry"},
        )
