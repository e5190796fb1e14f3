"""Client façade: one shared request/response helper for every service."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .config import ClientConfig, load_config
from .errors import APIError, DecodeError
from .models import Page, RequestModel
from .options import CallOption, build_params
from .transport import HTTPTransport, RawResponse
from .videos import VideosService

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True, slots=True)
class Response:
    """Status, headers and pagination metadata for one completed call."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    total: int | None = None
    page: int | None = None
    per_page: int | None = None
    next_page: str | None = None
    prev_page: str | None = None
    first_page: str | None = None
    last_page: str | None = None

    @classmethod
    def from_raw(cls, raw: RawResponse, envelope: Page | None = None) -> "Response":
        if envelope is None:
            return cls(status_code=raw.status_code, headers=raw.headers)
        paging = envelope.paging
        return cls(
            status_code=raw.status_code,
            headers=raw.headers,
            total=envelope.total,
            page=envelope.page,
            per_page=envelope.per_page,
            next_page=paging.next if paging else None,
            prev_page=paging.previous if paging else None,
            first_page=paging.first if paging else None,
            last_page=paging.last if paging else None,
        )


def encode_body(body: Any) -> Any:
    """Turn request models (or lists of them) into JSON-ready payloads."""
    if body is None:
        return None
    if isinstance(body, RequestModel):
        return body.to_payload()
    if isinstance(body, (list, tuple)):
        return [encode_body(item) for item in body]
    return body


class Client:
    """Entry point for the API; exposes resource services as attributes."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[HTTPTransport] = None,
    ) -> None:
        self.config = config or load_config()
        self.transport = transport or HTTPTransport(self.config)
        self.videos = VideosService(self)

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self.transport.close()

    def request(
        self,
        method: str,
        path: str,
        *,
        options: Sequence[CallOption] = (),
        body: Any = None,
        decode: bool = True,
    ) -> tuple[Any, RawResponse]:
        """Perform one exchange and return the decoded JSON document (or None).

        With ``decode=False`` a successful body is returned undecoded as ``raw.content``.
        """
        params = build_params(options)
        raw = self.transport.do(method, path, params=params or None, body=encode_body(body))
        if not raw.ok:
            payload = _decode_error_payload(raw.content)
            logger.warning(
                "API call %s %s returned %s",
                method,
                path,
                raw.status_code,
                extra={"event": "http.api_error", "status_code": raw.status_code, "path": path},
            )
            raise APIError(raw.status_code, payload, method=method, path=path, headers=raw.headers)
        if not decode or not raw.content.strip():
            return None, raw
        try:
            return json.loads(raw.content), raw
        except json.JSONDecodeError as exc:
            raise DecodeError(f"{method} {path}: invalid JSON response ({exc.msg})", body=raw.content) from exc

    def fetch(
        self,
        method: str,
        path: str,
        model: Type[ModelT],
        *,
        options: Sequence[CallOption] = (),
        body: Any = None,
    ) -> tuple[ModelT, Response]:
        """Decode a single JSON object into ``model``."""
        document, raw = self.request(method, path, options=options, body=body)
        item = _validate(model, document if document is not None else {}, method, path, raw)
        return item, Response.from_raw(raw)

    def fetch_list(
        self,
        path: str,
        model: Type[ModelT],
        *,
        options: Iterable[CallOption] = (),
    ) -> tuple[list[ModelT], Response]:
        """GET a paginated collection and unwrap its ``data`` list."""
        document, raw = self.request("GET", path, options=tuple(options))
        envelope = _validate(Page[model], document if document is not None else {}, "GET", path, raw)
        return list(envelope.data), Response.from_raw(raw, envelope)

    def send(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
    ) -> Response:
        """Perform a call whose response body carries nothing we decode."""
        _, raw = self.request(method, path, body=body, decode=False)
        return Response.from_raw(raw)


def _validate(model: Type[ModelT], document: Any, method: str, path: str, raw: RawResponse) -> ModelT:
    try:
        return model.model_validate(document)
    except ValidationError as exc:
        raise DecodeError(f"{method} {path}: unexpected response shape ({exc.error_count()} errors)", body=raw.content) from exc


def _decode_error_payload(content: bytes) -> dict[str, Any]:
    if not content.strip():
        return {}
    try:
        decoded = json.loads(content)
    except json.JSONDecodeError:
        return {"error": content.decode("utf-8", errors="replace")[:500]}
    return decoded if isinstance(decoded, dict) else {"error": decoded}
