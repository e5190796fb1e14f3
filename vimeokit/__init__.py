"""Typed client for the videos resource of the Vimeo REST API."""

from __future__ import annotations

from .client import Client, Response
from .config import ClientConfig, ConfigError, load_config
from .errors import APIError, DecodeError, TransportError, VimeoError
from .options import (
    opt_direction,
    opt_fields,
    opt_filter,
    opt_filter_embeddable,
    opt_filter_playable,
    opt_page,
    opt_param,
    opt_per_page,
    opt_query,
    opt_sort,
)
from .transport import HTTPTransport

__all__ = [
    "APIError",
    "Client",
    "ClientConfig",
    "ConfigError",
    "DecodeError",
    "HTTPTransport",
    "Response",
    "TransportError",
    "VimeoError",
    "load_config",
    "opt_direction",
    "opt_fields",
    "opt_filter",
    "opt_filter_embeddable",
    "opt_filter_playable",
    "opt_page",
    "opt_param",
    "opt_per_page",
    "opt_query",
    "opt_sort",
]
