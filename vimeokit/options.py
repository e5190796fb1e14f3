"""Functional call options that populate list/get query parameters."""

from __future__ import annotations

from typing import Callable, Iterable, MutableMapping, Sequence

CallOption = Callable[[MutableMapping[str, str]], None]


def opt_param(name: str, value: object) -> CallOption:
    """Pass an operation-specific filter through verbatim."""

    def apply(params: MutableMapping[str, str]) -> None:
        params[name] = _stringify(value)

    return apply


def opt_page(page: int) -> CallOption:
    return opt_param("page", page)


def opt_per_page(per_page: int) -> CallOption:
    return opt_param("per_page", per_page)


def opt_fields(fields: Sequence[str]) -> CallOption:
    """Restrict the response to the named fields (comma-joined)."""
    return opt_param("fields", ",".join(fields))


def opt_sort(sort: str) -> CallOption:
    return opt_param("sort", sort)


def opt_direction(direction: str) -> CallOption:
    return opt_param("direction", direction)


def opt_filter(value: str) -> CallOption:
    return opt_param("filter", value)


def opt_filter_embeddable(embeddable: bool) -> CallOption:
    return opt_param("filter_embeddable", embeddable)


def opt_filter_playable(playable: bool) -> CallOption:
    return opt_param("filter_playable", playable)


def opt_query(query: str) -> CallOption:
    return opt_param("query", query)


def build_params(options: Iterable[CallOption]) -> dict[str, str]:
    """Apply options in order; later options win on key collisions."""
    params: dict[str, str] = {}
    for option in options:
        option(params)
    return params


def _stringify(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


__all__ = [
    "CallOption",
    "build_params",
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
