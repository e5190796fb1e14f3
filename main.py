"""Entry point for the vimeokit command line."""

from __future__ import annotations

import json
import logging
import os
import sys
import time
import uuid
from dataclasses import dataclass
from typing import Any, Sequence

from vimeokit.cli import main as cli_main

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RunContext:
    """Captures immutable metadata for a single command invocation."""

    trace_id: str
    monotonic_ns: int


def _build_run_context() -> RunContext:
    trace_id = os.getenv("VIMEO_TRACE_ID") or uuid.uuid4().hex
    return RunContext(trace_id=trace_id, monotonic_ns=time.perf_counter_ns())


def _log_event(level: int, event: str, context: RunContext, **fields: Any) -> None:
    """Emit structured JSON logs with consistent tracing metadata."""
    payload: dict[str, Any] = {"event": event, "trace_id": context.trace_id, **fields}
    LOGGER.log(level, json.dumps(payload, default=str, separators=(",", ":")))


def main(argv: Sequence[str] | None = None) -> int:
    """Run one CLI command and report its duration."""
    context = _build_run_context()
    try:
        exit_code = cli_main(argv)
    except KeyboardInterrupt:
        _log_event(logging.WARNING, "vimeokit.interrupted", context, signal="SIGINT")
        return 130
    duration_ms = (time.perf_counter_ns() - context.monotonic_ns) / 1_000_000
    _log_event(logging.INFO, "vimeokit.command_completed", context, exit_code=exit_code, duration_ms=round(duration_ms, 2))
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
