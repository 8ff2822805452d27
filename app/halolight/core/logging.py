from __future__ import annotations

import json
import logging
from contextvars import ContextVar

from app.halolight.core.config import settings

_trace_id: ContextVar[str | None] = ContextVar("trace_id", default=None)


def configure_logging() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(message)s")


def bind_trace_id(trace_id: str) -> object:
    return _trace_id.set(trace_id)


def unbind_trace_id(token: object) -> None:
    _trace_id.reset(token)


def current_trace_id() -> str | None:
    return _trace_id.get()


def log_json(logger: logging.Logger, payload: dict) -> None:
    """Emit ``payload`` as one JSON line, tagged with the bound request trace id if any."""
    trace_id = _trace_id.get()
    if trace_id and "trace_id" not in payload:
        payload = {**payload, "trace_id": trace_id}
    logger.info(json.dumps(payload, ensure_ascii=False, default=str))
