from __future__ import annotations

"""Logging helpers shared by every mimematch module.

This module provides:
    - JsonLogFormatter: compact JSON lines with a fixed schema.
    - setup_base_logger: one-time configuration of the 'mimematch' logger.
    - get_logger: namespaced logger factory ('mimematch.*').
    - trace_lookup: debug trace of platform lookups, gated by set_trace_enabled or
      MIMEMATCH_TRACE_LOOKUPS=1.

The library itself never configures handlers on import; only the CLI (or
an application calling setup_base_logger) does.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

from mimematch.constants import ENV_TRACE_LOOKUPS

BASE_LOGGER_NAME = "mimematch"


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON.

    Fields:
        - ts: ISO-8601 UTC timestamp with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'mimematch.resolver').
        - msg: Formatted message string.
        - version: mimematch.__version__, resolved once per formatter.
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        # Imported lazily: the package __init__ imports this module.
        try:
            from mimematch import __version__ as version
        except ImportError:
            return "unknown"
        return str(version)

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "ts": ts.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.WARNING, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'mimematch' logger once and return it.

    A second call only adjusts the level.
    """
    base = logging.getLogger(BASE_LOGGER_NAME)
    if base.handlers:
        base.setLevel(level)
        return base

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'mimematch'."""
    if not name or name == BASE_LOGGER_NAME:
        return logging.getLogger(BASE_LOGGER_NAME)
    if name.startswith(BASE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER_NAME}.{name}")


_TRACE_OVERRIDE: Optional[bool] = None


def set_trace_enabled(enabled: Optional[bool]) -> None:
    """Force lookup tracing on or off; None defers to MIMEMATCH_TRACE_LOOKUPS."""
    global _TRACE_OVERRIDE
    _TRACE_OVERRIDE = enabled


def is_trace_enabled() -> bool:
    if _TRACE_OVERRIDE is not None:
        return _TRACE_OVERRIDE
    return os.getenv(ENV_TRACE_LOOKUPS) == "1"


def trace_lookup(logger: logging.Logger, message: str, **ctx) -> None:
    """Log a platform lookup at debug level when tracing is enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Structured context, attached as ``record.context`` so the
            JSON formatter can emit it under 'ctx'.
    """
    if not is_trace_enabled():
        return
    logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
