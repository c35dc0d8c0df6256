from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, TextIO

from mimematch.logging.helpers import get_logger, set_trace_enabled, setup_base_logger

if TYPE_CHECKING:
    from mimematch.config import Settings


class DefaultLoggerFactory:
    """Configure the base logger on first use and hand out 'mimematch.*' loggers."""

    def __init__(self, *, json_logs: bool = False, level: int = logging.WARNING, stream: Optional[TextIO] = None) -> None:
        self._json = bool(json_logs)
        self._level = int(level)
        self._stream: Optional[TextIO] = stream
        self._configured = False

    @classmethod
    def from_settings(cls, settings: 'Settings', *, stream: Optional[TextIO] = None) -> 'DefaultLoggerFactory':
        """Build a factory from Settings; also applies settings.trace_lookups.

        Without trace_lookups the override is cleared, so tracing falls back
        to MIMEMATCH_TRACE_LOOKUPS instead of staying on from an earlier call.
        """
        set_trace_enabled(settings.trace_lookups or None)
        return cls(json_logs=settings.json_logs, level=settings.log_level, stream=stream)

    def get_logger(self, name: str) -> logging.Logger:
        if not self._configured:
            setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
            self._configured = True
        return get_logger(name)
