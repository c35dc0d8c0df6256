from __future__ import annotations

"""Runtime settings read from the environment.

    MIMEMATCH_REGISTRY       platform registry reference (default 'system')
    MIMEMATCH_JSON_LOGS      '1' for JSON log lines
    MIMEMATCH_LOG_LEVEL      level name (default 'WARNING')
    MIMEMATCH_TRACE_LOOKUPS  '1' to trace every platform lookup

CLI flags take precedence; see Settings.merged.
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from mimematch.constants import ENV_JSON_LOGS, ENV_LOG_LEVEL, ENV_REGISTRY, ENV_TRACE_LOOKUPS

DEFAULT_REGISTRY = 'system'


def _parse_level(name: str) -> int:
    level = logging.getLevelName((name or '').strip().upper())
    return level if isinstance(level, int) else logging.WARNING


@dataclass(frozen=True)
class Settings:
    registry: str = DEFAULT_REGISTRY
    json_logs: bool = False
    log_level: int = logging.WARNING
    trace_lookups: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        env = os.environ if environ is None else environ
        return cls(
            registry=(env.get(ENV_REGISTRY) or '').strip() or DEFAULT_REGISTRY,
            json_logs=env.get(ENV_JSON_LOGS) == '1',
            log_level=_parse_level(env.get(ENV_LOG_LEVEL, 'WARNING')),
            trace_lookups=env.get(ENV_TRACE_LOOKUPS) == '1',
        )

    def merged(
        self,
        *,
        registry: Optional[str] = None,
        json_logs: Optional[bool] = None,
        log_level: Optional[int] = None,
    ) -> 'Settings':
        """Return a copy where every non-None argument overrides the field."""
        changes = {}
        if registry:
            changes['registry'] = registry
        if json_logs is not None:
            changes['json_logs'] = json_logs
        if log_level is not None:
            changes['log_level'] = log_level
        return replace(self, **changes)
