from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Extensions longer than this are reported as unknown without any lookup.
MAX_EXTENSION_LENGTH: int = 65536

# See http://www.iana.org/assignments/media-types/media-types.xhtml
LEGAL_TOP_LEVEL_TYPES: tuple[str, ...] = (
    'application',
    'audio',
    'example',
    'image',
    'message',
    'model',
    'multipart',
    'text',
    'video',
)

EXPERIMENTAL_TOP_LEVEL_PREFIX: str = 'x-'

UNIVERSAL_WILDCARDS: frozenset[str] = frozenset({'*', '*/*'})

# Environment variables understood by mimematch.config.
ENV_REGISTRY = 'MIMEMATCH_REGISTRY'
ENV_JSON_LOGS = 'MIMEMATCH_JSON_LOGS'
ENV_LOG_LEVEL = 'MIMEMATCH_LOG_LEVEL'
ENV_TRACE_LOOKUPS = 'MIMEMATCH_TRACE_LOOKUPS'
