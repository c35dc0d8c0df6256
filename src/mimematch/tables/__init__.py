"""
mimematch.tables – Immutable lookup tables built once at import time.
"""
from .mappings import (
    PRIMARY_MAPPINGS,
    SECONDARY_MAPPINGS,
    find_mime_type,
    iter_extensions_with_prefix,
)
from .standard_types import STANDARD_TYPE_GROUPS, find_standard_group

__all__ = [
    "PRIMARY_MAPPINGS",
    "SECONDARY_MAPPINGS",
    "STANDARD_TYPE_GROUPS",
    "find_mime_type",
    "find_standard_group",
    "iter_extensions_with_prefix",
]
