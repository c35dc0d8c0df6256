# mimematch/parsing/type_string.py
from __future__ import annotations

from typing import Optional

from mimematch.constants import EXPERIMENTAL_TOP_LEVEL_PREFIX, LEGAL_TOP_LEVEL_TYPES
from mimematch.core.models import ParsedType
from mimematch.utils.http import is_token


def parse_type(type_string: str) -> Optional[ParsedType]:
    """Split a parameterless ``top/sub`` string into its two tokens.

    Returns None unless there is exactly one '/' and both sides are HTTP
    tokens once surrounding whitespace is trimmed. Case is preserved.
    """
    components = [component.strip() for component in type_string.split('/')]
    if len(components) != 2:
        return None
    top_level, subtype = components
    if not is_token(top_level) or not is_token(subtype):
        return None
    return ParsedType(top_level, subtype)


def is_valid_top_level(type_string: str) -> bool:
    """Return True for registered top-level types and ``x-`` experimental ones."""
    if type_string.lower() in LEGAL_TOP_LEVEL_TYPES:
        return True
    return len(type_string) > 2 and type_string[:2].lower() == EXPERIMENTAL_TOP_LEVEL_PREFIX
