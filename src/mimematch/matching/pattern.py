from __future__ import annotations

"""Wildcard-aware content type matching.

Supported pattern forms::

    application/x-foo      exact (case-insensitive) base type
    application/*          any subtype
    application/*+xml      any subtype ending in "+xml"
    *  or  */*             anything

Parameters in the pattern must all be present in the tested type with the
same value. Keys are compared case-insensitively, values case-sensitively
(RFC 2045 leaves value case to each parameter; most are case-sensitive, so
this errs towards false negatives).
"""

from typing import Dict, List, Tuple

from mimematch.constants import UNIVERSAL_WILDCARDS


def split_parameters(mime_type: str) -> Tuple[str, str]:
    """Split *mime_type* into (base, parameters) at the first ';'.

    ``parameters`` is '' both for ``text/html`` and ``text/html;``; use
    has_parameters to tell the two apart.
    """
    base, _, params = mime_type.partition(';')
    return base, params


def has_parameters(mime_type: str) -> bool:
    return ';' in mime_type


def parse_parameter_pairs(params: str) -> List[Tuple[str, str]]:
    """Split ``k1=v1; k2=v2`` into key/value pairs.

    Pieces are trimmed and empty pieces dropped. A piece without '=' yields
    ('', ''); a key followed by several '=' keeps the text after the run.
    """
    pairs: List[Tuple[str, str]] = []
    for piece in params.split(';'):
        piece = piece.strip()
        if not piece:
            continue
        key, sep, rest = piece.partition('=')
        if not sep:
            pairs.append(('', ''))
            continue
        pairs.append((key, rest.lstrip('=')))
    return pairs


def _parameter_map(params: str) -> Dict[str, str]:
    # Later duplicates overwrite earlier ones.
    return {key.lower(): value for key, value in parse_parameter_pairs(params)}


def matches_parameters(pattern: str, mime_type: str) -> bool:
    """Return True if every parameter of *pattern* appears in *mime_type*."""
    if not has_parameters(pattern):
        return True
    if not has_parameters(mime_type):
        return False

    wanted = _parameter_map(split_parameters(pattern)[1])
    offered = _parameter_map(split_parameters(mime_type)[1])
    if len(wanted) > len(offered):
        return False

    for key, value in wanted.items():
        if key not in offered or offered[key] != value:
            return False
    return True


def matches(pattern: str, mime_type: str) -> bool:
    """Return True if *mime_type* satisfies the (possibly wildcarded) *pattern*.

    Examples:
        >>> matches('application/*+xml', 'application/xhtml+xml')
        True
        >>> matches('application/*+xml', 'application/xml')
        False
        >>> matches('text/html;charset=utf-8', 'text/html;charset=UTF-8')
        False
    """
    if not pattern:
        return False

    base_pattern = split_parameters(pattern)[0]
    base_type = split_parameters(mime_type)[0]

    if base_pattern in UNIVERSAL_WILDCARDS:
        return matches_parameters(pattern, mime_type)

    star = base_pattern.find('*')
    if star == -1:
        if base_pattern.lower() != base_type.lower():
            return False
        return matches_parameters(pattern, mime_type)

    # Guard against overlap between the text left and right of '*'.
    if len(base_type) < len(base_pattern) - 1:
        return False

    left = base_pattern[:star].lower()
    right = base_pattern[star + 1:].lower()
    lowered = base_type.lower()
    if not lowered.startswith(left):
        return False
    if right and not lowered.endswith(right):
        return False

    return matches_parameters(pattern, mime_type)
