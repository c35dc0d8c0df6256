from __future__ import annotations
"""HTTP token grammar (RFC 7230 §3.2.6).

A token is a non-empty run of visible ASCII characters that are not
separators. Control characters, whitespace and anything outside ASCII are
rejected.
"""

HTTP_SEPARATORS = frozenset('()<>@,;:\\"/[]?={} \t')


def is_token(value: str) -> bool:
    """Return True if *value* is a valid HTTP token."""
    if not value:
        return False
    for ch in value:
        code = ord(ch)
        if code >= 0x80 or code <= 0x1F or code == 0x7F:
            return False
        if ch in HTTP_SEPARATORS:
            return False
    return True
