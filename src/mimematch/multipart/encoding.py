from __future__ import annotations

"""multipart/form-data body formatting.

The helpers append to a caller-owned list of string chunks; join it once
at the end. Nothing is escaped: callers pick a boundary that does not occur
in any value and field names without quotes or line breaks.
"""

from typing import Iterable, List

from mimematch.core.models import MultipartField

CRLF = '\r\n'


def append_multipart_field(
    boundary: str,
    field_name: str,
    value: str,
    content_type: str,
    into: List[str],
) -> None:
    into.append(f'--{boundary}{CRLF}')
    into.append(f'Content-Disposition: form-data; name="{field_name}"{CRLF}')
    if content_type:
        into.append(f'Content-Type: {content_type}{CRLF}')
    # Blank line, then the value.
    into.append(f'{CRLF}{value}{CRLF}')


def append_multipart_terminator(boundary: str, into: List[str]) -> None:
    into.append(f'--{boundary}--{CRLF}')


def build_multipart_body(boundary: str, fields: Iterable[MultipartField]) -> str:
    """Return a complete body: every field in order, then the final delimiter."""
    chunks: List[str] = []
    for field in fields:
        append_multipart_field(boundary, field.name, field.value, field.content_type, chunks)
    append_multipart_terminator(boundary, chunks)
    return ''.join(chunks)
