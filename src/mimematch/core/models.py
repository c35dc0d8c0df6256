from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple


@dataclass(frozen=True)
class MimeMapping:
    """One content type and the extensions that map to it (without dots)."""
    content_type: str
    extensions: Tuple[str, ...]

    def has_extension(self, ext: str) -> bool:
        key = ext.lower()
        return any(e.lower() == key for e in self.extensions)


@dataclass(frozen=True)
class StandardTypeGroup:
    """A medium (``image/``, ``audio/``...) and its well-known full types.

    The group whose ``prefix`` is None is the catch-all default.
    """
    prefix: Optional[str]
    standard_types: Tuple[str, ...] = ()


class ParsedType(NamedTuple):
    top_level: str
    subtype: str


@dataclass(frozen=True)
class MultipartField:
    name: str
    value: str
    content_type: str = ''
