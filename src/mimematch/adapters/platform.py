"""
adapters.platform – Expose plain callables through PlatformRegistryProtocol.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Set

from ..core import PlatformRegistryProtocol


def _no_type(_: str) -> Optional[str]:
    return None


def _no_extensions(_: str) -> Iterable[str]:
    return ()


@dataclass
class CallablePlatformRegistry(PlatformRegistryProtocol):
    """Adapter that fulfills PlatformRegistryProtocol by delegation.

    Any callable left out behaves like a platform that knows nothing. When
    ``preferred`` is missing, the first extension from ``types`` (in sorted
    order) is used.
    """

    extensions: Callable[[str], Optional[str]] = _no_type
    types: Callable[[str], Iterable[str]] = _no_extensions
    preferred: Optional[Callable[[str], Optional[str]]] = None

    def lookup_extension(self, extension: str) -> Optional[str]:  # type: ignore[override]
        return self.extensions(extension) or None

    def lookup_type(self, content_type: str) -> Set[str]:  # type: ignore[override]
        return set(self.types(content_type))

    def preferred_extension(self, content_type: str) -> Optional[str]:  # type: ignore[override]
        if self.preferred is not None:
            return self.preferred(content_type)
        found = sorted(self.lookup_type(content_type))
        return found[0] if found else None
