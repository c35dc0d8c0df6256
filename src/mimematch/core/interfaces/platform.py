from __future__ import annotations
from typing import Optional, Protocol, Set, runtime_checkable


@runtime_checkable
class PlatformRegistryProtocol(Protocol):
    """OS-native extension <-> content type database.

    Implementations may block on registry or filesystem access and must be
    safe to call from worker threads. Extensions are exchanged without the
    leading dot.
    """

    def lookup_extension(self, extension: str) -> Optional[str]:
        """Return the content type registered for *extension*, if any."""
        ...

    def lookup_type(self, content_type: str) -> Set[str]:
        """Return every extension registered for *content_type*."""
        ...

    def preferred_extension(self, content_type: str) -> Optional[str]:
        """Return the extension the platform prefers for *content_type*."""
        ...


@runtime_checkable
class PlatformRegistryFactoryProtocol(Protocol):
    def __call__(self) -> PlatformRegistryProtocol:
        ...
