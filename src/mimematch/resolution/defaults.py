from __future__ import annotations

"""Process-wide default resolver used by the module-level API.

The resolver is built lazily from Settings.from_env() the first time it is
needed; set_default_resolver() replaces it (tests, embedding applications).
"""

import os
import threading
from typing import Optional, Set, Union

from mimematch.config import Settings
from mimematch.platform.mimetypes_registry import NullPlatformRegistry
from mimematch.plugins.registry import build_platform_registry
from mimematch.resolution.resolver import ExtensionResolver

_DEFAULT_RESOLVER: Optional[ExtensionResolver] = None
_LOCK = threading.Lock()

# Answers that never depend on the host, without building the platform database.
_WELL_KNOWN_RESOLVER = ExtensionResolver(NullPlatformRegistry())


def get_default_resolver() -> ExtensionResolver:
    global _DEFAULT_RESOLVER
    if _DEFAULT_RESOLVER is None:
        with _LOCK:
            if _DEFAULT_RESOLVER is None:
                settings = Settings.from_env()
                _DEFAULT_RESOLVER = ExtensionResolver(build_platform_registry(settings.registry))
    return _DEFAULT_RESOLVER


def set_default_resolver(resolver: Optional[ExtensionResolver]) -> None:
    """Install *resolver* as the default; None rebuilds it lazily from the environment."""
    global _DEFAULT_RESOLVER
    with _LOCK:
        _DEFAULT_RESOLVER = resolver


def resolve_extension(ext: str, include_platform: bool = True) -> Optional[str]:
    if not include_platform:
        return _WELL_KNOWN_RESOLVER.resolve_extension(ext, False)
    return get_default_resolver().resolve_extension(ext)


def resolve_well_known_extension(ext: str) -> Optional[str]:
    return _WELL_KNOWN_RESOLVER.resolve_well_known_extension(ext)


def resolve_file(path: Union[str, 'os.PathLike[str]'], include_platform: bool = True) -> Optional[str]:
    resolver = get_default_resolver() if include_platform else _WELL_KNOWN_RESOLVER
    return resolver.resolve_file(path, include_platform)


def extensions_for_type(content_type: str) -> Set[str]:
    return get_default_resolver().extensions_for_type(content_type)


def preferred_extension_for_type(content_type: str) -> Optional[str]:
    return get_default_resolver().preferred_extension_for_type(content_type)
