from __future__ import annotations

"""
Named factories for platform registries.

This registry provides:
- `register_platform_registry(name, factory)`
- `get_platform_registry_factory(name)`
- `build_platform_registry(ref)`

A reference is either a registered name (built-ins: 'system', 'none') or a
'module.path:AttrName' pointing at a PlatformRegistryProtocol class or a
zero-argument factory.
"""

import importlib
from typing import Any, Dict, Optional

from mimematch.core.interfaces.platform import PlatformRegistryFactoryProtocol, PlatformRegistryProtocol
from mimematch.errors import RegistryConfigError
from mimematch.platform.mimetypes_registry import MimetypesPlatformRegistry, NullPlatformRegistry

_FACTORIES: Dict[str, PlatformRegistryFactoryProtocol] = {
    'system': MimetypesPlatformRegistry,
    'none': NullPlatformRegistry,
}


def register_platform_registry(name: str, factory: PlatformRegistryFactoryProtocol) -> None:
    key = (name or '').strip().lower()
    if not key:
        raise ValueError('platform registry name must be non-empty')
    _FACTORIES[key] = factory


def get_platform_registry_factory(name: str) -> Optional[PlatformRegistryFactoryProtocol]:
    key = (name or '').strip().lower()
    return _FACTORIES.get(key)


def load_object_from_ref(ref: str) -> Any:
    """Load an attribute from a module given a 'module:attr' reference.

    Raises:
        RegistryConfigError: If the reference is malformed or cannot be resolved.
    """
    module_name, sep, obj_name = (ref or '').partition(':')
    if not module_name or not sep or not obj_name:
        raise RegistryConfigError(ref, "expected 'module.path:AttrName'")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise RegistryConfigError(ref, f'cannot import {module_name!r}: {exc}') from exc
    try:
        return getattr(module, obj_name)
    except AttributeError as exc:
        raise RegistryConfigError(ref, f'{module_name!r} has no attribute {obj_name!r}') from exc


def build_platform_registry(ref: str) -> PlatformRegistryProtocol:
    """Instantiate the platform registry named by *ref*."""
    factory = get_platform_registry_factory(ref)
    if factory is None:
        if ':' not in (ref or ''):
            raise RegistryConfigError(ref, 'unknown registry name')
        factory = load_object_from_ref(ref.strip())
        if not callable(factory):
            raise RegistryConfigError(ref, 'not callable')
    registry = factory()
    if not isinstance(registry, PlatformRegistryProtocol):
        raise RegistryConfigError(ref, f'{type(registry).__name__} does not implement PlatformRegistryProtocol')
    return registry
