from .registry import (
    build_platform_registry,
    get_platform_registry_factory,
    load_object_from_ref,
    register_platform_registry,
)

__all__ = [
    "build_platform_registry",
    "get_platform_registry_factory",
    "load_object_from_ref",
    "register_platform_registry",
]
