"""
mimematch.platform – Concrete PlatformRegistryProtocol implementations.
"""
from .mimetypes_registry import MimetypesPlatformRegistry, NullPlatformRegistry

__all__ = ["MimetypesPlatformRegistry", "NullPlatformRegistry"]
