"""
mimematch.adapters – Adapters that bridge plain code to Protocols.

Modules
-------
platform.py → CallablePlatformRegistry
"""

from .platform import CallablePlatformRegistry

__all__ = ["CallablePlatformRegistry"]
