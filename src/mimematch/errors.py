from __future__ import annotations

"""Exceptions raised by mimematch.

Lookups and matching never raise; they report misses as None, an empty set
or False. Only configuration of the platform registry can fail.
"""


class RegistryConfigError(ValueError):
    """A platform registry reference could not be resolved."""

    def __init__(self, ref: str, reason: str) -> None:
        super().__init__(f"invalid platform registry {ref!r}: {reason}")
        self.ref = ref
        self.reason = reason
