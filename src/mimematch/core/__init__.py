from __future__ import annotations

"""Public surface for mimematch.core.

Protocol types and plain data models shared by every layer:

    from mimematch.core import PlatformRegistryProtocol, MimeMapping
"""

from mimematch.core.interfaces.platform import (
    PlatformRegistryProtocol,
    PlatformRegistryFactoryProtocol,
)
from mimematch.core.models import (
    MimeMapping,
    MultipartField,
    ParsedType,
    StandardTypeGroup,
)

__all__ = [
    # Protocols
    "PlatformRegistryProtocol",
    "PlatformRegistryFactoryProtocol",
    # Models
    "MimeMapping",
    "MultipartField",
    "ParsedType",
    "StandardTypeGroup",
]
