from __future__ import annotations

"""
Extension <-> content type resolution.

Resolution follows the same order Mozilla uses:

  1. the primary table, which nothing can override;
  2. the platform registry (optional);
  3. the secondary table, which the platform is allowed to override.

Enumeration (`extensions_for_type`) unions the platform answer with every
hard-coded mapping under the requested type, because some supported
extensions (ogg, for instance) are often missing from the system database.
"""

import logging
import os
from typing import Optional, Set, Union

from mimematch.constants import MAX_EXTENSION_LENGTH, UNIVERSAL_WILDCARDS
from mimematch.core.interfaces.platform import PlatformRegistryProtocol
from mimematch.logging.helpers import get_logger
from mimematch.tables.mappings import (
    PRIMARY_MAPPINGS,
    SECONDARY_MAPPINGS,
    find_mime_type,
    iter_extensions_with_prefix,
)
from mimematch.tables.standard_types import find_standard_group
from mimematch.utils.paths import extension_of


class ExtensionResolver:
    """Resolve extensions and enumerate types against one platform registry."""

    def __init__(self, registry: PlatformRegistryProtocol, *, logger: Optional[logging.Logger] = None) -> None:
        self._registry = registry
        self._log = logger or get_logger('resolver')

    @property
    def registry(self) -> PlatformRegistryProtocol:
        return self._registry

    def resolve_extension(self, ext: str, include_platform: bool = True) -> Optional[str]:
        """Return the content type for *ext* (no leading dot), or None.

        Args:
            ext: File name extension, compared case-insensitively.
            include_platform: Consult the platform registry between the
                primary and the secondary table.
        """
        if len(ext) > MAX_EXTENSION_LENGTH:
            self._log.debug('extension of %d characters ignored', len(ext))
            return None

        found = find_mime_type(PRIMARY_MAPPINGS, ext)
        if found:
            return found

        if include_platform:
            found = self._registry.lookup_extension(ext)
            if found:
                return found

        return find_mime_type(SECONDARY_MAPPINGS, ext)

    def resolve_well_known_extension(self, ext: str) -> Optional[str]:
        """Like resolve_extension, but identical on every operating system."""
        return self.resolve_extension(ext, include_platform=False)

    def resolve_file(self, path: Union[str, 'os.PathLike[str]'], include_platform: bool = True) -> Optional[str]:
        ext = extension_of(path)
        if not ext:
            return None
        return self.resolve_extension(ext, include_platform)

    def preferred_extension_for_type(self, content_type: str) -> Optional[str]:
        return self._registry.preferred_extension(content_type)

    def extensions_for_type(self, content_type: str) -> Set[str]:
        """Return every known extension for a type or a ``prefix/*`` group.

        ``*`` and ``*/*`` yield nothing: no extension belongs to every type.
        An unknown ``prefix/*`` falls back to the default group, which has
        no standard types, so only hard-coded mappings under ``prefix/``
        contribute.
        """
        if content_type in UNIVERSAL_WILDCARDS:
            return set()

        mime_type = content_type.lower()
        found: Set[str] = set()

        if mime_type.endswith('/*'):
            leading = mime_type[:-1]
            group = find_standard_group(leading)
            if group.prefix is None:
                self._log.debug('no standard group for %r; using the default group', content_type)
            for standard_type in group.standard_types:
                found |= self._registry.lookup_type(standard_type)
        else:
            leading = mime_type
            found |= self._registry.lookup_type(mime_type)

        found.update(iter_extensions_with_prefix(PRIMARY_MAPPINGS, leading))
        found.update(iter_extensions_with_prefix(SECONDARY_MAPPINGS, leading))
        return found
