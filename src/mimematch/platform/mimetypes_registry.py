from __future__ import annotations

"""
Platform registry backed by the standard library's mimetypes database.

The database is private to each registry: it starts from Python's built-in
table, then reads every system file listed in ``mimetypes.knownfiles``
(``/etc/mime.types`` and friends) and, on Windows, the registry. It is
never written to afterwards, so lookups are safe from any thread.
"""

import logging
import mimetypes
import os
from typing import Optional, Sequence, Set

from mimematch.core.interfaces.platform import PlatformRegistryProtocol
from mimematch.logging.helpers import get_logger, trace_lookup
from mimematch.utils.paths import strip_leading_dot


class MimetypesPlatformRegistry(PlatformRegistryProtocol):
    def __init__(
        self,
        *,
        files: Optional[Sequence[str]] = None,
        use_system_files: bool = True,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._log = logger or get_logger('platform')
        self._db = mimetypes.MimeTypes()
        sources = list(mimetypes.knownfiles) if use_system_files else []
        sources.extend(files or ())
        for name in sources:
            if os.path.isfile(name):
                self._db.read(name)
                self._log.debug('loaded mime database %s', name)
        if use_system_files and hasattr(self._db, 'read_windows_registry'):
            self._db.read_windows_registry()

    def lookup_extension(self, extension: str) -> Optional[str]:
        key = '.' + extension
        found: Optional[str] = None
        for strict in (True, False):
            table = self._db.types_map[strict]
            found = table.get(key) or table.get(key.lower())
            if found:
                break
        trace_lookup(self._log, 'platform extension lookup', extension=extension, result=found)
        return found

    def lookup_type(self, content_type: str) -> Set[str]:
        found = {strip_leading_dot(e) for e in self._db.guess_all_extensions(content_type, strict=False)}
        trace_lookup(self._log, 'platform type lookup', content_type=content_type, result=sorted(found))
        return found

    def preferred_extension(self, content_type: str) -> Optional[str]:
        ext = self._db.guess_extension(content_type, strict=False)
        return strip_leading_dot(ext) if ext else None


class NullPlatformRegistry(PlatformRegistryProtocol):
    """A platform that knows no types; resolution falls back to the tables."""

    def lookup_extension(self, extension: str) -> Optional[str]:
        return None

    def lookup_type(self, content_type: str) -> Set[str]:
        return set()

    def preferred_extension(self, content_type: str) -> Optional[str]:
        return None
