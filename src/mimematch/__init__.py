from __future__ import annotations

from mimematch.adapters.platform import CallablePlatformRegistry
from mimematch.core.interfaces.platform import PlatformRegistryProtocol
from mimematch.core.models import MimeMapping, MultipartField, ParsedType
from mimematch.errors import RegistryConfigError
from mimematch.matching.pattern import matches
from mimematch.multipart.encoding import (
    append_multipart_field,
    append_multipart_terminator,
    build_multipart_body,
)
from mimematch.parsing.type_string import is_valid_top_level, parse_type
from mimematch.platform.mimetypes_registry import MimetypesPlatformRegistry, NullPlatformRegistry
from mimematch.plugins.registry import register_platform_registry
from mimematch.resolution.defaults import (
    extensions_for_type,
    get_default_resolver,
    preferred_extension_for_type,
    resolve_extension,
    resolve_file,
    resolve_well_known_extension,
    set_default_resolver,
)
from mimematch.resolution.resolver import ExtensionResolver

__version__ = '1.0.0'

__all__ = [
    'CallablePlatformRegistry',
    'ExtensionResolver',
    'MimeMapping',
    'MimetypesPlatformRegistry',
    'MultipartField',
    'NullPlatformRegistry',
    'ParsedType',
    'PlatformRegistryProtocol',
    'RegistryConfigError',
    'append_multipart_field',
    'append_multipart_terminator',
    'build_multipart_body',
    'extensions_for_type',
    'get_default_resolver',
    'is_valid_top_level',
    'matches',
    'parse_type',
    'preferred_extension_for_type',
    'register_platform_registry',
    'resolve_extension',
    'resolve_file',
    'resolve_well_known_extension',
    'set_default_resolver',
]
