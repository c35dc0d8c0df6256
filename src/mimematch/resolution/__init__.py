from .defaults import (
    extensions_for_type,
    get_default_resolver,
    preferred_extension_for_type,
    resolve_extension,
    resolve_file,
    resolve_well_known_extension,
    set_default_resolver,
)
from .resolver import ExtensionResolver

__all__ = [
    "ExtensionResolver",
    "extensions_for_type",
    "get_default_resolver",
    "preferred_extension_for_type",
    "resolve_extension",
    "resolve_file",
    "resolve_well_known_extension",
    "set_default_resolver",
]
