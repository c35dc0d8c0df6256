from .type_string import is_valid_top_level, parse_type

__all__ = ["is_valid_top_level", "parse_type"]
