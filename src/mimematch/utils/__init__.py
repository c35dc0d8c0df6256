"""
mimematch.utils – Small shared helpers (HTTP token grammar, file names).
"""
from .http import is_token
from .paths import extension_of, strip_leading_dot

__all__ = ["is_token", "extension_of", "strip_leading_dot"]
