# src/mimematch/utils/paths.py
"""
paths – File-name helpers feeding the extension resolver.

Provides:
  • extension_of(path)   – final extension without the leading dot
  • strip_leading_dot(s) – ".html" → "html"
"""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import Union


def extension_of(path: Union[str, "os.PathLike[str]"]) -> str:
    """Return the last extension of *path* without the dot ('' when absent).

    Hidden files such as ``.bashrc`` have no extension, matching
    :attr:`pathlib.PurePath.suffix`.
    """
    suffix = PurePath(os.fspath(path)).suffix
    return suffix[1:] if suffix else ''


def strip_leading_dot(ext: str) -> str:
    return ext[1:] if ext.startswith('.') else ext
