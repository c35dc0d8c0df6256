from __future__ import annotations

"""Curated full types per medium, used to expand ``image/*``-style queries.

From http://www.w3schools.com/media/media_mimeref.asp and
http://plugindoc.mozdev.org/winmime.php
"""

from typing import Tuple

from mimematch.core.models import StandardTypeGroup

STANDARD_IMAGE_TYPES: Tuple[str, ...] = (
    'image/bmp',
    'image/cis-cod',
    'image/gif',
    'image/ief',
    'image/jpeg',
    'image/webp',
    'image/pict',
    'image/pipeg',
    'image/png',
    'image/svg+xml',
    'image/tiff',
    'image/vnd.microsoft.icon',
    'image/x-cmu-raster',
    'image/x-cmx',
    'image/x-icon',
    'image/x-portable-anymap',
    'image/x-portable-bitmap',
    'image/x-portable-graymap',
    'image/x-portable-pixmap',
    'image/x-rgb',
    'image/x-xbitmap',
    'image/x-xpixmap',
    'image/x-xwindowdump',
)

STANDARD_AUDIO_TYPES: Tuple[str, ...] = (
    'audio/aac',
    'audio/aiff',
    'audio/amr',
    'audio/basic',
    'audio/midi',
    'audio/mp3',
    'audio/mp4',
    'audio/mpeg',
    'audio/mpeg3',
    'audio/ogg',
    'audio/vorbis',
    'audio/wav',
    'audio/webm',
    'audio/x-m4a',
    'audio/x-ms-wma',
    'audio/vnd.rn-realaudio',
    'audio/vnd.wave',
)

STANDARD_VIDEO_TYPES: Tuple[str, ...] = (
    'video/avi',
    'video/divx',
    'video/flc',
    'video/mp4',
    'video/mpeg',
    'video/ogg',
    'video/quicktime',
    'video/sd-video',
    'video/webm',
    'video/x-dv',
    'video/x-m4v',
    'video/x-mpeg',
    'video/x-ms-asf',
    'video/x-ms-wmv',
)

# The last group is the default for unrecognized prefixes.
STANDARD_TYPE_GROUPS: Tuple[StandardTypeGroup, ...] = (
    StandardTypeGroup('image/', STANDARD_IMAGE_TYPES),
    StandardTypeGroup('audio/', STANDARD_AUDIO_TYPES),
    StandardTypeGroup('video/', STANDARD_VIDEO_TYPES),
    StandardTypeGroup(None, ()),
)


def find_standard_group(leading_type: str, groups: Tuple[StandardTypeGroup, ...] = STANDARD_TYPE_GROUPS) -> StandardTypeGroup:
    """Return the group whose prefix equals *leading_type* (e.g. ``'image/'``).

    Falls through to the last group when no prefix matches.

    Raises:
        ValueError: If *groups* is empty.
    """
    if not groups:
        raise ValueError('at least one standard type group is required')
    for group in groups:
        if group.prefix is not None and leading_type == group.prefix:
            return group
    return groups[-1]
