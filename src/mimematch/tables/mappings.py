from __future__ import annotations

"""Hard-coded extension tables.

Two ordered tables are consulted by the resolver:

  * PRIMARY_MAPPINGS   – authoritative; the platform can never override them.
  * SECONDARY_MAPPINGS – fallbacks consulted only after the platform lookup
                         came back empty.

An extension may appear under several types (``webm``, ``ico``, ``png``);
the first entry in table order wins for resolution, every entry counts for
enumeration.
"""

from typing import Iterable, Iterator, Optional, Sequence, Tuple

from mimematch.core.models import MimeMapping


def _table(rows: Iterable[Tuple[str, str]]) -> Tuple[MimeMapping, ...]:
    return tuple(MimeMapping(ctype, tuple(exts.split(','))) for ctype, exts in rows)


PRIMARY_MAPPINGS: Tuple[MimeMapping, ...] = _table((
    ('text/html', 'html,htm,shtml,shtm'),
    ('text/css', 'css'),
    ('text/xml', 'xml'),
    ('image/gif', 'gif'),
    ('image/jpeg', 'jpeg,jpg'),
    ('image/webp', 'webp'),
    ('image/png', 'png'),
    ('video/mp4', 'mp4,m4v'),
    ('audio/x-m4a', 'm4a'),
    ('audio/mp3', 'mp3'),
    ('video/ogg', 'ogv,ogm'),
    ('audio/ogg', 'ogg,oga,opus'),
    ('video/webm', 'webm'),
    ('audio/webm', 'webm'),
    ('audio/wav', 'wav'),
    ('application/xhtml+xml', 'xhtml,xht,xhtm'),
    ('application/x-chrome-extension', 'crx'),
    ('multipart/related', 'mhtml,mht'),
))

SECONDARY_MAPPINGS: Tuple[MimeMapping, ...] = _table((
    ('application/octet-stream', 'exe,com,bin'),
    ('application/gzip', 'gz'),
    ('application/pdf', 'pdf'),
    ('application/postscript', 'ps,eps,ai'),
    ('application/javascript', 'js'),
    ('application/font-woff', 'woff'),
    ('image/bmp', 'bmp'),
    ('image/x-icon', 'ico'),
    ('image/vnd.microsoft.icon', 'ico'),
    ('image/jpeg', 'jfif,pjpeg,pjp'),
    ('image/tiff', 'tiff,tif'),
    ('image/x-xbitmap', 'xbm'),
    ('image/svg+xml', 'svg,svgz'),
    ('image/x-png', 'png'),
    ('message/rfc822', 'eml'),
    ('text/plain', 'txt,text'),
    ('text/html', 'ehtml'),
    ('application/rss+xml', 'rss'),
    ('application/rdf+xml', 'rdf'),
    ('text/xml', 'xsl,xbl,xslt'),
    ('application/vnd.mozilla.xul+xml', 'xul'),
    ('application/x-shockwave-flash', 'swf,swl'),
    ('application/pkcs7-mime', 'p7m,p7c,p7z'),
    ('application/pkcs7-signature', 'p7s'),
    ('application/x-mpegurl', 'm3u8'),
    ('application/epub+zip', 'epub'),
))


def find_mime_type(mappings: Sequence[MimeMapping], ext: str) -> Optional[str]:
    """Return the first content type in *mappings* listing *ext* (case-insensitive)."""
    for mapping in mappings:
        if mapping.has_extension(ext):
            return mapping.content_type
    return None


def iter_extensions_with_prefix(mappings: Sequence[MimeMapping], leading_type: str) -> Iterator[str]:
    """Yield extensions of every mapping whose type starts with *leading_type*.

    The prefix test ignores ASCII case; extensions are yielded as stored.
    """
    lead = leading_type.lower()
    for mapping in mappings:
        if mapping.content_type.lower().startswith(lead):
            yield from mapping.extensions
