"""Cookie header parsing.

Covers both directions a header arrives in: ``parse_header`` reads one
``Set-Cookie`` value (name, value and attributes), ``parse_cookies``
reads a request ``Cookie`` header carrying several name/value pairs.
"""

import logging
import re
from urllib.parse import unquote_plus

from crumb.errors import MalformedHeader

logger = logging.getLogger("crumb.http")

_SEGMENT_SPLIT = re.compile(r";\s*")

type Attributes = dict[str, str | bool]


def parse_header(header: str, raw: bool = False) -> tuple[str, str, Attributes]:
    """Split a ``Set-Cookie`` header value into ``(name, value, attributes)``.

    The first segment is ``name=value``, split on the first ``=``. Later
    segments are ``attr=val`` pairs or bare flags (``Secure``), the latter
    stored as ``True``. Attribute keys are lower-cased, last one wins.
    Unless *raw*, name and value are percent-decoded.

    Example::

        >>> parse_header("id=abc; Path=/x; Secure")
        ('id', 'abc', {'path': '/x', 'secure': True})
    """
    if not header or not header.strip():
        raise MalformedHeader(header)

    first, *segments = _SEGMENT_SPLIT.split(header.strip())
    name, sep, value = first.partition("=")
    if not sep and not name.strip():
        raise MalformedHeader(header)

    if not raw:
        name = unquote_plus(name)
        value = unquote_plus(value)

    attributes: Attributes = {}
    for segment in segments:
        segment = segment.strip()
        if not segment:
            continue
        if "=" in segment:
            attr, _, val = segment.partition("=")
            attributes[attr.strip().lower()] = val.strip()
        else:
            attributes[segment.lower()] = True

    logger.debug("Parsed cookie header %r with attributes %s", name, sorted(attributes))
    return name, value, attributes


def parse_cookies(header: str, raw: bool = False) -> dict[str, str]:
    """Parse a request ``Cookie`` header into a name-value dict.

    Pairs are decoded the same way ``parse_header`` decodes a
    ``Set-Cookie`` name and value, unless *raw*. Pairs without ``=``
    and pairs with an empty name are skipped; the last duplicate wins.
    Returns an empty dict for empty or missing headers.
    """
    cookies: dict[str, str] = {}
    if not header:
        return cookies
    for pair in _SEGMENT_SPLIT.split(header.strip()):
        name, sep, value = pair.partition("=")
        name = name.strip()
        if not sep or not name:
            continue
        value = value.strip()
        if not raw:
            name, value = unquote_plus(name), unquote_plus(value)
        cookies[name] = value
    return cookies
