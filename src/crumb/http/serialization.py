"""Set-Cookie serialization.

Turns a Cookie back into what the response layer needs: the encoded
name, the ordered option pairs, or a complete ``Set-Cookie`` value.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from crumb.http.expires import EXPIRES_FORMAT
from crumb.http.validation import RESERVED_CHARACTERS

if TYPE_CHECKING:
    from crumb.http.cookies import Cookie

# One-byte ASCII table; everything outside it passes through unchanged.
_NAME_ESCAPES = str.maketrans({char: quote(char, safe="") for char in RESERVED_CHARACTERS})

_DELETED_VALUE = "deleted"


def percent_encode_name(name: str) -> str:
    """Replace each reserved character in *name* with its ``%XX`` form."""
    return name.translate(_NAME_ESCAPES)


def format_expires(timestamp: int) -> str:
    """Format a Unix timestamp as a cookie date (``Thu, 01-Jan-1970 00:00:00 GMT``)."""
    return datetime.fromtimestamp(timestamp, tz=UTC).strftime(EXPIRES_FORMAT)


def to_options_tuple(cookie: Cookie) -> tuple[tuple[str, Any], ...]:
    """Return the cookie options as ordered ``(key, value)`` pairs."""
    return tuple(cookie.options().items())


def to_header_value(cookie: Cookie) -> str:
    """Serialize *cookie* to a ``Set-Cookie`` header value string.

    An empty value is written as a deletion: ``deleted`` with an epoch
    ``Expires`` and ``Max-Age=0``.
    """
    if cookie.value == "":
        parts = [
            f"{cookie.prefixed_name}={_DELETED_VALUE}",
            f"Expires={format_expires(0)}",
            "Max-Age=0",
        ]
    else:
        value = cookie.value if cookie.raw else quote(cookie.value, safe="")
        parts = [f"{cookie.prefixed_name}={value}"]
        if cookie.expires != 0:
            parts.append(f"Expires={cookie.expires_string}")
            parts.append(f"Max-Age={cookie.max_age}")

    if cookie.path:
        parts.append(f"Path={cookie.path}")
    if cookie.domain:
        parts.append(f"Domain={cookie.domain}")
    if cookie.secure:
        parts.append("Secure")
    if cookie.httponly:
        parts.append("HttpOnly")
    parts.append(f"SameSite={cookie.samesite}")
    return "; ".join(parts)
