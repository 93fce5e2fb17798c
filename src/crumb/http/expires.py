"""Expiry normalization.

Everything that can stand for an expiry (timestamps, numeric strings,
``datetime`` objects, HTTP date strings) is converted once, at
construction, into an absolute Unix timestamp. ``0`` means session cookie.
"""

from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

from crumb.errors import InvalidExpires

EXPIRES_FORMAT = "%a, %d-%b-%Y %H:%M:%S GMT"

# 9999-12-31 23:59:59 UTC, the last second a cookie date can express.
MAX_TIMESTAMP = 253402300799

type ExpiresLike = int | float | str | datetime | None


def normalize_expires(expires: ExpiresLike) -> int:
    """Return *expires* as a Unix timestamp, or ``0`` for "no expiry".

    Negative results clamp to ``0``. Raises ``InvalidExpires`` for
    strings that are neither numeric nor a recognizable date, for
    unsupported types, and for times past ``MAX_TIMESTAMP``.
    """
    if expires is None or expires == "":
        return 0
    if isinstance(expires, bool):
        raise InvalidExpires(expires)
    if isinstance(expires, datetime):
        if expires.tzinfo is None:
            expires = expires.replace(tzinfo=UTC)
        timestamp = int(expires.timestamp())
    elif isinstance(expires, int | float):
        try:
            timestamp = int(expires)
        except (ValueError, OverflowError):
            raise InvalidExpires(expires) from None
    elif isinstance(expires, str):
        timestamp = _parse_string(expires.strip())
    else:
        raise InvalidExpires(expires)
    if timestamp > MAX_TIMESTAMP:
        raise InvalidExpires(expires)
    return max(timestamp, 0)


def _parse_string(value: str) -> int:
    try:
        return int(float(value))
    except (ValueError, OverflowError):
        pass

    try:
        parsed = datetime.strptime(value, EXPIRES_FORMAT).replace(tzinfo=UTC)
    except ValueError:
        try:
            parsed = parsedate_to_datetime(value)
        except (TypeError, ValueError, IndexError):
            raise InvalidExpires(value) from None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
    return int(parsed.timestamp())
