"""Cookie attribute validation.

Pure functions with no state. Each raises a ``CookieError`` subclass on
failure and returns ``None`` otherwise, so the constructor and every
``with_*()`` method can run them before building anything.
"""

from crumb.errors import InvalidName, InvalidPrefix, InvalidSameSite

SAMESITE_LAX = "lax"
SAMESITE_STRICT = "strict"
SAMESITE_NONE = "none"
ALLOWED_SAMESITE_VALUES = (SAMESITE_LAX, SAMESITE_STRICT, SAMESITE_NONE)

SECURE_PREFIX = "__Secure-"
HOST_PREFIX = "__Host-"
ALLOWED_PREFIXES = (SECURE_PREFIX, HOST_PREFIX)

# Control characters, whitespace and the RFC 2616 separators.
RESERVED_CHARACTERS = "=,; \t\r\n\v\f()<>@:\\\"/[]?{}"
_RESERVED = frozenset(RESERVED_CHARACTERS)


def validate_name(name: str, raw: bool) -> None:
    """Reject empty names, and names with reserved characters unless *raw*."""
    if not name:
        raise InvalidName(name)
    if not raw and not _RESERVED.isdisjoint(name):
        raise InvalidName(name)


def validate_prefix(prefix: str, secure: bool, path: str, domain: str) -> None:
    """Check *prefix* is known and its attribute constraints hold.

    ``__Secure-`` needs the Secure flag. ``__Host-`` additionally needs
    ``path == "/"`` and an empty (host-only) domain.
    """
    if not prefix:
        return
    if prefix not in ALLOWED_PREFIXES:
        raise InvalidPrefix(prefix)
    if prefix == SECURE_PREFIX and not secure:
        raise InvalidPrefix(prefix, f"Cookies with the {prefix!r} prefix must be Secure.")
    if prefix == HOST_PREFIX and (not secure or path != "/" or domain):
        raise InvalidPrefix(
            prefix,
            f"Cookies with the {prefix!r} prefix must be Secure, have Path=/ and no Domain.",
        )


def validate_samesite(samesite: str, secure: bool) -> None:
    """Check *samesite* is Lax, Strict or None (any case), and None is Secure.

    An empty string stands for the browser default and is accepted.
    """
    value = samesite.lower() if samesite else SAMESITE_LAX
    if value not in ALLOWED_SAMESITE_VALUES:
        raise InvalidSameSite(samesite)
    if value == SAMESITE_NONE and not secure:
        raise InvalidSameSite(samesite, "SameSite=None requires the Secure flag.")


def normalize_samesite(samesite: str) -> str:
    """``"STRICT"`` → ``"Strict"``; an empty value maps to ``"Lax"``."""
    return (samesite or SAMESITE_LAX).capitalize()
