"""Immutable HTTP cookie value object.

A Cookie is built through ``Cookie.create()`` or ``Cookie.from_header_string()``
and never changes afterwards. Each ``.with_*()`` call validates the new
value against the other attributes and returns a new Cookie::

    cookie = Cookie.create("session", "abc", secure=True)
    scoped = cookie.with_path("/app").with_samesite("strict")

    cookie.path   # "/"
    scoped.path   # "/app"
"""

from __future__ import annotations

import warnings
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from crumb.clock import now
from crumb.config import get_defaults
from crumb.errors import ImmutableWrite, UndefinedAttribute
from crumb.http import serialization
from crumb.http.expires import ExpiresLike, normalize_expires
from crumb.http.parsing import parse_header
from crumb.http.validation import (
    normalize_samesite,
    validate_name,
    validate_prefix,
    validate_samesite,
)

_YEAR = 365 * 24 * 60 * 60

# Readable through cookie[key]. "expire" is a legacy alias of "expires".
_KEYED_ATTRIBUTES = frozenset(
    {"name", "value", "expires", "expire", "domain", "path", "secure", "httponly", "samesite"}
)

_FALSE_FLAGS = frozenset({"", "0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class Cookie:
    """A single HTTP cookie. Immutable after creation.

    Direct construction applies only the built-in fallbacks; use
    :meth:`create` to layer options over the process-wide defaults.
    Every path into the class validates the name, the prefix constraints
    and SameSite before the instance is handed out.
    """

    name: str
    value: str = ""
    prefix: str = ""
    expires: int = 0  # Unix timestamp, 0 = session / expired
    path: str = "/"
    domain: str = ""
    secure: bool = False
    httponly: bool = True
    samesite: str = "Lax"
    raw: bool = False

    def __post_init__(self) -> None:
        validate_name(self.name, self.raw)
        validate_prefix(self.prefix, self.secure, self.path, self.domain)
        validate_samesite(self.samesite, self.secure)
        object.__setattr__(self, "expires", normalize_expires(self.expires))
        object.__setattr__(self, "samesite", normalize_samesite(self.samesite))

    # -- Constructors --

    @classmethod
    def create(
        cls,
        name: str,
        value: str = "",
        options: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Cookie:
        """Build a Cookie from *options* laid over the current defaults.

        Options may come as a mapping, as keyword arguments, or both
        (keywords win). ``max_age`` / ``"max-age"`` takes precedence over
        ``expires`` and is resolved against the clock right here.
        Empty ``prefix``, ``path``, ``domain`` and ``samesite`` fall back
        to the defaults.
        """
        defaults = get_defaults()
        merged: dict[str, Any] = {**defaults, **(options or {})}
        merged.update((key.replace("_", "-"), val) for key, val in kwargs.items())

        expires = normalize_expires(merged["expires"])
        max_age = _as_int(merged.get("max-age"))
        if max_age is not None:
            expires = normalize_expires(now() + max_age)

        return cls(
            name=name,
            value=value,
            prefix=_text(merged["prefix"]) or _text(defaults["prefix"]),
            expires=expires,
            path=_text(merged["path"]) or _text(defaults["path"]) or "/",
            domain=_text(merged["domain"]) or _text(defaults["domain"]),
            secure=_flag(merged["secure"]),
            httponly=_flag(merged["httponly"]),
            samesite=_text(merged["samesite"]) or _text(defaults["samesite"]),
            raw=_flag(merged["raw"]),
        )

    @classmethod
    def from_header_string(cls, header: str, raw: bool = False) -> Cookie:
        """Build a Cookie from a ``Set-Cookie`` header value.

        Attributes missing from the header come from the defaults.
        """
        name, value, attributes = parse_header(header, raw)
        return cls.create(name, value, {**attributes, "raw": raw})

    # -- Accessors --

    @property
    def id(self) -> str:
        """Lookup key ``prefixed_name;path;domain``.

        Distinguishes cookies that share a name but differ in scope.
        """
        return f"{self.prefixed_name};{self.path};{self.domain}"

    @property
    def prefixed_name(self) -> str:
        """Prefix plus name, the name percent-encoded unless raw."""
        if self.raw:
            return f"{self.prefix}{self.name}"
        return f"{self.prefix}{serialization.percent_encode_name(self.name)}"

    @property
    def expires_string(self) -> str:
        """``expires`` as a cookie date string."""
        return serialization.format_expires(self.expires)

    @property
    def max_age(self) -> int:
        """Seconds until expiry, never negative."""
        return max(self.expires - now(), 0)

    def is_expired(self) -> bool:
        """True for session cookies (``expires == 0``) and past expiry times."""
        return self.expires == 0 or self.expires < now()

    def options(self) -> dict[str, Any]:
        """Return the cookie options in ``Set-Cookie`` order.

        The key order ``expires, path, domain, secure, httponly, samesite``
        is what header emission expects. Do not reorder.
        """
        return {
            "expires": self.expires,
            "path": self.path,
            "domain": self.domain,
            "secure": self.secure,
            "httponly": self.httponly,
            "samesite": self.samesite,
        }

    def to_dict(self) -> dict[str, Any]:
        """Return every attribute: name, value, prefix, raw, then the options."""
        return {
            "name": self.name,
            "value": self.value,
            "prefix": self.prefix,
            "raw": self.raw,
            **self.options(),
        }

    def to_header_value(self) -> str:
        """Serialize to a ``Set-Cookie`` header value string."""
        return serialization.to_header_value(self)

    def __str__(self) -> str:
        return self.to_header_value()

    # -- Keyed access --

    def __getitem__(self, key: str) -> Any:
        if key not in _KEYED_ATTRIBUTES:
            raise UndefinedAttribute(key)
        if key == "expire":
            return self.expires
        return getattr(self, key)

    def __setitem__(self, key: str, value: Any) -> None:
        raise ImmutableWrite(key)

    def __delitem__(self, key: str) -> None:
        raise ImmutableWrite(key)

    def __contains__(self, key: object) -> bool:
        return key in _KEYED_ATTRIBUTES

    # -- Transformations --

    def with_prefix(self, prefix: str = "") -> Cookie:
        """Return a new Cookie with a different prefix."""
        validate_prefix(prefix, self.secure, self.path, self.domain)
        return replace(self, prefix=prefix)

    def with_name(self, name: str) -> Cookie:
        """Return a new Cookie with a different name."""
        validate_name(name, self.raw)
        return replace(self, name=name)

    def with_value(self, value: str) -> Cookie:
        """Return a new Cookie with a different value."""
        return replace(self, value=value)

    def with_expires(self, expires: ExpiresLike) -> Cookie:
        """Return a new Cookie expiring at *expires* (timestamp, date string or datetime)."""
        return replace(self, expires=normalize_expires(expires))

    def with_expired(self) -> Cookie:
        """Return a new Cookie marked as expired (``expires == 0``)."""
        return replace(self, expires=0)

    def with_never_expiring(self) -> Cookie:
        """Return a new Cookie expiring five years from now.

        Deprecated: browsers cap cookie lifetimes well below five years.
        Pass an explicit time to :meth:`with_expires` instead.
        """
        warnings.warn(
            "Cookie.with_never_expiring() is deprecated, use with_expires() with an explicit time.",
            DeprecationWarning,
            stacklevel=2,
        )
        return replace(self, expires=now() + 5 * _YEAR)

    def with_path(self, path: str | None) -> Cookie:
        """Return a new Cookie scoped to *path* (empty means the default path)."""
        path = path or _text(get_defaults()["path"]) or "/"
        validate_prefix(self.prefix, self.secure, path, self.domain)
        return replace(self, path=path)

    def with_domain(self, domain: str | None) -> Cookie:
        """Return a new Cookie scoped to *domain* (``None`` means the default domain)."""
        if domain is None:
            domain = _text(get_defaults()["domain"])
        validate_prefix(self.prefix, self.secure, self.path, domain)
        return replace(self, domain=domain)

    def with_secure(self, secure: bool = True) -> Cookie:
        """Return a new Cookie with the Secure flag set or cleared."""
        validate_prefix(self.prefix, secure, self.path, self.domain)
        validate_samesite(self.samesite, secure)
        return replace(self, secure=secure)

    def with_httponly(self, httponly: bool = True) -> Cookie:
        """Return a new Cookie with the HttpOnly flag set or cleared."""
        return replace(self, httponly=httponly)

    def with_samesite(self, samesite: str) -> Cookie:
        """Return a new Cookie with a different SameSite policy."""
        validate_samesite(samesite, self.secure)
        return replace(self, samesite=samesite)

    def with_raw(self, raw: bool = True) -> Cookie:
        """Return a new Cookie with raw (unencoded) name handling set or cleared."""
        validate_name(self.name, raw)
        return replace(self, raw=raw)


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_FLAGS
    return bool(value)


def _as_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return None


def _text(value: Any) -> str:
    # Bare header flags (``; Path``) arrive as True, unset defaults as None.
    return value if isinstance(value, str) else ""
