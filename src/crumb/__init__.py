"""Crumb — immutable HTTP cookies.

Parses ``Set-Cookie`` headers, enforces RFC 6265 name grammar and the
``__Secure-`` / ``__Host-`` prefix rules, and serializes back out.

Basic usage::

    from crumb import Cookie

    cookie = Cookie.from_header_string("id=abc; Path=/x; Secure; SameSite=Strict")
    cookie.path                 # "/x"
    cookie.with_expired()       # new Cookie, original untouched

Process-wide defaults::

    from crumb import CookieConfig, set_defaults

    previous = set_defaults(CookieConfig(secure=True, samesite="strict"))
"""

__version__ = "0.1.0-dev"
__all__ = [
    "Cookie",
    "CookieConfig",
    "CookieError",
    "ConfigurationError",
    "ImmutableWrite",
    "InvalidExpires",
    "InvalidName",
    "InvalidPrefix",
    "InvalidSameSite",
    "MalformedHeader",
    "UndefinedAttribute",
    "get_defaults",
    "parse_cookies",
    "reset_defaults",
    "set_defaults",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crumb`` fast while providing a clean top-level API.
    """
    if name == "Cookie":
        from crumb.http.cookies import Cookie

        return Cookie

    if name == "parse_cookies":
        from crumb.http.parsing import parse_cookies

        return parse_cookies

    if name in ("CookieConfig", "get_defaults", "reset_defaults", "set_defaults"):
        from crumb import config as _config

        return getattr(_config, name)

    if name in (
        "CookieError",
        "ConfigurationError",
        "ImmutableWrite",
        "InvalidExpires",
        "InvalidName",
        "InvalidPrefix",
        "InvalidSameSite",
        "MalformedHeader",
        "UndefinedAttribute",
    ):
        from crumb import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
