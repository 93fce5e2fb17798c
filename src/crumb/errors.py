"""Crumb exception hierarchy.

Shared by the parser, validators and the Cookie value object so every
module raises and catches the same types. All of them signal a
programming error in the caller (bad input, bad configuration), never
an external condition, so nothing here is retried.
"""


class CookieError(Exception):
    """Base for all crumb-specific errors."""


class ConfigurationError(CookieError):
    """Raised when cookie defaults cannot be built from their source.

    Typically raised by ``CookieConfig.from_env()`` for values that do
    not parse as the expected type.
    """


class MalformedHeader(CookieError):  # noqa: N818
    """The header string does not contain a recognizable ``name=value`` pair."""

    def __init__(self, header: str) -> None:
        super().__init__(f"Cannot parse cookie header {header!r}: no name/value pair found.")
        self.header = header


class InvalidName(CookieError):  # noqa: N818
    """Cookie name is empty, or holds reserved characters while not raw."""

    def __init__(self, name: str) -> None:
        if name:
            detail = f"The cookie name {name!r} contains invalid characters."
        else:
            detail = "The cookie name cannot be empty."
        super().__init__(detail)
        self.name = name


class InvalidPrefix(CookieError):  # noqa: N818
    """Unrecognized prefix, or a prefix whose attribute constraints are violated."""

    def __init__(self, prefix: str, detail: str = "") -> None:
        super().__init__(detail or f"Invalid cookie prefix {prefix!r}.")
        self.prefix = prefix


class InvalidSameSite(CookieError):  # noqa: N818
    """SameSite value is unknown, or ``None`` without the Secure flag."""

    def __init__(self, samesite: str, detail: str = "") -> None:
        super().__init__(detail or f"The SameSite value must be Lax, Strict or None. {samesite!r} given.")
        self.samesite = samesite


class InvalidExpires(CookieError):  # noqa: N818
    """An expiry value that cannot be turned into a Unix timestamp."""

    def __init__(self, expires: object) -> None:
        super().__init__(f"Invalid cookie expiration time {expires!r}.")
        self.expires = expires


class UndefinedAttribute(CookieError, KeyError):  # noqa: N818
    """Keyed read of an attribute the Cookie does not expose.

    Also a ``KeyError`` so mapping-style callers can catch it the usual way.
    """

    def __init__(self, key: object) -> None:
        super().__init__(f"Undefined cookie attribute {key!r}.")
        self.key = key

    def __str__(self) -> str:
        return str(self.args[0])


class ImmutableWrite(CookieError, TypeError):  # noqa: N818
    """Attempted write or delete through the keyed-access interface.

    Cookies only change through their ``with_*()`` methods.
    """

    def __init__(self, key: object) -> None:
        super().__init__(
            f"Cannot set or unset {key!r}: Cookie is immutable, use the with_*() methods instead."
        )
        self.key = key
