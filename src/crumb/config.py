"""Cookie attribute defaults.

CookieConfig is a frozen dataclass — immutable after creation, IDE-autocompletable.
The process-wide defaults store sits underneath every Cookie constructor
as a fallback layer and is replaced atomically through ``set_defaults()``.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from typing import Any

from crumb.errors import ConfigurationError

logger = logging.getLogger("crumb.config")

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class CookieConfig:
    """Default cookie attributes. Immutable after creation.

    All fields have browser-friendly defaults. Override what you need::

        config = CookieConfig(secure=True, samesite="strict")
        set_defaults(config)
    """

    prefix: str = ""
    expires: int = 0  # 0 = session cookie
    path: str = "/"
    domain: str = ""  # "" = host-only
    secure: bool = False
    httponly: bool = True
    samesite: str = "lax"
    raw: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the attributes as a plain ``{name: value}`` dict."""
        return asdict(self)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        prefix: str = "CRUMB_COOKIE_",
    ) -> CookieConfig:
        """Build a config from ``CRUMB_COOKIE_*`` environment variables.

        Unset variables keep the dataclass default. Booleans accept
        ``1/true/yes/on`` and ``0/false/no/off``.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for f in fields(cls):
            key = f"{prefix}{f.name.upper()}"
            if key not in env:
                continue
            raw_value = env[key].strip()
            if f.type in (bool, "bool"):
                values[f.name] = _parse_bool(key, raw_value)
            elif f.type in (int, "int"):
                try:
                    values[f.name] = int(raw_value)
                except ValueError:
                    msg = f"{key} must be an integer, got {raw_value!r}"
                    raise ConfigurationError(msg) from None
            else:
                values[f.name] = raw_value
        return cls(**values)


def _parse_bool(key: str, value: str) -> bool:
    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    msg = f"{key} must be a boolean (1/0, true/false, yes/no, on/off), got {value!r}"
    raise ConfigurationError(msg)


_BUILTIN_DEFAULTS: dict[str, Any] = CookieConfig().to_dict()

_lock = threading.Lock()
_defaults: dict[str, Any] = dict(_BUILTIN_DEFAULTS)


def get_defaults() -> dict[str, Any]:
    """Return a copy of the current default attributes."""
    return dict(_defaults)


def set_defaults(config: CookieConfig | Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Merge *config* over the current defaults and return the old snapshot.

    Keys present in *config* win; the rest keep their current values.
    Values are not validated here, a Cookie built on bad defaults fails
    at construction. Unknown keys are dropped.
    """
    global _defaults
    if isinstance(config, CookieConfig):
        incoming = config.to_dict()
    else:
        incoming = dict(config or {})

    unknown = incoming.keys() - _BUILTIN_DEFAULTS.keys()
    if unknown:
        logger.warning("Ignoring unknown cookie default(s): %s", ", ".join(sorted(unknown)))
        for key in unknown:
            del incoming[key]

    with _lock:
        previous = _defaults
        _defaults = {**previous, **incoming}
    logger.debug("Cookie defaults replaced: %s", incoming)
    return dict(previous)


def reset_defaults() -> dict[str, Any]:
    """Restore the built-in defaults and return the old snapshot."""
    global _defaults
    with _lock:
        previous, _defaults = _defaults, dict(_BUILTIN_DEFAULTS)
    return dict(previous)
