"""Tests for crumb.config — CookieConfig and the process-wide defaults store."""

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from crumb.config import CookieConfig, get_defaults, reset_defaults, set_defaults
from crumb.errors import ConfigurationError


class TestCookieConfig:
    def test_defaults(self) -> None:
        cfg = CookieConfig()

        assert cfg.prefix == ""
        assert cfg.expires == 0
        assert cfg.path == "/"
        assert cfg.domain == ""
        assert cfg.secure is False
        assert cfg.httponly is True
        assert cfg.samesite == "lax"
        assert cfg.raw is False

    def test_frozen(self) -> None:
        cfg = CookieConfig()

        with pytest.raises(AttributeError):
            cfg.secure = True  # type: ignore[misc]

    def test_to_dict(self) -> None:
        assert CookieConfig(path="/app").to_dict() == {
            "prefix": "",
            "expires": 0,
            "path": "/app",
            "domain": "",
            "secure": False,
            "httponly": True,
            "samesite": "lax",
            "raw": False,
        }


class TestFromEnv:
    def test_empty_environment(self) -> None:
        assert CookieConfig.from_env({}) == CookieConfig()

    def test_reads_values(self) -> None:
        cfg = CookieConfig.from_env(
            {
                "CRUMB_COOKIE_PATH": "/app",
                "CRUMB_COOKIE_SECURE": "yes",
                "CRUMB_COOKIE_HTTPONLY": "off",
                "CRUMB_COOKIE_EXPIRES": "60",
                "CRUMB_COOKIE_SAMESITE": "strict",
            }
        )

        assert cfg.path == "/app"
        assert cfg.secure is True
        assert cfg.httponly is False
        assert cfg.expires == 60
        assert cfg.samesite == "strict"

    def test_custom_prefix(self) -> None:
        cfg = CookieConfig.from_env({"APP_DOMAIN": "example.com"}, prefix="APP_")
        assert cfg.domain == "example.com"

    def test_bad_boolean(self) -> None:
        with pytest.raises(ConfigurationError, match="CRUMB_COOKIE_SECURE"):
            CookieConfig.from_env({"CRUMB_COOKIE_SECURE": "maybe"})

    def test_bad_integer(self) -> None:
        with pytest.raises(ConfigurationError, match="CRUMB_COOKIE_EXPIRES"):
            CookieConfig.from_env({"CRUMB_COOKIE_EXPIRES": "soon"})

    def test_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CRUMB_COOKIE_RAW", "1")
        assert CookieConfig.from_env().raw is True


class TestDefaultsStore:
    def test_initial_defaults(self) -> None:
        assert get_defaults() == CookieConfig().to_dict()

    def test_set_returns_previous(self) -> None:
        previous = set_defaults({"path": "/one"})
        assert previous["path"] == "/"

        previous = set_defaults({"path": "/two"})
        assert previous["path"] == "/one"

    def test_merge_keeps_unspecified(self) -> None:
        set_defaults({"secure": True})
        set_defaults({"path": "/app"})

        current = get_defaults()
        assert current["secure"] is True
        assert current["path"] == "/app"

    def test_config_object(self) -> None:
        set_defaults(CookieConfig(samesite="strict"))
        assert get_defaults()["samesite"] == "strict"

    def test_none_is_noop(self) -> None:
        before = get_defaults()
        set_defaults(None)
        assert get_defaults() == before

    def test_restore_with_snapshot(self) -> None:
        snapshot = set_defaults({"domain": "example.com", "secure": True})
        set_defaults(snapshot)
        assert get_defaults() == snapshot

    def test_no_validation(self) -> None:
        set_defaults({"samesite": "bogus"})
        assert get_defaults()["samesite"] == "bogus"

    def test_unknown_keys_dropped(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="crumb.config"):
            set_defaults({"colour": "blue", "path": "/x"})

        assert "colour" not in get_defaults()
        assert get_defaults()["path"] == "/x"
        assert "colour" in caplog.text

    def test_get_returns_copy(self) -> None:
        get_defaults()["path"] = "/mutated"
        assert get_defaults()["path"] == "/"

    def test_reset(self) -> None:
        set_defaults({"path": "/x"})
        previous = reset_defaults()

        assert previous["path"] == "/x"
        assert get_defaults()["path"] == "/"

    def test_concurrent_swaps(self) -> None:
        def swap(i: int) -> dict[str, object]:
            return set_defaults({"path": f"/{i}"})

        with ThreadPoolExecutor(max_workers=8) as pool:
            previous = list(pool.map(swap, range(64)))

        seen = {snapshot["path"] for snapshot in previous} | {get_defaults()["path"]}
        assert seen == {"/"} | {f"/{i}" for i in range(64)}
