"""Tests for crumb.http.validation — name, prefix and SameSite rules."""

import pytest

from crumb.errors import InvalidName, InvalidPrefix, InvalidSameSite
from crumb.http.validation import (
    RESERVED_CHARACTERS,
    normalize_samesite,
    validate_name,
    validate_prefix,
    validate_samesite,
)


class TestValidateName:
    def test_plain_name(self) -> None:
        validate_name("session_id", raw=False)

    def test_empty(self) -> None:
        with pytest.raises(InvalidName, match="empty"):
            validate_name("", raw=False)

    def test_empty_even_when_raw(self) -> None:
        with pytest.raises(InvalidName):
            validate_name("", raw=True)

    @pytest.mark.parametrize("char", list(RESERVED_CHARACTERS))
    def test_each_reserved_character(self, char: str) -> None:
        with pytest.raises(InvalidName):
            validate_name(f"a{char}b", raw=False)

    def test_raw_skips_character_check(self) -> None:
        validate_name("a b;c", raw=True)

    def test_non_ascii_is_not_reserved(self) -> None:
        validate_name("café", raw=False)


class TestValidatePrefix:
    def test_no_prefix(self) -> None:
        validate_prefix("", secure=False, path="/x", domain="example.com")

    def test_unknown_prefix(self) -> None:
        with pytest.raises(InvalidPrefix):
            validate_prefix("__secure-", secure=True, path="/", domain="")

    def test_secure_prefix(self) -> None:
        validate_prefix("__Secure-", secure=True, path="/x", domain="example.com")

    def test_secure_prefix_without_secure(self) -> None:
        with pytest.raises(InvalidPrefix, match="Secure"):
            validate_prefix("__Secure-", secure=False, path="/", domain="")

    def test_host_prefix(self) -> None:
        validate_prefix("__Host-", secure=True, path="/", domain="")

    @pytest.mark.parametrize(
        ("secure", "path", "domain"),
        [
            (False, "/", ""),
            (True, "/app", ""),
            (True, "/", "example.com"),
        ],
    )
    def test_host_prefix_constraints(self, secure: bool, path: str, domain: str) -> None:
        with pytest.raises(InvalidPrefix):
            validate_prefix("__Host-", secure=secure, path=path, domain=domain)


class TestValidateSameSite:
    @pytest.mark.parametrize("value", ["Lax", "lax", "STRICT", "Strict", ""])
    def test_accepted(self, value: str) -> None:
        validate_samesite(value, secure=False)

    def test_none_requires_secure(self) -> None:
        with pytest.raises(InvalidSameSite, match="Secure"):
            validate_samesite("None", secure=False)

    def test_none_with_secure(self) -> None:
        validate_samesite("none", secure=True)

    def test_unknown(self) -> None:
        with pytest.raises(InvalidSameSite):
            validate_samesite("always", secure=True)


class TestNormalizeSameSite:
    def test_capitalizes(self) -> None:
        assert normalize_samesite("STRICT") == "Strict"
        assert normalize_samesite("none") == "None"

    def test_empty_is_lax(self) -> None:
        assert normalize_samesite("") == "Lax"
