"""Shared fixtures: every test starts from built-in defaults and the real clock."""

from collections.abc import Iterator

import pytest

from crumb.clock import set_clock
from crumb.config import reset_defaults


@pytest.fixture(autouse=True)
def _isolated_cookie_state() -> Iterator[None]:
    reset_defaults()
    set_clock(None)
    yield
    reset_defaults()
    set_clock(None)
