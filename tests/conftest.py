"""Shared test fixtures for the nsdebug test suite."""

import pytest

from nsdebug import registry as _registry_mod
from nsdebug.registry import DebugRegistry


# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------
class Collector:
    """Sink that records every call's arguments."""

    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(list(args))

    @property
    def lines(self):
        """First argument of each call (the decorated message)."""
        return [call[0] for call in self.calls]


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start=1_000_000):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def environ():
    """Isolated environment mapping (dates hidden for stable output)."""
    return {"DEBUG_HIDE_DATE": "on"}


@pytest.fixture
def collector():
    return Collector()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def registry(environ, collector, clock):
    """A registry with nothing enabled, colors off, output collected."""
    return DebugRegistry(
        "",
        environ=environ,
        sink=collector,
        use_colors=False,
        clock=clock,
    )


@pytest.fixture
def reset_singleton():
    """Restore the module-level registry after a test replaces it."""
    old = _registry_mod._registry
    yield
    _registry_mod._registry = old
