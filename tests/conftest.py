"""
- Keep the app from configuring logging at import (APP_ENV=test)
- Provide a scripted random generator so secrets are predictable
- Provide a fresh in-memory store per test and a client (TestClient(app))
  whose routes use that store
"""
import os
from itertools import cycle

import pytest
from fastapi.testclient import TestClient

# Ensure the app does NOT run dev-only setup (logging config)
os.environ.setdefault("APP_ENV", "test")

from mastermind.config import GameConfig
from mastermind.main import app, get_store
from mastermind.store import SessionStore


class ScriptedRng:
    """Stands in for random.Random: randrange() replays the given values forever."""

    def __init__(self, values):
        self._values = cycle(values)

    def randrange(self, stop):
        value = next(self._values)
        assert 0 <= value < stop
        return value


@pytest.fixture
def make_rng():
    return ScriptedRng


@pytest.fixture
def store() -> SessionStore:
    # Every secret drawn from this store is [0, 1, 2, 3]
    return SessionStore(GameConfig(), rng=ScriptedRng([0, 1, 2, 3]))


@pytest.fixture
def client(store):
    """Force the app to use the test store for every request."""
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
