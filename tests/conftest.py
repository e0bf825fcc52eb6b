import os
import tempfile

import pytest

os.environ.setdefault("VISGOTH_LOG_DIR", os.path.join(tempfile.gettempdir(), "visgoth-test-logs"))

from fastapi.testclient import TestClient

from visgoth.services.profiling import NullVisgothRegistry, set_visgoth


@pytest.fixture(autouse=True)
def null_registry():
    """Leave the process-wide registry disabled between tests."""
    set_visgoth(NullVisgothRegistry())
    yield
    set_visgoth(NullVisgothRegistry())


@pytest.fixture
def client():
    from visgoth.app import app

    return TestClient(app)


class FakeClock:
    """Deterministic clock returning preset readings, then repeating the last one."""

    def __init__(self, *readings):
        self.readings = list(readings)
        self.calls = 0

    def __call__(self):
        index = min(self.calls, len(self.readings) - 1)
        self.calls += 1
        return self.readings[index]


@pytest.fixture
def fake_clock():
    return FakeClock
