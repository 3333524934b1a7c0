import io
import os

import pytest

from unitester import TesterSettings, UnitTester


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep UNITESTER_* variables from the outer environment out of the tests."""
    for name in list(os.environ):
        if name.startswith("UNITESTER_"):
            monkeypatch.delenv(name)


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def tester(out) -> UnitTester:
    """Tester writing plain (uncolored) lines into ``out``."""
    return UnitTester(out, settings=TesterSettings(color=False))
