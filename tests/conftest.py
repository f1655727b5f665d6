import logging

import pytest


class FailingCursor:
    """Cursor over ``values`` that raises once ``next()`` is called ``fail_after`` times."""

    def __init__(self, values, fail_after):
        self.values = list(values)
        self.fail_after = fail_after
        self.calls = 0
        self.pos = 0

    def has_next(self):
        return self.pos < len(self.values)

    def next(self):
        if self.calls >= self.fail_after:
            raise RuntimeError(f"next() called more than {self.fail_after} times")
        self.calls += 1
        value = self.values[self.pos]
        self.pos += 1
        return value


class CountingCursor:
    """Cursor that records how often each operation is called."""

    def __init__(self, values):
        self.values = list(values)
        self.pos = 0
        self.has_next_calls = 0
        self.next_calls = 0

    def has_next(self):
        self.has_next_calls += 1
        return self.pos < len(self.values)

    def next(self):
        self.next_calls += 1
        value = self.values[self.pos]
        self.pos += 1
        return value


@pytest.fixture
def failing_cursor():
    return FailingCursor


@pytest.fixture
def counting_cursor():
    return CountingCursor


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("MAXFINDER_LOG_LEVEL", "MAXFINDER_LOG_FORMAT", "MAXFINDER_VERBOSE", "MAXFINDER_INPUT_ENCODING"):
        monkeypatch.delenv(name, raising=False)
