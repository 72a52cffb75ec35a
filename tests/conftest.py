"""Shared fixtures for context logger tests"""

import pytest

from context_logger.core.log_entry import LogEntry

LOGGER_ENV_VARS = ["LOG_LEVEL", "LOG_LIMIT", "LOG_NAMESPACES", "APP_NAME", "LOGS_PRETTY_PRINT"]


class MemoryWriter:
    """Writer collecting entries for assertions."""

    def __init__(self):
        self.entries = []

    def write(self, entry: LogEntry) -> None:
        self.entries.append(entry)

    def flush(self) -> None:
        pass

    def clear(self) -> None:
        self.entries.clear()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's shell settings out of the tests."""
    for var in LOGGER_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def writer():
    return MemoryWriter()
