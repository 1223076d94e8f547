"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path
from typing import Generator, Optional

import pytest

from inputpy import InputReader, OutputWriter
from inputpy.output import console


class MockReader(InputReader):
    """Reader that yields predefined lines, then end of input."""

    def __init__(self, *lines: str):
        self.lines = list(lines)
        self.read_count = 0

    def read_line(self) -> Optional[str]:
        self.read_count += 1
        if not self.lines:
            return None
        return self.lines.pop(0)


class FailingReader(InputReader):
    """Reader that always fails."""

    def __init__(self, error: Optional[Exception] = None):
        self.error = error or OSError("read failed")

    def read_line(self) -> Optional[str]:
        raise self.error


class MockWriter(OutputWriter):
    """Writer that captures output and counts flushes."""

    def __init__(self):
        self.chunks: list[str] = []
        self.flush_count = 0

    @property
    def output(self) -> str:
        return "".join(self.chunks)

    def write(self, text: str) -> None:
        self.chunks.append(text)

    def flush(self) -> None:
        self.flush_count += 1


class FailingWriter(MockWriter):
    """Writer that fails on write and/or flush."""

    def __init__(self, fail_write: bool = True, fail_flush: bool = True):
        super().__init__()
        self.fail_write = fail_write
        self.fail_flush = fail_flush

    def write(self, text: str) -> None:
        if self.fail_write:
            raise BrokenPipeError("write failed")
        super().write(text)

    def flush(self) -> None:
        if self.fail_flush:
            raise BrokenPipeError("flush failed")
        super().flush()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def writer() -> MockWriter:
    """Return a capturing writer."""
    return MockWriter()


@pytest.fixture
def make_reader():
    """Return a factory for readers fed with the given lines."""
    return MockReader


@pytest.fixture
def failing_reader() -> FailingReader:
    """Return a reader that raises OSError."""
    return FailingReader()


@pytest.fixture
def make_failing_writer():
    """Return a factory for writers failing on write and/or flush."""
    return FailingWriter


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Isolate tests from actual environment variables."""
    for key in ["INPUTPY_LOG_LEVEL", "INPUTPY_DEFAULT_PORT"]:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_console():
    """Restore global console quiet mode after each test."""
    original = console.quiet
    yield
    console.quiet = original
