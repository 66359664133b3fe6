"""
Pytest Configuration

Global test configuration, fixtures, and utilities for the
hashbench test suite.
"""

import logging
import tempfile
from pathlib import Path
from typing import Iterable, List

import pytest

# Add src to Python path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hashbench.core.config import AppConfig, LoggingConfig, ReportingConfig, set_config
from hashbench.benchmark.runner.config import HashAlgorithm


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def test_config(temp_dir):
    """Provide test configuration."""
    return AppConfig(
        name="Test Hash Benchmark",
        version="test",
        debug=True,
        logging=LoggingConfig(
            level="DEBUG",
            file=str(temp_dir / "logs" / "test.log")
        ),
        reporting=ReportingConfig(show_summary=False),
    )


# Fakes

class FakeClock:
    """Nanosecond clock that replays a fixed list of readings."""

    def __init__(self, readings: Iterable[int]):
        self.readings: List[int] = list(readings)
        self.calls = 0

    def __call__(self) -> int:
        value = self.readings[self.calls]
        self.calls += 1
        return value


class RecordingProvider:
    """Hash function stand-in that records every payload it receives."""

    def __init__(self, fail_on_call: int = None):
        self.payloads: List[bytes] = []
        self.fail_on_call = fail_on_call

    def __call__(self, data: bytes) -> bytes:
        if self.fail_on_call is not None and len(self.payloads) == self.fail_on_call:
            self.payloads.append(data)
            raise ValueError("provider exploded")
        self.payloads.append(data)
        return b"digest"


@pytest.fixture
def fake_clock():
    """Build a clock from per-run durations: each duration becomes one start/stop pair."""
    def create(durations: Iterable[int], start: int = 1_000) -> FakeClock:
        readings = []
        now = start
        for duration in durations:
            readings.extend([now, now + duration])
            now += duration + 7
        return FakeClock(readings)
    return create


@pytest.fixture
def recording_provider():
    """Factory for recording hash providers."""
    def create(fail_on_call: int = None) -> RecordingProvider:
        return RecordingProvider(fail_on_call=fail_on_call)
    return create


@pytest.fixture
def fake_providers(recording_provider):
    """A recording provider registered for every algorithm."""
    return {algorithm: recording_provider() for algorithm in HashAlgorithm}


# Test environment setup

@pytest.fixture(autouse=True)
def reset_global_config(monkeypatch):
    """Isolate tests from cached configuration and environment overrides."""
    for name in ("HASHBENCH_LOG_LEVEL", "HASHBENCH_SIPHASH_KEY", "HASHBENCH_DEBUG", "HASHBENCH_ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Drop handlers installed by setup_logging during a test."""
    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in original_handlers:
            handler.close()
    root_logger.handlers[:] = original_handlers
    root_logger.setLevel(original_level)


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external dependencies"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that exercise the real hashing providers"
    )
