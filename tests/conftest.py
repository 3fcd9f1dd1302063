"""Shared fixtures: a pinned clock and recording fulfillment fakes."""
import pytest

from core.time import FixedClock, SystemClock, set_default_clock

CURRENT_YEAR = 2025


class RecordingShipping:
    def __init__(self):
        self.calls = []

    def ship(self, book, address, quantity):
        self.calls.append((book, address, quantity))


class RecordingMailer:
    def __init__(self):
        self.calls = []

    def send_digital_copy(self, book, contact, quantity):
        self.calls.append((book, contact, quantity))


@pytest.fixture
def clock():
    return FixedClock(CURRENT_YEAR)


@pytest.fixture
def default_clock(clock):
    """Pin the process-wide clock for code that builds books itself."""
    set_default_clock(clock)
    yield clock
    set_default_clock(SystemClock())


@pytest.fixture
def shipping():
    return RecordingShipping()


@pytest.fixture
def mailer():
    return RecordingMailer()
