"""Clock protocol — the "current year" provider.

Book validation and outdated checks depend on the current calendar year.
Production code uses SystemClock; tests pin the year with FixedClock::

    clock = FixedClock(2025)
    book = PhysicalBook("ID1", "Book1", 45.50, 2020, stock=10, clock=clock)
    assert book.is_outdated(5)
"""
from __future__ import annotations

from datetime import date
from typing import Protocol


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------

class Clock(Protocol):
    """Injectable source of the current calendar year."""

    def current_year(self) -> int:
        ...  # pragma: no cover


# ---------------------------------------------------------------------------
# Implementations
# ---------------------------------------------------------------------------

class SystemClock:
    """Production clock — reads today's date on every call."""

    def current_year(self) -> int:
        return date.today().year


class FixedClock:
    """Test clock — always reports the same year."""

    def __init__(self, year: int) -> None:
        self._year = year

    def current_year(self) -> int:
        return self._year

    def advance(self, years: int = 1) -> None:
        """Move the clock forward (multi-step scenarios)."""
        self._year += years


# ---------------------------------------------------------------------------
# Default clock
# ---------------------------------------------------------------------------

_default_clock: Clock = SystemClock()


def set_default_clock(clock: Clock) -> None:
    """Override the process-wide default clock."""
    global _default_clock
    _default_clock = clock


def get_default_clock() -> Clock:
    return _default_clock
