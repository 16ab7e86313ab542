"""Time-of-day and duration value types.

The club runs on a wall clock with minute resolution, so both types store
whole minutes. ``Instant`` is a point within a single day (minutes since
midnight); ``Duration`` is a non-negative span between two instants.

Subtracting two instants yields a ``Duration``; adding a ``Duration`` to an
``Instant`` yields an ``Instant``.
"""

from __future__ import annotations

import re
from functools import total_ordering

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR

_CLOCK_RE = re.compile(r"(\d{2}):(\d{2})")


def _format_clock(minutes: int) -> str:
    hours, mins = divmod(minutes, MINUTES_PER_HOUR)
    return f"{hours:02d}:{mins:02d}"


@total_ordering
class Duration:
    """A span of time measured in whole minutes."""

    __slots__ = ("_minutes",)

    def __init__(self, minutes: int):
        if not isinstance(minutes, int):
            raise TypeError(f"Duration minutes must be int, got {type(minutes).__name__}")
        if minutes < 0:
            raise ValueError(f"Duration must be non-negative, got {minutes} minutes")
        self._minutes = minutes

    @classmethod
    def from_minutes(cls, minutes: int) -> Duration:
        return cls(minutes)

    @classmethod
    def from_hours(cls, hours: int) -> Duration:
        return cls(hours * MINUTES_PER_HOUR)

    @classmethod
    def zero(cls) -> Duration:
        return cls(0)

    @property
    def minutes(self) -> int:
        return self._minutes

    def to_minutes(self) -> int:
        return self._minutes

    def ceil_hours(self) -> int:
        """Whole hours covering this duration, rounded up.

        A zero duration covers zero hours; anything up to and including one
        hour covers one.
        """
        return -(-self._minutes // MINUTES_PER_HOUR)

    def format(self) -> str:
        """Render as ``HH:MM``."""
        return _format_clock(self._minutes)

    def __add__(self, other: Duration) -> Duration:
        if isinstance(other, Duration):
            return Duration(self._minutes + other._minutes)
        return NotImplemented

    def __radd__(self, other):
        # Lets sum() start from the int 0
        if other == 0:
            return self
        if isinstance(other, Instant):
            return other + self
        return NotImplemented

    def __sub__(self, other: Duration) -> Duration:
        if isinstance(other, Duration):
            return Duration(self._minutes - other._minutes)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self._minutes == other._minutes

    def __lt__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self._minutes < other._minutes

    def __hash__(self):
        return hash(("Duration", self._minutes))

    def __bool__(self) -> bool:
        return self._minutes > 0

    def __repr__(self) -> str:
        return f"Duration({self.format()})"


@total_ordering
class Instant:
    """A time of day, stored as minutes since midnight."""

    __slots__ = ("_minutes",)

    def __init__(self, minutes: int):
        if not isinstance(minutes, int):
            raise TypeError(f"Instant minutes must be int, got {type(minutes).__name__}")
        if not 0 <= minutes < MINUTES_PER_DAY:
            raise ValueError(f"Instant must fall within one day, got {minutes} minutes")
        self._minutes = minutes

    @classmethod
    def from_minutes(cls, minutes: int) -> Instant:
        return cls(minutes)

    @classmethod
    def at(cls, hours: int, minutes: int = 0) -> Instant:
        if not 0 <= minutes < MINUTES_PER_HOUR:
            raise ValueError(f"Minutes must be in 0..59, got {minutes}")
        return cls(hours * MINUTES_PER_HOUR + minutes)

    @classmethod
    def parse(cls, text: str) -> Instant:
        """Parse a zero-padded 24h ``HH:MM`` string.

        Raises:
            ValueError: If the text is not a valid time of day.
        """
        match = _CLOCK_RE.fullmatch(text)
        if match is None:
            raise ValueError(f"Expected HH:MM, got {text!r}")
        hours, minutes = int(match.group(1)), int(match.group(2))
        if hours >= 24 or minutes >= MINUTES_PER_HOUR:
            raise ValueError(f"Time of day out of range: {text!r}")
        return cls(hours * MINUTES_PER_HOUR + minutes)

    @property
    def minutes(self) -> int:
        return self._minutes

    def to_minutes(self) -> int:
        return self._minutes

    def format(self) -> str:
        """Render as ``HH:MM``."""
        return _format_clock(self._minutes)

    def __add__(self, other: Duration) -> Instant:
        if isinstance(other, Duration):
            return Instant(self._minutes + other.minutes)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Instant):
            return Duration(self._minutes - other._minutes)
        if isinstance(other, Duration):
            return Instant(self._minutes - other.minutes)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Instant):
            return NotImplemented
        return self._minutes == other._minutes

    def __lt__(self, other):
        if not isinstance(other, Instant):
            return NotImplemented
        return self._minutes < other._minutes

    def __hash__(self):
        return hash(("Instant", self._minutes))

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Instant({self.format()})"
