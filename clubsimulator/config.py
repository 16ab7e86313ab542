"""Immutable configuration for one club day."""

from __future__ import annotations

from dataclasses import dataclass

from clubsimulator.core.temporal import Duration, Instant


@dataclass(frozen=True)
class DayConfig:
    """Fixed parameters of a club day.

    Attributes:
        table_count: Number of tables, numbered ``1..table_count``.
        opens_at: Opening time. Arrivals before it are refused.
        closes_at: Closing time. Everyone still inside leaves at this time.
        hourly_rate: Price of one started hour at a table.
    """

    table_count: int
    opens_at: Instant
    closes_at: Instant
    hourly_rate: int

    def __post_init__(self):
        if self.table_count <= 0:
            raise ValueError(f"table_count must be > 0, got {self.table_count}")
        if not self.opens_at < self.closes_at:
            raise ValueError(
                f"opens_at ({self.opens_at}) must be before closes_at ({self.closes_at})"
            )
        if self.hourly_rate < 0:
            raise ValueError(f"hourly_rate must be >= 0, got {self.hourly_rate}")

    @classmethod
    def from_strings(
        cls, table_count: str, opens_at: str, closes_at: str, hourly_rate: str
    ) -> DayConfig:
        """Build a config from the textual header fields of a day log."""
        return cls(
            table_count=int(table_count),
            opens_at=Instant.parse(opens_at),
            closes_at=Instant.parse(closes_at),
            hourly_rate=int(hourly_rate),
        )

    @property
    def tables(self) -> range:
        return range(1, self.table_count + 1)

    @property
    def business_hours(self) -> Duration:
        return self.closes_at - self.opens_at

    def is_open_at(self, time: Instant) -> bool:
        """Whether ``time`` falls within opening hours, both ends inclusive."""
        return self.opens_at <= time <= self.closes_at

    def has_table(self, table: int) -> bool:
        return 1 <= table <= self.table_count
