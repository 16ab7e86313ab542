"""Results of a simulated club day.

``DayReport`` is what ``Simulation.run()`` returns: the full output record
stream, the per-table settlement and a ``RunSummary`` of what happened.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import pandas as pd

from clubsimulator.config import DayConfig
from clubsimulator.core.event import OutputRecord
from clubsimulator.core.temporal import Duration
from clubsimulator.entities.waiting_queue import QueueStats

if TYPE_CHECKING:
    from clubsimulator.entities.ledger import TableAccount


@dataclass(frozen=True)
class TableSettlement:
    """End-of-day totals for one table."""

    table: int
    proceeds: int
    occupied: Duration
    sessions: int = 0

    @classmethod
    def from_account(cls, account: TableAccount) -> TableSettlement:
        return cls(
            table=account.table,
            proceeds=account.proceeds,
            occupied=account.occupied,
            sessions=account.sessions,
        )

    def tokens(self) -> tuple[str, ...]:
        return (str(self.table), str(self.proceeds), self.occupied.format())

    def to_dict(self) -> dict[str, Any]:
        return {
            "table": self.table,
            "proceeds": self.proceeds,
            "occupied": self.occupied.format(),
            "sessions": self.sessions,
        }


@dataclass(frozen=True)
class RunSummary:
    """Counters collected while the day was replayed."""

    events_processed: int
    rejections: dict[str, int]
    promotions: int
    forced_departures: int
    queue: QueueStats
    total_proceeds: int
    wall_clock_seconds: float = field(default=0.0, compare=False)

    def __str__(self) -> str:
        lines = [
            "Club Day Summary",
            f"  Events processed: {self.events_processed}",
            f"  Promotions: {self.promotions}",
            f"  Forced departures: {self.forced_departures}",
            f"  Total proceeds: {self.total_proceeds}",
            f"  Queue: peak={self.queue.peak_depth}, accepted={self.queue.total_accepted}, "
            f"turned away={self.queue.total_turned_away}",
        ]
        if self.rejections:
            lines.append("  Rejections:")
            for tag, count in sorted(self.rejections.items()):
                lines.append(f"    {tag}: {count}")
        lines.append(f"  Wall clock: {self.wall_clock_seconds:.3f}s")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "events_processed": self.events_processed,
            "rejections": dict(self.rejections),
            "promotions": self.promotions,
            "forced_departures": self.forced_departures,
            "queue": self.queue.to_dict(),
            "total_proceeds": self.total_proceeds,
        }


@dataclass(frozen=True)
class DayReport:
    """Everything a club day produced.

    Attributes:
        config: The day's configuration.
        records: Echoes and synthesized records in output order, including
            the closing-time evictions.
        tables: Settlement for every table, in table order.
        summary: Run counters.
    """

    config: DayConfig
    records: list[OutputRecord] = field(default_factory=list)
    tables: list[TableSettlement] = field(default_factory=list)
    summary: RunSummary | None = None

    @property
    def total_proceeds(self) -> int:
        return sum(t.proceeds for t in self.tables)

    def table(self, number: int) -> TableSettlement:
        for settlement in self.tables:
            if settlement.table == number:
                return settlement
        raise KeyError(number)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "opens_at": self.config.opens_at.format(),
            "closes_at": self.config.closes_at.format(),
            "records": [r.to_dict() for r in self.records],
            "tables": [t.to_dict() for t in self.tables],
        }
        if self.summary is not None:
            result["summary"] = self.summary.to_dict()
        return result

    def to_dataframe(self) -> pd.DataFrame:
        """Per-table settlement as a DataFrame indexed by table number.

        Columns: ``proceeds``, ``occupied_minutes``, ``sessions`` and
        ``utilization`` (occupied share of opening hours).
        """
        open_minutes = self.config.business_hours.minutes
        rows = [
            {
                "table": t.table,
                "proceeds": t.proceeds,
                "occupied_minutes": t.occupied.minutes,
                "sessions": t.sessions,
                "utilization": t.occupied.minutes / open_minutes,
            }
            for t in self.tables
        ]
        return pd.DataFrame(
            rows, columns=["table", "proceeds", "occupied_minutes", "sessions", "utilization"]
        ).set_index("table")
