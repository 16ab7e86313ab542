"""Per-table accounting of occupied time and proceeds."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from clubsimulator.core.temporal import Duration
from clubsimulator.entities.seating import ClosedTicket

logger = logging.getLogger(__name__)


@dataclass
class TableAccount:
    """Running totals for one table. Both totals only grow."""

    table: int
    occupied: Duration = field(default_factory=Duration.zero)
    proceeds: int = 0
    sessions: int = 0


class Ledger:
    """Bills closed seating sessions against their tables.

    Each session is charged separately at ``hourly_rate`` per started hour,
    so two 30 minute sessions cost two hours while occupied time adds up to
    exactly one.
    """

    def __init__(self, tables: Iterable[int], hourly_rate: int):
        if hourly_rate < 0:
            raise ValueError(f"hourly_rate must be >= 0, got {hourly_rate}")
        self._hourly_rate = hourly_rate
        self._accounts: dict[int, TableAccount] = {t: TableAccount(table=t) for t in tables}

    @property
    def hourly_rate(self) -> int:
        return self._hourly_rate

    def charge_for(self, duration: Duration) -> int:
        return self._hourly_rate * duration.ceil_hours()

    def record(self, closed: ClosedTicket) -> int:
        """Add a finished session to its table. Returns the amount charged."""
        account = self.account(closed.table)
        duration = closed.duration
        charge = self.charge_for(duration)

        account.occupied = account.occupied + duration
        account.proceeds += charge
        account.sessions += 1
        logger.debug(
            "Table %d billed %d for %s (%s..%s, %s)",
            closed.table,
            charge,
            closed.client,
            closed.start,
            closed.end,
            duration,
        )
        return charge

    def account(self, table: int) -> TableAccount:
        try:
            return self._accounts[table]
        except KeyError:
            raise ValueError(f"Unknown table {table}") from None

    @property
    def total_proceeds(self) -> int:
        return sum(a.proceeds for a in self._accounts.values())

    def __iter__(self) -> Iterator[TableAccount]:
        return iter(sorted(self._accounts.values(), key=lambda a: a.table))

    def __len__(self) -> int:
        return len(self._accounts)
