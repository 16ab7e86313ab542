"""Table occupancy: which client sits where, and since when.

A ``SeatingMap`` hands out one ``Ticket`` per occupied table. Closing a
ticket returns a ``ClosedTicket`` describing the finished session, which
the ledger bills. The map keeps a client-to-table index alongside the
table-to-ticket mapping so both lookups are constant time.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from clubsimulator.core.temporal import Duration, Instant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ticket:
    """An open seating session at one table."""

    client: str
    start: Instant


@dataclass(frozen=True)
class ClosedTicket:
    """A finished seating session.

    Attributes:
        table: Table the session was held at.
        client: Who sat there.
        start: When they sat down.
        end: When they got up.
    """

    table: int
    client: str
    start: Instant
    end: Instant

    @property
    def duration(self) -> Duration:
        return self.end - self.start


class SeatingMap:
    """Tables ``1..table_count`` with at most one open ticket each.

    A client holds at most one ticket at a time. Moving a client to another
    table means closing their ticket and opening a new one.
    """

    def __init__(self, table_count: int):
        if table_count <= 0:
            raise ValueError(f"table_count must be > 0, got {table_count}")
        self._table_count = table_count
        self._tickets: dict[int, Ticket] = {}
        self._table_of: dict[str, int] = {}

    @property
    def table_count(self) -> int:
        return self._table_count

    @property
    def occupied_count(self) -> int:
        return len(self._tickets)

    def has_free_table(self) -> bool:
        return len(self._tickets) < self._table_count

    def free_tables(self) -> list[int]:
        return [t for t in range(1, self._table_count + 1) if t not in self._tickets]

    def is_occupied(self, table: int) -> bool:
        self._check_table(table)
        return table in self._tickets

    def ticket_at(self, table: int) -> Ticket | None:
        self._check_table(table)
        return self._tickets.get(table)

    def table_of(self, client: str) -> int | None:
        return self._table_of.get(client)

    def occupy(self, table: int, client: str, at: Instant) -> Ticket:
        """Open a ticket for ``client`` at ``table``.

        Raises:
            ValueError: If the table is taken or the client already holds
                a ticket elsewhere.
        """
        self._check_table(table)
        if table in self._tickets:
            raise ValueError(f"Table {table} is already occupied by {self._tickets[table].client!r}")
        if client in self._table_of:
            raise ValueError(f"Client {client!r} already sits at table {self._table_of[client]}")

        ticket = Ticket(client=client, start=at)
        self._tickets[table] = ticket
        self._table_of[client] = table
        logger.debug("Table %d taken by %s at %s", table, client, at)
        return ticket

    def release(self, table: int, at: Instant) -> ClosedTicket:
        """Close the ticket at ``table`` as of ``at``.

        Raises:
            ValueError: If the table has no open ticket.
        """
        self._check_table(table)
        ticket = self._tickets.pop(table, None)
        if ticket is None:
            raise ValueError(f"Table {table} is not occupied")
        del self._table_of[ticket.client]

        closed = ClosedTicket(table=table, client=ticket.client, start=ticket.start, end=at)
        logger.debug("Table %d freed by %s at %s after %s", table, ticket.client, at, closed.duration)
        return closed

    def release_client(self, client: str, at: Instant) -> ClosedTicket | None:
        """Close whatever ticket ``client`` holds. Returns None if unseated."""
        table = self._table_of.get(client)
        if table is None:
            return None
        return self.release(table, at)

    def __iter__(self) -> Iterator[tuple[int, Ticket]]:
        return iter(sorted(self._tickets.items()))

    def _check_table(self, table: int) -> None:
        if not 1 <= table <= self._table_count:
            raise ValueError(f"Table must be in 1..{self._table_count}, got {table}")

    def __repr__(self) -> str:
        return f"SeatingMap(occupied={len(self._tickets)}/{self._table_count})"
