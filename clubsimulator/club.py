"""The club's rule engine.

``Club`` owns the whole state of one day: who is inside, who sits where,
who is waiting and what each table has earned. It consumes ``ClientEvent``
values one at a time through ``handle_event()`` and answers with the
records to write to the output stream. ``close_day()`` evicts everyone
still inside and freezes the ledger.

Rule checks raise ``RuleViolation``; ``handle_event()`` turns each one
into an output record and carries on, so a bad event never stops the day.

Example::

    club = Club(DayConfig(3, Instant.parse("09:00"), Instant.parse("19:00"), 10))
    records = club.handle_event(ClientEvent.arrive("09:41", "client1"))
    records += club.close_day()
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable

from clubsimulator.config import DayConfig
from clubsimulator.core.clock import Clock
from clubsimulator.core.event import (
    ClientEvent,
    EventEcho,
    EventKind,
    ForcedDeparture,
    OutputRecord,
    Promotion,
    RejectionRecord,
)
from clubsimulator.core.temporal import Instant
from clubsimulator.entities.ledger import Ledger
from clubsimulator.entities.registry import SessionRegistry
from clubsimulator.entities.seating import SeatingMap
from clubsimulator.entities.waiting_queue import WaitingQueue
from clubsimulator.errors import RejectionReason, RuleViolation

logger = logging.getLogger(__name__)

Handler = Callable[[ClientEvent], list[OutputRecord]]


class Club:
    """State machine for a single club day.

    The caller must feed events in non-decreasing time order; the club
    neither sorts nor checks the feed.

    Args:
        config: Table count, opening hours and hourly rate for the day.
    """

    def __init__(self, config: DayConfig):
        self.config = config
        self.clock = Clock(config.opens_at)
        self.registry = SessionRegistry()
        self.seating = SeatingMap(config.table_count)
        self.queue = WaitingQueue(limit=config.table_count)
        self.ledger = Ledger(config.tables, config.hourly_rate)

        self._closed = False
        self._events_handled = 0
        self._rejections: Counter[RejectionReason] = Counter()
        self._promotions = 0
        self._forced_departures = 0

        self._handlers: dict[EventKind, Handler] = {
            EventKind.ARRIVE: self._on_arrive,
            EventKind.SEAT: self._on_seat,
            EventKind.WAIT: self._on_wait,
            EventKind.LEAVE: self._on_leave,
        }

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def events_handled(self) -> int:
        return self._events_handled

    @property
    def rejections(self) -> dict[RejectionReason, int]:
        return dict(self._rejections)

    @property
    def promotions(self) -> int:
        return self._promotions

    @property
    def forced_departures(self) -> int:
        return self._forced_departures

    def handle_event(self, event: ClientEvent) -> list[OutputRecord]:
        """Apply one input event.

        Returns:
            The echo of ``event`` followed by anything it caused.

        Raises:
            RuntimeError: If the day has already been closed.
            ValueError: If the event names a table the club does not have.
        """
        if self._closed:
            raise RuntimeError("Club day is closed; no further events can be handled")
        if event.table is not None and not self.config.has_table(event.table):
            raise ValueError(f"Table must be in 1..{self.config.table_count}, got {event.table}")

        self.clock.update(event.time)
        self._events_handled += 1

        records: list[OutputRecord] = [EventEcho(event)]
        try:
            records.extend(self._handlers[event.kind](event))
        except RuleViolation as violation:
            records.extend(self._reject(violation))
        return records

    def close_day(self) -> list[OutputRecord]:
        """Evict everyone still inside at closing time, in name order.

        Nobody is promoted from the queue during eviction.

        Raises:
            RuntimeError: If called twice.
        """
        if self._closed:
            raise RuntimeError("Club day is already closed")

        closes_at = self.config.closes_at
        if self.clock.now < closes_at:
            self.clock.update(closes_at)

        records: list[OutputRecord] = []
        for client in self.registry.sorted_names():
            self._depart(client, self._eviction_time(client), promote=False)
            self._forced_departures += 1
            records.append(ForcedDeparture(time=closes_at, client=client))

        self._closed = True
        logger.info(
            "Club closed at %s: %d evicted, proceeds %d",
            closes_at,
            len(records),
            self.ledger.total_proceeds,
        )
        return records

    def _eviction_time(self, client: str) -> Instant:
        """Closing time, or the ticket start for a client seated after closing."""
        closes_at = self.config.closes_at
        table = self.seating.table_of(client)
        if table is None:
            return closes_at
        start = self.seating.ticket_at(table).start
        if start > closes_at:
            logger.warning("%s sat down at %s, after closing; session billed as empty", client, start)
            return start
        return closes_at

    # -- rule handlers ---------------------------------------------------

    def _on_arrive(self, event: ClientEvent) -> list[OutputRecord]:
        if event.client in self.registry:
            raise RuleViolation(RejectionReason.DUPLICATE_PRESENCE, event.client, event.time)
        if not self.config.is_open_at(event.time):
            raise RuleViolation(RejectionReason.OUTSIDE_OPERATING_HOURS, event.client, event.time)

        self.registry.admit(event.client, event.time)
        return []

    def _on_seat(self, event: ClientEvent) -> list[OutputRecord]:
        self._require_present(event)
        table = event.table
        if self.seating.is_occupied(table):
            raise RuleViolation(RejectionReason.TABLE_OCCUPIED, event.client, event.time)

        # Moving tables settles the old one but never offers it to the queue
        closed = self.seating.release_client(event.client, event.time)
        if closed is not None:
            self.ledger.record(closed)
            logger.debug("%s moved from table %d to %d", event.client, closed.table, table)

        self.queue.withdraw(event.client)
        self.seating.occupy(table, event.client, event.time)
        return []

    def _on_wait(self, event: ClientEvent) -> list[OutputRecord]:
        self._require_present(event)
        if self.seating.has_free_table():
            raise RuleViolation(RejectionReason.TABLE_AVAILABLE, event.client, event.time)
        if self.queue.is_full():
            raise RuleViolation(RejectionReason.QUEUE_FULL, event.client, event.time)

        if event.client in self.queue or self.seating.table_of(event.client) is not None:
            logger.debug("%s is already seated or waiting; queue unchanged", event.client)
            return []

        self.queue.push(event.client)
        return []

    def _on_leave(self, event: ClientEvent) -> list[OutputRecord]:
        self._require_present(event)
        return self._depart(event.client, event.time, promote=True)

    # -- shared transitions ----------------------------------------------

    def _require_present(self, event: ClientEvent) -> None:
        if event.client not in self.registry:
            raise RuleViolation(RejectionReason.CLIENT_NOT_PRESENT, event.client, event.time)

    def _depart(self, client: str, at: Instant, *, promote: bool) -> list[OutputRecord]:
        """Remove ``client`` from the club, settling their table if they had one.

        With ``promote`` set, a table freed this way goes to the head of the
        waiting queue.
        """
        self.registry.discharge(client)
        self.queue.withdraw(client)

        closed = self.seating.release_client(client, at)
        if closed is None:
            return []
        self.ledger.record(closed)

        if not promote or not len(self.queue):
            return []
        return [self._promote(closed.table, at)]

    def _promote(self, table: int, at: Instant) -> Promotion:
        client = self.queue.pop()
        self.seating.occupy(table, client, at)
        self._promotions += 1
        logger.info("%s promoted from the waiting queue to table %d at %s", client, table, at)
        return Promotion(time=at, client=client, table=table)

    def _reject(self, violation: RuleViolation) -> list[OutputRecord]:
        reason = violation.reason
        self._rejections[reason] += 1
        logger.debug("Rejected event from %s at %s: %s", violation.client, violation.time, reason.name)

        if not reason.turns_client_away:
            return [RejectionRecord(time=violation.time, reason=reason)]

        self.queue.note_turned_away()
        self._forced_departures += 1
        logger.info("%s turned away at %s: waiting queue is full", violation.client, violation.time)
        records: list[OutputRecord] = [ForcedDeparture(time=violation.time, client=violation.client)]
        records.extend(self._depart(violation.client, violation.time, promote=True))
        return records

    def __repr__(self) -> str:
        return (
            f"Club(present={len(self.registry)}, {self.seating!r}, "
            f"{self.queue!r}, closed={self._closed})"
        )
