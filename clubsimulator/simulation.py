"""Drives a club through one day of events.

``Simulation`` replays an ordered event feed against a fresh ``Club`` and
collects the output stream, the settlement and a run summary into a
``DayReport``. The result depends only on the config and the feed, so
running the same simulation twice gives identical reports (apart from
the wall-clock timing in the summary).
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable

from clubsimulator.club import Club
from clubsimulator.config import DayConfig
from clubsimulator.core.event import ClientEvent, OutputRecord
from clubsimulator.instrumentation.summary import DayReport, RunSummary, TableSettlement

logger = logging.getLogger(__name__)


class Simulation:
    """One club day, from opening to settlement.

    Args:
        config: The day's table count, hours and rate.
        events: Client events in non-decreasing time order. The order is a
            precondition: events are applied exactly as given.
    """

    def __init__(self, config: DayConfig, events: Iterable[ClientEvent]):
        self._config = config
        self._events = list(events)
        self._club: Club | None = None

    @property
    def config(self) -> DayConfig:
        return self._config

    @property
    def events(self) -> list[ClientEvent]:
        return list(self._events)

    @property
    def club(self) -> Club | None:
        """The club of the most recent run, or None before the first run."""
        return self._club

    def run(self) -> DayReport:
        """Replay every event, then close the day and settle the tables."""
        wall_start = time.perf_counter()
        club = Club(self._config)
        self._club = club

        logger.info(
            "Simulation starting: %d tables, %s-%s, rate %d, %d events",
            self._config.table_count,
            self._config.opens_at,
            self._config.closes_at,
            self._config.hourly_rate,
            len(self._events),
        )

        records: list[OutputRecord] = []
        for event in self._events:
            records.extend(club.handle_event(event))
        records.extend(club.close_day())

        tables = [TableSettlement.from_account(account) for account in club.ledger]
        summary = RunSummary(
            events_processed=club.events_handled,
            rejections={reason.tag: count for reason, count in club.rejections.items()},
            promotions=club.promotions,
            forced_departures=club.forced_departures,
            queue=club.queue.stats(),
            total_proceeds=club.ledger.total_proceeds,
            wall_clock_seconds=time.perf_counter() - wall_start,
        )

        logger.info(
            "Simulation complete: %d events, %d records, proceeds %d",
            summary.events_processed,
            len(records),
            summary.total_proceeds,
        )
        return DayReport(config=self._config, records=records, tables=tables, summary=summary)


def simulate_day(config: DayConfig, events: Iterable[ClientEvent]) -> DayReport:
    """Run a single day and return its report."""
    return Simulation(config, events).run()
