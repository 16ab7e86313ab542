"""The engine's current time."""

from __future__ import annotations

import logging

from clubsimulator.core.temporal import Instant

logger = logging.getLogger(__name__)


class Clock:
    """Holds "now" for a running club day.

    The club applies events strictly in feed order and does not re-sort
    them, so the clock only records where the feed has reached. Moving it
    backwards is logged but tolerated.
    """

    def __init__(self, start_time: Instant):
        self._current_time = start_time

    @property
    def now(self) -> Instant:
        return self._current_time

    def update(self, time: Instant) -> None:
        if time < self._current_time:
            logger.warning(
                "Clock moved backwards from %s to %s; event feed is not ordered",
                self._current_time,
                time,
            )
        self._current_time = time
