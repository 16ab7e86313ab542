"""FIFO queue of present clients waiting for a table."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueueStats:
    """Frozen snapshot of waiting-queue statistics.

    Attributes:
        depth: Clients waiting right now.
        peak_depth: Largest depth observed.
        total_accepted: Clients that joined the queue.
        total_promoted: Clients taken from the head onto a table.
        total_withdrawn: Clients that left the club while waiting.
        total_turned_away: Join requests refused because the queue was full.
    """

    depth: int
    peak_depth: int
    total_accepted: int
    total_promoted: int
    total_withdrawn: int
    total_turned_away: int

    def to_dict(self) -> dict[str, int]:
        return {
            "depth": self.depth,
            "peak_depth": self.peak_depth,
            "accepted": self.total_accepted,
            "promoted": self.total_promoted,
            "withdrawn": self.total_withdrawn,
            "turned_away": self.total_turned_away,
        }


class WaitingQueue:
    """Clients waiting for a free table, first come first served.

    The queue refuses newcomers once it already holds more than ``limit``
    clients, so at most ``limit + 1`` clients can be waiting at once.
    A name appears at most once.

    Args:
        limit: The club's table count.
    """

    def __init__(self, limit: int):
        if limit <= 0:
            raise ValueError(f"limit must be > 0, got {limit}")
        self._limit = limit
        self._items: deque[str] = deque()

        self._peak_depth = 0
        self._accepted = 0
        self._promoted = 0
        self._withdrawn = 0
        self._turned_away = 0

    @property
    def limit(self) -> int:
        return self._limit

    def is_full(self) -> bool:
        return len(self._items) > self._limit

    def push(self, client: str) -> None:
        """Append ``client`` at the tail.

        Raises:
            ValueError: If the client is already waiting.
        """
        if client in self._items:
            raise ValueError(f"Client {client!r} is already waiting")
        self._items.append(client)
        self._accepted += 1
        self._peak_depth = max(self._peak_depth, len(self._items))
        logger.debug("%s joined the waiting queue (depth=%d)", client, len(self._items))

    def pop(self) -> str:
        """Remove and return the head of the queue.

        Raises:
            IndexError: If nobody is waiting.
        """
        if not self._items:
            raise IndexError("pop from an empty waiting queue")
        client = self._items.popleft()
        self._promoted += 1
        return client

    def peek(self) -> str | None:
        return self._items[0] if self._items else None

    def withdraw(self, client: str) -> bool:
        """Remove ``client`` wherever they stand. Returns False if absent."""
        try:
            self._items.remove(client)
        except ValueError:
            return False
        self._withdrawn += 1
        logger.debug("%s left the waiting queue (depth=%d)", client, len(self._items))
        return True

    def note_turned_away(self) -> None:
        self._turned_away += 1

    def stats(self) -> QueueStats:
        return QueueStats(
            depth=len(self._items),
            peak_depth=self._peak_depth,
            total_accepted=self._accepted,
            total_promoted=self._promoted,
            total_withdrawn=self._withdrawn,
            total_turned_away=self._turned_away,
        )

    def __contains__(self, client: object) -> bool:
        return client in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"WaitingQueue(depth={len(self._items)}, limit={self._limit})"
