"""Input events and the records the club writes in response.

Every input ``ClientEvent`` is echoed into the output stream before it is
applied. Whatever the club synthesizes in reaction to it (a rejection, a
forced departure, a promotion from the waiting queue) follows the echo.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Union

from clubsimulator.core.temporal import Instant
from clubsimulator.errors import RejectionReason


class EventKind(IntEnum):
    """Incoming event ids."""

    ARRIVE = 1
    SEAT = 2
    WAIT = 3
    LEAVE = 4


class OutputKind(IntEnum):
    """Ids of records synthesized by the club."""

    FORCED_DEPARTURE = 11
    PROMOTION = 12
    REJECTION = 13


def _as_instant(time: Instant | str) -> Instant:
    if isinstance(time, Instant):
        return time
    return Instant.parse(time)


@dataclass(frozen=True)
class ClientEvent:
    """One line of the day log.

    Attributes:
        time: When the event happened.
        kind: What the client did.
        client: Client name.
        table: Requested table, set only for ``EventKind.SEAT``.
    """

    time: Instant
    kind: EventKind
    client: str
    table: int | None = None

    def __post_init__(self):
        if not self.client:
            raise ValueError("ClientEvent requires a client name")
        if self.kind is EventKind.SEAT:
            if self.table is None:
                raise ValueError(f"Seat event for {self.client!r} requires a table")
            if self.table < 1:
                raise ValueError(f"Table numbers start at 1, got {self.table}")
        elif self.table is not None:
            raise ValueError(f"{self.kind.name} event must not carry a table")

    @classmethod
    def arrive(cls, time: Instant | str, client: str) -> ClientEvent:
        return cls(_as_instant(time), EventKind.ARRIVE, client)

    @classmethod
    def seat(cls, time: Instant | str, client: str, table: int) -> ClientEvent:
        return cls(_as_instant(time), EventKind.SEAT, client, table)

    @classmethod
    def wait(cls, time: Instant | str, client: str) -> ClientEvent:
        return cls(_as_instant(time), EventKind.WAIT, client)

    @classmethod
    def leave(cls, time: Instant | str, client: str) -> ClientEvent:
        return cls(_as_instant(time), EventKind.LEAVE, client)

    def tokens(self) -> tuple[str, ...]:
        parts = (self.time.format(), str(int(self.kind)), self.client)
        if self.table is not None:
            parts += (str(self.table),)
        return parts


@dataclass(frozen=True)
class EventEcho:
    """An input event repeated verbatim in the output."""

    event: ClientEvent

    @property
    def time(self) -> Instant:
        return self.event.time

    @property
    def code(self) -> int:
        return int(self.event.kind)

    def tokens(self) -> tuple[str, ...]:
        return self.event.tokens()

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "time": self.time.format(),
            "code": self.code,
            "client": self.event.client,
        }
        if self.event.table is not None:
            result["table"] = self.event.table
        return result


@dataclass(frozen=True)
class RejectionRecord:
    """The club refused an event."""

    time: Instant
    reason: RejectionReason

    @property
    def code(self) -> int:
        return int(OutputKind.REJECTION)

    def tokens(self) -> tuple[str, ...]:
        return (self.time.format(), str(self.code), self.reason.tag)

    def to_dict(self) -> dict[str, Any]:
        return {"time": self.time.format(), "code": self.code, "reason": self.reason.tag}


@dataclass(frozen=True)
class ForcedDeparture:
    """A client was made to leave: queue overflow or closing time."""

    time: Instant
    client: str

    @property
    def code(self) -> int:
        return int(OutputKind.FORCED_DEPARTURE)

    def tokens(self) -> tuple[str, ...]:
        return (self.time.format(), str(self.code), self.client)

    def to_dict(self) -> dict[str, Any]:
        return {"time": self.time.format(), "code": self.code, "client": self.client}


@dataclass(frozen=True)
class Promotion:
    """A waiting client was seated at a table that just became free."""

    time: Instant
    client: str
    table: int

    @property
    def code(self) -> int:
        return int(OutputKind.PROMOTION)

    def tokens(self) -> tuple[str, ...]:
        return (self.time.format(), str(self.code), self.client, str(self.table))

    def to_dict(self) -> dict[str, Any]:
        return {
            "time": self.time.format(),
            "code": self.code,
            "client": self.client,
            "table": self.table,
        }


OutputRecord = Union[EventEcho, RejectionRecord, ForcedDeparture, Promotion]
"""Any record the club writes to its output stream."""
