"""Core value types: time, clock and event records."""

from clubsimulator.core.clock import Clock
from clubsimulator.core.event import (
    ClientEvent,
    EventEcho,
    EventKind,
    ForcedDeparture,
    OutputKind,
    OutputRecord,
    Promotion,
    RejectionRecord,
)
from clubsimulator.core.temporal import Duration, Instant

__all__ = [
    "Clock",
    "ClientEvent",
    "Duration",
    "EventEcho",
    "EventKind",
    "ForcedDeparture",
    "Instant",
    "OutputKind",
    "OutputRecord",
    "Promotion",
    "RejectionRecord",
]
