"""Rule-violation taxonomy and loader errors."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clubsimulator.core.temporal import Instant


class RejectionReason(Enum):
    """Why the club refused to apply a client event.

    The value is the reason tag printed in rejection records.
    ``QUEUE_FULL`` is never printed as a rejection: the client is turned
    away with a forced departure instead.
    """

    DUPLICATE_PRESENCE = "YouShallNotPass"
    OUTSIDE_OPERATING_HOURS = "NotOpenYet"
    CLIENT_NOT_PRESENT = "ClientUnknown"
    TABLE_OCCUPIED = "PlaceIsBusy"
    TABLE_AVAILABLE = "ICanWaitNoLonger!"
    QUEUE_FULL = "QueueFull"

    @property
    def tag(self) -> str:
        return self.value

    @property
    def turns_client_away(self) -> bool:
        """True when the rejection also makes the client leave the club."""
        return self is RejectionReason.QUEUE_FULL


class RuleViolation(Exception):
    """Raised by club rule checks; converted into an output record by the club.

    Attributes:
        reason: Which rule was broken.
        client: Client whose event broke it.
        time: Timestamp of the offending event.
    """

    def __init__(self, reason: RejectionReason, client: str, time: Instant):
        super().__init__(f"{time} {client}: {reason.name}")
        self.reason = reason
        self.client = client
        self.time = time


class LogFormatError(ValueError):
    """A line of a day log could not be parsed.

    Attributes:
        line_number: 1-based line number within the log.
        line: The offending line, without its trailing newline.
        detail: What was wrong with it.
    """

    def __init__(self, line_number: int, line: str, detail: str):
        super().__init__(f"line {line_number}: {detail}: {line!r}")
        self.line_number = line_number
        self.line = line
        self.detail = detail
