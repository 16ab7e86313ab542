"""Loader for the club's plain-text day log.

Layout::

    3                  <- table count
    09:00 19:00        <- opening and closing time
    10                 <- hourly rate
    08:48 1 client1    <- events: time, id, client name[, table]
    09:54 2 client1 1
    ...

Client names use lowercase latin letters, digits, ``_`` and ``-``. Only a
seat event (id 2) carries a table number, which must exist. Event times
must not go backwards. Loading stops at the first malformed line with a
``LogFormatError`` naming it.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from clubsimulator.config import DayConfig
from clubsimulator.core.event import ClientEvent, EventKind
from clubsimulator.core.temporal import Instant
from clubsimulator.errors import LogFormatError

logger = logging.getLogger(__name__)

_COUNT_RE = re.compile(r"\d+")
_HOURS_RE = re.compile(r"(\d{2}:\d{2}) (\d{2}:\d{2})")
_EVENT_RE = re.compile(r"(\d{2}:\d{2}) (\d+) ([a-z0-9_-]+)(?: (\d+))?")

HEADER_LINES = 3


def parse_day_log(path: Path) -> tuple[DayConfig, list[ClientEvent]]:
    """Read and parse a day log file."""
    with Path(path).open(encoding="utf-8") as f:
        text = f.read()
    config, events = parse_day_log_text(text)
    logger.info("Loaded %d events for %d tables from %s", len(events), config.table_count, path)
    return config, events


def parse_day_log_text(text: str) -> tuple[DayConfig, list[ClientEvent]]:
    """Parse the contents of a day log.

    Raises:
        LogFormatError: On the first line that does not fit the layout.
    """
    lines = text.rstrip("\r\n").splitlines()
    if len(lines) < HEADER_LINES:
        number = len(lines) + 1
        raise LogFormatError(number, "", "log ends before the header is complete")

    config = _parse_header(lines[:HEADER_LINES])

    events: list[ClientEvent] = []
    previous: Instant | None = None
    for number, line in enumerate(lines[HEADER_LINES:], start=HEADER_LINES + 1):
        event = _parse_event(number, line, config)
        if previous is not None and event.time < previous:
            raise LogFormatError(number, line, f"event time goes back from {previous}")
        previous = event.time
        events.append(event)
    return config, events


def _parse_header(lines: list[str]) -> DayConfig:
    tables_line, hours_line, rate_line = lines

    if not _COUNT_RE.fullmatch(tables_line) or int(tables_line) == 0:
        raise LogFormatError(1, tables_line, "table count must be a positive integer")

    match = _HOURS_RE.fullmatch(hours_line)
    if match is None:
        raise LogFormatError(2, hours_line, "expected opening and closing time as 'HH:MM HH:MM'")
    try:
        opens_at = Instant.parse(match.group(1))
        closes_at = Instant.parse(match.group(2))
    except ValueError as exc:
        raise LogFormatError(2, hours_line, str(exc)) from exc
    if not opens_at < closes_at:
        raise LogFormatError(2, hours_line, "closing time must be after opening time")

    if not _COUNT_RE.fullmatch(rate_line):
        raise LogFormatError(3, rate_line, "hourly rate must be a non-negative integer")

    return DayConfig(
        table_count=int(tables_line),
        opens_at=opens_at,
        closes_at=closes_at,
        hourly_rate=int(rate_line),
    )


def _parse_event(number: int, line: str, config: DayConfig) -> ClientEvent:
    match = _EVENT_RE.fullmatch(line)
    if match is None:
        raise LogFormatError(number, line, "expected 'HH:MM <id> <client> [<table>]'")

    raw_time, raw_kind, client, raw_table = match.groups()
    try:
        time = Instant.parse(raw_time)
    except ValueError as exc:
        raise LogFormatError(number, line, str(exc)) from exc

    try:
        kind = EventKind(int(raw_kind))
    except ValueError:
        raise LogFormatError(number, line, f"unknown event id {raw_kind}") from None

    if kind is EventKind.SEAT:
        if raw_table is None:
            raise LogFormatError(number, line, "seat event needs a table number")
        table = int(raw_table)
        if not config.has_table(table):
            raise LogFormatError(number, line, f"table must be in 1..{config.table_count}")
        return ClientEvent(time, kind, client, table)

    if raw_table is not None:
        raise LogFormatError(number, line, f"event id {int(kind)} takes no table number")
    return ClientEvent(time, kind, client)
