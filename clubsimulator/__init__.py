"""clubsimulator: replay a pay-per-hour computer club's day and settle its tables."""

import logging

logging.getLogger("clubsimulator").addHandler(logging.NullHandler())

from clubsimulator.club import Club
from clubsimulator.config import DayConfig
from clubsimulator.core import (
    ClientEvent,
    Clock,
    Duration,
    EventEcho,
    EventKind,
    ForcedDeparture,
    Instant,
    OutputKind,
    OutputRecord,
    Promotion,
    RejectionRecord,
)
from clubsimulator.entities import (
    ClosedTicket,
    Ledger,
    QueueStats,
    SeatingMap,
    SessionRegistry,
    TableAccount,
    Ticket,
    WaitingQueue,
)
from clubsimulator.errors import LogFormatError, RejectionReason, RuleViolation
from clubsimulator.instrumentation import DayReport, RunSummary, TableSettlement
from clubsimulator.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
    set_module_level,
)
from clubsimulator.parser import parse_day_log, parse_day_log_text
from clubsimulator.report import render_json, render_lines, render_text
from clubsimulator.simulation import Simulation, simulate_day

__version__ = "0.1.0"

__all__ = [
    # Engine
    "Club",
    "DayConfig",
    "Simulation",
    "simulate_day",
    # Time
    "Clock",
    "Duration",
    "Instant",
    # Events and records
    "ClientEvent",
    "EventEcho",
    "EventKind",
    "ForcedDeparture",
    "OutputKind",
    "OutputRecord",
    "Promotion",
    "RejectionRecord",
    # State
    "ClosedTicket",
    "Ledger",
    "QueueStats",
    "SeatingMap",
    "SessionRegistry",
    "TableAccount",
    "Ticket",
    "WaitingQueue",
    # Errors
    "LogFormatError",
    "RejectionReason",
    "RuleViolation",
    # Results
    "DayReport",
    "RunSummary",
    "TableSettlement",
    # I/O
    "parse_day_log",
    "parse_day_log_text",
    "render_json",
    "render_lines",
    "render_text",
    # Logging
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
]
