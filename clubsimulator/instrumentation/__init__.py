"""Run results and counters."""

from clubsimulator.instrumentation.summary import DayReport, RunSummary, TableSettlement

__all__ = [
    "DayReport",
    "RunSummary",
    "TableSettlement",
]
