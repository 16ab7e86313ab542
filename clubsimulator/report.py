"""Rendering of a ``DayReport`` for people and for other programs."""

from __future__ import annotations

import json

from clubsimulator.instrumentation.summary import DayReport


def render_lines(report: DayReport) -> list[str]:
    """The club's text report, one entry per line.

    Opening time, every output record, closing time, then
    ``<table> <proceeds> <HH:MM>`` for each table.
    """
    lines = [report.config.opens_at.format()]
    lines.extend(" ".join(record.tokens()) for record in report.records)
    lines.append(report.config.closes_at.format())
    lines.extend(" ".join(settlement.tokens()) for settlement in report.tables)
    return lines


def render_text(report: DayReport) -> str:
    return "\n".join(render_lines(report)) + "\n"


def render_json(report: DayReport, indent: int | None = 2) -> str:
    return json.dumps(report.to_dict(), indent=indent)
