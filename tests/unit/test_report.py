"""Unit tests for report rendering and DayReport helpers."""

import json

import pytest

from clubsimulator import ClientEvent, simulate_day
from clubsimulator.report import render_json, render_lines, render_text


@pytest.fixture
def report(one_table):
    events = [
        ClientEvent.arrive("09:00", "client1"),
        ClientEvent.seat("09:00", "client1", 1),
        ClientEvent.arrive("09:10", "client2"),
        ClientEvent.wait("09:10", "client2"),
        ClientEvent.leave("10:30", "client1"),
        ClientEvent.arrive("11:00", "client3"),
        ClientEvent.arrive("11:00", "client3"),
    ]
    return simulate_day(one_table, events)


class TestRenderText:

    def test_lines(self, report):
        assert render_lines(report) == [
            "09:00",
            "09:00 1 client1",
            "09:00 2 client1 1",
            "09:10 1 client2",
            "09:10 3 client2",
            "10:30 4 client1",
            "10:30 12 client2 1",
            "11:00 1 client3",
            "11:00 1 client3",
            "11:00 13 YouShallNotPass",
            "19:00 11 client2",
            "19:00 11 client3",
            "19:00",
            "1 110 10:00",
        ]

    def test_text_ends_with_newline(self, report):
        text = render_text(report)
        assert text.endswith("1 110 10:00\n")
        assert text.count("\n") == len(render_lines(report))


class TestRenderJson:

    def test_structure(self, report):
        data = json.loads(render_json(report))
        assert data["opens_at"] == "09:00"
        assert data["closes_at"] == "19:00"
        assert data["tables"] == [
            {"table": 1, "proceeds": 110, "occupied": "10:00", "sessions": 2}
        ]
        assert data["records"][5] == {"time": "10:30", "code": 12, "client": "client2", "table": 1}
        assert data["records"][8] == {"time": "11:00", "code": 13, "reason": "YouShallNotPass"}
        assert data["summary"]["promotions"] == 1
        assert data["summary"]["rejections"] == {"YouShallNotPass": 1}

    def test_compact(self, report):
        assert "\n" not in render_json(report, indent=None)


class TestDataFrame:

    def test_per_table_frame(self, report):
        frame = report.to_dataframe()
        assert list(frame.index) == [1]
        assert list(frame.columns) == ["proceeds", "occupied_minutes", "sessions", "utilization"]
        row = frame.loc[1]
        assert row["proceeds"] == 110
        assert row["occupied_minutes"] == 600
        assert row["utilization"] == pytest.approx(1.0)

    def test_table_lookup(self, report):
        assert report.table(1).proceeds == 110
        with pytest.raises(KeyError):
            report.table(2)
        assert report.total_proceeds == 110
