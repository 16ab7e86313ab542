"""Unit tests for the day log loader."""

import pytest

from clubsimulator import ClientEvent, DayConfig, EventKind, Instant, LogFormatError
from clubsimulator.parser import parse_day_log, parse_day_log_text

HEADER = "3\n09:00 19:00\n10\n"


class TestHeader:

    def test_parses_config(self):
        config, events = parse_day_log_text(HEADER)
        assert config == DayConfig(3, Instant.parse("09:00"), Instant.parse("19:00"), 10)
        assert events == []

    @pytest.mark.parametrize(
        "text, line_number",
        [
            ("0\n09:00 19:00\n10\n", 1),
            ("three\n09:00 19:00\n10\n", 1),
            ("-1\n09:00 19:00\n10\n", 1),
            ("3\n9:00 19:00\n10\n", 2),
            ("3\n09:00\n10\n", 2),
            ("3\n19:00 09:00\n10\n", 2),
            ("3\n09:00 25:00\n10\n", 2),
            ("3\n09:00 19:00\n-10\n", 3),
            ("3\n09:00 19:00\nten\n", 3),
        ],
    )
    def test_bad_header_line(self, text, line_number):
        with pytest.raises(LogFormatError) as excinfo:
            parse_day_log_text(text)
        assert excinfo.value.line_number == line_number
        assert excinfo.value.line == text.splitlines()[line_number - 1]

    def test_truncated_header(self):
        with pytest.raises(LogFormatError, match="header"):
            parse_day_log_text("3\n09:00 19:00\n")


class TestEvents:

    def test_parses_each_kind(self):
        text = HEADER + "09:00 1 alice\n09:05 2 alice 3\n09:10 3 bob\n09:20 4 alice\n"
        _, events = parse_day_log_text(text)
        assert events == [
            ClientEvent.arrive("09:00", "alice"),
            ClientEvent.seat("09:05", "alice", 3),
            ClientEvent.wait("09:10", "bob"),
            ClientEvent.leave("09:20", "alice"),
        ]
        assert [e.kind for e in events] == list(EventKind)

    def test_name_alphabet(self):
        _, events = parse_day_log_text(HEADER + "09:00 1 client_1-b\n")
        assert events[0].client == "client_1-b"

    def test_windows_line_endings(self):
        _, events = parse_day_log_text(HEADER.replace("\n", "\r\n") + "09:00 1 alice\r\n")
        assert events == [ClientEvent.arrive("09:00", "alice")]

    @pytest.mark.parametrize(
        "line",
        [
            "09:00 1 Alice",
            "09:00 1 alice bob",
            "09:00 5 alice",
            "09:00 2 alice",
            "09:00 2 alice 4",
            "09:00 2 alice 0",
            "09:00 1 alice 2",
            "9:00 1 alice",
            "09:00  1 alice",
            "",
        ],
    )
    def test_bad_event_line(self, line):
        text = HEADER + "08:00 1 ok\n" + line + "\n09:30 1 after\n"
        with pytest.raises(LogFormatError) as excinfo:
            parse_day_log_text(text)
        assert excinfo.value.line_number == 5
        assert excinfo.value.line == line

    def test_time_going_backwards(self):
        text = HEADER + "10:00 1 alice\n09:59 1 bob\n"
        with pytest.raises(LogFormatError, match="goes back") as excinfo:
            parse_day_log_text(text)
        assert excinfo.value.line == "09:59 1 bob"

    def test_equal_times_allowed(self):
        _, events = parse_day_log_text(HEADER + "10:00 1 alice\n10:00 1 bob\n")
        assert len(events) == 2


class TestParseFile:

    def test_reads_file(self, tmp_path):
        path = tmp_path / "day.txt"
        path.write_text(HEADER + "09:00 1 alice\n", encoding="utf-8")
        config, events = parse_day_log(path)
        assert config.table_count == 3
        assert events == [ClientEvent.arrive("09:00", "alice")]
