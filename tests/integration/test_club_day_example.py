"""Integration test for the club day example."""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

import pytest

EXAMPLE = Path(__file__).parents[2] / "examples" / "club_day.py"


@pytest.fixture(scope="module")
def club_day():
    spec = importlib.util.spec_from_file_location("club_day_example", EXAMPLE)
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)
    return module


class TestClubDayExample:

    def test_runs_bundled_log(self, club_day):
        result = club_day.run_club_day()
        tables = [(t.table, t.proceeds, t.occupied.format()) for t in result.report.tables]
        assert tables == [(1, 70, "05:58"), (2, 30, "02:18"), (3, 90, "08:01")]

    def test_print_summary(self, club_day, capsys):
        club_day.print_summary(club_day.run_club_day())
        out = capsys.readouterr().out
        assert "12:33 12 client4 1" in out
        assert "Club Day Summary" in out

    def test_visualization(self, club_day, test_output_dir):
        path = club_day.visualize_results(club_day.run_club_day(), test_output_dir)
        assert path.exists()
        assert path.stat().st_size > 0
