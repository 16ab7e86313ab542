"""Unit tests for the command-line interface."""

import json

from clubsimulator.cli import main

LOG = """1
09:00 19:00
10
09:00 1 client1
09:00 2 client1 1
10:30 4 client1
"""


class TestCli:

    def test_prints_text_report(self, tmp_path, capsys):
        path = tmp_path / "day.txt"
        path.write_text(LOG, encoding="utf-8")

        assert main([str(path)]) == 0

        out = capsys.readouterr().out
        assert out.splitlines() == [
            "09:00",
            "09:00 1 client1",
            "09:00 2 client1 1",
            "10:30 4 client1",
            "19:00",
            "1 20 01:30",
        ]

    def test_json(self, tmp_path, capsys):
        path = tmp_path / "day.txt"
        path.write_text(LOG, encoding="utf-8")

        assert main([str(path), "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["tables"][0]["proceeds"] == 20

    def test_malformed_line_is_printed(self, tmp_path, capsys):
        path = tmp_path / "day.txt"
        path.write_text(LOG + "11:00 7 client1\n", encoding="utf-8")

        assert main([str(path)]) == 1

        assert capsys.readouterr().out == "11:00 7 client1\n"

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.txt")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_summary_on_stderr(self, tmp_path, capsys):
        path = tmp_path / "day.txt"
        path.write_text(LOG, encoding="utf-8")

        assert main([str(path), "--summary"]) == 0

        err = capsys.readouterr().err
        assert "Club Day Summary" in err
        assert "Total proceeds: 20" in err
