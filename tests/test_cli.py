"""
命令行入口的测试。
"""

from __future__ import annotations

import json

from gridroute.cli import build_parser, main
from gridroute.core.grid import EXAMPLE_ROWS


def test_cli_example_text_output(capsys):
    rc = main(["--example"])
    out = capsys.readouterr().out

    assert rc == 0
    assert "Part one: 40" in out
    assert "Part two: 315" in out


def test_cli_input_file_json_output(tmp_path, capsys):
    path = tmp_path / "grid.txt"
    path.write_text("\n".join(EXAMPLE_ROWS) + "\n", encoding="utf-8")

    rc = main(["--input", str(path), "--json", "--heuristic", "zero"])
    payload = json.loads(capsys.readouterr().out)

    assert rc == 0
    assert payload["part_one"] == 40
    assert payload["part_two"] == 315
    assert payload["heuristic"] == "zero"
    assert payload["shape"] == [10, 10]
    assert set(payload["elapsed_us"]) == {"part_one", "part_two"}


def test_cli_day_lookup(tmp_path, capsys):
    (tmp_path / "15.txt").write_text("19\n11\n", encoding="utf-8")

    rc = main(["--day", "15", "--input-dir", str(tmp_path), "--factor", "1"])
    out = capsys.readouterr().out

    assert rc == 0
    assert "Part one: 2" in out
    assert "Part two: 2" in out


def test_cli_missing_file_returns_1(tmp_path, capsys):
    rc = main(["--input", str(tmp_path / "nope.txt")])
    assert rc == 1
    assert capsys.readouterr().out == ""


def test_cli_malformed_input_returns_2(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("120\n111\n", encoding="utf-8")
    assert main(["--input", str(path)]) == 2


def test_cli_bad_factor_returns_2():
    assert main(["--example", "--factor", "0"]) == 2


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.heuristic == "manhattan"
    assert args.factor == 5
    assert not args.json


def test_cli_bad_log_level_returns_2(capsys):
    rc = main(["--example", "--log-level", "bogus"])
    assert rc == 2
    assert capsys.readouterr().out == ""
