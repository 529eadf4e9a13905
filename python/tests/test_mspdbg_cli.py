"""CLI tests for mspdbg."""

from __future__ import annotations

import json

from mspdbg.cli import build_arg_parser, main


def test_arg_parser_defaults(monkeypatch):
    monkeypatch.delenv("MSPDBG_LOG", raising=False)
    args = build_arg_parser().parse_args([])
    assert args.log_level == "WARNING"
    assert args.command == []
    assert args.history_limit == 1000


def test_single_command(capsys):
    assert main(["-c", "= 0x10+1"]) == 0
    assert capsys.readouterr().out == "0x0011 (17)\n"


def test_unknown_command_fails(capsys):
    assert main(["-c", "frob"]) == 1
    assert "unknown command: frob" in capsys.readouterr().err


def test_symbols_and_script(tmp_path, capsys):
    sym_file = tmp_path / "app.json"
    sym_file.write_text(json.dumps({"main": 0x4400}), encoding="utf-8")
    script = tmp_path / "run.txt"
    script.write_text("= main+2\nexit\n= main\n", encoding="utf-8")
    assert main(["--symbols", str(sym_file), "--script", str(script)]) == 0
    assert capsys.readouterr().out == "0x4402 (17410)\n"


def test_missing_symbol_file(tmp_path, capsys):
    assert main(["--symbols", str(tmp_path / "none.json"), "-c", "opt"]) == 1
    assert capsys.readouterr().err.startswith("mspdbg: ")
