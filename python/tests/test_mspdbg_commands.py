"""Unit tests for mspdbg built-in commands."""

from __future__ import annotations

import json

from shell_stubs import RecordingCommand
from mspdbg.dispatcher import dispatch
from mspdbg.options import Option, OptionKind
from mspdbg.parser import Cursor


def _run(ctx, registry, line, *, interactive=False):
    return dispatch(ctx, registry, line, interactive=interactive)


def test_help_lists_commands(ctx, registry, capsys):
    _run(ctx, registry, "help")
    out = capsys.readouterr().out
    assert out.startswith("Available commands:\n")
    for name in ("opt", "help", "read", "sym", "exit", "="):
        assert name in out
    assert 'Type "help <command>" for more information.' in out
    assert "Ctrl+D" not in out


def test_help_mentions_ctrl_d_when_interactive(ctx, registry, capsys):
    _run(ctx, registry, "help", interactive=True)
    assert "Press Ctrl+D to quit." in capsys.readouterr().out


def test_help_topic_for_command(ctx, registry, capsys):
    _run(ctx, registry, "help OPT")
    out = capsys.readouterr().out
    assert out.startswith("COMMAND: opt\n")
    assert "opt [name] [value]" in out


def test_help_topic_for_option(ctx, registry, capsys):
    _run(ctx, registry, "help Color")
    out = capsys.readouterr().out
    assert out == "OPTION: color (boolean)\nColorize disassembly output.\n"


def test_help_topic_matching_command_and_option(ctx, registry, capsys):
    ctx.options.register(Option("sym", OptionKind.TEXT, help="Shadow option."))
    _run(ctx, registry, "help sym")
    out = capsys.readouterr().out
    assert "COMMAND: sym" in out
    assert "\n\nOPTION: sym (text)\nShadow option.\n" in out


def test_help_unknown_topic(ctx, registry, capsys):
    command = registry.find("help")
    assert command.run(ctx, Cursor("nothing")) == 1
    assert capsys.readouterr().err == "help: unknown command: nothing\n"


def test_opt_lists_all_options(ctx, registry, capsys):
    ctx.options.register(Option("base", OptionKind.NUMERIC))
    _run(ctx, registry, "opt")
    lines = capsys.readouterr().out.splitlines()
    assert [line.split("=")[0].strip() for line in lines] == ["base", "color"]


def test_opt_shows_single_option(ctx, registry, capsys):
    _run(ctx, registry, "opt COLOR")
    assert capsys.readouterr().out.strip() == "color = false"


def test_opt_sets_boolean(ctx, registry):
    _run(ctx, registry, "opt color yes")
    assert ctx.options.get("color") is True
    _run(ctx, registry, "opt color off")
    assert ctx.options.get("color") is False


def test_opt_sets_numeric_from_expression(ctx, registry, capsys):
    ctx.options.register(Option("base", OptionKind.NUMERIC))
    ctx.symbols.define("main", 0x4400)
    _run(ctx, registry, "opt base main+0x10")
    assert ctx.options.get("base") == 0x4410
    _run(ctx, registry, "opt base")
    assert capsys.readouterr().out.strip() == "base = 0x4410 (17424)"


def test_opt_text_takes_rest_of_line(ctx, registry):
    ctx.options.register(Option("banner", OptionKind.TEXT))
    _run(ctx, registry, "opt banner hello   there  ")
    assert ctx.options.get("banner") == "hello   there"


def test_opt_unknown_option(ctx, registry, capsys):
    command = registry.find("opt")
    assert command.run(ctx, Cursor("nope 1")) == 1
    assert capsys.readouterr().err == "opt: no such option: nope\n"


def test_opt_numeric_parse_failure(ctx, registry, capsys):
    ctx.options.register(Option("base", OptionKind.NUMERIC))
    assert _run(ctx, registry, "opt base bogus") == 0
    err = capsys.readouterr().err.splitlines()
    assert err == ["unknown token: bogus", "opt: can't parse option: bogus"]
    assert ctx.options.get("base") == 0


def test_eval_prints_hex_and_decimal(ctx, registry, capsys):
    ctx.symbols.define("start", 0x100)
    _run(ctx, registry, "= start + 0x20 - 1")
    assert capsys.readouterr().out == "0x011f (287)\n"


def test_eval_reports_unknown_token(ctx, registry, capsys):
    _run(ctx, registry, "eval missing")
    assert capsys.readouterr().err == "unknown token: missing\n"


def test_sym_define_show_and_list(ctx, registry, capsys):
    _run(ctx, registry, "sym main 0x4400")
    _run(ctx, registry, "sym loop main+8")
    assert ctx.symbols.resolve("loop") == 0x4408
    _run(ctx, registry, "sym loop")
    _run(ctx, registry, "sym")
    out = capsys.readouterr().out.splitlines()
    assert out == ["0x4408: loop", "0x4400: main", "0x4408: loop"]


def test_sym_unknown_name(ctx, registry, capsys):
    _run(ctx, registry, "sym nowhere")
    assert capsys.readouterr().err == "sym: no such symbol: nowhere\n"


def test_sym_load(ctx, registry, tmp_path, capsys):
    sym_file = tmp_path / "demo.json"
    sym_file.write_text(json.dumps({"main": "0x4400", "isr": 0xFFE0}), encoding="utf-8")
    _run(ctx, registry, f"sym load {sym_file}")
    assert capsys.readouterr().out == "2 symbols loaded\n"
    assert ctx.symbols.resolve("isr") == 0xFFE0


def test_sym_load_missing_file(ctx, registry, tmp_path, capsys):
    _run(ctx, registry, f"sym load {tmp_path / 'missing.json'}")
    assert capsys.readouterr().err.startswith("sym: ")


def test_read_runs_script_non_interactively(ctx, registry, tmp_path):
    probe = RecordingCommand()
    registry.register(probe)
    script = tmp_path / "script.txt"
    script.write_text("# setup\n\nopt color on\nprobe one two\n", encoding="utf-8")
    _run(ctx, registry, f"read {script}", interactive=True)
    assert ctx.options.get("color") is True
    assert probe.calls == [{"rest": "one two", "interactive": False}]
    assert not ctx.is_interactive()


def test_read_missing_file(ctx, registry, tmp_path, capsys):
    _run(ctx, registry, f"read {tmp_path / 'nope.txt'}")
    assert capsys.readouterr().err.startswith("read: ")


def test_read_requires_filename(ctx, registry, capsys):
    _run(ctx, registry, "read")
    assert capsys.readouterr().err == "read: filename must be specified\n"
