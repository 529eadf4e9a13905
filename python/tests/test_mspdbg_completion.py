"""Completion tests for mspdbg."""

from __future__ import annotations

from prompt_toolkit.document import Document

from mspdbg.completion import ShellCompleter
from mspdbg.options import Option, OptionKind


def _complete(ctx, registry, text):
    completer = ShellCompleter(ctx, registry)
    doc = Document(text, cursor_position=len(text))
    return [c.text for c in completer.get_completions(doc, None)]


def test_command_completion(ctx, registry):
    assert _complete(ctx, registry, "he") == ["help"]
    assert "quit" in _complete(ctx, registry, "")


def test_option_completion_for_opt(ctx, registry):
    ctx.options.register(Option("colormode", OptionKind.TEXT))
    assert _complete(ctx, registry, "opt CO") == ["color", "colormode"]


def test_help_completes_commands_and_options(ctx, registry):
    results = _complete(ctx, registry, "help ")
    assert "color" in results and "sym" in results


def test_symbol_completion_inside_expression(ctx, registry):
    ctx.symbols.define("main", 0x4400)
    ctx.symbols.define("memcpy", 0x4500)
    ctx.symbols.define("loop", 0x4410)
    assert _complete(ctx, registry, "= 0x10+m") == ["main", "memcpy"]


def test_unknown_command_has_no_completions(ctx, registry):
    assert _complete(ctx, registry, "bogus ar") == []
