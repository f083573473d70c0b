"""Unit tests for :mod:`atc.entrypoints.cli.helpers.messages`.

Glyphs follow the encoding of Click's stderr stream at call time, and the
status helpers write styled lines to stderr only.
"""

import io
import sys

import click
import pytest

from atc.entrypoints.cli.helpers.messages import (
    _supports_character,
    caution_glyph,
    error,
    error_glyph,
    success,
    success_glyph,
    warn,
)

SET_YELLOW = "\x1b[33m"
SET_GREEN = "\x1b[32m"
SET_RED = "\x1b[31m"
SET_BOLD = "\x1b[1m"
RESET = "\x1b[0m"


class FakeTTY(io.StringIO):
    """A text stream that reports itself as a TTY with a chosen encoding."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        return self._encoding

    def isatty(self) -> bool:
        return True


@pytest.mark.parametrize(
    ("encoding", "expected_caution", "expected_success", "expected_error"),
    [
        ("ascii", "[!]", "[OK]", "[X]"),
        ("utf-8", "⚠️", "✅", "❌"),
    ],
)
def test_glyphs_respect_stream_encoding(
    monkeypatch, encoding, expected_caution, expected_success, expected_error
):
    stream = FakeTTY(encoding)
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)

    assert caution_glyph() == expected_caution
    assert success_glyph() == expected_success
    assert error_glyph() == expected_error


def test_supports_character_requeries_stream_each_call(monkeypatch):
    calls: list[str] = []

    def stream_factory(name: str):  # pylint: disable=unused-argument
        enc = "ascii" if not calls else "utf-8"
        calls.append(enc)
        return FakeTTY(enc)

    monkeypatch.setattr(click, "get_text_stream", stream_factory)

    assert _supports_character("⚠️") is False
    assert _supports_character("⚠️") is True
    assert calls == ["ascii", "utf-8"]


@pytest.mark.parametrize(
    ("encoding", "glyph", "color_code", "func"),
    [
        ("ascii", "[!]", SET_YELLOW, warn),
        ("utf-8", "⚠️", SET_YELLOW, warn),
        ("ascii", "[OK]", SET_GREEN, success),
        ("utf-8", "✅", SET_GREEN, success),
        ("ascii", "[X]", SET_RED, error),
        ("utf-8", "❌", SET_RED, error),
    ],
)
def test_messages_emit_styled_stderr(monkeypatch, encoding, glyph, color_code, func):
    stream = FakeTTY(encoding)
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
    monkeypatch.setattr(sys, "stderr", stream, raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("CLICOLOR", "1")

    func("No tariff is set for Brest.")

    out = stream.getvalue()
    assert glyph in out
    assert "No tariff is set for Brest." in out
    assert SET_BOLD in out
    assert color_code in out
    assert RESET in out


def test_status_lines_leave_stdout_clean(monkeypatch, capsys):
    """Amounts go to stdout; status lines must not pollute it."""
    stream = FakeTTY("utf-8")
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
    warn("careful")
    success("done")
    error("failed")
    captured = capsys.readouterr()
    assert "careful" in captured.err
    assert "done" in captured.err
    assert "failed" in captured.err
    assert captured.out == ""
