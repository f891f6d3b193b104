"""Unit tests for :mod:`tessera.entrypoints.cli.helpers.messages`.

Glyph selection must follow the encoding of the stream returned by
``click.get_text_stream("stderr")`` at call time, and the message helpers
must write styled lines to stderr only.
"""

import io
import sys

import click
import pytest

from tessera.entrypoints.cli.helpers.messages import (
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


class FakeTTY(io.StringIO):
    """A text stream that claims to be a TTY with a chosen encoding."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        """Declared character encoding."""
        return self._encoding

    def isatty(self) -> bool:
        """Keep Click from stripping ANSI styles."""
        return True


@pytest.mark.parametrize(
    ("encoding", "expected"),
    [
        ("ascii", ("[!]", "[OK]", "[X]")),
        ("utf-8", ("⚠️", "✅", "❌")),
    ],
)
def test_glyphs_follow_stream_encoding(monkeypatch, encoding, expected):
    """Emoji are used only when stderr can encode them."""
    stream = FakeTTY(encoding)
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
    assert (caution_glyph(), success_glyph(), error_glyph()) == expected


def test_supports_character_checks_stream_every_time(monkeypatch):
    """The stream is looked up on every call, not cached."""
    encodings = iter(["ascii", "utf-8"])
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeTTY(next(encodings)))
    assert _supports_character("✅") is False
    assert _supports_character("✅") is True


@pytest.mark.parametrize(
    ("func", "glyph", "color_code"),
    [(warn, "[!]", SET_YELLOW), (success, "[OK]", SET_GREEN), (error, "[X]", SET_RED)],
)
def test_messages_are_styled(monkeypatch, func, glyph, color_code):
    """Each helper writes a bold, colored line with its glyph."""
    stream = FakeTTY("ascii")
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
    monkeypatch.setattr(sys, "stderr", stream, raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)

    func("careful")

    out = stream.getvalue()
    assert f"{glyph}  careful" in out
    assert SET_BOLD in out
    assert color_code in out


def test_messages_leave_stdout_alone(monkeypatch, capsys):
    """Messages go to stderr so stdout stays machine-readable."""
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeTTY("utf-8"))
    success("done")
    captured = capsys.readouterr()
    assert "done" in captured.err
    assert captured.out == ""
