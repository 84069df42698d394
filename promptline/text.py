"""Text helpers for terminal output: line endings, ANSI stripping and widths."""

from __future__ import annotations

import re

import regex
from wcwidth import wcwidth

_SOLITARY_LF = re.compile(r"(?<!\r)\n")

_ANSI_SEQUENCE = re.compile(
    r"""
    \x1b\[[0-?]*[ -/]*[@-~]            # CSI sequences
    | \x1b\][^\x07\x1b]*(?:\x07|\x1b\\) # OSC sequences
    | \x1b[PX^_][^\x1b]*\x1b\\          # DCS, SOS, PM, APC strings
    | \x1b[ -/]*[0-~]                   # other escape sequences
    """,
    re.VERBOSE,
)
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")

_GRAPHEME = regex.compile(r"\X")


def coerce_crlf(text: str) -> str:
    """Return ``text`` with every solitary LF turned into CRLF."""
    return _SOLITARY_LF.sub("\r\n", text)


def strip_ansi(text: str) -> str:
    """Return ``text`` with ANSI escape sequences and control characters removed.

    Line feeds and tabs are kept.
    """
    return _CONTROL_CHARS.sub("", _ANSI_SEQUENCE.sub("", text))


def _split_lines(text: str) -> list[str]:
    """Split on LF, dropping a trailing CR per line and a final empty line."""
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def estimate_required_lines(text: str, screen_width: int) -> int:
    """Estimate the screen rows ``text`` occupies, counting wrapping."""
    return sum(1 + estimate_single_line_wraps(line, screen_width) for line in _split_lines(text))


def estimate_single_line_wraps(line: str, terminal_columns: int) -> int:
    """Return the extra rows needed because ``line`` wraps; 0 if it fits."""
    if terminal_columns <= 0:
        raise ValueError("terminal_columns must be positive")
    width = line_width(line)
    line_count = -(-width // terminal_columns)
    return max(line_count - 1, 0)


def line_width(line: str) -> int:
    """Return the display width of ``line``, ignoring ANSI escapes."""
    return sum(max(wcwidth(char), 0) for char in strip_ansi(line))


def remove_last_grapheme(text: str) -> str:
    """Return ``text`` without its last grapheme cluster."""
    last = None
    for last in _GRAPHEME.finditer(text):
        pass
    return text[: last.start()] if last is not None else ""