#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jsoncolordiff/renderers/ansi.py
"""ANSI color handling, escape-aware wrapping and ellipsis truncation.

Everything in this module treats escape sequences as zero-width: they are
never split across lines and never count toward the line width. Colors are
applied through :class:`Painter` objects whose ``enabled`` flag comes from the
caller's options, so disabling color is a per-call decision.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from jsoncolordiff.constants import (
    ANSI_PATTERN,
    ANSI_RESET,
    ANSI_RESET_CODES,
    DEFAULT_LINE_WIDTH,
    ELLIPSIS_ROWS,
    ESCAPE,
    MIN_TRUNCATED_LINES,
)
from jsoncolordiff.types import HighlightRange


class Color(Enum):
    """Terminal foreground colors used by the renderers (SGR codes)."""

    RED = 31
    GREEN = 32
    YELLOW = 33
    HI_RED = 91
    HI_GREEN = 92

    @property
    def code(self) -> str:
        """Return the escape sequence that opens this color."""
        return f"{ESCAPE}[{self.value}m"


@dataclass(frozen=True)
class Painter:
    """Callable that wraps text in a color, or passes it through when disabled."""

    color: Color
    enabled: bool = True

    def __call__(self, text: str) -> str:
        if not self.enabled or not text:
            return text
        return f"{self.color.code}{text}{ANSI_RESET}"

    @property
    def code(self) -> str:
        """Opening escape sequence, or an empty string when disabled."""
        return self.color.code if self.enabled else ""


@dataclass(frozen=True)
class Palette:
    """The set of painters used by one comparison call.

    Parameters
    ----------
    use_color : bool, default True
        When False every painter returns its input unchanged.

    """

    use_color: bool = True

    @property
    def removed(self) -> Painter:
        """Painter for removed/expected content."""
        return Painter(Color.RED, self.use_color)

    @property
    def added(self) -> Painter:
        """Painter for added/actual content."""
        return Painter(Color.GREEN, self.use_color)

    @property
    def strong_removed(self) -> Painter:
        """High-intensity painter for word diffs of raw strings and headers."""
        return Painter(Color.HI_RED, self.use_color)

    @property
    def strong_added(self) -> Painter:
        """High-intensity counterpart of :attr:`strong_removed`."""
        return Painter(Color.HI_GREEN, self.use_color)

    @property
    def neutral(self) -> Painter:
        """Painter for the ellipsis marker."""
        return Painter(Color.YELLOW, self.use_color)


def strip_ansi(text: str) -> str:
    """Remove every ANSI escape sequence from ``text``."""
    return ANSI_PATTERN.sub("", text)


def visible_length(text: str) -> int:
    """Return the number of characters a terminal would display."""
    return len(strip_ansi(text))


def break_lines(text: str, width: int = DEFAULT_LINE_WIDTH) -> str:
    """Re-flow ``text`` so no line shows more than ``width`` characters.

    Escape sequences and control characters are copied through without
    counting toward the width, and an escape sequence is always emitted whole.
    Existing newlines are kept and reset the count.

    Parameters
    ----------
    text : str
        Possibly colorized text
    width : int, default 50
        Maximum visible characters per line

    Returns
    -------
    str
        The wrapped text

    """
    output: list[str] = []
    sequence: list[str] = []
    line_length = 0

    for char in text:
        if sequence:
            sequence.append(char)
            if char.isascii() and char.isalpha():
                output.append("".join(sequence))
                sequence.clear()
        elif char == ESCAPE:
            sequence.append(char)
        elif char == "\n":
            output.append(char)
            line_length = 0
        elif char < " ":
            output.append(char)
        else:
            if line_length >= width:
                output.append("\n")
                line_length = 0
            output.append(char)
            line_length += 1

    if sequence:
        output.append("".join(sequence))
    return "".join(output)


def _paint_marked(chunk: str, marks: list[bool], painter: Painter) -> str:
    parts: list[str] = []
    position = 0
    for marked, group in itertools.groupby(marks):
        length = len(list(group))
        segment = chunk[position : position + length]
        parts.append(painter(segment) if marked else segment)
        position += length
    return "".join(parts)


def break_with_color(
    text: str,
    painter: Painter | None,
    ranges: Iterable[HighlightRange],
    width: int = DEFAULT_LINE_WIDTH,
) -> str:
    """Paint the characters covered by ``ranges`` and hard-wrap the result.

    Parameters
    ----------
    text : str
        Plain text to render
    painter : Painter or None
        Painter applied to highlighted runs. None leaves the text uncolored.
    ranges : iterable of HighlightRange
        Character spans to highlight; may be unordered or overlapping
    width : int, default 50
        Characters per physical line

    Returns
    -------
    str
        The rendered text with a trailing newline, or ``""`` for empty input

    """
    if not text:
        return ""

    marks = [False] * len(text)
    if painter is not None:
        for span in ranges:
            for index in range(span.start, min(span.end, len(text))):
                marks[index] = True

    rows = []
    for offset in range(0, len(text), width):
        chunk = text[offset : offset + width]
        rows.append(_paint_marked(chunk, marks[offset : offset + width], painter) if painter else chunk)
    return "\n".join(rows) + "\n"


def wrap_text_with_ansi(text: str) -> str:
    """Make every line of ``text`` independently valid for a terminal.

    A line that ends with a color still open gets a reset appended, and the
    following line re-opens that color, so wrapped colored text stays visually
    continuous when the lines are laid out separately (e.g. in table cells).

    Parameters
    ----------
    text : str
        Colorized multi-line text

    Returns
    -------
    str
        Text where each line ends with a newline and carries its own color state

    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    wrapped: list[str] = []
    active: str | None = None
    for line in lines:
        prefix = active or ""
        for code in ANSI_PATTERN.findall(line):
            active = None if code in ANSI_RESET_CODES else code
        suffix = ANSI_RESET if active else ""
        wrapped.append(f"{prefix}{line}{suffix}\n")
    return "".join(wrapped)


def _open_code(lines: Iterable[str]) -> str | None:
    """Return the color code still open after ``lines``, if any."""
    active: str | None = None
    for line in lines:
        for code in ANSI_PATTERN.findall(line):
            active = None if code in ANSI_RESET_CODES else code
    return active


def _truncate(lines: list[str], threshold: int, ellipsis: str) -> str:
    if len(lines) <= threshold:
        return "\n".join(lines)
    if threshold <= MIN_TRUNCATED_LINES or len(lines) - threshold < MIN_TRUNCATED_LINES:
        return "\n".join(lines)

    kept = threshold - len(ELLIPSIS_ROWS)
    head = kept // 2
    tail_start = len(lines) - (kept - head)
    # re-open a color the dropped lines left open
    resume_code = _open_code(lines[:tail_start]) or ""
    result = "\n".join(lines[:head] + [ellipsis + resume_code] + lines[tail_start:])
    if resume_code and _open_code([result]):
        result += ANSI_RESET
    return result


def truncate_to_match_with_ellipsis(expected_text: str, actual_text: str, use_color: bool = True) -> tuple[str, str]:
    """Bound two blocks to roughly the same height by eliding their middles.

    The threshold is the mean line count of the two blocks plus one. A block
    longer than the threshold keeps its head and tail and gets a three-row
    ellipsis marker in place of the middle, as long as the threshold exceeds
    three lines and at least three lines would be dropped. If the dropped lines
    leave a color open, that color is re-opened after the marker and closed at
    the end of the block.

    Parameters
    ----------
    expected_text : str
        Rendered expected block
    actual_text : str
        Rendered actual block
    use_color : bool, default True
        Color the marker

    Returns
    -------
    tuple of (str, str)
        The possibly truncated expected and actual blocks

    """
    expected_lines = expected_text.split("\n")
    actual_lines = actual_text.split("\n")
    threshold = (len(expected_lines) + len(actual_lines)) // 2 + 1

    palette = Palette(use_color)
    ellipsis = palette.neutral("\n".join(ELLIPSIS_ROWS))

    return (
        _truncate(expected_lines, threshold, ellipsis),
        _truncate(actual_lines, threshold, ellipsis),
    )
