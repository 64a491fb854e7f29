#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Shared data structures for the diff pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Sign(Enum):
    """Direction of a top-level difference."""

    REMOVED = "-"
    ADDED = "+"


@dataclass(frozen=True)
class DiffRecord:
    """One signed top-level field difference.

    ``path`` is the top-level key and ``value`` the rendered text of the field
    on the side named by ``sign``.
    """

    sign: Sign
    path: str
    value: str

    def render(self) -> str:
        """Return the diff line, e.g. ``- "name": Cat``."""
        return f'{self.sign.value} "{self.path}": {self.value}'


@dataclass(frozen=True, slots=True)
class HighlightRange:
    """Half-open character span ``[start, end)`` that receives color."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.start >= self.end:
            raise ValueError(f"Invalid highlight range [{self.start}, {self.end})")


@dataclass(frozen=True)
class Diff:
    """Rendered expected/actual blocks for side-by-side display.

    The two blocks are rendered independently; they are not guaranteed to
    have the same number of lines.
    """

    expected: str = ""
    actual: str = ""

    @property
    def is_empty(self) -> bool:
        """Return True when neither side has any output."""
        return not self.expected and not self.actual
