#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jsoncolordiff/diff/words.py
"""Word-level comparison of two strings.

Words are the pieces between single ASCII spaces, compared position by
position. Runs of spaces produce empty words and other whitespace is part of
a word, so strings that differ only in spacing desynchronize from that point
on. Callers depend on this exact tokenization.
"""

from __future__ import annotations

from typing import Iterable

from jsoncolordiff.renderers.ansi import Painter
from jsoncolordiff.types import HighlightRange


def split_words(text: str) -> list[str]:
    """Split ``text`` on single spaces."""
    return text.split(" ")


def diff_word_indices(first: str, second: str) -> tuple[list[int], list[int]]:
    """Return the indices of differing words on each side.

    An index differs when the words are unequal or when only one side has a
    word at that position.

    Examples
    --------
    >>> diff_word_indices("a b c", "a x")
    ([1, 2], [1])

    """
    words1 = split_words(first)
    words2 = split_words(second)
    indices1: list[int] = []
    indices2: list[int] = []

    for index in range(max(len(words1), len(words2))):
        in_first = index < len(words1)
        in_second = index < len(words2)
        if in_first and in_second:
            if words1[index] != words2[index]:
                indices1.append(index)
                indices2.append(index)
        elif in_first:
            indices1.append(index)
        else:
            indices2.append(index)

    return indices1, indices2


def diff_word_ranges(first: str, second: str) -> list[HighlightRange]:
    """Return character ranges in ``first`` covering its differing words.

    Only ``first`` is measured; call again with the arguments swapped for the
    other side. Empty words have no extent and produce no range.
    """
    words2 = split_words(second)
    ranges: list[HighlightRange] = []
    start = 0

    for index, word in enumerate(split_words(first)):
        if (index >= len(words2) or word != words2[index]) and word:
            ranges.append(HighlightRange(start, start + len(word)))
        start += len(word) + 1

    return ranges


def color_words(text: str, painter: Painter, indices: Iterable[int]) -> str:
    """Paint the words of ``text`` at ``indices`` and re-join them."""
    selected = set(indices)
    return " ".join(painter(word) if index in selected else word for index, word in enumerate(split_words(text)))
