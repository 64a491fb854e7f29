#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jsoncolordiff/diff/colorize.py
"""Render paired diff segments into the expected and actual blocks."""

from __future__ import annotations

from typing import AbstractSet, Sequence

from jsoncolordiff.constants import TOP_LEVEL_INDENT
from jsoncolordiff.diff.pairing import LiteralLine, StructuralPair, pair_records
from jsoncolordiff.diff.structural import StructuralColorizer
from jsoncolordiff.diff.words import diff_word_ranges
from jsoncolordiff.options import DiffOptions
from jsoncolordiff.renderers.ansi import Palette, break_lines, break_with_color, truncate_to_match_with_ellipsis
from jsoncolordiff.types import Diff, DiffRecord, HighlightRange, Sign


def render_literal_line(line: LiteralLine, palette: Palette, width: int) -> str:
    """Render one diff record as a wrapped, colored line.

    With a partner record only the sign and the differing words are colored;
    a lone record is colored whole. Noised records lose their sign and color.
    """
    text = line.record.render()

    if line.noised:
        return break_with_color(" " + text[1:], None, (), width)

    painter = palette.removed if line.record.sign is Sign.REMOVED else palette.added
    if line.partner is None:
        return break_with_color(text, painter, [HighlightRange(0, len(text))], width)

    # ranges are measured without the sign column
    word_ranges = diff_word_ranges(text[1:], line.partner.render()[1:])
    ranges = [HighlightRange(0, 1)] + [HighlightRange(span.start + 1, span.end + 1) for span in word_ranges]
    return break_with_color(text, painter, ranges, width)


def render_structural_pair(pair: StructuralPair, colorizer: StructuralColorizer, options: DiffOptions) -> tuple[str, str]:
    """Render a structural pair as ``{ "key": ... }`` blocks on both sides."""
    expected, actual = colorizer.compare_maps({pair.key: pair.expected}, {pair.key: pair.actual}, TOP_LEVEL_INDENT)
    expected = break_lines(expected, options.line_width)
    actual = break_lines(actual, options.line_width)
    if options.truncate:
        expected, actual = truncate_to_match_with_ellipsis(expected, actual, options.use_color)
    return (
        break_lines(expected, options.line_width) + "\n",
        break_lines(actual, options.line_width) + "\n",
    )


def colorize_records(
    records: Sequence[DiffRecord],
    noise: AbstractSet[str] = frozenset(),
    options: DiffOptions | None = None,
    context: str | None = None,
) -> Diff:
    """Split diff records into colorized expected and actual blocks.

    Parameters
    ----------
    records : sequence of DiffRecord
        Shallow diff records in order
    noise : set of str, optional
        Keys emitted without color
    options : DiffOptions, optional
        Rendering options; defaults to ``DiffOptions()``
    context : str, optional
        Unchanged ``key:value`` line shown first on both sides

    Returns
    -------
    Diff
        The rendered blocks

    """
    options = options or DiffOptions()
    palette = Palette(options.use_color)
    colorizer = StructuralColorizer(palette.removed, palette.added, noise, options.line_width)

    expected: list[str] = []
    actual: list[str] = []

    if context:
        context_text = break_with_color(context, None, (), options.line_width)
        expected.append(context_text)
        actual.append(context_text)

    for segment in pair_records(records, noise):
        if isinstance(segment, StructuralPair):
            expected_text, actual_text = render_structural_pair(segment, colorizer, options)
            expected.append(expected_text)
            actual.append(actual_text)
        elif segment.record.sign is Sign.REMOVED:
            expected.append(render_literal_line(segment, palette, options.line_width))
        else:
            actual.append(render_literal_line(segment, palette, options.line_width))

    return Diff(expected="".join(expected), actual="".join(actual))
