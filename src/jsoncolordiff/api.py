#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jsoncolordiff/api.py
"""Python API for colorized JSON, header and string comparison.

This module composes the diff pipeline into the three public entry points.
Each call receives its own :class:`~jsoncolordiff.options.DiffOptions`; nothing
is shared between calls.
"""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from jsoncolordiff.diff.accessor import kind_of, parse_document, value_text, values_equal
from jsoncolordiff.diff.colorize import colorize_records
from jsoncolordiff.diff.context import find_context_line
from jsoncolordiff.diff.records import changed_keys, shallow_diff
from jsoncolordiff.diff.words import color_words, diff_word_indices
from jsoncolordiff.options import DiffOptions
from jsoncolordiff.renderers.ansi import Palette, break_lines
from jsoncolordiff.types import Diff

logger = logging.getLogger(__name__)


def _resolve_options(options: DiffOptions | None, disable_color: bool = False) -> DiffOptions:
    options = options or DiffOptions()
    if disable_color and options.use_color:
        options = options.create_updated(use_color=False)
    return options


def compare_json(
    expected: bytes | str,
    actual: bytes | str,
    noise: Mapping[str, Sequence[str]] | None = None,
    disable_color: bool = False,
    *,
    options: DiffOptions | None = None,
) -> Diff:
    """Compare two JSON documents and return colorized expected/actual blocks.

    Parameters
    ----------
    expected : bytes or str
        Expected JSON document
    actual : bytes or str
        Actual JSON document
    noise : mapping of str to sequence of str, optional
        Field names whose differences are shown without color, e.g. volatile
        timestamps or request ids. Only the keys are used; the values are
        accepted for compatibility with noise configurations that list
        patterns per field.
    disable_color : bool, default False
        Suppress every escape sequence for this call
    options : DiffOptions, optional
        Rendering options; ``disable_color=True`` overrides ``options.use_color``

    Returns
    -------
    Diff
        The rendered blocks; empty when the documents have no top-level
        difference

    Raises
    ------
    JsonParseError
        If either document is not valid JSON

    Examples
    --------
    >>> diff = compare_json(b'{"name": "Cat", "id": 3}', b'{"name": "Dog", "id": 3}', disable_color=True)
    >>> print(diff.expected, end="")
    id:3
    - "name": Cat

    """
    options = _resolve_options(options, disable_color)
    expected_doc = parse_document(expected, "expected")
    actual_doc = parse_document(actual, "actual")

    if not kind_of(expected_doc).is_container or not kind_of(actual_doc).is_container:
        if values_equal(expected_doc, actual_doc):
            return Diff()
        logger.debug("Scalar document, falling back to word comparison")
        return compare(value_text(expected_doc), value_text(actual_doc), options=options)

    records = shallow_diff(expected_doc, actual_doc)
    if not records:
        return Diff()

    context = None
    if options.include_context:
        context = find_context_line(expected_doc, actual_doc, changed_keys(records))

    noise_keys = frozenset(noise or ())
    return colorize_records(records, noise_keys, options, context)


def compare_headers(
    expected: Mapping[str, str],
    actual: Mapping[str, str],
    *,
    options: DiffOptions | None = None,
) -> Diff:
    """Compare two flat header mappings word by word.

    One ``key: value`` line is produced per header of ``expected``, followed
    by headers that only ``actual`` has. A header missing from one side is
    rendered there with an empty value.

    Parameters
    ----------
    expected : mapping of str to str
        Expected headers
    actual : mapping of str to str
        Actual headers
    options : DiffOptions, optional
        Rendering options

    Returns
    -------
    Diff
        One wrapped line per header on each side

    """
    options = _resolve_options(options)
    palette = Palette(options.use_color)
    expected_lines: list[str] = []
    actual_lines: list[str] = []

    keys = list(expected) + [key for key in actual if key not in expected]
    for key in keys:
        expected_value = expected.get(key, "")
        actual_value = actual.get(key, "")
        expected_indices, actual_indices = diff_word_indices(expected_value, actual_value)

        expected_line = f"{key}: " + color_words(expected_value, palette.strong_removed, expected_indices)
        actual_line = f"{key}: " + color_words(actual_value, palette.strong_added, actual_indices)
        expected_lines.append(break_lines(expected_line, options.line_width) + "\n")
        actual_lines.append(break_lines(actual_line, options.line_width) + "\n")

    return Diff(expected="".join(expected_lines), actual="".join(actual_lines))


def compare(expected: str, actual: str, *, options: DiffOptions | None = None) -> Diff:
    """Word-diff two raw strings.

    Parameters
    ----------
    expected : str
        Expected text
    actual : str
        Actual text
    options : DiffOptions, optional
        Rendering options

    Returns
    -------
    Diff
        Both strings with their differing words highlighted

    """
    options = _resolve_options(options)
    palette = Palette(options.use_color)
    expected_indices, actual_indices = diff_word_indices(expected, actual)
    return Diff(
        expected=color_words(expected, palette.strong_removed, expected_indices),
        actual=color_words(actual, palette.strong_added, actual_indices),
    )
