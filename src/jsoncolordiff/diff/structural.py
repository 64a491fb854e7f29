#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jsoncolordiff/diff/structural.py
"""Recursive colorization of nested mappings and sequences.

Mappings are compared key by key and sequences index by index; there is no
alignment step, so inserting an element at the front of a list rewrites every
following index. Differing scalars of the same kind are narrowed down to the
differing words.
"""

from __future__ import annotations

from typing import Any, Container

from jsoncolordiff.constants import DEFAULT_LINE_WIDTH, INDENT_UNIT
from jsoncolordiff.diff.accessor import JsonKind, kind_of, serialize, values_equal
from jsoncolordiff.diff.words import color_words, diff_word_indices
from jsoncolordiff.renderers.ansi import Painter, break_lines


class StructuralColorizer:
    """Render two container values side by side with colored differences.

    Parameters
    ----------
    removed : Painter
        Painter for content only in, or different in, the expected value
    added : Painter
        Painter for content only in, or different in, the actual value
    noise : container of str, optional
        Keys rendered without color on both sides
    width : int, default 50
        Visible width used when wrapping word-diffed scalar lines

    Examples
    --------
    >>> from jsoncolordiff.renderers.ansi import Palette
    >>> palette = Palette(use_color=False)
    >>> colorizer = StructuralColorizer(palette.removed, palette.added)
    >>> expected, actual = colorizer.compare_maps({"a": 1}, {"a": 2}, "")
    >>> print(expected)
    {
      "a": 1,
    }

    """

    def __init__(
        self,
        removed: Painter,
        added: Painter,
        noise: Container[str] = frozenset(),
        width: int = DEFAULT_LINE_WIDTH,
    ):
        self.removed = removed
        self.added = added
        self.noise = noise
        self.width = width

    def compare_maps(self, a: dict[str, Any], b: dict[str, Any], indent: str) -> tuple[str, str]:
        """Compare two mappings.

        Parameters
        ----------
        a : dict
            Expected mapping
        b : dict
            Actual mapping
        indent : str
            Indentation of the closing brace; entries are one level deeper

        Returns
        -------
        tuple of (str, str)
            Expected and actual renderings, each from ``{`` to ``}``

        """
        expected = ["{\n"]
        actual = ["{\n"]
        inner = indent + INDENT_UNIT

        for key, a_value in a.items():
            if key not in b:
                self._write_one_sided(expected, key, a_value, inner, self.removed)
                continue
            self.compare(key, a_value, b[key], inner, expected, actual)

        for key, b_value in b.items():
            if key not in a:
                self._write_one_sided(actual, key, b_value, inner, self.added)

        expected.append(indent + "}")
        actual.append(indent + "}")
        return "".join(expected), "".join(actual)

    def compare_sequences(self, a: list[Any], b: list[Any], indent: str) -> tuple[str, str]:
        """Compare two sequences position by position.

        Each output line is labelled ``[index]:`` and indented one level deeper
        than ``indent``. An index present on one side only appears only on that
        side.
        """
        expected: list[str] = []
        actual: list[str] = []
        inner = indent + INDENT_UNIT

        for index in range(max(len(a), len(b))):
            label = f"{inner}[{index}]: "

            if index >= len(a):
                text = serialize(b[index], inner)
                if text is not None:
                    actual.append(f"{label}{self.added(text)}\n")
                continue
            if index >= len(b):
                text = serialize(a[index], inner)
                if text is not None:
                    expected.append(f"{label}{self.removed(text)}\n")
                continue

            a_value, b_value = a[index], b[index]
            a_kind, b_kind = kind_of(a_value), kind_of(b_value)

            if a_kind is JsonKind.MAPPING and b_kind is JsonKind.MAPPING:
                expected_text, actual_text = self.compare_maps(a_value, b_value, inner)
                expected.append(f"{label}{expected_text}\n")
                actual.append(f"{label}{actual_text}\n")
                continue

            if a_kind is JsonKind.SEQUENCE and b_kind is JsonKind.SEQUENCE:
                expected_text, actual_text = self.compare_sequences(a_value, b_value, inner)
                expected.append(f"{label}[\n{expected_text}{inner}]\n")
                actual.append(f"{label}[\n{actual_text}{inner}]\n")
                continue

            a_text = serialize(a_value, inner)
            b_text = serialize(b_value, inner)
            if a_text is None or b_text is None:
                continue
            if values_equal(a_value, b_value):
                expected.append(f"{label}{a_text}\n")
                actual.append(f"{label}{b_text}\n")
            else:
                expected.append(f"{label}{self.removed(a_text)}\n")
                actual.append(f"{label}{self.added(b_text)}\n")

        return "".join(expected), "".join(actual)

    def compare(
        self,
        key: str,
        a_value: Any,
        b_value: Any,
        indent: str,
        expected: list[str],
        actual: list[str],
    ) -> None:
        """Compare the two values of one key and append both renderings.

        Mappings and sequences recurse. Values of different kinds are written
        fully colored. Equal scalars are written plain, and differing scalars of
        the same kind have only their differing words colored.
        """
        if key in self.noise:
            self._write_pair(expected, key, a_value, indent, None)
            self._write_pair(actual, key, b_value, indent, None)
            return

        a_kind, b_kind = kind_of(a_value), kind_of(b_value)
        if a_kind is not b_kind:
            self._write_pair(expected, key, a_value, indent, self.removed)
            self._write_pair(actual, key, b_value, indent, self.added)
            return

        if a_kind is JsonKind.MAPPING:
            expected_text, actual_text = self.compare_maps(a_value, b_value, indent)
            expected.append(f'{indent}"{key}": {expected_text}\n')
            actual.append(f'{indent}"{key}": {actual_text}\n')
            return

        if a_kind is JsonKind.SEQUENCE:
            expected_text, actual_text = self.compare_sequences(a_value, b_value, indent)
            expected.append(f'{indent}"{key}": [\n{expected_text}{indent}]\n')
            actual.append(f'{indent}"{key}": [\n{actual_text}{indent}]\n')
            return

        a_text = serialize(a_value, indent)
        b_text = serialize(b_value, indent)
        if a_text is None or b_text is None:
            return

        if values_equal(a_value, b_value):
            expected.append(f'{indent}"{key}": {a_text},\n')
            actual.append(f'{indent}"{key}": {b_text},\n')
            return

        a_indices, b_indices = diff_word_indices(a_text, b_text)
        expected_line = f'{indent}"{key}": {color_words(a_text, self.removed, a_indices)},\n'
        actual_line = f'{indent}"{key}": {color_words(b_text, self.added, b_indices)},\n'
        expected.append(break_lines(expected_line, self.width))
        actual.append(break_lines(actual_line, self.width))

    def _write_one_sided(self, out: list[str], key: str, value: Any, indent: str, painter: Painter) -> None:
        if key in self.noise:
            self._write_pair(out, key, value, indent, None)
        else:
            self._write_pair(out, painter(key), value, indent, painter)

    def _write_pair(
        self,
        out: list[str],
        key_text: str,
        value: Any,
        indent: str,
        painter: Painter | None,
    ) -> None:
        text = serialize(value, indent)
        if text is None:
            return
        if painter is not None and value != "":
            text = painter(text)
        out.append(f'{indent}"{key_text}": {text},\n')
