"""Property-based fuzzing tests for wrapping, word diffs and truncation.

This test module uses Hypothesis to generate random text and documents and
validate the properties the renderers rely on.

Test Coverage:
- Wrapped lines never exceed the visible width
- Wrapping never loses characters or splits escape sequences
- Word highlight ranges fall on word boundaries
- Truncation keeps blocks within the shared threshold
- Identical documents always produce an empty diff
- Removed keys show on the expected side only, added keys on the actual side only
"""

import json

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from jsoncolordiff import compare_json
from jsoncolordiff.constants import ANSI_PATTERN
from jsoncolordiff.diff.words import diff_word_ranges
from jsoncolordiff.renderers.ansi import (
    Color,
    Painter,
    break_lines,
    strip_ansi,
    truncate_to_match_with_ellipsis,
    visible_length,
)
from jsoncolordiff.types import HighlightRange

plain_text = st.text(alphabet=st.characters(min_codepoint=32, max_codepoint=126), max_size=40)
words = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=8)
keys = st.text(alphabet="abcdefghij", min_size=1, max_size=6)

json_values = st.recursive(
    st.none() | st.booleans() | st.integers() | st.text(max_size=10),
    lambda children: st.lists(children, max_size=4) | st.dictionaries(st.text(max_size=5), children, max_size=4),
    max_leaves=10,
)


@st.composite
def colored_text(draw):
    """Draw text made of plain and painted segments."""
    segments = draw(st.lists(st.tuples(plain_text, st.sampled_from([None, Color.RED, Color.GREEN])), max_size=6))
    return "".join(Painter(color)(text) if color else text for text, color in segments)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestBreakLinesFuzzing:
    """Property-based tests for break_lines()."""

    @given(colored_text(), st.integers(min_value=1, max_value=60))
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_lines_fit_width(self, text, width):
        """Property: No wrapped line shows more than width characters."""
        for line in break_lines(text, width).split("\n"):
            assert visible_length(line) <= width

    @given(colored_text(), st.integers(min_value=1, max_value=60))
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_no_characters_lost(self, text, width):
        """Property: Removing the inserted newlines restores the text."""
        result = break_lines(text, width)
        assert strip_ansi(result).replace("\n", "") == strip_ansi(text)

    @given(colored_text(), st.integers(min_value=1, max_value=60))
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_escape_sequences_intact(self, text, width):
        """Property: Every escape sequence survives unsplit and in order."""
        assert ANSI_PATTERN.findall(break_lines(text, width)) == ANSI_PATTERN.findall(text)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestWordRangeFuzzing:
    """Property-based tests for diff_word_ranges()."""

    @given(st.lists(words, min_size=1, max_size=8), st.lists(words, min_size=1, max_size=8))
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_ranges_on_word_boundaries(self, first_words, second_words):
        """Property: Ranges cover whole differing words of the first string."""
        first = " ".join(first_words)
        ranges = diff_word_ranges(first, " ".join(second_words))

        for span in ranges:
            assert span.start == 0 or first[span.start - 1] == " "
            assert span.end == len(first) or first[span.end] == " "
            assert first[span.start : span.end] in first_words

        expected_count = sum(
            1
            for index, word in enumerate(first_words)
            if index >= len(second_words) or second_words[index] != word
        )
        assert len(ranges) == expected_count

    @given(words, words)
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_single_differing_word(self, first, second):
        """Property: Two different single words highlight the whole first word."""
        if first == second:
            assert diff_word_ranges(first, second) == []
        else:
            assert diff_word_ranges(first, second) == [HighlightRange(0, len(first))]


@pytest.mark.unit
@pytest.mark.fuzzing
class TestTruncationFuzzing:
    """Property-based tests for truncate_to_match_with_ellipsis()."""

    @given(st.integers(min_value=1, max_value=60), st.integers(min_value=1, max_value=60), st.booleans())
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_blocks_are_bounded(self, expected_count, actual_count, use_color):
        """Property: A truncated block has exactly threshold lines, others are untouched."""
        expected = "\n".join(f"e{i}" for i in range(expected_count))
        actual = "\n".join(f"a{i}" for i in range(actual_count))
        threshold = (expected_count + actual_count) // 2 + 1

        results = truncate_to_match_with_ellipsis(expected, actual, use_color)
        for original, count, result in ((expected, expected_count, results[0]), (actual, actual_count, results[1])):
            lines = strip_ansi(result).split("\n")
            if count > threshold and threshold > 3 and count - threshold >= 3:
                assert len(lines) == threshold
                assert lines[0] == original.split("\n")[0]
                assert lines[-1] == original.split("\n")[-1]
            else:
                assert result == original


@pytest.mark.unit
@pytest.mark.fuzzing
class TestCompareJsonFuzzing:
    """Property-based tests for compare_json()."""

    @given(json_values)
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_identical_documents_are_empty(self, document):
        """Property: A document compared with itself has no differences."""
        text = json.dumps(document)
        assert compare_json(text, text).is_empty

    @given(
        st.dictionaries(keys, st.integers(), max_size=6),
        st.dictionaries(keys, st.integers(), max_size=6),
    )
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_sides_are_symmetric(self, expected_doc, actual_doc):
        """Property: Removed keys appear only on expected, added keys only on actual."""
        diff = compare_json(json.dumps(expected_doc), json.dumps(actual_doc), disable_color=True)

        for key in expected_doc.keys() - actual_doc.keys():
            assert diff.expected.count(f'- "{key}": ') == 1
            assert f'"{key}": ' not in diff.actual
        for key in actual_doc.keys() - expected_doc.keys():
            assert diff.actual.count(f'+ "{key}": ') == 1
            assert f'"{key}": ' not in diff.expected
