"""Unit tests for the public comparison API."""

import json

import pytest

from jsoncolordiff import Diff, DiffOptions, JsonParseError, compare, compare_headers, compare_json
from jsoncolordiff.renderers.ansi import strip_ansi

RED = "\x1b[31m"
GREEN = "\x1b[32m"
RESET = "\x1b[0m"


@pytest.mark.unit
class TestCompareJson:
    """Test compare_json() end to end."""

    def test_literal_pair_with_context(self, cat_and_dog):
        """Test a changed scalar field with an unchanged context field."""
        diff = compare_json(*cat_and_dog, disable_color=True)
        assert diff == Diff(expected='id:3\n- "name": Cat\n', actual='id:3\n+ "name": Dog\n')

    def test_literal_pair_colors(self, cat_and_dog):
        """Test only the sign and the differing word are colored."""
        diff = compare_json(*cat_and_dog)
        assert diff.expected == f'id:3\n{RED}-{RESET} "name": {RED}Cat{RESET}\n'
        assert diff.actual == f'id:3\n{GREEN}+{RESET} "name": {GREEN}Dog{RESET}\n'

    def test_nested_structural_diff(self, nested_documents):
        """Test a deep change is recursed into and only the leaf is colored."""
        plain = compare_json(*nested_documents, disable_color=True)
        assert plain.expected == '{\n   "level1": {\n     "level2": {\n       "name": "Cat",\n       "id": 3,\n     }\n   }\n }\n'
        assert plain.actual == '{\n   "level1": {\n     "level2": {\n       "name": "Dog",\n       "id": 3,\n     }\n   }\n }\n'

        colored = compare_json(*nested_documents)
        assert f'{RED}"Cat"{RESET}' in colored.expected
        assert f'{GREEN}"Dog"{RESET}' in colored.actual
        id_line = next(line for line in colored.expected.split("\n") if '"id"' in line)
        assert "\x1b" not in id_line

    def test_array_growth(self):
        """Test a new array element appears on the actual side only."""
        diff = compare_json(b'{"outer": []}', b'{"outer": ["Vary"]}', disable_color=True)
        assert diff.expected == '{\n   "outer": [\n   ]\n }\n'
        assert diff.actual == '{\n   "outer": [\n     [0]: "Vary"\n   ]\n }\n'

    def test_identical_documents(self):
        """Test identical documents give an empty diff."""
        document = b'{"a": [1, {"b": null}], "c": "text"}'
        assert compare_json(document, document).is_empty

    def test_symmetry(self):
        """Test removed keys go to expected and added keys to actual."""
        diff = compare_json(b'{"a": 1, "b": 2}', b'{"b": 2, "c": 3}', disable_color=True)
        assert diff == Diff(expected='b:2\n- "a": 1\n', actual='b:2\n+ "c": 3\n')

    def test_noise_suppresses_color(self):
        """Test noised keys are shown plain while others keep color."""
        expected = json.dumps({"key1": ["a", "b", "c"], "key2": "value1"})
        actual = json.dumps({"key1": ["a", "b", "d"], "keyX": "value1"})
        diff = compare_json(expected, actual, {"key1": []})

        expected_lines = diff.expected.split("\n")
        actual_lines = diff.actual.split("\n")
        assert expected_lines[0] == '  "key1": ["a", "b", "c"]'
        assert actual_lines[0] == '  "key1": ["a", "b", "d"]'
        assert strip_ansi(expected_lines[1]) == '- "key2": value1'
        assert RED in expected_lines[1]
        assert strip_ansi(actual_lines[1]) == '+ "keyX": value1'
        assert GREEN in actual_lines[1]

    def test_nested_one_sided_noise_key_is_plain(self):
        """Test a noised key missing from one nested side carries no color."""
        diff = compare_json(b'{"meta": {"ts": "2020", "id": 1}}', b'{"meta": {"id": 2, "ts2": 1}}', {"ts": []})
        ts_line = next(line for line in diff.expected.split("\n") if '"ts"' in line)
        assert ts_line == '     "ts": "2020",'

    def test_disable_color(self, nested_documents):
        """Test no escape sequences anywhere when color is disabled."""
        diff = compare_json(*nested_documents, disable_color=True)
        assert "\x1b" not in diff.expected
        assert "\x1b" not in diff.actual

    def test_color_is_per_call(self, cat_and_dog):
        """Test one call's color setting does not affect the next."""
        compare_json(*cat_and_dog, disable_color=True)
        assert RED in compare_json(*cat_and_dog).expected

    def test_disable_color_overrides_options(self, cat_and_dog):
        """Test disable_color wins over options.use_color."""
        diff = compare_json(*cat_and_dog, disable_color=True, options=DiffOptions(use_color=True))
        assert "\x1b" not in diff.expected

    def test_without_context(self, cat_and_dog):
        """Test the context line can be turned off."""
        diff = compare_json(*cat_and_dog, options=DiffOptions(use_color=False, include_context=False))
        assert diff.expected == '- "name": Cat\n'

    def test_line_width(self):
        """Test long lines wrap at the configured width."""
        diff = compare_json(
            b'{"text": "one two three four"}',
            b'{"text": "one two three five"}',
            options=DiffOptions(use_color=False, line_width=10),
        )
        assert all(len(line) <= 10 for line in diff.expected.split("\n"))
        assert diff.expected.replace("\n", "") == '- "text": one two three four'

    def test_malformed_expected(self):
        """Test malformed expected JSON raises with its label."""
        with pytest.raises(JsonParseError) as exc_info:
            compare_json(b"{", b"{}")
        assert exc_info.value.label == "expected"

    def test_malformed_actual(self):
        """Test malformed actual JSON raises with its label."""
        with pytest.raises(JsonParseError, match="actual"):
            compare_json(b"{}", b'{"a": }')

    def test_scalar_documents(self):
        """Test scalar documents fall back to word comparison."""
        diff = compare_json(b'"hello world"', b'"hello there"', disable_color=True)
        assert diff == Diff("hello world", "hello there")

    def test_equal_scalar_documents(self):
        """Test equal scalar documents give an empty diff."""
        assert compare_json(b"3", b"3.0").is_empty

    def test_array_documents(self):
        """Test top-level arrays are compared by index without context."""
        diff = compare_json(b'["a", "b"]', b'["a", "c"]', disable_color=True)
        assert diff == Diff(expected='- "1": b\n', actual='+ "1": c\n')

    def test_str_input(self, cat_and_dog):
        """Test str documents are accepted like bytes."""
        expected, actual = (document.decode() for document in cat_and_dog)
        assert compare_json(expected, actual) == compare_json(*cat_and_dog)


@pytest.mark.unit
class TestCompareHeaders:
    """Test compare_headers() function."""

    def test_missing_value(self):
        """Test an empty expected value against a set actual value."""
        diff = compare_headers({"Vary": ""}, {"Vary": "Origin"}, options=DiffOptions(use_color=False))
        assert diff == Diff(expected="Vary: \n", actual="Vary: Origin\n")

    def test_strong_colors(self):
        """Test header words use the high-intensity colors."""
        diff = compare_headers({"Vary": ""}, {"Vary": "Origin"})
        assert diff.expected == "Vary: \n"
        assert diff.actual == "Vary: \x1b[92mOrigin\x1b[0m\n"

    def test_word_level(self):
        """Test only differing words of a header are colored."""
        diff = compare_headers({"Cache-Control": "no-cache, private"}, {"Cache-Control": "no-cache, public"})
        assert diff.expected == "Cache-Control: no-cache, \x1b[91mprivate\x1b[0m\n"

    def test_header_only_in_actual(self):
        """Test headers only in actual are listed after the expected ones."""
        diff = compare_headers({"A": "x"}, {"A": "x", "B": "y"}, options=DiffOptions(use_color=False))
        assert diff == Diff(expected="A: x\nB: \n", actual="A: x\nB: y\n")

    def test_equal_headers(self):
        """Test equal headers render without color."""
        diff = compare_headers({"A": "x"}, {"A": "x"})
        assert diff == Diff(expected="A: x\n", actual="A: x\n")

    def test_long_header_wraps(self):
        """Test header lines wrap at the line width."""
        diff = compare_headers({"X": "a" * 30}, {"X": "b" * 30}, options=DiffOptions(use_color=False, line_width=20))
        assert diff.expected.split("\n")[:2] == ["X: " + "a" * 17, "a" * 13]


@pytest.mark.unit
class TestCompare:
    """Test compare() on raw strings."""

    def test_word_diff(self):
        """Test differing words are colored with strong colors."""
        diff = compare("hello world", "hello there")
        assert diff == Diff("hello \x1b[91mworld\x1b[0m", "hello \x1b[92mthere\x1b[0m")

    def test_identical(self):
        """Test identical strings are returned uncolored."""
        assert compare("same", "same") == Diff("same", "same")

    def test_without_color(self):
        """Test color can be turned off."""
        assert compare("a", "b", options=DiffOptions(use_color=False)) == Diff("a", "b")
