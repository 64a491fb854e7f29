#  Copyright (c) 2025 Tom Villani, Ph.D.
"""jsoncolordiff - explain why two JSON responses differ.

jsoncolordiff compares two JSON documents (or two flat header mappings) and
renders the difference as two colorized, line-wrapped text blocks, one for
the expected side and one for the actual side, ready for side-by-side
display in a terminal.

Key Features
------------
- Shallow top-level diff with recursive re-diffing of nested objects and arrays
- Word-level highlighting inside changed string values
- Noise keys whose differences are shown without emphasis
- ANSI-escape-safe wrapping and symmetric ellipsis truncation
- Side-by-side rich table output and a command-line tool

Requirements
------------
- Python 3.10+
- rich (table rendering)

Examples
--------
Compare two response bodies:

    >>> from jsoncolordiff import compare_json
    >>> diff = compare_json(b'{"name": "Cat"}', b'{"name": "Dog"}')
    >>> diff.is_empty
    False

Compare headers:

    >>> from jsoncolordiff import compare_headers
    >>> diff = compare_headers({"Vary": ""}, {"Vary": "Origin"})
    >>> diff.expected.startswith("Vary: ")
    True

"""

from jsoncolordiff.api import compare, compare_headers, compare_json
from jsoncolordiff.exceptions import InputError, JsonColorDiffError, JsonParseError, ParsingError, RenderingError
from jsoncolordiff.options import DiffOptions
from jsoncolordiff.renderers.table import render_side_by_side
from jsoncolordiff.types import Diff, DiffRecord, HighlightRange, Sign

__version__ = "0.3.0"

__all__ = [
    "Diff",
    "DiffOptions",
    "DiffRecord",
    "HighlightRange",
    "InputError",
    "JsonColorDiffError",
    "JsonParseError",
    "ParsingError",
    "RenderingError",
    "Sign",
    "compare",
    "compare_headers",
    "compare_json",
    "render_side_by_side",
]
