#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jsoncolordiff/renderers/__init__.py
"""Terminal renderers for diff output.

Available Renderers
-------------------
- ansi: colors, escape-aware wrapping and ellipsis truncation
- table: side-by-side expected/actual table built with rich

Examples
--------
Render a diff as a table:
    >>> from jsoncolordiff import compare_json
    >>> from jsoncolordiff.renderers import render_side_by_side
    >>> diff = compare_json(b'{"a": 1}', b'{"a": 2}')
    >>> table = render_side_by_side(diff, field="body", use_color=False)
    >>> "Expect body" in table
    True

"""

from jsoncolordiff.renderers.ansi import (
    Color,
    Painter,
    Palette,
    break_lines,
    strip_ansi,
    truncate_to_match_with_ellipsis,
    wrap_text_with_ansi,
)
from jsoncolordiff.renderers.table import render_side_by_side

__all__ = [
    "Color",
    "Painter",
    "Palette",
    "break_lines",
    "render_side_by_side",
    "strip_ansi",
    "truncate_to_match_with_ellipsis",
    "wrap_text_with_ansi",
]
