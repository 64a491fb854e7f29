#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jsoncolordiff/renderers/table.py
"""Side-by-side terminal table for a rendered :class:`~jsoncolordiff.types.Diff`.

The two blocks are already wrapped by the diff pipeline, so the table only
lays them out in two borderless columns; rich is told not to wrap them again.
"""

from __future__ import annotations

import io

from rich import box
from rich.console import Console
from rich.errors import ConsoleError
from rich.table import Table
from rich.text import Text

from jsoncolordiff.constants import DEFAULT_LINE_WIDTH
from jsoncolordiff.exceptions import RenderingError
from jsoncolordiff.renderers.ansi import wrap_text_with_ansi
from jsoncolordiff.types import Diff


def build_table(diff: Diff, field: str = "", centered: bool = False, column_width: int = DEFAULT_LINE_WIDTH) -> Table:
    """Build the two-column rich table for a diff.

    Parameters
    ----------
    diff : Diff
        Rendered expected and actual blocks
    field : str, default ""
        Name appended to the column headers, e.g. ``"body"``
    centered : bool, default False
        Center the cell contents instead of left-aligning them
    column_width : int, default 50
        Minimum width of each column

    Returns
    -------
    Table
        The table, ready to print on a rich console

    """
    justify = "center" if centered else "left"
    table = Table(box=box.SIMPLE_HEAD, show_edge=False, pad_edge=False)
    table.add_column(f"Expect {field}".rstrip(), justify=justify, min_width=column_width, no_wrap=True)
    table.add_column(f"Actual {field}".rstrip(), justify=justify, min_width=column_width, no_wrap=True)
    table.add_row(
        Text.from_ansi(wrap_text_with_ansi(diff.expected)),
        Text.from_ansi(wrap_text_with_ansi(diff.actual)),
    )
    return table


def render_side_by_side(
    diff: Diff,
    field: str = "",
    centered: bool = False,
    use_color: bool = True,
    column_width: int = DEFAULT_LINE_WIDTH,
) -> str:
    """Render a diff as a side-by-side table string.

    Parameters
    ----------
    diff : Diff
        Rendered expected and actual blocks
    field : str, default ""
        Name appended to the column headers
    centered : bool, default False
        Center the cell contents
    use_color : bool, default True
        Keep the colors in the output; when False the table is plain text
    column_width : int, default 50
        Minimum width of each column

    Returns
    -------
    str
        The table as text, ending with a newline

    Raises
    ------
    RenderingError
        If rich cannot render the table

    """
    table = build_table(diff, field=field, centered=centered, column_width=column_width)
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        force_terminal=use_color,
        no_color=not use_color,
        color_system="standard" if use_color else None,
        width=2 * column_width + 8,
        highlight=False,
    )
    try:
        console.print(table)
    except ConsoleError as e:
        raise RenderingError(f"Failed to render diff table: {e}", original_error=e) from e
    return buffer.getvalue()
