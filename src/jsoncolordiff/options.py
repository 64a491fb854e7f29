#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options controlling how differences are rendered.

The options object is threaded explicitly through every comparison call, so
two calls with different color settings never affect each other.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from jsoncolordiff.constants import DEFAULT_LINE_WIDTH


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class DiffOptions(CloneFrozenMixin):
    """Rendering options for a single comparison.

    Parameters
    ----------
    use_color : bool, default True
        Emit ANSI color escape sequences. When False every output is plain text.
    line_width : int, default 50
        Maximum visible characters per physical line before wrapping.
    include_context : bool, default True
        Prepend one unchanged ``key:value`` line to JSON diffs for orientation.
    truncate : bool, default True
        Replace the middle of long structural blocks with an ellipsis marker.

    Examples
    --------
    Plain output at a wider width:
        >>> options = DiffOptions(use_color=False, line_width=80)
        >>> options.create_updated(include_context=False).line_width
        80

    """

    use_color: bool = field(
        default=True,
        metadata={"help": "Emit ANSI color escape sequences"},
    )
    line_width: int = field(
        default=DEFAULT_LINE_WIDTH,
        metadata={"help": "Maximum visible characters per line before wrapping", "type": int},
    )
    include_context: bool = field(
        default=True,
        metadata={"help": "Prepend one unchanged key:value line for orientation"},
    )
    truncate: bool = field(
        default=True,
        metadata={"help": "Elide the middle of long nested diffs"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If ``line_width`` is not positive.

        """
        if self.line_width <= 0:
            raise ValueError(f"line_width must be positive, got {self.line_width}")
