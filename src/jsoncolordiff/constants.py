#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for jsoncolordiff.

This module centralizes the hardcoded values used across the library:
rendering widths, ANSI escape handling and command-line defaults.
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ColorMode = Literal["auto", "always", "never"]

# =============================================================================
# Rendering
# =============================================================================

# Visible characters per physical line before the renderer wraps
DEFAULT_LINE_WIDTH = 50

# Indentation unit for nested structures
INDENT_UNIT = "  "

# Indentation used for the synthetic wrapper around a top-level pair
TOP_LEVEL_INDENT = " "

# Minimum number of lines a side must lose before it is truncated
MIN_TRUNCATED_LINES = 3

# Rows of the ellipsis marker that replaces truncated lines
ELLIPSIS_ROWS = (".", ".", ".")

# =============================================================================
# ANSI escape sequences
# =============================================================================

ESCAPE = "\x1b"
ANSI_RESET = "\x1b[0m"
ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*[a-zA-Z]")
ANSI_RESET_CODES = frozenset({"\x1b[0m", "\x1b[m"})

# =============================================================================
# Command line
# =============================================================================

ENV_PREFIX = "JSONCOLORDIFF_"
DEFAULT_COLOR_MODE: ColorMode = "auto"

EXIT_SUCCESS = 0
EXIT_DIFFERENCES = 1
EXIT_ERROR = 2

# =============================================================================
# Logging
# =============================================================================

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s: %(message)s"
TRACE_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
