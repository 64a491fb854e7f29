#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jsoncolordiff/cli.py
"""Command-line interface for comparing two JSON files.

The command reads an expected and an actual document (``-`` reads one of them
from stdin), compares them and prints the result as a side-by-side table, or
as two plain blocks with ``--plain``. Options can take their defaults from
``JSONCOLORDIFF_<OPTION>`` environment variables.

Exit codes follow diff(1): 0 when there are no differences, 1 when there are,
2 on errors.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any, Callable, TextIO

from jsoncolordiff.api import compare_headers, compare_json
from jsoncolordiff.constants import (
    DEFAULT_COLOR_MODE,
    DEFAULT_LINE_WIDTH,
    DEFAULT_LOG_LEVEL,
    ENV_PREFIX,
    EXIT_DIFFERENCES,
    EXIT_ERROR,
    EXIT_SUCCESS,
    LOG_LEVELS,
)
from jsoncolordiff.exceptions import InputError, JsonColorDiffError
from jsoncolordiff.logging_utils import configure_logging
from jsoncolordiff.options import DiffOptions
from jsoncolordiff.renderers.table import render_side_by_side
from jsoncolordiff.types import Diff

logger = logging.getLogger(__name__)


def get_version() -> str:
    """Get the version of the jsoncolordiff package."""
    try:
        return version("jsoncolordiff")
    except PackageNotFoundError:
        return "unknown"


def _validate_width(value: str) -> int:
    """Validate the line width is a positive integer.

    Raises
    ------
    argparse.ArgumentTypeError
        If value is not a positive integer

    """
    try:
        ivalue = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"width must be an integer, got '{value}'") from e

    if ivalue <= 0:
        raise argparse.ArgumentTypeError(f"width must be positive, got {ivalue}")

    return ivalue


def _validate_color_mode(value: str) -> str:
    """Validate a color mode taken from the environment."""
    if value not in ("auto", "always", "never"):
        raise ValueError(f"color must be auto, always or never, got '{value}'")
    return value


def _validate_log_level(value: str) -> str:
    """Validate a log level name taken from the environment."""
    name = value.upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}, got '{value}'")
    return name


def _env_default(dest: str, fallback: Any, convert: Callable[[str], Any] = str) -> Any:
    """Return the ``JSONCOLORDIFF_<DEST>`` environment value, or ``fallback``."""
    env_key = f"{ENV_PREFIX}{dest.upper()}"
    env_value = os.environ.get(env_key)
    if env_value is None:
        return fallback
    try:
        return convert(env_value)
    except (ValueError, TypeError, argparse.ArgumentTypeError) as e:
        logger.warning("Invalid environment variable %s=%s: %s", env_key, env_value, e)
        return fallback


def _create_parser() -> argparse.ArgumentParser:
    """Create the argparse parser for the command.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="jsoncolordiff",
        description="Compare two JSON documents and show expected and actual side by side",
    )

    parser.add_argument("expected", help="Expected JSON document (use '-' for stdin)")
    parser.add_argument("actual", help="Actual JSON document (use '-' for stdin)")

    parser.add_argument(
        "--headers",
        action="store_true",
        help="Treat both inputs as flat JSON objects of header names to string values",
    )
    parser.add_argument(
        "--noise",
        "-n",
        action="append",
        default=[],
        metavar="KEY",
        help="Show differences of KEY without color (repeatable)",
    )
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default=_env_default("color", DEFAULT_COLOR_MODE, _validate_color_mode),
        help="Colorize output: auto (default, if terminal and NO_COLOR is unset), always, never",
    )
    parser.add_argument(
        "--width",
        "-w",
        type=_validate_width,
        default=_env_default("width", DEFAULT_LINE_WIDTH, _validate_width),
        help=f"Visible characters per line before wrapping (default: {DEFAULT_LINE_WIDTH})",
    )
    parser.add_argument(
        "--no-context",
        dest="include_context",
        action="store_false",
        help="Do not show an unchanged field above the differences",
    )
    parser.add_argument(
        "--no-truncate",
        dest="truncate",
        action="store_false",
        help="Show long nested differences in full instead of eliding the middle",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print the expected and actual blocks one after the other instead of a table",
    )
    parser.add_argument("--field", default="", help="Name shown in the table headers, e.g. 'body'")

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=_env_default("log_level", DEFAULT_LOG_LEVEL, _validate_log_level),
        help=f"Set logging level for debugging (default: {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Log everything at DEBUG with timestamps and module names (overrides --log-level)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")

    return parser


def _read_source(source: str) -> bytes:
    """Read one input from a path or from stdin (``-``).

    Raises
    ------
    InputError
        If the file does not exist, cannot be read, or stdin is empty

    """
    if source == "-":
        data = sys.stdin.buffer.read()
        if not data:
            raise InputError("No data received from stdin", source=source)
        return data

    path = Path(source)
    if not path.exists():
        raise InputError(f"Source file not found: {source}", source=source)
    try:
        return path.read_bytes()
    except OSError as e:
        raise InputError(f"Cannot read {source}: {e}", source=source, original_error=e) from e


def _load_headers(data: bytes, source: str) -> dict[str, str]:
    """Parse a header file into a flat string mapping.

    Raises
    ------
    InputError
        If the content is not a JSON object of string values

    """
    try:
        headers = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InputError(f"{source} is not valid JSON: {e}", source=source, original_error=e) from e

    if not isinstance(headers, dict) or not all(isinstance(value, str) for value in headers.values()):
        raise InputError(f"{source} must be a JSON object mapping header names to strings", source=source)
    return headers


def _should_use_color(mode: str, stream: TextIO) -> bool:
    """Resolve the ``--color`` mode against the output stream."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(callable(isatty) and isatty())


def _write_diff(diff: Diff, parsed: argparse.Namespace, use_color: bool, stream: TextIO) -> None:
    if parsed.plain:
        stream.write(f"Expect {parsed.field}".rstrip() + "\n")
        stream.write(diff.expected)
        stream.write(f"Actual {parsed.field}".rstrip() + "\n")
        stream.write(diff.actual)
        return
    stream.write(render_side_by_side(diff, field=parsed.field, use_color=use_color, column_width=parsed.width))


def main(args: list[str] | None = None) -> int:
    """Run the command.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments; defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Exit code (0 no differences, 1 differences, 2 error)

    """
    parser = _create_parser()
    try:
        parsed = parser.parse_args(args)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_ERROR

    configure_logging(parsed.log_level, log_file=parsed.log_file, trace_mode=parsed.trace)

    if parsed.expected == "-" and parsed.actual == "-":
        print("Error: Cannot read both expected and actual from stdin", file=sys.stderr)
        return EXIT_ERROR

    use_color = _should_use_color(parsed.color, sys.stdout)
    options = DiffOptions(
        use_color=use_color,
        line_width=parsed.width,
        include_context=parsed.include_context,
        truncate=parsed.truncate,
    )

    try:
        expected_data = _read_source(parsed.expected)
        actual_data = _read_source(parsed.actual)

        if parsed.headers:
            expected_headers = _load_headers(expected_data, parsed.expected)
            actual_headers = _load_headers(actual_data, parsed.actual)
            diff = compare_headers(expected_headers, actual_headers, options=options)
            has_changes = expected_headers != actual_headers
        else:
            noise = {key: [] for key in parsed.noise}
            diff = compare_json(expected_data, actual_data, noise, options=options)
            has_changes = not diff.is_empty

        if not has_changes:
            print("No differences found.", file=sys.stderr)
            return EXIT_SUCCESS

        _write_diff(diff, parsed, use_color, sys.stdout)
        return EXIT_DIFFERENCES

    except JsonColorDiffError as e:
        logger.debug("Comparison failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_ERROR
