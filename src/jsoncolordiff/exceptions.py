#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the jsoncolordiff library.

This module defines specialized exception classes for the error conditions
that can occur while comparing and rendering JSON documents. These
exceptions provide more specific error information than generic built-ins.

Exception Hierarchy
-------------------
- JsonColorDiffError (base exception)

  - ParsingError (input document parsing failures)
    - JsonParseError (malformed top-level JSON)

  - InputError (CLI input problems: missing files, bad header maps)

  - RenderingError (output generation failures)

Notes
-----
Only top-level parse failures are raised to callers. Speculative parsing of
nested values and serialization of individual fields are recovered locally
and never surface as exceptions.

"""

from __future__ import annotations


class JsonColorDiffError(Exception):
    """Base exception class for all jsoncolordiff-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ParsingError(JsonColorDiffError):
    """Exception raised when an input document cannot be parsed.

    Parameters
    ----------
    message : str
        Description of the parsing error
    parsing_stage : str, optional
        Stage of parsing where the error occurred
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    parsing_stage : str or None
        The parsing stage where the error occurred

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error with stage information."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class JsonParseError(ParsingError):
    """Exception raised when a top-level JSON document is malformed.

    Parameters
    ----------
    label : str
        Which side failed to parse (e.g. "expected" or "actual")
    line : int, optional
        1-based line of the decode failure
    column : int, optional
        1-based column of the decode failure
    message : str, optional
        Custom error message. If not provided, one is built from the position
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        label: str,
        line: int | None = None,
        column: int | None = None,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the JSON parse error with position details."""
        if message is None:
            message = f"Invalid JSON in {label} document"
            if line is not None and column is not None:
                message += f" (line {line}, column {column})"
        super().__init__(message, parsing_stage="decode", original_error=original_error)
        self.label = label
        self.line = line
        self.column = column


class InputError(JsonColorDiffError):
    """Exception raised for unusable command-line inputs.

    Parameters
    ----------
    message : str
        Description of the input problem
    source : str, optional
        The file path or ``-`` (stdin) that caused the problem
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, source: str | None = None, original_error: Exception | None = None):
        """Initialize the input error with its source."""
        super().__init__(message, original_error=original_error)
        self.source = source


class RenderingError(JsonColorDiffError):
    """Exception raised when the side-by-side output cannot be produced.

    Parameters
    ----------
    message : str
        Description of the rendering error
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error=original_error)
