#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jsoncolordiff/diff/accessor.py
"""JSON parsing, classification and text rendering helpers.

All JSON handling in the pipeline goes through this module. Values are the
plain Python objects produced by :func:`json.loads`; :class:`JsonKind` is the
single place where their shape is classified, and every dispatch site in the
package branches on it.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Iterator

from jsoncolordiff.exceptions import JsonParseError

logger = logging.getLogger(__name__)

MISSING: Any = object()


class JsonKind(Enum):
    """Closed set of JSON value shapes."""

    MAPPING = auto()
    SEQUENCE = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()

    @property
    def is_container(self) -> bool:
        """Return True for mappings and sequences."""
        return self in (JsonKind.MAPPING, JsonKind.SEQUENCE)


def kind_of(value: Any) -> JsonKind:
    """Classify a parsed JSON value.

    Raises
    ------
    TypeError
        If ``value`` is not something :func:`json.loads` can produce.

    """
    # bool is a subclass of int, so it must be checked first
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if value is None:
        return JsonKind.NULL
    if isinstance(value, dict):
        return JsonKind.MAPPING
    if isinstance(value, list):
        return JsonKind.SEQUENCE
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


@dataclass(frozen=True)
class ContainerParse:
    """Outcome of :func:`parse_container`.

    ``kind`` is ``JsonKind.MAPPING``, ``JsonKind.SEQUENCE`` or None when the
    text is not a recursable container.
    """

    kind: JsonKind | None
    value: Any = None

    @property
    def is_container(self) -> bool:
        return self.kind is not None


def parse_document(data: bytes | str, label: str) -> Any:
    """Parse a complete JSON document.

    Parameters
    ----------
    data : bytes or str
        Raw document; bytes are decoded as UTF-8 (a BOM is tolerated)
    label : str
        Name of the side being parsed, used in error messages

    Returns
    -------
    Any
        The parsed value; mapping key order follows the document

    Raises
    ------
    JsonParseError
        If the input is not valid UTF-8 or not valid JSON

    """
    if isinstance(data, (bytes, bytearray)):
        try:
            text = bytes(data).decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise JsonParseError(label, message=f"{label} document is not valid UTF-8", original_error=e) from e
    else:
        text = data

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise JsonParseError(label, line=e.lineno, column=e.colno, original_error=e) from e


def parse_container(text: str) -> ContainerParse:
    """Try to read ``text`` as a mapping, then as a sequence.

    Anything else, including malformed JSON, is reported as a result with
    ``kind=None`` rather than an exception.
    """
    stripped = text.strip()
    if not stripped or stripped[0] not in "{[":
        return ContainerParse(None)

    try:
        value = json.loads(stripped)
    except json.JSONDecodeError as e:
        logger.debug("Value is not recursable JSON (%s): %.40r", e.msg, stripped)
        return ContainerParse(None)

    kind = kind_of(value)
    if kind is JsonKind.MAPPING or kind is JsonKind.SEQUENCE:
        return ContainerParse(kind, value)
    return ContainerParse(None)


def iter_fields(document: Any) -> Iterator[tuple[str, Any]]:
    """Yield the top-level ``(key, value)`` pairs of a document.

    Sequence documents are keyed by their index as a string; scalar documents
    have no fields.
    """
    kind = kind_of(document)
    if kind is JsonKind.MAPPING:
        yield from document.items()
    elif kind is JsonKind.SEQUENCE:
        for index, item in enumerate(document):
            yield str(index), item


def get_field(document: Any, key: str) -> Any:
    """Look up a top-level field, returning :data:`MISSING` when absent."""
    kind = kind_of(document)
    if kind is JsonKind.MAPPING:
        return document.get(key, MISSING)
    if kind is JsonKind.SEQUENCE:
        if key.isascii() and key.isdecimal() and int(key) < len(document):
            return document[int(key)]
        return MISSING
    return MISSING


def _number_text(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)


def value_text(value: Any) -> str:
    """Render a value the way it appears in a diff line.

    Strings are unquoted, integral numbers drop their fractional part (so
    ``1`` and ``1.0`` render the same), and containers are JSON text with the
    document's key order.
    """
    kind = kind_of(value)
    if kind is JsonKind.STRING:
        return value
    if kind is JsonKind.NUMBER:
        return _number_text(value)
    if kind is JsonKind.BOOLEAN:
        return "true" if value else "false"
    if kind is JsonKind.NULL:
        return "null"
    if kind is JsonKind.MAPPING or kind is JsonKind.SEQUENCE:
        return json.dumps(value, ensure_ascii=False)
    raise ValueError(f"Unhandled JSON kind: {kind}")


def values_equal(a: Any, b: Any) -> bool:
    """Deep equality that never treats booleans as numbers."""
    kind = kind_of(a)
    if kind is not kind_of(b):
        return False
    if kind is JsonKind.MAPPING:
        return a.keys() == b.keys() and all(values_equal(a[key], b[key]) for key in a)
    if kind is JsonKind.SEQUENCE:
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    return a == b


def serialize(value: Any, indent: str = "") -> str | None:
    """Pretty-print a value as JSON for display.

    Continuation lines are prefixed with ``indent`` so nested blocks line up
    with the key that owns them.

    Returns
    -------
    str or None
        The JSON text, or None when the value cannot be represented
        (e.g. ``NaN`` read from lenient input)

    """
    try:
        text = json.dumps(value, indent=2, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        logger.warning("Cannot serialize value for display: %s", e)
        return None
    if indent:
        text = text.replace("\n", "\n" + indent)
    return text
