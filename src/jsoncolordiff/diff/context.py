#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jsoncolordiff/diff/context.py
"""Find one unchanged field to show above a diff for orientation."""

from __future__ import annotations

import logging
from typing import AbstractSet, Any

from jsoncolordiff.diff.accessor import MISSING, JsonKind, kind_of, value_text, values_equal

logger = logging.getLogger(__name__)


def find_context_line(expected_doc: Any, actual_doc: Any, changed: AbstractSet[str]) -> str | None:
    """Return ``key:value`` for the first unchanged top-level field.

    The field must exist in both documents with equal values and must not be
    one of the ``changed`` keys. Fields are scanned in the expected document's
    order.

    Parameters
    ----------
    expected_doc : Any
        Parsed expected document
    actual_doc : Any
        Parsed actual document
    changed : set of str
        Keys that already appear in the diff

    Returns
    -------
    str or None
        The context line, or None when there is no candidate or either
        document is not a mapping

    """
    if kind_of(expected_doc) is not JsonKind.MAPPING or kind_of(actual_doc) is not JsonKind.MAPPING:
        return None

    for key, expected_value in expected_doc.items():
        if key in changed:
            continue
        actual_value = actual_doc.get(key, MISSING)
        if actual_value is not MISSING and values_equal(expected_value, actual_value):
            logger.debug("Using %r as context line", key)
            return f"{key}:{value_text(expected_value)}"

    return None
