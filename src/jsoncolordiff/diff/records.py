#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jsoncolordiff/diff/records.py
"""Shallow top-level comparison of two parsed documents.

Only top-level fields are inspected. A nested difference shows up here as the
whole field differing and is broken down later by the structural colorizer.
"""

from __future__ import annotations

from typing import Any, Iterable

from jsoncolordiff.diff.accessor import MISSING, get_field, iter_fields, value_text
from jsoncolordiff.types import DiffRecord, Sign


def shallow_diff(expected_doc: Any, actual_doc: Any) -> list[DiffRecord]:
    """Compare the top-level fields of two documents.

    Fields are compared by their rendered text (:func:`value_text`), not by
    deep value equality.

    Parameters
    ----------
    expected_doc : Any
        Parsed expected document
    actual_doc : Any
        Parsed actual document

    Returns
    -------
    list of DiffRecord
        For each expected field: one ``REMOVED`` record if it is missing from
        the actual document, or a ``REMOVED``/``ADDED`` pair if it differs.
        Then one ``ADDED`` record per actual field missing from the expected
        document.

    """
    records: list[DiffRecord] = []

    for key, expected_value in iter_fields(expected_doc):
        actual_value = get_field(actual_doc, key)
        expected_text = value_text(expected_value)
        if actual_value is MISSING:
            records.append(DiffRecord(Sign.REMOVED, key, expected_text))
            continue
        actual_text = value_text(actual_value)
        if expected_text != actual_text:
            records.append(DiffRecord(Sign.REMOVED, key, expected_text))
            records.append(DiffRecord(Sign.ADDED, key, actual_text))

    for key, actual_value in iter_fields(actual_doc):
        if get_field(expected_doc, key) is MISSING:
            records.append(DiffRecord(Sign.ADDED, key, value_text(actual_value)))

    return records


def changed_keys(records: Iterable[DiffRecord]) -> set[str]:
    """Return the keys named by a sequence of diff records."""
    return {record.path for record in records}
