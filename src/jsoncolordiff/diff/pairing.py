#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jsoncolordiff/diff/pairing.py
"""Group diff records into renderable segments.

A removed record immediately followed by an added record for the same key is
a candidate for structural recursion. Each side's text is read back with
:func:`parse_container`; when both sides are mappings, or both are sequences,
the pair becomes a :class:`StructuralPair`. Everything else is rendered as
literal diff lines.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Container, Sequence, Union

from jsoncolordiff.diff.accessor import JsonKind, parse_container
from jsoncolordiff.types import DiffRecord, Sign

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LiteralLine:
    """A diff record rendered as a single colored line.

    ``partner`` is the opposite-sign record next to this one, used to
    highlight only the differing words. Noised lines are rendered without
    color.
    """

    record: DiffRecord
    partner: DiffRecord | None = None
    noised: bool = False


@dataclass(frozen=True)
class StructuralPair:
    """A changed field whose two sides are containers of the same kind."""

    key: str
    kind: JsonKind
    expected: Any
    actual: Any


Segment = Union[LiteralLine, StructuralPair]


def classify_pair(removed: DiffRecord, added: DiffRecord) -> StructuralPair | None:
    """Return a :class:`StructuralPair` when both values are like containers.

    Returns None when the keys differ, either side is not a container, or
    the two sides have different shapes.
    """
    if removed.path != added.path:
        return None

    expected = parse_container(removed.value)
    actual = parse_container(added.value)
    if not expected.is_container or expected.kind is not actual.kind:
        logger.debug("Field %r is not recursable (%s vs %s)", removed.path, expected.kind, actual.kind)
        return None

    return StructuralPair(removed.path, expected.kind, expected.value, actual.value)


def pair_records(records: Sequence[DiffRecord], noise: Container[str] = frozenset()) -> list[Segment]:
    """Turn shallow diff records into segments in their original order.

    Parameters
    ----------
    records : sequence of DiffRecord
        Output of :func:`~jsoncolordiff.diff.records.shallow_diff`
    noise : container of str, optional
        Keys whose lines are always emitted plain, even when they could be
        compared structurally

    Returns
    -------
    list of Segment
        Each record appears in exactly one segment

    """
    segments: list[Segment] = []
    index = 0

    while index < len(records):
        record = records[index]
        following = records[index + 1] if index + 1 < len(records) else None

        if record.path in noise:
            segments.append(LiteralLine(record, noised=True))
            index += 1
            continue

        if (
            record.sign is Sign.REMOVED
            and following is not None
            and following.sign is Sign.ADDED
            and following.path not in noise
        ):
            pair = classify_pair(record, following)
            if pair is not None:
                segments.append(pair)
            else:
                segments.append(LiteralLine(record, partner=following))
                segments.append(LiteralLine(following, partner=record))
            index += 2
            continue

        segments.append(LiteralLine(record))
        index += 1

    return segments
