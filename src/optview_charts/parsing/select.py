from __future__ import annotations

from ..types import Record
from ..utils.logging import get_logger
from .lists import extract_records

__all__ = ["select_largest", "mark_largest", "parse_list"]

log = get_logger(__name__)


def select_largest(records: list[Record]) -> int | None:
    """
    Index of the record with the greatest count, or None for an empty list.

    Only a strictly greater count replaces the candidate, so ties go to the
    earliest record.
    """
    best: int | None = None
    for i, rec in enumerate(records):
        if best is None or rec.count > records[best].count:
            best = i
    return best


def mark_largest(records: list[Record]) -> list[Record]:
    """Flag the largest record (and only that one). Empty input is a no-op."""
    idx = select_largest(records)
    for i, rec in enumerate(records):
        rec.is_largest = i == idx
    if idx is not None:
        log.debug("Largest counter: %s (%d)", records[idx].name, records[idx].count)
    return records


def parse_list(text: str) -> list[Record]:
    """Extract the summary list from `text` and flag its largest entry."""
    return mark_largest(extract_records(text))
