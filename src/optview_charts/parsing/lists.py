# src/optview_charts/parsing/lists.py
"""
Summary-list extraction by positional text scanning.

The input is not parsed as HTML: we locate the first ``<ul ...>`` ...
``</ul>`` span and peel ``<li>`` items off it one at a time. Each item is
expected to read ``<name>: <integer>``.

Public API:
    - find_list_region(text) -> str | None
    - ItemCursor(region)
    - parse_payload(payload) -> Record | None
    - parse_list_item(text) -> tuple[Record | None, str] | None
    - iter_records(region) -> Iterator[Record]
    - extract_records(text) -> list[Record]
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import Final

from ..constants import ITEM_CLOSE, ITEM_OPEN, LIST_CLOSE, LIST_OPEN, NAME_COUNT_SEP
from ..types import Record
from ..utils.logging import get_logger

__all__ = [
    "ParseError",
    "ItemCursor",
    "find_list_region",
    "parse_payload",
    "parse_list_item",
    "iter_records",
    "extract_records",
]

log = get_logger(__name__)

# Optional sign + ASCII digits only (int() alone would also take "1_000", "٣")
_COUNT_RE: Final = re.compile(r"[+-]?[0-9]+")


class ParseError(ValueError):
    """A list item whose count is not an integer."""

    def __init__(self, name: str, text: str) -> None:
        super().__init__(f"malformed entry for counter `{name}`")
        self.name = name
        self.text = text


def find_list_region(text: str) -> str | None:
    """
    Return the text from the first list-open marker up to (not including) the
    first list-close marker, or None if either is missing.

    The returned span still starts with the opening marker. Nested lists are
    not supported: the first ``</ul>`` ends the region.
    """
    start = text.find(LIST_OPEN)
    if start < 0:
        return None
    end = text.find(LIST_CLOSE)
    if end < start:
        # missing, or a stray close before the list opens
        return None
    return text[start:end]


class ItemCursor:
    """
    Walks a list region item by item without re-scanning consumed text.

    Each call to ``next_payload`` returns the text between one ``<li>`` and
    the next (or the end of the region for the terminal item).
    """

    __slots__ = ("_text", "_pos")

    def __init__(self, region: str) -> None:
        self._text = region
        self._pos = region.find(ITEM_OPEN)

    @property
    def rest(self) -> str:
        """Unconsumed text, starting at the next item marker (or empty)."""
        if self._pos < 0:
            return ""
        return self._text[self._pos :]

    def next_payload(self) -> str | None:
        if self._pos < 0:
            return None
        start = self._pos + len(ITEM_OPEN)
        nxt = self._text.find(ITEM_OPEN, start)
        end = len(self._text) if nxt < 0 else nxt
        self._pos = nxt
        return self._text[start:end]

    def __iter__(self) -> Iterator[str]:
        while (payload := self.next_payload()) is not None:
            yield payload


def parse_payload(payload: str) -> Record | None:
    """
    Turn one item payload into a Record.

    Returns None (and logs a warning) when the payload has no colon or an
    empty name.
    Raises ParseError when the text after the colon is not an integer.
    """
    body = payload.strip()
    if body.endswith(ITEM_CLOSE):
        body = body[: -len(ITEM_CLOSE)]

    name, sep, value = body.partition(NAME_COUNT_SEP)
    if not sep:
        log.warning("Skipping list item without '%s': %r", NAME_COUNT_SEP, body)
        return None

    name = name.strip()
    value = value.strip()
    if not name:
        log.warning("Skipping list item with an empty name: %r", body)
        return None
    if not _COUNT_RE.fullmatch(value):
        raise ParseError(name, value)
    return Record(name=name, count=int(value))


def parse_list_item(text: str) -> tuple[Record | None, str] | None:
    """
    Peel the first item off `text`.

    Returns (record, rest) where `rest` starts at the following item marker;
    `record` is None if the item was dropped. Returns None when no item
    marker remains.
    """
    cursor = ItemCursor(text)
    payload = cursor.next_payload()
    if payload is None:
        return None
    return parse_payload(payload), cursor.rest


def iter_records(region: str) -> Iterator[Record]:
    """Yield Records from a list region in source order."""
    for payload in ItemCursor(region):
        rec = parse_payload(payload)
        if rec is not None:
            yield rec


def extract_records(text: str) -> list[Record]:
    """Locate the summary list in `text` and return its (unmarked) Records."""
    region = find_list_region(text)
    if region is None:
        log.debug("No list region found")
        return []
    records = list(iter_records(region))
    log.debug("Extracted %d records", len(records))
    return records
