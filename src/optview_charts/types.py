from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Record:
    """One named counter from the summary list."""
    name: str
    count: int
    is_largest: bool = False
