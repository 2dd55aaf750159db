from __future__ import annotations

from pathlib import Path


def write_index(html: str, out_path: Path) -> Path:
    """Write the whole page in one go. OS errors propagate to the caller."""
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(html, encoding="utf-8")
    return out_path
