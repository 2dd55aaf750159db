# src/optview_charts/core.py
from __future__ import annotations

from pathlib import Path

from .constants import OUTPUT_FILENAME
from .io.exports import write_index
from .io.templates import PageTemplates
from .parsing.select import parse_list
from .render import render_page
from .types import Record
from .utils.logging import get_logger

log = get_logger(__name__)


def convert_text(
    text: str, templates: PageTemplates | None = None
) -> tuple[list[Record], str]:
    """Parse an opt-viewer summary page; return the marked records and the chart page."""
    records = parse_list(text)
    return records, render_page(records, templates)


def convert_html(text: str, templates: PageTemplates | None = None) -> str:
    """Turn an opt-viewer summary page into the chart page (pure, no I/O)."""
    return convert_text(text, templates)[1]


def convert_file(input_path: Path, out_path: Path = Path(OUTPUT_FILENAME)) -> list[Record]:
    """
    Read `input_path`, write the chart page to `out_path` and return the
    marked records.

    Raises FileNotFoundError for a missing input, ParseError for a malformed
    count and OSError when the output cannot be written.
    """
    if not input_path.exists():
        raise FileNotFoundError(input_path)
    records, html = convert_text(input_path.read_text(encoding="utf-8"))
    write_index(html, out_path)
    log.debug("Wrote %d records from %s to %s", len(records), input_path, out_path)
    return records
