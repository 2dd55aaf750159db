# src/optview_charts/render.py
"""
Serialize Records into Highcharts point literals and splice them into the
page templates.

A record becomes ``{name: "<name>", y: <count>, sliced: <true|false>}``.
Names go through json.dumps so quotes, backslashes and control characters
are escaped. The literal lands inside a <script> element, so ``</`` and
``<!`` are also broken up, and U+2028/U+2029 are written as escapes.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Final

from .io.templates import PageTemplates, load_templates
from .types import Record

__all__ = ["quote_name", "record_to_literal", "records_to_literals", "render_page"]


# Sequences that must not appear raw inside <script>
_SCRIPT_ESCAPES: Final = (
    ("</", "<\\/"),
    ("<!", "\\u003c!"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


def quote_name(name: str) -> str:
    """Return `name` as a double-quoted JS string literal safe inside <script>."""
    out = json.dumps(name, ensure_ascii=False)
    for raw, esc in _SCRIPT_ESCAPES:
        out = out.replace(raw, esc)
    return out


def record_to_literal(record: Record) -> str:
    sliced = "true" if record.is_largest else "false"
    return f"{{name: {quote_name(record.name)}, y: {record.count}, sliced: {sliced}}}"


def records_to_literals(records: Iterable[Record]) -> str:
    """Comma-join record literals in order; empty input gives ''."""
    return ",".join(record_to_literal(r) for r in records)


def render_page(records: Iterable[Record], templates: PageTemplates | None = None) -> str:
    """prefix + joined literals + suffix, with no extra separators."""
    tpl = templates or load_templates()
    return tpl.prefix + records_to_literals(records) + tpl.suffix
