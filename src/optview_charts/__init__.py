"""
optview_charts package.
"""

from .core import convert_file, convert_html, convert_text
from .parsing.lists import ParseError, extract_records
from .parsing.select import mark_largest, parse_list
from .render import render_page
from .types import Record

__all__ = [
    "ParseError",
    "Record",
    "convert_file",
    "convert_html",
    "convert_text",
    "extract_records",
    "mark_largest",
    "parse_list",
    "render_page",
]
__version__ = "0.1.0"
