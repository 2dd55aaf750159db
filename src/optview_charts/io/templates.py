# src/optview_charts/io/templates.py
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from importlib.resources import files

from ..constants import END_TEMPLATE, START_TEMPLATE, TEMPLATE_DIR

__all__ = ["PageTemplates", "load_templates"]


@dataclass(frozen=True, slots=True)
class PageTemplates:
    """Fixed page text placed before and after the serialized records."""
    prefix: str
    suffix: str


def _read_resource(name: str) -> str:
    res = files("optview_charts").joinpath(TEMPLATE_DIR).joinpath(name)
    return res.read_text(encoding="utf-8")


@lru_cache(maxsize=1)
def load_templates() -> PageTemplates:
    """Load the packaged Highcharts page fragments (once per process)."""
    return PageTemplates(
        prefix=_read_resource(START_TEMPLATE),
        suffix=_read_resource(END_TEMPLATE),
    )
