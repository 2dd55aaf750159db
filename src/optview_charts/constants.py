# src/optview_charts/constants.py
from __future__ import annotations

from typing import Final

# ---------------------------------------------------------------------------
# opt-viewer summary list markers
# The summary block on an opt-viewer index page looks like:
#   <ul id='entries_summary'>
#   <li>LoadClobbered: 4661
#   <li>NoDefinition: 2361
#   </ul>
# Items are not closed; the next <li> (or </ul>) ends the previous one.
# ---------------------------------------------------------------------------
LIST_OPEN: Final = "<ul"
LIST_CLOSE: Final = "</ul>"
ITEM_OPEN: Final = "<li>"
ITEM_CLOSE: Final = "</li>"

# Separates counter name from its value inside one item
NAME_COUNT_SEP: Final = ":"

# Default output page (written to the current directory)
OUTPUT_FILENAME: Final = "index.html"

# Template fragments shipped inside the package
TEMPLATE_DIR: Final = "resources"
START_TEMPLATE: Final = "start_index.html"
END_TEMPLATE: Final = "end_index.html"

# Process exit codes (-128 wraps to 128 on POSIX)
EXIT_OK: Final = 0
EXIT_FAILURE: Final = 128
