from __future__ import annotations

import logging

_PACKAGE = "optview_charts"
_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return a logger under the package namespace.

    Without a name, the package root logger is returned (the CLI adjusts its
    level). A stderr handler is attached to the root logger once.
    """
    root = logging.getLogger(_PACKAGE)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    if name is None or name == _PACKAGE:
        return root
    return logging.getLogger(name)
