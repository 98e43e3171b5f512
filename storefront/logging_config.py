"""Logging setup for the storefront service."""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_HANDLER_NAME = "storefront-stream"


def configure_logging(level: str = "INFO") -> None:
    """Attach one stream handler to the ``storefront`` logger.

    Safe to call more than once; later calls only adjust the level.
    """
    root = logging.getLogger("storefront")
    root.setLevel(level)
    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
