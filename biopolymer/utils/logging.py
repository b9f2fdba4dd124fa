"""Centralized logging helpers."""

from __future__ import annotations

import logging
from typing import Final

_LOGGER_NAME: Final = "biopolymer"
_FORMAT: Final = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def get_logger(component: str | None = None, level: int | str | None = None) -> logging.Logger:
    """Return the ``biopolymer`` logger (or a child), attaching a stream handler once.

    Library modules log through ``logging.getLogger(__name__)`` and never
    configure handlers themselves. Entry points call this instead.
    """
    root = logging.getLogger(_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    if level is not None:
        root.setLevel(level.upper() if isinstance(level, str) else level)
    return root.getChild(component) if component else root
