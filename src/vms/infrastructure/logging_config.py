"""Logging setup shared by the CLI entry points."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Configure the root logger once; later calls only adjust the level."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=numeric, format=LOG_FORMAT)
    root.setLevel(numeric)
