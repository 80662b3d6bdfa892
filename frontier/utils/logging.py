"""Structured logging configuration."""

from __future__ import annotations

import logging
import sys

DIAGNOSTICS_LOGGER = "frontier.diagnostics"


def setup_logging(level: str = "INFO") -> None:
    """Configure root logger with a clean format for game output.

    The ``frontier.diagnostics`` channel (contract violations caught
    during round resolution) also goes to stderr at WARNING and above,
    whatever the root level.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)-5s] %(name)-28s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)

    diag_handler = logging.StreamHandler(sys.stderr)
    diag_handler.setLevel(logging.WARNING)
    diag_handler.setFormatter(formatter)

    diagnostics = logging.getLogger(DIAGNOSTICS_LOGGER)
    diagnostics.setLevel(logging.WARNING)
    diagnostics.handlers.clear()
    diagnostics.addHandler(diag_handler)
    diagnostics.propagate = False
