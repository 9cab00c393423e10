"""Logging setup for the gitwrap command line."""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING", format_string: str | None = None) -> logging.Logger:
    """Route log records to stderr at ``level``.

    Existing root handlers are replaced so repeated calls do not duplicate
    output. Stdout stays reserved for command output.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper()))
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    handler.setLevel(getattr(logging, level.upper()))
    root.addHandler(handler)

    return logging.getLogger("gitwrap")
