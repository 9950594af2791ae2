"""Logging setup for the command line application.

Logs go to stderr so they never mix with command output on stdout.
"""

from __future__ import annotations

import logging
import sys

_HANDLER_NAME = "storefront"


class _StderrHandler(logging.StreamHandler):
    """Always writes to whatever ``sys.stderr`` is at emit time."""

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def setup_logging(level: str = "WARNING") -> None:
    """Install the stderr handler once and set the root level."""
    root = logging.getLogger()
    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = _StderrHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
