from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
HANDLER_NAME = "termindex"


class StderrHandler(logging.StreamHandler):
    """Writes to whatever `sys.stderr` is at emit time, not at setup time."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def configure_logging(level: str | int = "INFO") -> None:
    """Send `termindex.*` records to stderr at `level`."""
    if isinstance(level, str):
        level = level.upper()
    root = logging.getLogger("termindex")
    root.setLevel(level)

    # replace our own handler on repeated calls; leave any others alone
    for h in list(root.handlers):
        if h.get_name() == HANDLER_NAME:
            root.removeHandler(h)
    handler = StderrHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
