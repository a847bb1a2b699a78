"""Logging setup for the server process."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ServerLogHandler(logging.StreamHandler):
    """Stream handler installed by configure_logging; recognised on repeated calls."""

    def __init__(self) -> None:
        super().__init__()
        self.setFormatter(logging.Formatter(LOG_FORMAT))


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger. Safe to call more than once."""
    root = logging.getLogger()
    root.setLevel(level)

    if not any(isinstance(handler, ServerLogHandler) for handler in root.handlers):
        root.addHandler(ServerLogHandler())
