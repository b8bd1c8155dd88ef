"""
Logging setup for the Standoff backend.

Modules log through ``logging.getLogger(__name__)``; this only configures
the root handler once per process.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger with a console handler.

    Safe to call more than once; later calls only adjust the level.
    """
    global _configured

    root = logging.getLogger()
    if not _configured:
        logging.basicConfig(
            level=level.upper(),
            format=LOG_FORMAT,
            handlers=[logging.StreamHandler()],
        )
        _configured = True
    root.setLevel(level.upper())
