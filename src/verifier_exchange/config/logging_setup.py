"""Process-wide logging setup"""

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging to stderr.

    Args:
        level: Log level name; defaults to $LOG_LEVEL, then INFO
    """
    logging.basicConfig(
        level=(level or os.getenv("LOG_LEVEL", "INFO")).upper(),
        stream=sys.stderr,
        format=LOG_FORMAT,
    )
