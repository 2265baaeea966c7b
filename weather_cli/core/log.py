import logging
import sys

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """
    Route diagnostics to stderr so stdout only carries the report.

    Unknown level names fall back to WARNING.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING

    logging.basicConfig(
        format=LOG_FORMAT,
        level=numeric,
        stream=sys.stderr,
    )
