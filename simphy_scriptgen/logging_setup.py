import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send application logs to stdout at the requested level."""
    logging.basicConfig(
        stream=sys.stdout,
        level=level.upper(),
        format=LOG_FORMAT,
        force=True,
    )
