"""Standard library logging for route handlers and third-party libraries."""

import logging
import sys

from gate.config import Settings

# Libraries that log every request or pool checkout at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "asyncpg", "sqlalchemy.pool")


def setup_logging(settings: Settings) -> None:
    """Send ``gate`` logs to stdout at DEBUG or INFO.

    Args:
        settings: Application settings; ``debug`` selects the level
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("gate").setLevel(level)
    logging.getLogger(__name__).debug(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
