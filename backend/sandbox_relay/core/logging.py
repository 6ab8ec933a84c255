import logging

from sandbox_relay.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Loggers that follow LOG_LEVEL alongside the root logger
RELAY_LOGGERS = ("sandbox_relay", "uvicorn.error", "uvicorn.access")


def configure_logging(settings: Settings) -> int:
    """Root handler plus relay/uvicorn levels; returns the numeric level."""
    level = logging.getLevelName(settings.LOG_LEVEL)

    logging.basicConfig(level=level, format=LOG_FORMAT)
    for name in RELAY_LOGGERS:
        logging.getLogger(name).setLevel(level)

    return level
