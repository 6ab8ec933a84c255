import logging

import uvicorn

from sandbox_relay.core.config import get_settings
from sandbox_relay.core.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    logger.info("Starting relay on %s:%s (upstream %s)", settings.HOST, settings.PORT, settings.OPENAI_ENDPOINT)
    # uvicorn reports the bound address itself once listening
    uvicorn.run(
        "sandbox_relay.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
