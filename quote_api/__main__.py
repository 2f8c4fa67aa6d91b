import logging

import uvicorn

from quote_api.core.config import settings
from quote_api.core.logging import configure_logging


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    logging.getLogger("quote_api").info("starting %s on %s:%s", settings.APP_NAME, settings.HOST, settings.PORT)
    uvicorn.run(
        "quote_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
