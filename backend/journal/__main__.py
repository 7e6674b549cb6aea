import logging

import uvicorn

from journal.core.config import settings

logger = logging.getLogger("journal")


def main() -> None:
    from journal.main import app

    logger.info(
        "Workout journal started on http://%s:%s; press Ctrl-C to terminate.",
        settings.host,
        settings.port,
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
