"""
Process entry point: ``python -m sharelink``.

Configures logging from LOG_LEVEL and serves the app with uvicorn on
HOST:PORT.
"""

import logging

import uvicorn

from sharelink.core.setting import settings


def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info(f"App listening at port {settings.PORT}")
    uvicorn.run(
        "sharelink.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
