"""
Process entrypoint - boots the embedded uvicorn server.

Usage:

    homepage --host 0.0.0.0 --port 8080

Command-line arguments are handed to the settings layer unchanged.
"""

import logging
import sys
from collections.abc import Sequence

import uvicorn

from src.api.main import create_app
from src.config.settings import load_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Configure root logging for the process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def main(argv: Sequence[str] | None = None) -> None:
    """
    Start the application and serve until terminated.

    Startup failures (e.g. port already bound) are fatal; uvicorn exits
    the process with a non-zero status.
    """
    if argv is None:
        argv = sys.argv[1:]
    settings = load_settings(argv)
    configure_logging(settings.log_level)

    print("Our application is running!")
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
