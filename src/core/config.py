"""Settings read from the environment (with defaults good enough for local development)."""

import logging
import os

DATABASE_URL = os.getenv("QUORIDOR_DATABASE_URL", "sqlite:///./quoridor.db")
DB_ECHO = os.getenv("QUORIDOR_DB_ECHO", "false").lower() == "true"
LOG_LEVEL = os.getenv("QUORIDOR_LOG_LEVEL", "INFO").upper()

# every module logs through logging.getLogger(__name__), so they all hang below this one
PACKAGE_LOGGER = "src"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Call once from the entrypoint of the application. Library code only ever asks for a logger."""
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger(PACKAGE_LOGGER).setLevel(level.upper())
