"""Logging setup.

Modules log through ``logging.getLogger(__name__)``; this only configures the
root handler and level once at startup.
"""
import logging

from .config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)
    logging.getLogger(__name__).debug("Logging configured")
