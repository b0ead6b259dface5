"""Logging setup driven by Settings.log_level."""

import logging

from account_service.infrastructure.config.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """
    Configure the package logger once per process.

    Only the ``account_service`` logger tree is touched so that the
    server (uvicorn) keeps control of its own loggers.
    """
    logger = logging.getLogger("account_service")
    logger.setLevel(settings.log_level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
