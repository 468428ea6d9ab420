import logging

from stripe_mock.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None) -> logging.Logger:
    """Attach a console handler to the ``stripe_mock`` package logger.

    Module loggers created with ``logging.getLogger(__name__)`` propagate to it.
    Calling this more than once does not stack handlers.
    """
    logger = logging.getLogger("stripe_mock")
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)

    return logger
