"""
Logging setup: a dedicated stdout logger for SocialGenius, with the HTTP
client and provider SDK loggers held to the same level.
"""

import logging
import sys
from socialgenius.utils.config import config
from socialgenius.utils.constants import THIRD_PARTY_LOGGERS

APP_LOGGER_NAME = "socialgenius"


def configure_logging(level=config.log_level, log_format=config.log_format) -> logging.Logger:
    """
    Configure the application logger and cap third-party loggers.

    Safe to call more than once: existing handlers on the application
    logger are replaced, not stacked.
    """
    # Anything outside SocialGenius only reports errors
    logging.basicConfig(level=logging.ERROR, format=log_format, stream=sys.stdout)

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(level)

    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)

    app_handler = logging.StreamHandler(sys.stdout)
    app_handler.setFormatter(logging.Formatter(log_format))
    app_logger.addHandler(app_handler)
    app_logger.propagate = False

    for name in THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(level)

    return app_logger


configure_logging()

logger = logging.getLogger(__name__)
