import logging

from interaction_kit.config import settings

LOGGER_NAME = "interaction_kit"


def configure_logging(level: str | None = None) -> logging.Logger:
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO))
    return logging.getLogger(LOGGER_NAME)
