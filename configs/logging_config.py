import logging
from typing import Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Configure the root logger with a single console handler.

    Args:
        level: numeric level or level name ("DEBUG", "INFO", ...)

    Returns:
        logging.Logger: the configured root logger
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # drop handlers from a previous call so messages are not duplicated
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module (usually called with __name__)."""
    return logging.getLogger(name)
