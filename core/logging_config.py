"""Logger setup for data provider components."""

import logging

LOG_FORMAT = '%(name)s: %(levelname)s %(message)s'


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Get a component logger writing leveled lines to stderr.

    The logger is configured once per name: the first call attaches the
    handler and sets the level, later calls return it unchanged.

    Args:
        name: Component prefix used as the logger name
        level: Logging level for the first configuration

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger
