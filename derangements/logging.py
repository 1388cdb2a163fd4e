import logging
import os


def get_logger(name):
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # WARNING for library usage, INFO for the command line
    # overridden by the DERANGEMENTS_LOG_LEVEL environment variable
    default_level = logging.WARNING
    if name.endswith(".main"):
        default_level = logging.INFO

    level_name = os.getenv("DERANGEMENTS_LOG_LEVEL", logging.getLevelName(default_level))
    try:
        level = getattr(logging, level_name.upper())
    except AttributeError:
        level = default_level

    logger.setLevel(level)
    return logger
