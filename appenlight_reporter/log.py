# log.py - logger helper shared by the reporter modules
import logging

LOGGER_NAME = "appenlight_reporter"


def get_logger(name: str = LOGGER_NAME):
    logger = logging.getLogger(name)
    if not logger.handlers:
        # StreamHandler writes to stderr
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger
