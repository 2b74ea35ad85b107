# server/logging_config.py

import logging


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

stream_handler = logging.StreamHandler()
stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach the stream handler to the root logger (once) and set the level."""
    logger = logging.getLogger()
    logger.setLevel(level.upper())

    if stream_handler not in logger.handlers:
        logger.addHandler(stream_handler)

    return logger
