import logging
import os

LOG_LEVEL = os.environ.get("LOG_LEVEL", "info")

LOGGING_FORMAT = "[{asctime}|{filename}:{funcName}:{lineno:d}]{levelname}  {message}"


def setup_logger(level: str | None = None) -> logging.Logger:
    """Attach a console handler to the root logger.

    Args:
        level: Level name ('debug', 'info', ...). Defaults to the LOG_LEVEL env var.
    """
    logger = logging.getLogger()

    logging_level = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
    }.get((level or LOG_LEVEL).lower(), logging.INFO)

    formatter = logging.Formatter(LOGGING_FORMAT, style="{", datefmt="%H:%M:%S")

    # Create a handler for console output
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    # Replace whatever handlers were installed before
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(console_handler)
    logger.setLevel(logging_level)

    return logger
