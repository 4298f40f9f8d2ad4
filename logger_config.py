import logging
from logging.handlers import RotatingFileHandler

from app.config import settings


def setup_logger(name, log_file=None, level=None):
    """
    Set up a logger with the specified name and configuration.

    Args:
        name (str): Name of the logger
        log_file (str, optional): Path to the log file. If None, uses LOG_FILE from settings;
            an empty value disables file logging
        level (str, optional): Logging level. If None, uses LOG_LEVEL from settings

    Returns:
        logging.Logger: Configured logger instance
    """
    log_file = settings.LOG_FILE if log_file is None else log_file
    log_level = level or settings.LOG_LEVEL

    # Create logger
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Handlers are attached once per logger name
    if logger.handlers:
        return logger

    # Create formatters
    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    console_formatter = logging.Formatter("%(levelname)s: %(message)s")

    # Create and configure file handler
    if log_file:
        file_handler = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5  # 10MB
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    # Create and configure console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    # Reduce noise from the Google client libraries
    for noisy in ["googleapiclient.discovery_cache", "google_auth_httplib2"]:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return logger
