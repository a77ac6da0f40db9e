"""Logging configuration for the market server."""

import logging
import sys

import config


def setup_logger(name):
    """Set up and return a logger with the specified name."""
    logger = logging.getLogger(name)
    logger.setLevel(config.LOG_LEVEL)

    # uvicorn --reload re-imports modules; don't stack handlers
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(config.LOG_LEVEL)
        handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
        logger.addHandler(handler)

    return logger
