# core/log.py
import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str = "raytracer", level=None) -> logging.Logger:
    """Return a logger with a single stderr handler attached."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(level)
    return logger


def child_logger(module: str) -> logging.Logger:
    """Module loggers propagate to the 'raytracer' root configured above."""
    return logging.getLogger(f"raytracer.{module}")
