"""Contains logging related functionality."""

import logging
import logging.config
import typing
from pathlib import Path

import yaml

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def init_logging(filepath: Path) -> dict[str, typing.Any]:
    """Read logging config yaml file from `filepath` and apply it globally.

    :param filepath: Path to the logging configuration yaml file.
    :returns: The logging configuration as dict.
    :raises FileNotFoundError: If `filepath` does not exist.
    """
    if not filepath.exists():
        raise FileNotFoundError(f"Logging config not found: {filepath}")

    config: dict[str, typing.Any] = yaml.safe_load(filepath.read_text(encoding="utf-8"))
    logging.config.dictConfig(config)
    logging.getLogger(__name__).debug("Logging initialised from %s", filepath)
    return config


def enable_debug_logging(name: str = "typeresist") -> logging.Logger:
    """Raise logger `name` to DEBUG, attaching a stderr handler if nothing would emit its records.

    :param name: Name of the logger to raise.
    :returns: The raised logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    if not logger.hasHandlers():
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
