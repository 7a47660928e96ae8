"""Logger hierarchy for featurecheck and its CLI sinks."""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "featurecheck"
CONSOLE_FORMAT = "[featurecheck] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``featurecheck.<name>``, or the root featurecheck logger."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def _attach(logger: logging.Logger, handler: logging.Handler, fmt: str) -> None:
    handler.setLevel(logger.level)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send featurecheck records to stderr, and to ``log_file`` when one is given.

    Calling this again replaces the handlers from the previous call.
    """
    logger = get_logger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(), CONSOLE_FORMAT)
    if log_file is not None:
        target = Path(log_file).expanduser()
        target.parent.mkdir(parents=True, exist_ok=True)
        _attach(logger, logging.FileHandler(target, encoding="utf-8"), FILE_FORMAT)
    return logger


__all__ = ["configure_logging", "get_logger"]
