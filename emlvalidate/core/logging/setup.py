# emlvalidate/core/logging/setup.py
from __future__ import annotations
import logging
import sys

from emlvalidate.config.service import config, configBool
from .formatters import DevFormatter, JsonFormatter

__all__ = [
    "ROOT_LOGGER_NAME",
    "configureLogging",
]

ROOT_LOGGER_NAME = "emlvalidate"

# Marks handlers installed by configureLogging so reconfiguring replaces only ours
_HANDLER_FLAG = "_emlvalidateHandler"



def _resolveLevel(level: int | str | None) -> int:
    if level is None:
        level = config("logging.level", "WARNING")
    if isinstance(level, int):
        return level
    # Resolve level string like "INFO" → logging.INFO, fallback safe
    return getattr(logging, str(level).strip().upper(), logging.WARNING)



def configureLogging(level: int | str | None = None, *, json: bool | None = None, stream=None) -> logging.Logger:
    """
    Attach a single console handler to the "emlvalidate" logger.

      - level: explicit level, else config "logging.level"
      - json:  JSON lines instead of the dev format, else config "logging.json"
      - stream: defaults to stderr so stdout stays clean for --json output

    Safe to call repeatedly; previously installed handlers are replaced.
    """
    rootLevel = _resolveLevel(level)
    useJson = configBool("logging.json", False) if json is None else bool(json)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            logger.removeHandler(handler)
    logger.setLevel(rootLevel)
    logger.propagate = False

    consoleHandler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    consoleHandler.setLevel(rootLevel)
    consoleHandler.setFormatter(JsonFormatter() if useJson else DevFormatter())
    setattr(consoleHandler, _HANDLER_FLAG, True)
    logger.addHandler(consoleHandler)
    return logger
