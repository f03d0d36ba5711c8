# emlvalidate/core/logging/__init__.py
from __future__ import annotations

from .context import boundLogContext, setLogContext, clearLogContext, getLogContext
from .formatters import DevFormatter, JsonFormatter
from .setup import ROOT_LOGGER_NAME, configureLogging

__all__ = [
    "ROOT_LOGGER_NAME",
    "configureLogging",
    "DevFormatter",
    "JsonFormatter",
    "boundLogContext",
    "setLogContext",
    "clearLogContext",
    "getLogContext",
]
