# emlvalidate/core/logging/formatters.py
from __future__ import annotations

import logging

from emlvalidate.core.jsonutils import safeJsonDumps, serializeError
from .context import getLogContext

__all__ = ["DevFormatter", "JsonFormatter"]

# Context keys shown by DevFormatter, in display order
_DEV_CONTEXT_KEYS = ("modRoot", "stage")



class JsonFormatter(logging.Formatter):
    """One JSON object per line, for CI logs and other tooling."""
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": int(record.created * 1000),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
            "ctx": getLogContext() or {},
        }
        if record.exc_info and record.exc_info[1] is not None:
            payload["exc"] = serializeError(record.exc_info[1])
            payload["exc"]["stack"] = self.formatException(record.exc_info)
        return safeJsonDumps(payload)



class DevFormatter(logging.Formatter):
    """`LEVEL: [logger] message [modRoot/stage]` for people reading stderr."""
    def format(self, record: logging.LogRecord) -> str:
        line = f"{record.levelname}: [{record.name}] {record.getMessage()}"

        ctx = getLogContext() or {}
        shown = [str(ctx[key]) for key in _DEV_CONTEXT_KEYS if ctx.get(key)]
        if shown:
            line += f" [{'/'.join(shown)}]"

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        if record.stack_info:
            line += "\n" + self.formatStack(record.stack_info)
        return line
