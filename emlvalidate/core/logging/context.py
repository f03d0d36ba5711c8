# emlvalidate/core/logging/context.py
from __future__ import annotations
import contextvars
from collections.abc import Iterator
from contextlib import contextmanager

# modRoot/stage of the validation in progress; formatters append it to every record
_validationContext: contextvars.ContextVar[dict[str, object] | None] = contextvars.ContextVar(
    "emlvalidate.logctx", default=None,
)

def setLogContext(**values: object) -> None:
    """Merge values into the current context; None values are skipped."""
    merged = dict(_validationContext.get() or {})
    merged.update({key: value for key, value in values.items() if value is not None})
    _validationContext.set(merged)

def clearLogContext() -> None:
    _validationContext.set(None)

def getLogContext() -> dict[str, object] | None:
    return _validationContext.get()

@contextmanager
def boundLogContext(**values: object) -> Iterator[None]:
    """Context for the duration of a block; whatever was there before is restored on exit."""
    token = _validationContext.set({key: value for key, value in values.items() if value is not None})
    try:
        yield
    finally:
        _validationContext.reset(token)
