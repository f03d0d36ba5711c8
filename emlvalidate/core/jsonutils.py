# emlvalidate/core/jsonutils.py
from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum
from pathlib import PurePath
from typing import Any

__all__ = ["safeJsonDumps", "prettyJsonDumps", "serializeError", "toJsonable"]



def toJsonable(obj: Any) -> Any:
    """
    Reduces validator values to plain JSON types.

    pydantic models dump in JSON mode without None fields, paths become strings,
    enums their value, sets become sorted lists and exceptions go through
    serializeError(). Anything else is represented by repr().
    """
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj
    if hasattr(obj, "model_dump") and not isinstance(obj, type):
        return obj.model_dump(mode="json", exclude_none=True)
    if isinstance(obj, BaseException):
        return serializeError(obj)
    if isinstance(obj, Enum):
        return toJsonable(obj.value)
    if isinstance(obj, PurePath):
        return str(obj)
    if isinstance(obj, Mapping):
        return {str(key): toJsonable(value) for key, value in obj.items()}
    if isinstance(obj, (set, frozenset)):
        return sorted((toJsonable(value) for value in obj), key=repr)
    if isinstance(obj, (list, tuple)):
        return [toJsonable(value) for value in obj]
    return repr(obj)



def safeJsonDumps(obj: Any) -> str:
    """
    Compact single-line JSON (log records). Never raises on odd values: the
    payload is reduced with toJsonable() first when plain encoding fails.
    """
    try:
        return json.dumps(obj, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
    except (TypeError, ValueError):
        return json.dumps(toJsonable(obj), ensure_ascii=False, separators=(",", ":"), default=repr)



def prettyJsonDumps(obj: Any) -> str:
    """Indented, newline-terminated JSON for mod.json and terminal output."""
    return json.dumps(toJsonable(obj), ensure_ascii=False, allow_nan=False, indent=2) + "\n"



def serializeError(err: BaseException | str | None) -> dict[str, Any]:
    """
    Structured view of a failure for JSON output.

        EmptyNameError()  -> {"type": "EmptyNameError", "message": "mod name is empty.", "attrs": {}}
        "text"            -> {"message": "text"}
        None              -> {}
    """
    if err is None:
        return {}
    if isinstance(err, str):
        return {"message": err}

    # emlvalidate.core.errors keep their inputs as public attributes
    attrs = {key: toJsonable(value) for key, value in vars(err).items() if not key.startswith("_")}
    return {"type": type(err).__name__, "message": str(err), "attrs": attrs}
