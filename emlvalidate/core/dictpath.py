# emlvalidate/core/dictpath.py
from __future__ import annotations
from typing import Any
from collections.abc import Mapping, MutableMapping

__all__ = ["getByPath", "setByPath", "deleteByPath", "deepMerge"]



def _splitPath(path: str) -> list[str]:
    """
    Splits a dotted config key like "rules.bannedExtensions" into segments.
    Backslash escapes the next character, so "a\\.b" addresses the literal key "a.b".
    """
    if not isinstance(path, str) or not path:
        raise ValueError("Path must be a non-empty string")
    parts: list[str] = []
    curr: list[str] = []
    esc = False
    for ch in path:
        if esc:
            curr.append(ch)
            esc = False
            continue
        if ch == "\\":
            esc = True
            continue
        if ch == ".":
            parts.append("".join(curr))
            curr = []
            continue
        curr.append(ch)
    if esc:
        raise ValueError("Path ends with a dangling escape (trailing backslash)")
    parts.append("".join(curr))
    if any(part == "" for part in parts):
        raise ValueError(f"Path '{path}' contains empty segment(s)")
    return parts



def getByPath(obj: Mapping[str, Any], path: str, default: Any | None = None) -> Any:
    """
    Returns the value at `path` or `default` when any hop is missing.
    Invalid paths are treated as "not found".
    """
    try:
        parts = _splitPath(path)
    except ValueError:
        return default

    current: Any = obj
    for part in parts:
        if isinstance(current, Mapping) and part in current:
            current = current[part]
            continue
        return default
    return current



def setByPath(obj: MutableMapping[str, Any], path: str, value: Any) -> None:
    """
    Sets `value` at `path`, creating intermediate dicts as needed.
    Raises TypeError when an intermediate hop exists but is not a mutable mapping.
    """
    parts = _splitPath(path)
    current: Any = obj
    for part in parts[:-1]:
        child = current.get(part)
        if child is None:
            child = {}
            current[part] = child
        elif not isinstance(child, MutableMapping):
            raise TypeError(f"Cannot descend into '{part}': {type(child).__name__} is not a mapping")
        current = child
    current[parts[-1]] = value



def deleteByPath(obj: MutableMapping[str, Any], path: str) -> bool:
    """
    Removes the value at `path` and prunes parents left empty.
    Returns True if something was removed.
    """
    parts = _splitPath(path)
    stack: list[tuple[MutableMapping[str, Any], str]] = []
    current: Any = obj
    for part in parts[:-1]:
        child = current.get(part) if isinstance(current, MutableMapping) else None
        if not isinstance(child, MutableMapping):
            return False
        stack.append((current, part))
        current = child

    last = parts[-1]
    if last not in current:
        return False
    del current[last]

    for parent, key in reversed(stack):
        if parent[key]:
            break
        del parent[key]
    return True



def deepMerge(base: Mapping[str, Any], top: Mapping[str, Any]) -> dict[str, Any]:
    """
    Merges `top` over `base` without mutating either.
    Nested mappings merge key by key; any other value (lists included) replaces.
    """
    out: dict[str, Any] = dict(base)
    for key, value in top.items():
        current = out.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            out[key] = deepMerge(current, value)
        else:
            out[key] = value
    return out
