# emlvalidate/config/providers.py
from __future__ import annotations
import copy
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import json5

from emlvalidate.core.dictpath import deleteByPath, getByPath, setByPath

logger = logging.getLogger(__name__)

__all__ = ["ConfigProvider", "DefaultsProvider", "FileProvider", "OverrideProvider"]



def _readJson5Object(path: Path, owner: str) -> dict[str, Any]:
    """
    Parse a JSON5 file whose top level must be an object. An empty document counts as {}.

    Raises:
        TypeError: top level is not an object
        ValueError: the text is not JSON5 (json5 raises ValueError subclasses)
    """
    parsed = json5.loads(path.read_text(encoding="utf-8"))
    if parsed is None:
        return {}
    if not isinstance(parsed, Mapping):
        raise TypeError(f"{owner}: top level of '{path}' must be an object, got {type(parsed).__name__}")
    return dict(parsed)



class ConfigProvider:
    """A single config layer. ConfigStore asks the top-most layer first."""
    def get(self, key: str) -> Any | None:
        raise NotImplementedError

    def to_dict(self) -> dict[str, Any]:
        raise NotImplementedError



# ----------------------------------------------
#        Shipped defaults (read-only)
# ----------------------------------------------

class DefaultsProvider(ConfigProvider):
    """
    Bottom layer: the rule tables and settings that ship with the package.

    Pass exactly one of `data` (a mapping, mostly for tests) or `path`
    (a JSON5 file such as config/defaults/validator.json5).

    Raises:
        ValueError: both or neither of `data` and `path` given
        FileNotFoundError: `path` does not name a file
        TypeError: the content is not an object, or the file does not parse
    """
    def __init__(self, data: Mapping[str, Any] | None = None, *, path: Path | str | None = None) -> None:
        owner = type(self).__name__
        if (data is None) == (path is None):
            raise ValueError(f"{owner}: pass exactly one of 'data' or 'path'")

        if data is not None:
            if not isinstance(data, Mapping):
                raise TypeError(f"{owner}: 'data' must be a mapping, got {type(data).__name__}")
            self._data = copy.deepcopy(dict(data))
            return

        defaultsPath = Path(path)  # type: ignore[arg-type]
        if not defaultsPath.is_file():
            raise FileNotFoundError(f"{owner}: shipped defaults '{defaultsPath}' are missing")
        try:
            self._data = _readJson5Object(defaultsPath, owner)
        except ValueError as err:
            raise TypeError(f"{owner}: cannot parse shipped defaults '{defaultsPath}': {err}") from err

    def get(self, key: str) -> Any | None:
        return getByPath(self._data, key, None)

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self._data)



# ----------------------------------------------
#        User config file (read-only)
# ----------------------------------------------

class FileProvider(ConfigProvider):
    """
    Middle layer: a user's JSON5 file (--config or $EMLVALIDATE_CONFIG).

    With strict=False a missing file is an empty layer and a file that does not
    parse is logged and ignored. With strict=True both raise (FileNotFoundError,
    ValueError). A directory or a non-object top level always raises.
    """
    def __init__(self, path: str | Path, *, strict: bool = False) -> None:
        self.path = Path(path)
        self.strict = strict
        self._data = self._read()

    def _read(self) -> dict[str, Any]:
        owner = type(self).__name__
        if not self.path.exists():
            if self.strict:
                raise FileNotFoundError(f"{owner}: config file '{self.path}' does not exist")
            logger.debug("%s: no config file at '%s', layer is empty", owner, self.path)
            return {}
        if not self.path.is_file():
            raise IsADirectoryError(f"{owner}: config path '{self.path}' is not a file")

        try:
            data = _readJson5Object(self.path, owner)
        except ValueError as err:
            if self.strict:
                raise ValueError(f"{owner}: cannot parse '{self.path}': {err}") from err
            logger.warning("%s: ignoring '%s', it does not parse: %s", owner, self.path, err)
            return {}

        logger.debug("%s: '%s' sets %s", owner, self.path, sorted(data))
        return data

    def get(self, key: str) -> Any | None:
        return getByPath(self._data, key, None)

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self._data)



# ----------------------------------------------
#        Runtime overrides (in-memory)
# ----------------------------------------------

class OverrideProvider(ConfigProvider):
    """
    Top layer for CLI flags and tests. Keys are dotted paths
    ({"logging.level": "DEBUG"}); setting a key to None removes it.
    """
    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = {}
        for key, value in (data or {}).items():
            self.set(key, value)

    def get(self, key: str) -> Any | None:
        return getByPath(self._data, key, None)

    def set(self, key: str, value: Any) -> None:
        if value is None:
            deleteByPath(self._data, key)
        else:
            setByPath(self._data, key, copy.deepcopy(value))

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self._data)
