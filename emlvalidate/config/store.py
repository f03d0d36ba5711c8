# emlvalidate/config/store.py
from __future__ import annotations

from typing import Any

from emlvalidate.core.dictpath import deepMerge
from .providers import ConfigProvider

__all__ = ["ConfigStore"]



class ConfigStore:
    """
    Minimal layered config store:
      - read: first hit from the top-most provider down
      - effective(): providers deep-merged bottom to top
    """

    def __init__(self, *, namespace: str, providers: list[ConfigProvider]):
        self.namespace = namespace
        self._providers = list(providers)

    def get(self, key: str, default: Any | None = None) -> Any | None:
        for provider in reversed(self._providers): # Topmost first precedence
            value = provider.get(key)
            if value is not None:
                return value
        return default

    def effective(self) -> dict[str, Any]:
        merged: dict[str, Any] = {}
        for provider in self._providers:
            merged = deepMerge(merged, provider.to_dict())
        return merged

    def snapshot(self) -> dict[str, Any]:
        return {
            "namespace": self.namespace,
            "values": self.effective(),
            "layers": [provider.__class__.__name__ for provider in self._providers],
        }
