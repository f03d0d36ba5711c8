# emlvalidate/config/service.py
from __future__ import annotations
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from emlvalidate.config.providers import ConfigProvider, DefaultsProvider, FileProvider, OverrideProvider
from emlvalidate.config.store import ConfigStore

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULTS_PATH", "CONFIG_ENV_VAR",
    "initConfig", "resetConfig", "getConfigStore",
    "config", "configBool",
]

DEFAULTS_PATH = Path(__file__).resolve().parent / "defaults" / "validator.json5"
CONFIG_ENV_VAR = "EMLVALIDATE_CONFIG"

# ------------------------------------------------------------------ #
# Module singleton
# ------------------------------------------------------------------ #

_CONFIG_STORE: ConfigStore | None = None



def initConfig(
    userPath: str | Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> ConfigStore:
    """
    Build the process-wide config store (replaces any previous one).

    Layers, bottom to top:
      1) shipped defaults (DEFAULTS_PATH)
      2) user file: `userPath`, else $EMLVALIDATE_CONFIG if set
      3) in-memory overrides (dotted keys, e.g. {"logging.level": "DEBUG"})

    An explicitly given user file must exist and parse; one coming from the
    environment is best-effort.
    """
    global _CONFIG_STORE

    providers: list[ConfigProvider] = [DefaultsProvider(path=DEFAULTS_PATH)]

    if userPath is not None:
        providers.append(FileProvider(userPath, strict=True))
    else:
        envPath = os.environ.get(CONFIG_ENV_VAR, "").strip()
        if envPath:
            providers.append(FileProvider(envPath, strict=False))

    providers.append(OverrideProvider(overrides))

    _CONFIG_STORE = ConfigStore(namespace="config:emlvalidate", providers=providers)
    logger.debug("Config initialized (layers=%s)", _CONFIG_STORE.snapshot()["layers"])
    return _CONFIG_STORE



def resetConfig() -> None:
    """Drop the process-wide store; the next access rebuilds it from defaults."""
    global _CONFIG_STORE
    _CONFIG_STORE = None



def getConfigStore() -> ConfigStore:
    global _CONFIG_STORE
    if _CONFIG_STORE is None:
        initConfig()
    assert _CONFIG_STORE is not None
    return _CONFIG_STORE



def config(key: str, default: Any | None = None) -> Any:
    return getConfigStore().get(key, default)



def configBool(key: str, default: bool = False) -> bool:
    value = config(key, None)
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)
