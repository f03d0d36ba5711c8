# tests/conftest.py
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import pytest

from emlvalidate.config.service import CONFIG_ENV_VAR, resetConfig
from emlvalidate.core.logging import ROOT_LOGGER_NAME, clearLogContext
from emlvalidate.mods.rules import ValidationRules, loadRules



def pytest_configure(config: pytest.Config) -> None:
    if sys.flags.optimize:
        raise RuntimeError("Assertions are disabled (optimize > 0)")



@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    # Every test starts from the shipped defaults, whatever the developer's environment says
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    resetConfig()
    yield
    resetConfig()
    clearLogContext()
    # configureLogging() (CLI runs) detaches the package logger from caplog; undo it
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True



@pytest.fixture()
def rules() -> ValidationRules:
    return loadRules()



def write_mod(root: Path, manifest: dict[str, Any] | str, files: dict[str, str | None] | None = None) -> Path:
    """
    Create a mod directory. `files` maps relative paths to text content;
    None creates a directory instead of a file.
    """
    root.mkdir(parents=True, exist_ok=True)
    text = manifest if isinstance(manifest, str) else json.dumps(manifest)
    (root / "mod.json").write_text(text, encoding="utf-8")
    for relPath, content in (files or {}).items():
        target = root / relPath
        if content is None:
            target.mkdir(parents=True, exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
    return root



@pytest.fixture()
def make_mod(tmp_path):
    """
    Factory building a valid EM2/WII mod with icon.png; keyword overrides patch the manifest
    (pass None to drop a key).
    """
    counter = {"n": 0}

    def _make(files: dict[str, str | None] | None = None, **overrides: Any) -> Path:
        counter["n"] += 1
        manifest: dict[str, Any] = {
            "name": "Test",
            "game": "em2",
            "platform": "wii",
            "icon_path": "icon.png",
        }
        for key, value in overrides.items():
            if value is None:
                manifest.pop(key, None)
            else:
                manifest[key] = value
        allFiles: dict[str, str | None] = {"icon.png": "png"}
        allFiles.update(files or {})
        return write_mod(tmp_path / f"mod{counter['n']}", manifest, allFiles)

    return _make
