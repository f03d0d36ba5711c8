# emlvalidate/__init__.py
"""eml-validate - validation and scaffolding for Epic Mickey Launcher mod packages.

- **mods/**: manifest model, loader, validation pipeline, scaffolder, rule tables
- **config/**: layered JSON5 configuration (shipped defaults, user file, overrides)
- **core/**: error taxonomy, logging, JSON helpers, safe path resolution
"""

from emlvalidate.mods.manifest import ModInfo, ModManifest
from emlvalidate.mods.rules import ValidationRules, loadRules
from emlvalidate.mods.scaffold import generateProject
from emlvalidate.mods.validator import ModValidator, validateMod

__version__ = "0.2.0"

__all__ = [
    "ModInfo",
    "ModManifest",
    "ModValidator",
    "ValidationRules",
    "generateProject",
    "loadRules",
    "validateMod",
]
