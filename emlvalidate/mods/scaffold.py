# emlvalidate/mods/scaffold.py
from __future__ import annotations
import logging
import os
from pathlib import Path

from emlvalidate.core.errors import (
    IncompatibleGamePlatformError,
    UnsupportedGameError,
    UnsupportedPlatformError,
)
from emlvalidate.mods.constants import MANIFEST_FILE_NAME
from emlvalidate.mods.manifest import ModInfo
from emlvalidate.mods.rules import ValidationRules, loadRules

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_MOD_NAME",
    "DEFAULT_SHORT_DESCRIPTION",
    "DEFAULT_ICON_PATH",
    "DEFAULT_TEXTURES_DIR",
    "DEFAULT_GAME_FILES_DIR",
    "DEFAULT_SCRIPTS_DIR",
    "buildDefaultModInfo",
    "generateProject",
]

DEFAULT_MOD_NAME = "Auto Generated Mod"
DEFAULT_SHORT_DESCRIPTION = "Generated with eml-validate"
DEFAULT_ICON_PATH = "icon.png"
DEFAULT_TEXTURES_DIR = "textures"
DEFAULT_GAME_FILES_DIR = "games"
DEFAULT_SCRIPTS_DIR = "scripts"



def buildDefaultModInfo(game: str, platform: str, rules: ValidationRules) -> ModInfo:
    """
    Default record for a (game, platform) pair. Pure: touches no files.

    Raises:
        UnsupportedGameError / UnsupportedPlatformError: unknown names
        IncompatibleGamePlatformError: forbidden pair
    """
    canonicalGame = rules.canonicalGame(game)
    if canonicalGame is None:
        raise UnsupportedGameError(game, list(rules.games))
    canonicalPlatform = rules.canonicalPlatform(platform)
    if canonicalPlatform is None:
        raise UnsupportedPlatformError(platform, list(rules.platforms))
    if rules.isForbidden(canonicalGame, canonicalPlatform):
        raise IncompatibleGamePlatformError(canonicalGame, canonicalPlatform)

    return ModInfo(
        name=DEFAULT_MOD_NAME,
        game=canonicalGame,
        platform=canonicalPlatform,
        shortdescription=DEFAULT_SHORT_DESCRIPTION,
        custom_game_files_path=DEFAULT_GAME_FILES_DIR,
        custom_textures_path=DEFAULT_TEXTURES_DIR if rules.texturesAllowed(canonicalPlatform) else None,
        scripts_path=DEFAULT_SCRIPTS_DIR if rules.scriptsAllowed(canonicalGame, canonicalPlatform) else None,
        icon_path=DEFAULT_ICON_PATH,
    )



def generateProject(
    game: str,
    platform: str,
    outputDir: Path | str,
    *,
    rules: ValidationRules | None = None,
) -> ModInfo:
    """
    Create a mod skeleton in `outputDir` and write its mod.json.

    The pair is checked before anything is written. Directory creation is safe to
    repeat; an existing mod.json is overwritten and other content is left alone.
    The icon file itself is not created.
    """
    rules = rules if rules is not None else loadRules()
    info = buildDefaultModInfo(game, platform, rules)

    root = Path(outputDir)
    root.mkdir(parents=True, exist_ok=True)
    for relDir in (info.scripts_path, info.custom_game_files_path, info.custom_textures_path):
        if relDir:
            (root / relDir).mkdir(parents=True, exist_ok=True)

    manifestPath = root / MANIFEST_FILE_NAME
    tmpPath = manifestPath.with_suffix(manifestPath.suffix + ".tmp")
    tmpPath.write_text(info.toJson(), encoding="utf-8")
    os.replace(tmpPath, manifestPath)

    logger.info("Generated %s/%s mod skeleton at '%s'", info.game, info.platform, root)
    return info
