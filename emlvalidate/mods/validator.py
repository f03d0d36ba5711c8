# emlvalidate/mods/validator.py
from __future__ import annotations
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from emlvalidate.core.errors import (
    BannedFileExtensionError,
    CapabilityNotAllowedError,
    EmptyDescriptionError,
    EmptyNameError,
    EmptyPathError,
    IncompatibleGamePlatformError,
    InvalidDependencyNameError,
    PathNotFoundError,
    UnsupportedGameError,
    UnsupportedPlatformError,
)
from emlvalidate.core.logging import boundLogContext, setLogContext
from emlvalidate.core.paths import resolveSafe
from emlvalidate.mods.constants import (
    DESCRIPTION_FILE_NAME,
    FIELD_GAME_FILES,
    FIELD_ICON,
    FIELD_SCRIPTS,
    FIELD_TEXTURES,
    SHORT_DESCRIPTION_SENTINEL,
    TAG_GAMEFILE_MOD,
    TAG_SCRIPT_MOD,
    TAG_TEXTURE_MOD,
)
from emlvalidate.mods.loader import loadDescription, loadManifest
from emlvalidate.mods.manifest import ModInfo, ModManifest
from emlvalidate.mods.rules import ValidationRules, loadRules
from emlvalidate.mods.walk import fileExtension, iterModFiles

logger = logging.getLogger(__name__)

__all__ = [
    "ValidationStage",
    "ValidationContext",
    "ModValidator",
    "validateMod",
]



class ValidationStage(str, Enum):
    """Pipeline stages in execution order. The content scan is last: it is the only one that walks the tree."""
    IDENTITY = "identity"
    DESCRIPTION = "description"
    ENUMERATION = "enumeration"
    COMPATIBILITY = "compatibility"
    CAPABILITIES = "capabilities"
    ICON = "icon"
    DEPENDENCIES = "dependencies"
    CONTENT_SCAN = "contentScan"



@dataclass
class ValidationContext:
    """
    Mutable draft of one validation call. Stages read the manifest and fill in
    the normalized fields; nothing here outlives the call.
    """
    modRoot: Path
    manifest: ModManifest
    rules: ValidationRules

    name: str = ""
    game: str = ""
    platform: str = ""
    description: str = ""
    shortdescription: str = ""
    dependencies: list[str] = field(default_factory=list)
    customTexturesPath: str | None = None
    customGameFilesPath: str | None = None
    scriptsPath: str | None = None
    iconPath: str = ""
    # Copied into the record only after every stage passed
    tags: list[str] = field(default_factory=list)

    def toModInfo(self) -> ModInfo:
        return ModInfo(
            name=self.name,
            game=self.game,
            platform=self.platform,
            description=self.description,
            shortdescription=self.shortdescription,
            dependencies=list(self.dependencies),
            custom_textures_path=self.customTexturesPath,
            custom_game_files_path=self.customGameFilesPath,
            scripts_path=self.scriptsPath,
            icon_path=self.iconPath,
            auto_generated_tags=list(self.tags),
        )



StageFn = Callable[[ValidationContext], None]



# ------------------------------------------------------------------ #
# Stages
# ------------------------------------------------------------------ #

def checkIdentity(ctx: ValidationContext) -> None:
    if not ctx.manifest.name.strip():
        raise EmptyNameError()
    ctx.name = ctx.manifest.name



def resolveDescription(ctx: ValidationContext) -> None:
    """
    description.md wins over the inline description. When the manifest has no
    shortdescription and description.md exists, the sentinel is stored instead.
    """
    manifest = ctx.manifest
    noShortDescription = manifest.shortdescription is None
    if not noShortDescription:
        ctx.shortdescription = manifest.shortdescription.strip()

    ctx.description = manifest.description or ""

    longDescription = loadDescription(ctx.modRoot)
    if longDescription is None:
        return

    longDescription = longDescription.strip()
    if not longDescription:
        raise EmptyDescriptionError(str(ctx.modRoot / DESCRIPTION_FILE_NAME))

    ctx.description = longDescription
    if noShortDescription:
        ctx.shortdescription = SHORT_DESCRIPTION_SENTINEL



def checkEnumerations(ctx: ValidationContext) -> None:
    game = ctx.rules.canonicalGame(ctx.manifest.game)
    if game is None:
        raise UnsupportedGameError(ctx.manifest.game, list(ctx.rules.games))

    platform = ctx.rules.canonicalPlatform(ctx.manifest.platform)
    if platform is None:
        raise UnsupportedPlatformError(ctx.manifest.platform, list(ctx.rules.platforms))

    ctx.game = game
    ctx.platform = platform



def checkCompatibility(ctx: ValidationContext) -> None:
    if ctx.rules.isForbidden(ctx.game, ctx.platform):
        raise IncompatibleGamePlatformError(ctx.game, ctx.platform)



def _checkModPath(ctx: ValidationContext, fieldName: str, rawPath: str, *, requireFile: bool = False) -> str:
    """
    Shared path rule: non-empty after trim, relative, inside the mod root, existing.
    Returns the trimmed path.
    """
    requested = rawPath.strip()
    if not requested:
        raise EmptyPathError(fieldName)

    resolved = resolveSafe(ctx.modRoot, requested, field=fieldName, allowSymlinks=ctx.rules.allowSymlinks)
    if not resolved.exists():
        raise PathNotFoundError(fieldName, requested)
    if requireFile and not resolved.is_file():
        raise PathNotFoundError(fieldName, requested, detail="is not a file")
    return requested



def checkCapabilities(ctx: ValidationContext) -> None:
    manifest = ctx.manifest

    # Gating before any filesystem access
    if manifest.custom_textures_path is not None and not ctx.rules.texturesAllowed(ctx.platform):
        raise CapabilityNotAllowedError(FIELD_TEXTURES, ctx.game, ctx.platform)
    if manifest.scripts_path is not None and not ctx.rules.scriptsAllowed(ctx.game, ctx.platform):
        raise CapabilityNotAllowedError(FIELD_SCRIPTS, ctx.game, ctx.platform)

    if manifest.custom_game_files_path is not None:
        ctx.customGameFilesPath = _checkModPath(ctx, FIELD_GAME_FILES, manifest.custom_game_files_path)
        ctx.tags.append(TAG_GAMEFILE_MOD)

    if manifest.custom_textures_path is not None:
        ctx.customTexturesPath = _checkModPath(ctx, FIELD_TEXTURES, manifest.custom_textures_path)
        ctx.tags.append(TAG_TEXTURE_MOD)

    if manifest.scripts_path is not None:
        ctx.scriptsPath = _checkModPath(ctx, FIELD_SCRIPTS, manifest.scripts_path)
        ctx.tags.append(TAG_SCRIPT_MOD)



def checkIcon(ctx: ValidationContext) -> None:
    ctx.iconPath = _checkModPath(ctx, FIELD_ICON, ctx.manifest.icon_path, requireFile=True)



def checkDependencies(ctx: ValidationContext) -> None:
    """
    Every character of a trimmed entry must be alphanumeric; a blank entry has none
    to fail. Entries are kept exactly as written.
    """
    for rawDependency in ctx.manifest.dependencies:
        if not all(char.isalnum() for char in rawDependency.strip()):
            raise InvalidDependencyNameError(rawDependency)
    ctx.dependencies = list(ctx.manifest.dependencies)



def scanBannedContent(ctx: ValidationContext) -> None:
    scanned = 0
    for filePath in iterModFiles(ctx.modRoot):
        scanned += 1
        extension = fileExtension(filePath)
        if extension and ctx.rules.isBannedExtension(extension):
            raise BannedFileExtensionError(extension, str(filePath.relative_to(ctx.modRoot)))
    logger.debug("Content scan passed (%d files)", scanned)



DEFAULT_STAGES: tuple[tuple[ValidationStage, StageFn], ...] = (
    (ValidationStage.IDENTITY, checkIdentity),
    (ValidationStage.DESCRIPTION, resolveDescription),
    (ValidationStage.ENUMERATION, checkEnumerations),
    (ValidationStage.COMPATIBILITY, checkCompatibility),
    (ValidationStage.CAPABILITIES, checkCapabilities),
    (ValidationStage.ICON, checkIcon),
    (ValidationStage.DEPENDENCIES, checkDependencies),
    (ValidationStage.CONTENT_SCAN, scanBannedContent),
)



# ------------------------------------------------------------------ #
# Pipeline
# ------------------------------------------------------------------ #

class ModValidator:
    """
    Fail-fast validation chain over a mod directory.

    Each call loads the manifest fresh, runs DEFAULT_STAGES in order and stops at
    the first error. Instances hold only the (frozen) rules, so one validator can
    be shared across threads as long as each call targets its own mod root.
    """

    def __init__(
        self,
        rules: ValidationRules | None = None,
        *,
        stages: tuple[tuple[ValidationStage, StageFn], ...] = DEFAULT_STAGES,
    ) -> None:
        self.rules = rules if rules is not None else loadRules()
        self.stages = stages

    def validate(self, modRoot: Path | str) -> ModInfo:
        """
        Raises:
            ModValidationError subclass: the first failed check
            PackageIOError: the mod could not be read
        """
        root = Path(modRoot)
        with boundLogContext(modRoot=str(root)):
            manifest = loadManifest(root)
            ctx = ValidationContext(modRoot=root, manifest=manifest, rules=self.rules)

            for stage, stageFn in self.stages:
                setLogContext(stage=stage.value)
                logger.debug("Running stage '%s'", stage.value)
                try:
                    stageFn(ctx)
                except Exception as err:
                    logger.info("Mod '%s' rejected at stage '%s': %s", root, stage.value, err)
                    raise

            info = ctx.toModInfo()
            logger.info(
                "Mod '%s' accepted (%s/%s, tags=%s)",
                info.name, info.game, info.platform, info.auto_generated_tags,
            )
            return info



def validateMod(modRoot: Path | str, *, rules: ValidationRules | None = None) -> ModInfo:
    """Validate one mod directory with the configured (or given) rules."""
    return ModValidator(rules).validate(modRoot)
