# emlvalidate/mods/loader.py
from __future__ import annotations
import json
import logging
from pathlib import Path

from pydantic import ValidationError

from emlvalidate.core.errors import ManifestMalformedError, ManifestMissingError, PackageIOError
from emlvalidate.mods.constants import DESCRIPTION_FILE_NAME, MANIFEST_FILE_NAME
from emlvalidate.mods.manifest import ModManifest

logger = logging.getLogger(__name__)

__all__ = ["loadManifest", "loadDescription"]



def _readText(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as err:
        raise ManifestMalformedError(str(path), f"not valid UTF-8 ({err.reason})") from err
    except OSError as err:
        raise PackageIOError(str(path), err.strerror or str(err)) from err



def _formatValidationError(err: ValidationError) -> str:
    issues: list[str] = []
    for issue in err.errors():
        location = ".".join(str(part) for part in issue.get("loc", ())) or "<root>"
        if issue.get("type") == "missing":
            issues.append(f"'{location}' is required")
        else:
            issues.append(f"'{location}': {issue.get('msg', 'invalid value')}")
    return "; ".join(issues)



def loadManifest(modRoot: Path) -> ModManifest:
    """
    Read and type-check `<modRoot>/mod.json`.

    Raises:
        ManifestMissingError: mod.json is absent (or not a regular file)
        ManifestMalformedError: invalid JSON, non-object root, missing or mistyped keys
        PackageIOError: the file exists but cannot be read
    """
    manifestPath = Path(modRoot) / MANIFEST_FILE_NAME
    if not manifestPath.is_file():
        raise ManifestMissingError(str(manifestPath))

    raw = _readText(manifestPath)
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as err:
        raise ManifestMalformedError(str(manifestPath), f"invalid JSON ({err.msg} at line {err.lineno}, column {err.colno})") from err

    if not isinstance(data, dict):
        raise ManifestMalformedError(str(manifestPath), f"root must be an object, not {type(data).__name__}")

    try:
        manifest = ModManifest.model_validate(data)
    except ValidationError as err:
        raise ManifestMalformedError(str(manifestPath), _formatValidationError(err)) from err

    logger.debug("Loaded manifest '%s' (name=%r, game=%r, platform=%r)", manifestPath, manifest.name, manifest.game, manifest.platform)
    return manifest



def loadDescription(modRoot: Path) -> str | None:
    """
    Read `<modRoot>/description.md` if present. Returns None when the file is absent.
    The text is returned as-is; trimming and emptiness are the validator's concern.
    """
    descriptionPath = Path(modRoot) / DESCRIPTION_FILE_NAME
    if not descriptionPath.exists():
        return None
    try:
        return descriptionPath.read_text(encoding="utf-8")
    except UnicodeDecodeError as err:
        raise PackageIOError(str(descriptionPath), f"not valid UTF-8 ({err.reason})") from err
    except OSError as err:
        raise PackageIOError(str(descriptionPath), err.strerror or str(err)) from err
