# emlvalidate/core/errors.py
from __future__ import annotations

__all__ = [
    "ModValidationError",
    "ManifestMissingError",
    "ManifestMalformedError",
    "EmptyNameError",
    "EmptyDescriptionError",
    "UnsupportedGameError",
    "UnsupportedPlatformError",
    "IncompatibleGamePlatformError",
    "CapabilityNotAllowedError",
    "EmptyPathError",
    "AbsolutePathNotAllowedError",
    "PathOutsideModError",
    "PathNotFoundError",
    "InvalidDependencyNameError",
    "BannedFileExtensionError",
    "PackageIOError",
]



class ModValidationError(Exception):
    """
    Base of every domain failure raised while loading, validating or scaffolding a mod.

    Subclasses keep their inputs as attributes so callers can react without parsing
    the message.
    """
    pass



# ----- Manifest loading -----

class ManifestMissingError(ModValidationError):
    def __init__(self, manifestPath: str) -> None:
        self.manifestPath = manifestPath
        super().__init__(f"{manifestPath} does not exist.")



class ManifestMalformedError(ModValidationError):
    def __init__(self, manifestPath: str, detail: str) -> None:
        self.manifestPath = manifestPath
        self.detail = detail
        super().__init__(f"{manifestPath} is malformed: {detail}")



# ----- Identity / content -----

class EmptyNameError(ModValidationError):
    def __init__(self) -> None:
        super().__init__("mod name is empty.")



class EmptyDescriptionError(ModValidationError):
    def __init__(self, descriptionPath: str) -> None:
        self.descriptionPath = descriptionPath
        super().__init__(f"mod description is empty ({descriptionPath}).")



# ----- Enumerations / compatibility -----

class UnsupportedGameError(ModValidationError):
    def __init__(self, game: str, allowed: list[str]) -> None:
        self.game = game
        self.allowed = allowed
        super().__init__(f"could not recognize defined game '{game}' (expected one of {', '.join(allowed)}).")



class UnsupportedPlatformError(ModValidationError):
    def __init__(self, platform: str, allowed: list[str]) -> None:
        self.platform = platform
        self.allowed = allowed
        super().__init__(
            f"could not recognize defined platform '{platform}' (expected one of {', '.join(allowed)})."
        )



class IncompatibleGamePlatformError(ModValidationError):
    def __init__(self, game: str, platform: str) -> None:
        self.game = game
        self.platform = platform
        super().__init__(f"impossible combination ({game}/{platform}).")



class CapabilityNotAllowedError(ModValidationError):
    """Raised when a capability path is declared for a game/platform that cannot use it."""
    def __init__(self, field: str, game: str, platform: str) -> None:
        self.field = field
        self.game = game
        self.platform = platform
        super().__init__(f"{field} is not allowed for {game}/{platform}.")



# ----- Per-field path checks -----

class EmptyPathError(ModValidationError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} is empty.")



class AbsolutePathNotAllowedError(ModValidationError):
    def __init__(self, field: str, path: str) -> None:
        self.field = field
        self.path = path
        super().__init__(f"you are not allowed to have absolute paths on {field} ({path}).")



class PathOutsideModError(ModValidationError):
    def __init__(self, field: str, path: str, reason: str = "points outside of the mod root directory") -> None:
        self.field = field
        self.path = path
        self.reason = reason
        super().__init__(f"{field} '{path}' {reason}.")



class PathNotFoundError(ModValidationError):
    def __init__(self, field: str, path: str, detail: str = "does not exist") -> None:
        self.field = field
        self.path = path
        self.detail = detail
        super().__init__(f"{field} '{path}' {detail}.")



# ----- Dependencies / content scan -----

class InvalidDependencyNameError(ModValidationError):
    def __init__(self, dependency: str) -> None:
        self.dependency = dependency
        super().__init__(f"only alphanumerics are allowed in dependency list (got {dependency!r}).")



class BannedFileExtensionError(ModValidationError):
    def __init__(self, extension: str, filePath: str) -> None:
        self.extension = extension
        self.filePath = filePath
        super().__init__(f"mod contains illegal file ({extension}): {filePath}")



# ----- I/O -----

class PackageIOError(OSError):
    """
    Filesystem failure while reading a mod (permissions, vanished entries, walk errors).

    Not a ModValidationError: the package was never judged, it could not be read.
    """
    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"I/O failure on '{path}': {detail}")
