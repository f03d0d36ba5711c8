# emlvalidate/mods/rules.py
from __future__ import annotations
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from emlvalidate.config.service import getConfigStore
from emlvalidate.core.dictpath import getByPath

__all__ = ["ValidationRules", "loadRules"]



_SEQUENCE_TYPES = (list, tuple, set, frozenset)



def _rawNames(raw: Any) -> tuple[str, ...]:
    """games/platforms as given, before field validation; non-string entries are skipped."""
    if not isinstance(raw, _SEQUENCE_TYPES):
        return ()
    return tuple(value.strip() for value in raw if isinstance(value, str))



def _canonicalLookup(values: tuple[str, ...], raw: str) -> str | None:
    needle = raw.strip().casefold()
    for value in values:
        if value.casefold() == needle:
            return value
    return None



class ValidationRules(BaseModel):
    """
    Immutable rule tables shared by the validator and the scaffolder.

    Game and platform names are stored in canonical case; every lookup is
    case-insensitive and returns the canonical spelling.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    games: tuple[str, ...]
    platforms: tuple[str, ...]
    forbiddenPairs: frozenset[tuple[str, str]] = Field(default_factory=frozenset)
    texturelessPlatforms: frozenset[str] = Field(default_factory=frozenset)
    scriptingPairs: frozenset[tuple[str, str]] = Field(default_factory=frozenset)
    bannedExtensions: frozenset[str] = Field(default_factory=frozenset)
    allowSymlinks: bool = True

    @field_validator("games", "platforms")
    @classmethod
    def _nonEmptyUnique(cls, values: tuple[str, ...]) -> tuple[str, ...]:
        cleaned = tuple(value.strip() for value in values)
        if not cleaned or any(not value for value in cleaned):
            raise ValueError("must be a non-empty list of non-empty names")
        folded = [value.casefold() for value in cleaned]
        if len(set(folded)) != len(folded):
            raise ValueError("names must be unique ignoring case")
        return cleaned

    @field_validator("bannedExtensions")
    @classmethod
    def _normalizeExtensions(cls, values: frozenset[str]) -> frozenset[str]:
        # Stored lowercase without the leading dot, matching how files are compared
        return frozenset(value.strip().lstrip(".").lower() for value in values if value.strip().lstrip("."))

    @model_validator(mode="before")
    @classmethod
    def _canonicalizeTables(cls, data: Any) -> Any:
        # Tables may be written in any case; rewrite them in the spelling used by games/platforms.
        # Entries that match nothing stay as written and are reported by _checkTables.
        if not isinstance(data, Mapping):
            return data
        games = _rawNames(data.get("games"))
        platforms = _rawNames(data.get("platforms"))

        def canonical(values: tuple[str, ...], raw: Any) -> Any:
            if not isinstance(raw, str):
                return raw
            return _canonicalLookup(values, raw) or raw

        def canonicalPair(pair: Any) -> Any:
            if isinstance(pair, (list, tuple)) and len(pair) == 2:
                return (canonical(games, pair[0]), canonical(platforms, pair[1]))
            return pair

        canonicalized = dict(data)
        for tableName in ("forbiddenPairs", "scriptingPairs"):
            if isinstance(canonicalized.get(tableName), _SEQUENCE_TYPES):
                canonicalized[tableName] = [canonicalPair(pair) for pair in canonicalized[tableName]]
        if isinstance(canonicalized.get("texturelessPlatforms"), _SEQUENCE_TYPES):
            canonicalized["texturelessPlatforms"] = [
                canonical(platforms, value) for value in canonicalized["texturelessPlatforms"]
            ]
        return canonicalized

    @model_validator(mode="after")
    def _checkTables(self) -> "ValidationRules":
        for tableName, pairs in (("forbiddenPairs", self.forbiddenPairs), ("scriptingPairs", self.scriptingPairs)):
            for game, platform in sorted(pairs):
                if game not in self.games or platform not in self.platforms:
                    raise ValueError(f"{tableName}: unknown pair {game}/{platform}")
        for platform in sorted(self.texturelessPlatforms):
            if platform not in self.platforms:
                raise ValueError(f"texturelessPlatforms: unknown platform {platform}")
        return self

    # ----- Lookups -----

    def canonicalGame(self, raw: str) -> str | None:
        return _canonicalLookup(self.games, raw)

    def canonicalPlatform(self, raw: str) -> str | None:
        return _canonicalLookup(self.platforms, raw)

    def isForbidden(self, game: str, platform: str) -> bool:
        """Expects canonical names (see canonicalGame/canonicalPlatform)."""
        return (game, platform) in self.forbiddenPairs

    def texturesAllowed(self, platform: str) -> bool:
        return platform not in self.texturelessPlatforms

    def scriptsAllowed(self, game: str, platform: str) -> bool:
        return (game, platform) in self.scriptingPairs

    def isBannedExtension(self, extension: str) -> bool:
        return extension.lower() in self.bannedExtensions



def loadRules(overrides: Mapping[str, Any] | None = None) -> ValidationRules:
    """
    Build ValidationRules from the effective config ("rules" and "paths.allowSymlinks").

    `overrides` are merged last, for callers that tweak a single table.

    Raises:
        pydantic.ValidationError: if the configured tables are malformed
    """
    effective = getConfigStore().effective()
    data: dict[str, Any] = dict(getByPath(effective, "rules", {}) or {})
    data.setdefault("allowSymlinks", bool(getByPath(effective, "paths.allowSymlinks", True)))
    if overrides:
        data.update(overrides)
    return ValidationRules.model_validate(data)
