# emlvalidate/mods/manifest.py
from __future__ import annotations
from pydantic import BaseModel, Field, ConfigDict

from emlvalidate.core.jsonutils import prettyJsonDumps

__all__ = ["ModManifest", "ModInfo"]



class ModManifest(BaseModel):
    """
    mod.json as written by the mod author. Types are strict; semantics are not checked here.
    Unknown keys are ignored so newer manifests still load.
    """
    model_config = ConfigDict(extra="ignore", strict=True, frozen=True)

    name: str
    game: str
    platform: str
    icon_path: str
    shortdescription: str | None = None
    description: str | None = None
    dependencies: list[str] = Field(default_factory=list)
    custom_textures_path: str | None = None
    custom_game_files_path: str | None = None
    scripts_path: str | None = None



class ModInfo(BaseModel):
    """
    Normalized mod record: the output of a successful validation and the shape the
    scaffolder writes. A None path means the capability is disabled.
    """
    model_config = ConfigDict(extra="ignore")

    name: str
    game: str
    platform: str
    description: str = ""
    shortdescription: str = ""
    dependencies: list[str] = Field(default_factory=list)
    custom_textures_path: str | None = None
    custom_game_files_path: str | None = None
    scripts_path: str | None = None
    icon_path: str
    auto_generated_tags: list[str] = Field(default_factory=list)

    def toDict(self) -> dict:
        """Same keys as mod.json; disabled capability paths are left out."""
        return self.model_dump(mode="json", exclude_none=True)

    def toJson(self) -> str:
        return prettyJsonDumps(self.toDict())
