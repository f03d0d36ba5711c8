# emlvalidate/mods/constants.py
from __future__ import annotations

__all__ = [
    "MANIFEST_FILE_NAME", "DESCRIPTION_FILE_NAME", "SHORT_DESCRIPTION_SENTINEL",
    "TAG_TEXTURE_MOD", "TAG_GAMEFILE_MOD", "TAG_SCRIPT_MOD",
    "FIELD_TEXTURES", "FIELD_GAME_FILES", "FIELD_SCRIPTS", "FIELD_ICON",
]



# Fixed file names at the top level of a mod package.
MANIFEST_FILE_NAME = "mod.json"
DESCRIPTION_FILE_NAME = "description.md"

# Stored as shortdescription when the manifest omits it but description.md exists.
SHORT_DESCRIPTION_SENTINEL = "clone"

# Capability tags added to auto_generated_tags.
TAG_TEXTURE_MOD = "texture-mod"
TAG_GAMEFILE_MOD = "gamefile-mod"
TAG_SCRIPT_MOD = "script-mod"

# Manifest keys of the path fields, used as the `field` of path errors.
FIELD_TEXTURES = "custom_textures_path"
FIELD_GAME_FILES = "custom_game_files_path"
FIELD_SCRIPTS = "scripts_path"
FIELD_ICON = "icon_path"
