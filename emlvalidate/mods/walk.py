# emlvalidate/mods/walk.py
from __future__ import annotations
import os
from collections.abc import Iterator
from pathlib import Path

from emlvalidate.core.errors import PackageIOError

__all__ = ["iterModFiles", "fileExtension"]



def iterModFiles(modRoot: Path) -> Iterator[Path]:
    """
    Lazily yields every non-directory entry under `modRoot`, depth-first.

    - Entries of a directory are visited in name order, so the first match of any
      scan is stable between runs.
    - Symlinked directories are not descended into.
    - Any OS error while listing a directory raises PackageIOError and ends the walk.
    """
    stack: list[Path] = [Path(modRoot)]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as err:
            raise PackageIOError(str(current), err.strerror or str(err)) from err

        subdirs: list[Path] = []
        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append(Path(entry.path))
                    continue
                if entry.is_dir():
                    # Symlink to a directory
                    continue
            except OSError as err:
                raise PackageIOError(entry.path, err.strerror or str(err)) from err
            yield Path(entry.path)

        # Reverse so the alphabetically first subdirectory is walked next
        stack.extend(reversed(subdirs))



def fileExtension(path: Path) -> str:
    """Lowercased extension without the dot; "" for none (dotfiles like ".sh" have none)."""
    return path.suffix[1:].lower()
