# emlvalidate/core/paths.py
from __future__ import annotations
from pathlib import Path, PurePosixPath, PureWindowsPath

from emlvalidate.core.errors import AbsolutePathNotAllowedError, PathOutsideModError

__all__ = ["isAbsoluteAnywhere", "resolveSafe"]



def isAbsoluteAnywhere(requested: str) -> bool:
    """
    True if `requested` is absolute on either POSIX or Windows.

    Manifests travel between machines, so "C:\\mods\\tex" must be rejected on Linux
    and "/opt/tex" on Windows. A drive counts only when a separator follows it, so
    "c:tex" is a relative name; resolveSafe still confines whatever it joins to.
    """
    return (
        PurePosixPath(requested).is_absolute()
        or PureWindowsPath(requested).is_absolute()
        or requested.startswith(("/", "\\"))
    )



def resolveSafe(root: Path, requested: str, *, field: str, allowSymlinks: bool = False) -> Path:
    """
    Returns the resolved path of `requested` under `root`.

    Raises:
        AbsolutePathNotAllowedError: `requested` is absolute
        PathOutsideModError: the path leaves `root`, or crosses a symlink while
            `allowSymlinks` is False

    Existence is not checked here; callers decide what must exist.
    """
    if isAbsoluteAnywhere(requested):
        raise AbsolutePathNotAllowedError(field, requested)

    if not isinstance(root, Path):
        root = Path(root)

    raw = root.joinpath(requested)
    resolved = raw.resolve(strict=False) # Don't raise if file doesn't exist
    rootResolved = root.resolve(strict=False)

    # Must remain inside the mod root
    if not resolved.is_relative_to(rootResolved):
        raise PathOutsideModError(field, requested)

    if not allowSymlinks:
        # Leaf and every parent up to the root must not be symlinks
        path = raw
        while True:
            if path.resolve(strict=False) == rootResolved:
                break

            if path.is_symlink():
                raise PathOutsideModError(field, requested, reason="goes through a symlink")

            parent = path.parent
            if parent == path: # Filesystem root guard
                break
            path = parent
    return resolved
