"""File name helpers."""

from __future__ import annotations

import os
import stat

_WINDOWS = os.name == "nt"
_SEP = "\\" if _WINDOWS else "/"
_OTHER_SEP = "/" if _WINDOWS else "\\"


def exists(filename: str) -> bool:
    """True if filename names an existing regular file."""
    try:
        info = os.stat(filename)
    except OSError:
        return False
    return stat.S_ISREG(info.st_mode)


def timestamp(filename: str) -> int:
    """Last modification time of a regular file, in seconds, or 0."""
    try:
        info = os.stat(filename)
    except OSError:
        return 0
    if stat.S_ISREG(info.st_mode):
        return int(info.st_mtime)
    return 0


def normalize_filename(filename: str) -> str:
    """Replace every separator by the platform's own."""
    return filename.replace(_OTHER_SEP, _SEP)


def pathname(filename: str) -> str:
    """Directory part of a file name, always ending with a separator."""
    path = normalize_filename(filename)
    slash = path.rfind(_SEP)
    if slash == -1:
        return "." + _SEP
    return path[: slash + 1]


def relative_filename(filename: str, path: str) -> str:
    """Strip from filename the prefix it has in common with path."""
    common = 0
    for f, p in zip(filename, path):
        if f != p:
            break
        common += 1
    return filename[common:]


def absolute_filename(path: str, filename: str) -> str:
    """Join path and filename unless filename already starts with '.' or '/'."""
    if filename[:1] in (".", "/") and filename:
        return normalize_filename(filename)
    return normalize_filename(path + filename)