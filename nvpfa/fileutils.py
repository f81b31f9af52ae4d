"""File system helpers for locating MIDI files and soundfonts."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Iterable

from nvpfa.utils import error


def files_by_extension(base_dir: str | os.PathLike, ext: str) -> list[str]:
    """Recursively collect regular files under ``base_dir`` ending in ``ext``.

    The match is case-sensitive. Symbolic links are skipped. A directory
    that cannot be read is reported and contributes nothing.
    """
    base = os.fspath(base_dir)
    if not base.endswith("/"):
        base += "/"
    try:
        entries = list(os.scandir(base))
    except OSError:
        error("FileUtils", f"Failed to scan: {base}\n")
        return []

    found: list[str] = []
    for entry in entries:
        full_path = base + entry.name
        try:
            mode = os.lstat(full_path).st_mode
        except OSError:
            continue
        if stat.S_ISLNK(mode):
            continue
        if stat.S_ISDIR(mode):
            found.extend(files_by_extension(full_path, ext))
        elif stat.S_ISREG(mode) and entry.name.endswith(ext):
            found.append(full_path)
    return found


def find_files(base_dir: str | os.PathLike, extensions: Iterable[str]) -> list[str]:
    """Collect files for each extension in turn, concatenated in that order."""
    return [path for ext in extensions for path in files_by_extension(base_dir, ext)]


def file_exists(path: str | os.PathLike) -> bool:
    """Return whether ``path`` can be opened for reading."""
    try:
        with open(Path(path), "rb"):
            return True
    except OSError:
        return False