"""Directory scanning by suffix, and file modification times."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterator, List

__all__ = ["ScanEntry", "FileStats", "scan_directories", "scan_files", "scan_paths", "file_stat"]


@dataclass(frozen=True)
class ScanEntry:
    """A scanned item: full path, name without suffix, and the suffix."""

    pathfile: str
    name: str
    ext: str = ""


@dataclass(frozen=True)
class FileStats:
    """Modification time in whole seconds since the epoch."""

    mtime: int


def _list(directory: str) -> List[os.DirEntry]:
    try:
        with os.scandir(directory) as it:
            return list(it)
    except OSError:
        return []


def _matches(name: str, suffix: str) -> bool:
    # The first occurrence of the suffix must be the one at the end of the name.
    return len(name) > len(suffix) and name.find(suffix) == len(name) - len(suffix)


def scan_directories(directory) -> Iterator[ScanEntry]:
    """Subdirectories of ``directory`` (which should end in a slash).

    Each path ends in a slash; an unreadable directory yields nothing.
    """
    directory = os.fspath(directory)
    for entry in _list(directory):
        if entry.is_dir(follow_symlinks=False) and entry.name not in (".", ".."):
            yield ScanEntry(directory + entry.name + "/", entry.name)


def scan_files(directory, suffix: str) -> Iterator[ScanEntry]:
    """Regular files of ``directory`` whose names end in ``suffix``."""
    directory = os.fspath(directory)
    for entry in _list(directory):
        if entry.is_file(follow_symlinks=False) and _matches(entry.name, suffix):
            cut = len(entry.name) - len(suffix)
            yield ScanEntry(directory + entry.name, entry.name[:cut], entry.name[cut:])


def scan_paths(directory, suffix: str) -> Iterator[str]:
    """Paths of the files :func:`scan_files` finds."""
    for entry in scan_files(directory, suffix):
        yield entry.pathfile


def file_stat(filename) -> FileStats:
    """Stat a file; raises ``OSError`` if it cannot be read."""
    return FileStats(int(os.stat(filename).st_mtime))