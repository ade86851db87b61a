"""Utility helpers for reading directory entries from the filesystem."""

from __future__ import annotations

import errno
import logging
import os
import stat
from pathlib import Path
from typing import List, Optional

from dirsniff.models import DirectoryEntry, EntryKind

LOGGER = logging.getLogger(__name__)


def error_code(exc: OSError) -> Optional[str]:
    """Symbolic errno name for ``exc`` (``ENOENT``), if it carries one."""
    if exc.errno is None:
        return None
    return errno.errorcode.get(exc.errno, str(exc.errno))


def _read_entry(directory: Path, dirent: os.DirEntry) -> DirectoryEntry:
    try:
        if dirent.is_symlink():
            return DirectoryEntry(dirent.name, EntryKind.SYMLINK)
        if dirent.is_file(follow_symlinks=False):
            size = dirent.stat(follow_symlinks=False).st_size
            return DirectoryEntry(dirent.name, EntryKind.FILE, size=size)
        if dirent.is_dir(follow_symlinks=False):
            return DirectoryEntry(dirent.name, EntryKind.DIRECTORY)
        return DirectoryEntry(dirent.name, EntryKind.OTHER)
    except OSError as exc:
        LOGGER.debug("Failed to stat %s: %s", directory / dirent.name, exc)
        return DirectoryEntry(dirent.name, EntryKind.BROKEN, error_code=error_code(exc))


def list_entries(directory: Path) -> List[DirectoryEntry]:
    """List the immediate children of ``directory`` sorted by name.

    Per-entry stat failures become ``BROKEN`` entries. Failing to open the
    directory itself raises ``OSError``.
    """
    with os.scandir(directory) as dirents:
        entries = [_read_entry(directory, dirent) for dirent in dirents]
    entries.sort(key=lambda entry: entry.name)
    return entries


def probe_path(path: Path) -> EntryKind:
    """Classify ``path`` itself without following symlinks."""
    mode = os.lstat(path).st_mode
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    return EntryKind.OTHER
