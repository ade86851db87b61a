"""Core dirsniff data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple


class EntryKind(str, Enum):
    """Type of one directory child as observed at listing time."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"
    BROKEN = "broken"


class ResultKind(str, Enum):
    """Terminal state of one explored path."""

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    UNKNOWN = "unknown"
    ERROR = "error"


class ErrorKind(str, Enum):
    """Why a path could not be examined."""

    NOT_FOUND = "not found"
    OTHER = "other"


class AdditionalNote(str, Enum):
    """Annotations that may accompany any classification outcome."""

    GIT_REPOSITORY = "Git repository"
    GITHUB_REPOSITORY = "GitHub repository"
    MACOS_FINDER_FILES = "macOS Finder files"


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """One child of a directory, with its type and size fixed when listed."""

    name: str
    kind: EntryKind
    size: Optional[int] = None
    error_code: Optional[str] = None

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True, slots=True)
class ErrorInfo:
    """Failure recorded on an error leaf; ``code`` is the errno name when known."""

    kind: ErrorKind
    code: Optional[str]
    message: str


@dataclass(frozen=True, slots=True)
class DirectoryResult:
    """Outcome for one explored path.

    Directory results carry the classification and, when the directory was
    left unidentified with depth to spare, the results for its children.
    Other kinds are leaves.
    """

    path: Path
    kind: ResultKind
    identified: bool = False
    answers: Tuple[str, ...] = ()
    collection: Optional[str] = None
    notes: Tuple[AdditionalNote, ...] = ()
    children: Tuple["DirectoryResult", ...] = ()
    verbose_summary: Tuple[str, ...] = ()
    unclassified: Tuple[str, ...] = ()
    error: Optional[ErrorInfo] = None

    @property
    def name(self) -> str:
        return str(self.path)
