"""Depth-bounded exploration of directory trees."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, List, Sequence, Tuple, Union

from dirsniff.classify.collection import find_collection
from dirsniff.classify.notes import detect_notes
from dirsniff.classify.partition import Partition, partition_entries
from dirsniff.classify.signatures import identify
from dirsniff.config import TraversalConfig
from dirsniff.models import (
    DirectoryEntry,
    DirectoryResult,
    EntryKind,
    ErrorInfo,
    ErrorKind,
    ResultKind,
)
from dirsniff.utils.files import error_code, list_entries, probe_path
from dirsniff.utils.text import format_counts

LOGGER = logging.getLogger(__name__)

Lister = Callable[[Path], List[DirectoryEntry]]
Prober = Callable[[Path], EntryKind]

EMPTY_ANSWER = "empty"

_LEAF_KINDS = {
    EntryKind.FILE: (ResultKind.FILE, True),
    EntryKind.SYMLINK: (ResultKind.SYMLINK, True),
    EntryKind.OTHER: (ResultKind.UNKNOWN, False),
    EntryKind.BROKEN: (ResultKind.UNKNOWN, False),
}


def verbose_summary(partition: Partition) -> Tuple[str, ...]:
    """Per-bucket lines describing an unidentified directory."""
    groups: Sequence[Tuple[str, Union[Sequence[str], Dict[str, int]]]] = (
        ("broken", partition.broken),
        ("symlinks", partition.symlinks),
        ("files", partition.normal_files),
        ("dirs", partition.normal_directories),
        ("zero byte files", partition.zero_byte_files),
        ("dot files", partition.dot_files),
        ("dot dirs", partition.dot_directories),
        ("dirs with extensions", partition.extension_directories),
        ("neither files nor dirs", partition.unknown),
        ("dir extensions", partition.directory_extension_table()),
        ("file extensions", partition.file_extension_table()),
        ("UUID dirs", partition.uuid_directories),
    )
    lines: List[str] = []
    for label, group in groups:
        if not group:
            continue
        if isinstance(group, dict):
            lines.append(f"{label}: {format_counts(group)}")
        else:
            lines.append(f"{label}: {', '.join(group)}")
    return tuple(lines)


def recursion_candidates(partition: Partition, config: TraversalConfig) -> List[str]:
    """Child directory names worth exploring, in bucket order."""
    candidates = [*partition.normal_directories, *partition.extension_directories]
    if config.follow_dot_directories:
        candidates.extend(partition.dot_directories)
        candidates.extend(partition.uuid_directories)
    return candidates


class Explorer:
    """Classifies paths and descends into the directories it cannot identify."""

    def __init__(
        self,
        config: TraversalConfig,
        *,
        lister: Lister = list_entries,
        prober: Prober = probe_path,
    ) -> None:
        self.config = config
        self.lister = lister
        self.prober = prober

    def explore(self, paths: Sequence[Path]) -> List[DirectoryResult]:
        """Explore every root independently."""
        return [self.explore_path(Path(path)) for path in paths]

    def explore_path(self, path: Path, depth: int = 0) -> DirectoryResult:
        try:
            kind = self.prober(path)
            if kind is not EntryKind.DIRECTORY:
                result_kind, identified = _LEAF_KINDS[kind]
                LOGGER.debug("%s is a %s", path, result_kind.value)
                return DirectoryResult(path=path, kind=result_kind, identified=identified)
            entries = self.lister(path)
        except FileNotFoundError as exc:
            LOGGER.debug("No such path: %s", path)
            return self._error(path, ErrorKind.NOT_FOUND, exc)
        except OSError as exc:
            LOGGER.debug("Failed to read %s: %s", path, exc)
            return self._error(path, ErrorKind.OTHER, exc)

        return self.classify(path, entries, depth)

    def classify(
        self, path: Path, entries: Sequence[DirectoryEntry], depth: int = 0
    ) -> DirectoryResult:
        """Classify one listed directory and, if unidentified, its children."""
        partition = partition_entries(entries)

        if partition.total == 0:
            return DirectoryResult(
                path=path,
                kind=ResultKind.DIRECTORY,
                identified=True,
                answers=(EMPTY_ANSWER,),
            )

        answers = identify(partition)
        collection = None
        if not answers:
            collection = find_collection(
                partition.file_extension_table(), partition.file_extensions
            )
        identified = bool(answers) or collection is not None
        notes = tuple(detect_notes(partition))

        summary: Tuple[str, ...] = ()
        children: List[DirectoryResult] = []
        if not identified:
            if self.config.verbose:
                summary = verbose_summary(partition)
            if depth < self.config.max_depth:
                for name in recursion_candidates(partition, self.config):
                    children.append(self.explore_path(path / name, depth + 1))
            else:
                LOGGER.debug("Depth budget exhausted at %s", path)

        return DirectoryResult(
            path=path,
            kind=ResultKind.DIRECTORY,
            identified=identified,
            answers=tuple(answers),
            collection=collection,
            notes=notes,
            children=tuple(children),
            verbose_summary=summary,
            unclassified=partition.unclassified,
        )

    @staticmethod
    def _error(path: Path, kind: ErrorKind, exc: OSError) -> DirectoryResult:
        message = exc.strerror or str(exc)
        return DirectoryResult(
            path=path,
            kind=ResultKind.ERROR,
            error=ErrorInfo(kind=kind, code=error_code(exc), message=message),
        )
