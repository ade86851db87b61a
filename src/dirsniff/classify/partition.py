"""Split a directory listing into mutually exclusive buckets."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple, TypeVar

from dirsniff.models import DirectoryEntry, EntryKind
from dirsniff.utils.text import count_extensions, extensions_of

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

UUID_PATTERN = re.compile(
    r"^[0-9A-Fa-f]{8}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{12}$"
    r"|^[0-9A-Fa-f]{32}$"
)


def collate(items: Sequence[T], predicates: Sequence[Callable[[T], bool]]) -> List[List[T]]:
    """Split ``items`` into ``len(predicates) + 1`` lists.

    Each item lands in the list of the first predicate it satisfies; the
    final list collects the items no predicate accepted.
    """
    buckets: List[List[T]] = [[] for _ in range(len(predicates) + 1)]
    for item in items:
        index = len(predicates)
        for position, predicate in enumerate(predicates):
            if predicate(item):
                index = position
                break
        buckets[index].append(item)
    return buckets


def is_broken(entry: DirectoryEntry) -> bool:
    """Entry whose stat failed."""
    return entry.kind is EntryKind.BROKEN


def is_symlink(entry: DirectoryEntry) -> bool:
    """Symbolic link, never followed."""
    return entry.kind is EntryKind.SYMLINK


def is_unknown(entry: DirectoryEntry) -> bool:
    """Neither a regular file nor a directory (sockets, FIFOs, devices)."""
    return not entry.is_file and not entry.is_directory


def is_dot_file(entry: DirectoryEntry) -> bool:
    """Regular file whose name starts with a dot."""
    return entry.is_file and entry.name.startswith(".")


def is_file(entry: DirectoryEntry) -> bool:
    """Any regular file; dot files are taken earlier."""
    return entry.is_file


def is_dot_directory(entry: DirectoryEntry) -> bool:
    """Directory whose name starts with a dot."""
    return entry.is_directory and entry.name.startswith(".")


def is_extension_directory(entry: DirectoryEntry) -> bool:
    """Directory with a dot in its name, such as a macOS bundle."""
    return entry.is_directory and "." in entry.name


def is_uuid_directory(entry: DirectoryEntry) -> bool:
    """Directory named like a UUID."""
    return entry.is_directory and UUID_PATTERN.match(entry.name) is not None


def is_directory(entry: DirectoryEntry) -> bool:
    """Any directory left over."""
    return entry.is_directory


# Order matters: the first predicate that holds decides the bucket.
PREDICATES: Tuple[Callable[[DirectoryEntry], bool], ...] = (
    is_broken,
    is_symlink,
    is_unknown,
    is_dot_file,
    is_file,
    is_dot_directory,
    is_extension_directory,
    is_uuid_directory,
    is_directory,
)


@dataclass(frozen=True, slots=True)
class Partition:
    """Bucketed view of one directory's entries."""

    broken: Tuple[str, ...] = ()
    symlinks: Tuple[str, ...] = ()
    unknown: Tuple[str, ...] = ()
    dot_files: Tuple[str, ...] = ()
    normal_files: Tuple[str, ...] = ()
    dot_directories: Tuple[str, ...] = ()
    extension_directories: Tuple[str, ...] = ()
    uuid_directories: Tuple[str, ...] = ()
    normal_directories: Tuple[str, ...] = ()
    unclassified: Tuple[str, ...] = ()
    zero_byte_files: Tuple[str, ...] = ()

    @property
    def total(self) -> int:
        return sum(len(bucket) for bucket in self.exclusive_buckets())

    def exclusive_buckets(self) -> Tuple[Tuple[str, ...], ...]:
        """The nine ordered buckets followed by the catch-all."""
        return (
            self.broken,
            self.symlinks,
            self.unknown,
            self.dot_files,
            self.normal_files,
            self.dot_directories,
            self.extension_directories,
            self.uuid_directories,
            self.normal_directories,
            self.unclassified,
        )

    @property
    def file_extensions(self) -> List[str]:
        return extensions_of(self.normal_files)

    @property
    def directory_extensions(self) -> List[str]:
        return extensions_of(self.extension_directories)

    def file_extension_table(self) -> Dict[str, int]:
        return count_extensions(self.file_extensions, fold_case=True)

    def directory_extension_table(self) -> Dict[str, int]:
        return count_extensions(self.directory_extensions, fold_case=False)


def partition_entries(entries: Sequence[DirectoryEntry]) -> Partition:
    """Sort ``entries`` by name and distribute them over the buckets."""
    ordered = sorted(entries, key=lambda entry: entry.name)
    *buckets, catch_all = [
        tuple(entry.name for entry in bucket) for bucket in collate(ordered, PREDICATES)
    ]
    zero_byte = tuple(entry.name for entry in ordered if entry.is_file and entry.size == 0)

    partition = Partition(*buckets, unclassified=catch_all, zero_byte_files=zero_byte)
    if partition.unclassified:
        LOGGER.warning(
            "Entries did not match any bucket: %s", ", ".join(partition.unclassified)
        )
    return partition
