"""Annotations that are independent of a directory's classification."""

from __future__ import annotations

from typing import List

from dirsniff.classify.partition import Partition
from dirsniff.models import AdditionalNote

FINDER_ICON_FILE = "Icon\r"
FINDER_METADATA_FILE = ".DS_Store"


def detect_notes(partition: Partition) -> List[AdditionalNote]:
    """Notes about a directory that apply whether or not it was identified."""
    notes: List[AdditionalNote] = []

    if ".git" in partition.dot_directories:
        if ".github" in partition.dot_directories:
            notes.append(AdditionalNote.GITHUB_REPOSITORY)
        else:
            notes.append(AdditionalNote.GIT_REPOSITORY)

    if FINDER_ICON_FILE in partition.normal_files or FINDER_METADATA_FILE in partition.dot_files:
        notes.append(AdditionalNote.MACOS_FINDER_FILES)

    return notes
