"""Recognize directories whose files share one extension or one file class."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Sequence, Tuple


@dataclass(frozen=True, slots=True)
class ExtensionClass:
    name: str
    extensions: FrozenSet[str]

    def covers(self, extensions: Sequence[str]) -> bool:
        return all(ext in self.extensions for ext in extensions)


def _class(name: str, *groups: Sequence[str]) -> ExtensionClass:
    return ExtensionClass(name, frozenset(ext for group in groups for ext in group))


# .mp4 is both audio and video, .webp both image and video; table order decides.
AUDIO = (".mp3", ".mp4", ".m4a", ".ogg", ".ram", ".wav")
JPEG = (".jpeg", ".jpg")
OTHER_IMAGE = (".gif", ".png", ".svg", ".tiff", ".webp")
VIDEO = (".mov", ".mp4", ".webp")
JAVASCRIPT = (".cjs", ".coffee", ".cts", ".js", ".jsx", ".mjs", ".mts", ".ts", ".tsx")
PERL = (".pod", ".pl", ".pm")
WORD = (".doc", ".docx")
EXCEL = (".xls", ".xlsx")

# Narrow classes come before the broader unions that contain them.
EXTENSION_CLASSES: Tuple[ExtensionClass, ...] = (
    _class("audio", AUDIO),
    _class("jpeg", JPEG),
    _class("image", JPEG, OTHER_IMAGE),
    _class("video", VIDEO),
    _class("media", JPEG, OTHER_IMAGE, AUDIO, VIDEO),
    _class("web", (".css", ".htm", ".html", ".js")),
    _class("C source", (".c", ".h")),
    _class("C++ source", (".cpp", ".hpp")),
    _class("archive", (".bz2", ".gz", ".xz", ".zip")),
    _class("Perl script", PERL),
    _class("JavaScript/ECMAScript/CoffeeScript/TypeScript", JAVASCRIPT),
    _class("script", JAVASCRIPT, PERL, (".lua", ".php", ".py", ".sh")),
    _class("MS Word", WORD),
    _class("word processor", WORD, (".odt",)),
    _class("Excel", EXCEL),
    _class("spreadsheet", EXCEL, (".ods",)),
    _class("MS Office", WORD, EXCEL),
    _class("LibreOffice", (".odt", ".ods")),
    _class("office", WORD, EXCEL, (".odt", ".ods")),
)


def find_collection(
    extension_table: Dict[str, int],
    file_extensions: Sequence[str],
    classes: Sequence[ExtensionClass] = EXTENSION_CLASSES,
) -> Optional[str]:
    """Describe the directory's files as a collection, or return ``None``.

    ``extension_table`` is the case-folded frequency table and
    ``file_extensions`` the flat list it was built from.
    """
    distinct = list(extension_table)
    if len(distinct) == 1:
        only = distinct[0]
        count = extension_table[only]
        if count > 1:
            return f"a collection of {count} {only} files"
        return None

    if distinct:
        for extension_class in classes:
            if extension_class.covers(distinct):
                return f"a collection of {len(file_extensions)} {extension_class.name} files"
    return None
