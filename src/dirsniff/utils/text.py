"""Extension helpers: extraction, frequency tables and their rendering."""

from __future__ import annotations

from typing import Dict, Iterable, List


def extension_of(name: str) -> str:
    """Return the extension of ``name`` including the dot, or ``""``.

    A leading dot alone does not count as an extension.
    """
    index = name.rfind(".")
    if index <= 0:
        return ""
    return name[index:]


def extensions_of(names: Iterable[str]) -> List[str]:
    """Extensions of every name that has one, in input order."""
    return [ext for ext in (extension_of(name) for name in names) if ext]


def count_extensions(extensions: Iterable[str], *, fold_case: bool) -> Dict[str, int]:
    """Build an extension frequency table."""
    table: Dict[str, int] = {}
    for ext in extensions:
        key = ext.lower() if fold_case else ext
        table[key] = table.get(key, 0) + 1
    return table


def format_counts(table: Dict[str, int]) -> str:
    """Render a frequency table as ``"ext: n, ..."``, most frequent first."""
    ordered = sorted(table.items(), key=lambda item: (-item[1], item[0]))
    return ", ".join(f"{key}: {count}" for key, count in ordered)


def printable(text: str) -> str:
    """Replace undecodable filename bytes with ``\\xNN`` escapes.

    ``os.scandir`` hands back non-UTF-8 names with surrogate escapes, which
    cannot be written to a UTF-8 stream.
    """
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")
