"""Rich tree rendering of exploration results."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from dirsniff.models import DirectoryResult, ErrorKind, ResultKind
from dirsniff.utils.text import printable

COLLATION_WARNING = "*** an entry did not get collated into any category!"


def _line(text: str, style: str) -> Text:
    return Text(printable(text), style=style)


def _answer(text: str, style: str = "bold green") -> Text:
    return _line(f"=> {text}", style)


def _leaf_lines(result: DirectoryResult) -> list[Text]:
    if result.kind is ResultKind.FILE:
        return [_answer("file")]
    if result.kind is ResultKind.SYMLINK:
        return [_answer("symlink")]
    if result.kind is ResultKind.UNKNOWN:
        return [_answer("neither file nor directory", style="yellow")]

    error = result.error
    if error is not None and error.kind is ErrorKind.NOT_FOUND:
        return [_line(f"* no such file: {result.name}", "red")]
    message = error.message if error is not None else "unknown error"
    if error is not None and error.code:
        message = f"{message} ({error.code})"
    return [_line(f"* err: {message}", "red")]


def _directory_lines(result: DirectoryResult) -> list[Text]:
    lines: list[Text] = []
    if result.unclassified:
        lines.append(
            _line(f"{COLLATION_WARNING} {', '.join(result.unclassified)}", "bold red")
        )
    lines.extend(_answer(answer) for answer in result.answers)
    if result.collection is not None:
        lines.append(_answer(result.collection, style="bold cyan"))
    lines.extend(_line(f"+ {note.value}", "magenta") for note in result.notes)
    if not result.identified:
        lines.append(_answer("unidentified", style="yellow"))
    lines.extend(_line(line, "dim") for line in result.verbose_summary)
    return lines


def build_tree(result: DirectoryResult, *, root: bool = True) -> Tree:
    """Build a tree for ``result`` and everything explored below it."""
    label = result.name if root else result.path.name
    tree = Tree(_line(f"<{label}>", "bold"), guide_style="dim")

    if result.kind is not ResultKind.DIRECTORY:
        for line in _leaf_lines(result):
            tree.add(line)
        return tree

    for line in _directory_lines(result):
        tree.add(line)
    for child in result.children:
        tree.add(build_tree(child, root=False))
    return tree


def render_results(console: Console, results: Sequence[DirectoryResult]) -> None:
    for result in results:
        console.print(build_tree(result))
