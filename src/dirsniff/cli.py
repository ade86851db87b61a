"""Command line interface for dirsniff."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from dirsniff.config import DEFAULT_MAX_DEPTH, TraversalConfig, parse_max_depth
from dirsniff.explore.explorer import Explorer
from dirsniff.render import render_results

LOGGER = logging.getLogger(__name__)


console = Console()
app = typer.Typer(help="dirsniff - guess what each directory in a tree is for")


def _setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _drop_unknown_flags(args: List[Path]) -> List[Path]:
    """Keep the positional paths; unrecognized flags end up here too."""
    paths = []
    for arg in args:
        if str(arg).startswith("-"):
            LOGGER.debug("Ignoring unknown option %s", arg)
        else:
            paths.append(arg)
    return paths


@app.command(context_settings={"ignore_unknown_options": True})
def sniff(
    paths: List[Path] = typer.Argument(..., help="Files or directories to classify."),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Summarize the contents of unidentified directories"
    ),
    dot_dirs: bool = typer.Option(
        False, "--dot-dirs", "-d", help="Also descend into dot and UUID-named directories"
    ),
    max_depth: Optional[str] = typer.Option(
        None,
        "--max-depth",
        "-m",
        help=f"Levels to explore below an unidentified directory (default {DEFAULT_MAX_DEPTH})",
    ),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
) -> None:
    """Classify each path by the layout of its entries."""
    _setup_logging(debug)
    config = TraversalConfig(
        max_depth=parse_max_depth(max_depth),
        follow_dot_directories=dot_dirs,
        verbose=verbose,
    )

    explorer = Explorer(config)
    results = explorer.explore(_drop_unknown_flags(paths))
    render_results(console, results)
