"""Table of known directory layouts and the matcher that evaluates it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence, Tuple

from dirsniff.classify.partition import Partition

LOGGER = logging.getLogger(__name__)


class Haystack(str, Enum):
    """Which list of names a step searches."""

    NORMAL_FILES = "normal files"
    DOT_FILES = "dot files"
    NORMAL_DIRECTORIES = "normal directories"
    DOT_DIRECTORIES = "dot directories"
    DIRECTORY_EXTENSIONS = "directory extensions"
    FILE_EXTENSIONS = "file extensions"
    SYMLINKS = "symlinks"


class Containment(str, Enum):
    ALL_OF = "all of"
    ANY_OF = "any of"
    MEMBER = "member"

    def check(self, haystack: Sequence[str], needles: Sequence[str]) -> bool:
        if self is Containment.ALL_OF:
            return all(needle in haystack for needle in needles)
        if self is Containment.ANY_OF:
            return any(needle in haystack for needle in needles)
        return needles[0] in haystack


@dataclass(frozen=True, slots=True)
class Step:
    haystack: Haystack
    test: Containment
    needles: Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Signature:
    """A named layout: it matches when every step passes."""

    name: str
    steps: Tuple[Step, ...]

    def matches(self, haystacks: Dict[Haystack, Sequence[str]]) -> bool:
        return all(step.test.check(haystacks[step.haystack], step.needles) for step in self.steps)


def _has(haystack: Haystack, needle: str) -> Step:
    return Step(haystack, Containment.MEMBER, (needle,))


def _all(haystack: Haystack, *needles: str) -> Step:
    return Step(haystack, Containment.ALL_OF, needles)


def _any(haystack: Haystack, *needles: str) -> Step:
    return Step(haystack, Containment.ANY_OF, needles)


FILES = Haystack.NORMAL_FILES
DOT_FILES = Haystack.DOT_FILES
DIRS = Haystack.NORMAL_DIRECTORIES
DOT_DIRS = Haystack.DOT_DIRECTORIES
DIR_EXTS = Haystack.DIRECTORY_EXTENSIONS
FILE_EXTS = Haystack.FILE_EXTENSIONS
SYMLINKS = Haystack.SYMLINKS

SIGNATURES: Tuple[Signature, ...] = (
    Signature(
        "Android Studio or IntelliJ IDEA project",
        (_has(DOT_DIRS, ".idea"),),
    ),
    Signature(
        "Clojure project",
        (_has(FILES, "project.clj"), _all(DIRS, "src", "test")),
    ),
    Signature(
        "Crystal project",
        (
            _all(DOT_FILES, ".gitignore", ".editorconfig"),
            _all(FILES, "LICENSE", "README.md", "shard.yml"),
            _all(DIRS, "src", "spec"),
        ),
    ),
    Signature("D (DUB) project", (_any(FILES, "dub.json", "dub.sdl"),)),
    Signature("Dart package", (_has(FILES, "pubspec.yaml"), _has(DIRS, "lib"))),
    Signature("Deno folder", (_any(FILES, "deno.json", "deno.jsonc"),)),
    Signature(
        "Eclipse workspace",
        (
            _all(DOT_FILES, ".classpath", ".project"),
            _has(DOT_DIRS, ".settings"),
            _all(DIRS, "bin", "src"),
        ),
    ),
    Signature(
        "Flutter project",
        (
            _all(DOT_DIRS, ".dart_tool", ".idea"),
            _all(DIRS, "android", "ios", "lib", "test"),
            _all(DOT_FILES, ".gitignore", ".metadata", ".packages"),
            _all(FILES, "demo_app.iml", "pubspec.lock", "pubspec.yaml"),
        ),
    ),
    Signature(
        "Ghidra project",
        (
            _all(DIRS, "idata", "user", "versioned"),
            _all(FILES, "project.prp", "projectState"),
        ),
    ),
    Signature(
        "Git repository .git directory",
        (
            _all(FILES, "HEAD", "config", "description"),
            _all(DIRS, "hooks", "info", "objects", "refs"),
        ),
    ),
    Signature("Go module", (_has(FILES, "go.mod"),)),
    Signature("Gradle project", (_has(FILES, "build.gradle"),)),
    Signature("Hack project", (_has(DOT_FILES, ".hhconfig"),)),
    Signature("Julia package", (_has(FILES, "Project.toml"), _has(DIRS, "src"))),
    Signature("macOS application", (_has(DIRS, "Contents"),)),
    Signature(
        "macOS application (wrapped)",
        (_has(DIRS, "Wrapper"), _has(SYMLINKS, "WrappedBundle")),
    ),
    Signature("Nim package", (_all(DIRS, "src", "tests"), _has(FILE_EXTS, ".nimble"))),
    Signature("Perl CPAN module", (_has(DIRS, "t"), _has(FILES, "Makefile.PL"))),
    Signature("Python package", (_has(FILES, "__init__.py"),)),
    Signature("Racket package", (_has(FILES, "info.rkt"),)),
    Signature(
        "React Native project",
        (_all(DIRS, "ios", "android"), _all(FILES, "index.js", "App.js")),
    ),
    Signature("Retro Virtual Machine", (_has(DIRS, "snap"), _has(FILES, "machine"))),
    Signature(
        "Rust project",
        (_all(FILES, "Cargo.lock", "Cargo.toml"), _all(DIRS, "src")),
    ),
    Signature(
        "Scala project",
        (_has(FILES, "build.sbt"), _all(DIRS, "project", "src", "target")),
    ),
    Signature("Typescript project", (_has(FILES, "tsconfig.json"), _has(FILE_EXTS, ".ts"))),
    Signature("Visual Studio project", (_has(DOT_DIRS, ".vs"), _has(FILE_EXTS, ".sln"))),
    Signature("Xcode project", (_has(DIR_EXTS, ".xcodeproj"),)),
    Signature(
        "Zig project",
        (_all(DIRS, "src", "zig-cache", "zig-out"), _has(FILES, "build.zig")),
    ),
)


def haystacks_for(partition: Partition) -> Dict[Haystack, Sequence[str]]:
    return {
        Haystack.NORMAL_FILES: partition.normal_files,
        Haystack.DOT_FILES: partition.dot_files,
        Haystack.NORMAL_DIRECTORIES: partition.normal_directories,
        Haystack.DOT_DIRECTORIES: partition.dot_directories,
        Haystack.DIRECTORY_EXTENSIONS: partition.directory_extensions,
        Haystack.FILE_EXTENSIONS: partition.file_extensions,
        Haystack.SYMLINKS: partition.symlinks,
    }


def identify(
    partition: Partition, signatures: Sequence[Signature] = SIGNATURES
) -> List[str]:
    """Return the name of every signature the partition satisfies, in table order."""
    haystacks = haystacks_for(partition)
    answers = [signature.name for signature in signatures if signature.matches(haystacks)]
    if answers:
        LOGGER.debug("Matched signatures: %s", ", ".join(answers))
    return answers
