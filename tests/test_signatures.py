"""Tests for the signature rule table."""

from __future__ import annotations

from typing import Iterable

import pytest

from dirsniff.classify.partition import Partition, partition_entries
from dirsniff.classify.signatures import (
    SIGNATURES,
    Containment,
    Haystack,
    Signature,
    Step,
    identify,
)
from dirsniff.models import DirectoryEntry, EntryKind


def _partition(
    files: Iterable[str] = (),
    dirs: Iterable[str] = (),
    symlinks: Iterable[str] = (),
) -> Partition:
    """Build a partition; dot names and dotted directories sort themselves out."""
    entries = [DirectoryEntry(name, EntryKind.FILE, size=1) for name in files]
    entries += [DirectoryEntry(name, EntryKind.DIRECTORY) for name in dirs]
    entries += [DirectoryEntry(name, EntryKind.SYMLINK) for name in symlinks]
    return partition_entries(entries)


class TestContainment:
    """Test the three containment shapes."""

    def test_all_of(self) -> None:
        assert Containment.ALL_OF.check(["a", "b", "c"], ["a", "c"])
        assert not Containment.ALL_OF.check(["a", "b"], ["a", "c"])

    def test_any_of(self) -> None:
        assert Containment.ANY_OF.check(["a", "b"], ["x", "b"])
        assert not Containment.ANY_OF.check(["a", "b"], ["x", "y"])

    def test_member_checks_first_needle(self) -> None:
        assert Containment.MEMBER.check(["a"], ["a"])
        assert not Containment.MEMBER.check(["b"], ["a", "b"])

    def test_empty_haystack(self) -> None:
        assert not Containment.ANY_OF.check([], ["a"])
        assert not Containment.MEMBER.check([], ["a"])


class TestSignatureTable:
    """Sanity checks on the table itself."""

    def test_names_are_unique(self) -> None:
        names = [signature.name for signature in SIGNATURES]
        assert len(names) == len(set(names))

    def test_every_signature_has_steps(self) -> None:
        for signature in SIGNATURES:
            assert signature.steps
            for step in signature.steps:
                assert step.needles


class TestIdentify:
    """Test identify function."""

    def test_rust_project(self) -> None:
        partition = _partition(files=["Cargo.lock", "Cargo.toml"], dirs=["src", "target"])

        assert identify(partition) == ["Rust project"]

    def test_removing_required_name_drops_match(self) -> None:
        """A signature disappears when one required name is gone."""
        partition = _partition(files=["Cargo.toml"], dirs=["src"])

        assert identify(partition) == []

    def test_adding_required_name_adds_match(self) -> None:
        """A signature appears once every step is satisfied."""
        before = _partition(files=["Makefile.PL"], dirs=["lib"])
        after = _partition(files=["Makefile.PL"], dirs=["lib", "t"])

        assert "Perl CPAN module" not in identify(before)
        assert "Perl CPAN module" in identify(after)

    def test_all_matches_are_reported(self) -> None:
        """Every matching signature is returned in table order."""
        partition = _partition(files=["build.gradle", "go.mod"], dirs=[".idea"])

        assert identify(partition) == [
            "Android Studio or IntelliJ IDEA project",
            "Go module",
            "Gradle project",
        ]

    def test_git_directory(self) -> None:
        partition = _partition(
            files=["HEAD", "config", "description"],
            dirs=["hooks", "info", "objects", "refs"],
        )

        assert identify(partition) == ["Git repository .git directory"]

    def test_xcode_project_uses_directory_extension(self) -> None:
        partition = _partition(dirs=["Demo.xcodeproj", "Demo"])

        assert identify(partition) == ["Xcode project"]

    def test_wrapped_macos_application_uses_symlink(self) -> None:
        partition = _partition(dirs=["Wrapper"], symlinks=["WrappedBundle"])

        assert identify(partition) == ["macOS application (wrapped)"]

    def test_wrapped_bundle_must_be_symlink(self) -> None:
        partition = _partition(dirs=["Wrapper", "WrappedBundle"])

        assert identify(partition) == []

    def test_typescript_project_uses_file_extension(self) -> None:
        partition = _partition(files=["tsconfig.json", "index.ts"])

        assert identify(partition) == ["Typescript project"]

    def test_file_extensions_are_case_sensitive(self) -> None:
        """Rule table extensions are not case-folded."""
        partition = _partition(files=["tsconfig.json", "INDEX.TS"])

        assert identify(partition) == []

    def test_visual_studio_project(self) -> None:
        partition = _partition(files=["App.sln"], dirs=[".vs"])

        assert identify(partition) == ["Visual Studio project"]

    def test_eclipse_workspace(self) -> None:
        partition = _partition(
            files=[".classpath", ".project"], dirs=[".settings", "bin", "src"]
        )

        assert identify(partition) == ["Eclipse workspace"]

    def test_deno_any_of(self) -> None:
        partition = _partition(files=["deno.jsonc"])

        assert identify(partition) == ["Deno folder"]

    @pytest.mark.parametrize(
        ("files", "dirs", "expected"),
        [
            (["__init__.py", "core.py"], [], "Python package"),
            (["pubspec.yaml"], ["lib"], "Dart package"),
            (["Project.toml"], ["src"], "Julia package"),
            (["build.sbt"], ["project", "src", "target"], "Scala project"),
            (["build.zig"], ["src", "zig-cache", "zig-out"], "Zig project"),
            (["demo.nimble"], ["src", "tests"], "Nim package"),
            (["info.rkt"], [], "Racket package"),
            (["machine"], ["snap"], "Retro Virtual Machine"),
            (["project.clj"], ["src", "test"], "Clojure project"),
            ([".hhconfig"], [], "Hack project"),
            (["dub.sdl"], [], "D (DUB) project"),
            ([], ["Contents"], "macOS application"),
        ],
    )
    def test_known_layouts(self, files: list[str], dirs: list[str], expected: str) -> None:
        assert identify(_partition(files=files, dirs=dirs)) == [expected]

    def test_empty_partition(self) -> None:
        assert identify(Partition()) == []

    def test_custom_table(self) -> None:
        """A new layout is one more row; the matcher does not change."""
        table = [
            Signature(
                "Example layout",
                (Step(Haystack.NORMAL_FILES, Containment.MEMBER, ("example.cfg",)),),
            )
        ]

        assert identify(_partition(files=["example.cfg"]), table) == ["Example layout"]
