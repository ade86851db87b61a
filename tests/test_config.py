"""Tests for traversal configuration."""

from __future__ import annotations

import dataclasses

import pytest

from dirsniff.config import DEFAULT_MAX_DEPTH, TraversalConfig, parse_max_depth


class TestTraversalConfig:
    """Test TraversalConfig dataclass."""

    def test_default_config(self) -> None:
        """Should create config with default values."""
        config = TraversalConfig()

        assert config.max_depth == 1
        assert config.follow_dot_directories is False
        assert config.verbose is False

    def test_custom_config(self) -> None:
        """Should create config with custom values."""
        config = TraversalConfig(max_depth=3, follow_dot_directories=True, verbose=True)

        assert config.max_depth == 3
        assert config.follow_dot_directories is True
        assert config.verbose is True

    def test_config_is_immutable(self) -> None:
        """Config cannot change during a run."""
        config = TraversalConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.max_depth = 5  # type: ignore[misc]


class TestParseMaxDepth:
    """Test parse_max_depth helper."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("3", 3),
            ("0", 0),
            ("=2", 2),
            ("-1", -1),
            ("3.0", 3),
            (" 4 ", 4),
            ("010", 10),
        ],
    )
    def test_valid_values(self, raw: str, expected: int) -> None:
        """Should accept base-10 integers."""
        assert parse_max_depth(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "3abc", "0x10", "1e3", "3.5", "="])
    def test_malformed_values_keep_default(self, raw: str) -> None:
        """Malformed values are ignored."""
        assert parse_max_depth(raw) == DEFAULT_MAX_DEPTH

    def test_malformed_value_keeps_given_default(self) -> None:
        """The caller's default survives a malformed value."""
        assert parse_max_depth("nope", default=7) == 7

    def test_missing_value(self) -> None:
        """No value means the default."""
        assert parse_max_depth(None) == DEFAULT_MAX_DEPTH
