"""Tests for errstack.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from errstack.core.config import (
    DEFAULT_MAX_STACK_DEPTH,
    ConfigError,
    StackConfig,
    load_config,
    load_config_or_default,
)
from errstack.core.result import Err, Ok


class TestStackConfig:
    """Test StackConfig defaults and validation."""

    def test_defaults(self) -> None:
        assert StackConfig().max_depth == 50
        assert DEFAULT_MAX_STACK_DEPTH == 50

    def test_custom_depth(self) -> None:
        assert StackConfig(max_depth=10).max_depth == 10

    def test_zero_allowed(self) -> None:
        assert StackConfig(max_depth=0).max_depth == 0

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError, match=">= 0"):
            StackConfig(max_depth=-1)

    def test_non_int_rejected(self) -> None:
        with pytest.raises(ValueError):
            StackConfig(max_depth="10")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        config = StackConfig()
        with pytest.raises(AttributeError):
            config.max_depth = 1  # type: ignore[misc]


class TestFromDict:
    """Test StackConfig.from_dict."""

    def test_empty(self) -> None:
        assert StackConfig.from_dict({}) == StackConfig()

    def test_stack_table(self) -> None:
        assert StackConfig.from_dict({"stack": {"max_depth": 12}}).max_depth == 12

    def test_missing_key_uses_default(self) -> None:
        assert StackConfig.from_dict({"stack": {}}).max_depth == DEFAULT_MAX_STACK_DEPTH

    def test_wrong_type_rejected(self) -> None:
        with pytest.raises(ValueError, match="must be an integer"):
            StackConfig.from_dict({"stack": {"max_depth": "deep"}})

    def test_bool_rejected(self) -> None:
        with pytest.raises(ValueError):
            StackConfig.from_dict({"stack": {"max_depth": True}})


class TestLoadConfig:
    """Test load_config."""

    def test_load_valid(self, tmp_path: Path) -> None:
        path = tmp_path / "errstack.toml"
        path.write_text("[stack]\nmax_depth = 8\n")
        result = load_config(path)
        assert isinstance(result, Ok)
        assert result.value.max_depth == 8

    def test_load_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "errstack.toml"
        path.write_text("")
        result = load_config(path)
        assert result == Ok(StackConfig())

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.toml"
        result = load_config(path)
        assert isinstance(result, Err)
        assert isinstance(result.error, ConfigError)
        assert "not found" in result.error.message
        assert result.error.path == path

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "errstack.toml"
        path.write_text("[stack\nmax_depth = ")
        result = load_config(path)
        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message

    def test_invalid_value(self, tmp_path: Path) -> None:
        path = tmp_path / "errstack.toml"
        path.write_text("[stack]\nmax_depth = -3\n")
        result = load_config(path)
        assert isinstance(result, Err)
        assert "Invalid config structure" in result.error.message

    def test_invalid_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "errstack.toml"
        path.write_bytes(b"\xff\xfe[stack]")
        result = load_config(path)
        assert isinstance(result, Err)


class TestLoadConfigOrDefault:
    """Test load_config_or_default."""

    def test_returns_loaded(self, tmp_path: Path) -> None:
        path = tmp_path / "errstack.toml"
        path.write_text("[stack]\nmax_depth = 3\n")
        assert load_config_or_default(path).max_depth == 3

    def test_returns_default_on_error(self, tmp_path: Path) -> None:
        assert load_config_or_default(tmp_path / "missing.toml") == StackConfig()
