"""Typed configuration for stack capture.

The only setting is the maximum number of frames captured per error. It can
be built directly, or loaded from a TOML file::

    [stack]
    max_depth = 50
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result, is_ok
from .structured import StrDict, as_str_dict, get_int, get_table

__all__ = [
    "DEFAULT_MAX_STACK_DEPTH",
    "StackConfig",
    "ConfigError",
    "load_config",
    "load_config_or_default",
]

DEFAULT_MAX_STACK_DEPTH = 50


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class StackConfig:
    """Stack capture settings.

    Attributes:
        max_depth: Maximum number of frames captured per error. Zero disables
            capture entirely.
    """

    max_depth: int = DEFAULT_MAX_STACK_DEPTH

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ValueError(f"max_depth must be an int, got {self.max_depth!r}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> StackConfig:
        """Create StackConfig from a mapping (parsed TOML)."""
        stack: StrDict = get_table(data, "stack") or {}
        depth = get_int(stack, "max_depth")
        if depth is None:
            if "max_depth" in stack:
                raise ValueError(f"stack.max_depth must be an integer, got {stack['max_depth']!r}")
            depth = DEFAULT_MAX_STACK_DEPTH
        return cls(max_depth=depth)


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[StackConfig, ConfigError]:
    """Load stack capture settings from a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        Ok(StackConfig) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if not is_ok(result):
        return result

    try:
        return Ok(StackConfig.from_dict(result.value))
    except (TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> StackConfig:
    """Load config from file, or return the default config on any failure."""
    return load_config(path).unwrap_or(StackConfig())
