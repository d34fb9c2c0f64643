"""Typed configuration loading.

Configuration is read (never written) from TOML:

- `semtag.toml`: keys at the root table
- `pyproject.toml`: keys under `[tool.semtag]`

Example:
    [tool.semtag]
    default_bump = "minor"
    tag_dialect = "git"
    build_dialect = "canonical"
    tag_message = "Release {tag}"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from semtag.version.dialects import CANONICAL, DIALECTS, GIT_PORCELAIN, Dialect, dialect_named
from semtag.version.increment import BUMP_KINDS, DEFAULT_BUMP, DEFAULT_TAG_MESSAGE, parse_bump
from semtag.version.model import Bump

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "CONFIG_FILE_NAME",
    "PYPROJECT_FILE_NAME",
    "Config",
    "ConfigError",
    "discover_config",
    "load_config",
]

CONFIG_FILE_NAME = "semtag.toml"
PYPROJECT_FILE_NAME = "pyproject.toml"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Resolved settings for the command line front end.

    Attributes:
        default_bump: Increment applied when a command is given none
        tag_dialect: Dialect of version-control tags and describe output
        build_dialect: Dialect of build versions
        tag_message: Annotated tag message template, formatted with `tag`
    """

    default_bump: Bump = DEFAULT_BUMP
    tag_dialect: Dialect = GIT_PORCELAIN
    build_dialect: Dialect = CANONICAL
    tag_message: str = DEFAULT_TAG_MESSAGE

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML table).

        Raises:
            ValueError: a key names an unknown dialect or increment, or the
                message template is unusable.
        """
        bump_name = get_str(data, "default_bump")
        tag_name = get_str(data, "tag_dialect")
        build_name = get_str(data, "build_dialect")
        message = get_str(data, "tag_message")

        default_bump = DEFAULT_BUMP
        if bump_name is not None:
            parsed = parse_bump(bump_name)
            if parsed is None:
                raise ValueError(
                    f"unknown default_bump {bump_name!r} (expected one of: {', '.join(BUMP_KINDS)})"
                )
            default_bump = parsed

        return cls(
            default_bump=default_bump,
            tag_dialect=_dialect(tag_name, "tag_dialect", GIT_PORCELAIN),
            build_dialect=_dialect(build_name, "build_dialect", CANONICAL),
            tag_message=_template(message) if message is not None else DEFAULT_TAG_MESSAGE,
        )


def _dialect(name: str | None, key: str, default: Dialect) -> Dialect:
    if name is None:
        return default
    dialect = dialect_named(name)
    if dialect is None:
        raise ValueError(f"unknown {key} {name!r} (expected one of: {', '.join(DIALECTS)})")
    return dialect


def _template(message: str) -> str:
    if "{tag}" not in message:
        raise ValueError(f"tag_message must contain '{{tag}}': {message!r}")
    try:
        message.format(tag="v0.0.1")
    except (IndexError, KeyError, ValueError) as e:
        raise ValueError(f"tag_message is not a valid template: {e}") from e
    return message


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


def _settings_table(path: Path, data: StrDict) -> StrDict:
    """Select the table holding semtag settings within a parsed file."""
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: StrDict = get_table(data, "tool") or {}
    return get_table(tool, "semtag") or {}


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to semtag.toml or pyproject.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        config = Config.from_dict(_settings_table(path, result.value))
        return Ok(config)
    except (KeyError, TypeError, ValueError) as e:
        return Err(
            ConfigError(
                f"Invalid config structure: {e}",
                path=path,
                hint=f"check the settings in {path.name}",
            )
        )


def discover_config(directory: Path) -> Path | None:
    """Find the config file for `directory`.

    `semtag.toml` wins over `pyproject.toml`; returns None if neither exists.
    """
    for name in (CONFIG_FILE_NAME, PYPROJECT_FILE_NAME):
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None
