"""Typed configuration loading.

The config file is optional. It lets a user pretend to be another host,
which is how native prefixes and library names for other platforms are
computed:

    [platform]
    os_name = "SunOS"
    arch = "sparc"

    [search]
    path = "/opt/tools/bin:/usr/bin"
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result

__all__ = [
    "CONFIG_ENV_VAR",
    "Config",
    "ConfigError",
    "PlatformConfig",
    "SearchConfig",
    "load_config",
]

# Environment variable naming a config file when --config is not given
CONFIG_ENV_VAR = "HOSTOS_CONFIG"

Table = dict[str, object]


def _table(data: Mapping[str, object], key: str) -> Table:
    """Nested table under ``key``, or an empty one if missing or malformed."""
    value = data.get(key)
    if isinstance(value, dict) and all(isinstance(k, str) for k in value):
        return value
    return {}


def _text(table: Mapping[str, object], key: str) -> str | None:
    """Stripped string under ``key``; None if missing, not a str, or blank."""
    value = table.get(key)
    if not isinstance(value, str):
        return None
    return value.strip() or None


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class PlatformConfig:
    """Overrides for the detected host identity."""

    os_name: str | None = None
    arch: str | None = None


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Override for the executable search path (path-variable syntax)."""

    path: str | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    platform: PlatformConfig = field(default_factory=PlatformConfig)
    search: SearchConfig = field(default_factory=SearchConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        platform = _table(data, "platform")
        search = _table(data, "search")

        return cls(
            platform=PlatformConfig(
                os_name=_text(platform, "os_name"),
                arch=_text(platform, "arch"),
            ),
            search=SearchConfig(path=_text(search, "path")),
        )

    def with_overrides(self, *, os_name: str | None = None, arch: str | None = None) -> Config:
        """Return a copy where the given values replace the file's."""
        return dataclasses.replace(
            self,
            platform=PlatformConfig(
                os_name=os_name if os_name is not None else self.platform.os_name,
                arch=arch if arch is not None else self.platform.arch,
            ),
        )

    @property
    def is_empty(self) -> bool:
        return self == Config()


def _parse_toml(path: Path) -> Result[Table, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        data: Table = tomllib.loads(path.read_bytes().decode("utf-8"))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except IsADirectoryError:
        return Err(ConfigError(f"Config path is a directory: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to the config file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    match _parse_toml(path):
        case Ok(data):
            return Ok(Config.from_dict(data))
        case Err() as err:
            return err

