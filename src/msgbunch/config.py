"""Configuration system for msgbunch.

Builder settings live in a TOML file under a ``[bunch]`` table, loaded into
typed dataclasses with sensible defaults for all values.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeVar

import tomli_w

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from msgbunch.builder import DEFAULT_SPLIT_CHARS
from msgbunch.bunch import MSG_LIMIT
from msgbunch.exceptions import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

_T = TypeVar("_T")

__all__ = [
    "BunchConfig",
    "MsgBunchConfig",
    "default_config",
    "load_config",
    "save_config",
    "validate_config",
]

logger = logging.getLogger(__name__)


@dataclass
class BunchConfig:
    """[bunch] section."""

    limit: int = MSG_LIMIT
    split_chars: str = DEFAULT_SPLIT_CHARS
    strict: bool = False


@dataclass
class MsgBunchConfig:
    """Root configuration combining all sections."""

    bunch: BunchConfig = field(default_factory=BunchConfig)


def default_config() -> MsgBunchConfig:
    """Return a config with all default values."""
    return MsgBunchConfig()


def validate_config(config: MsgBunchConfig) -> None:
    """Check config values, raising ``ConfigError`` on the first bad one."""
    bunch = config.bunch
    # bool is an int subclass, so reject it explicitly
    if isinstance(bunch.limit, bool) or not isinstance(bunch.limit, int) or bunch.limit < 1:
        raise ConfigError(f"bunch.limit must be a positive integer, got {bunch.limit!r}")
    if not isinstance(bunch.split_chars, str):
        raise ConfigError(f"bunch.split_chars must be a string, got {bunch.split_chars!r}")
    if not isinstance(bunch.strict, bool):
        raise ConfigError(f"bunch.strict must be a boolean, got {bunch.strict!r}")


def _config_to_dict(config: MsgBunchConfig) -> dict[str, object]:
    """Convert MsgBunchConfig to a nested dict suitable for TOML serialization."""
    return {"bunch": dict(vars(config.bunch))}


def save_config(config: MsgBunchConfig, path: Path) -> None:
    """Save configuration to a TOML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data = _config_to_dict(config)
    try:
        with path.open("wb") as f:
            tomli_w.dump(data, f)
        logger.info("Saved config to %s", path)
    except OSError as e:
        logger.error("Failed to save config to %s: %s", path, e)
        raise ConfigError(f"Failed to save config to {path}: {e}") from e


def _load_section(cls: type[_T], data: dict[str, object]) -> _T:
    """Load a dataclass section from a dict, ignoring unknown keys."""
    known_fields = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
    filtered = {k: v for k, v in data.items() if k in known_fields}
    return cls(**filtered)


def load_config(path: Path) -> MsgBunchConfig:
    """Load configuration from a TOML file.

    Missing sections or keys get default values.

    Raises:
        ConfigError: If the file is missing, unreadable, or holds invalid values.
    """
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        raw = path.read_bytes()
        data = tomllib.loads(raw.decode("utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.error("Failed to load config from %s: %s", path, e)
        raise ConfigError(f"Failed to load config from {path}: {e}") from e

    config = MsgBunchConfig()
    section = data.get("bunch")
    if section is not None:
        if not isinstance(section, dict):
            raise ConfigError(f"[bunch] in {path} must be a table")
        config.bunch = _load_section(BunchConfig, section)

    validate_config(config)
    logger.info("Loaded config from %s", path)
    return config
