"""Shared fixtures for msgbunch tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from msgbunch.builder import MsgBunchBuilder
from msgbunch.config import MsgBunchConfig, save_config

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def builder() -> MsgBunchBuilder:
    """A fresh builder with the default Discord limit."""
    return MsgBunchBuilder()


@pytest.fixture
def small_builder() -> MsgBunchBuilder:
    """A builder with a tiny limit so splits are easy to read."""
    return MsgBunchBuilder(limit=10)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A TOML config file with non-default builder settings."""
    config = MsgBunchConfig()
    config.bunch.limit = 12
    config.bunch.split_chars = " "
    path = tmp_path / "msgbunch.toml"
    save_config(config, path)
    return path
