"""
Shared pytest fixtures for compound_key_map tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import pytest as _pytest

import compound_key_map as ckm
import compound_key_map.config as config

ENV_PREFIX = "COMPOUND_KEY_MAP_"


@_pytest.fixture(autouse=True)
def isolated_config(
    monkeypatch: _pytest.MonkeyPatch,
    tmp_path: _pathlib.Path,
) -> _typing.Iterator[_pathlib.Path]:
    """
    Isolate every test from the real environment and user config.

    Removes COMPOUND_KEY_MAP_* environment variables, points the config
    directory at an empty temp dir, and drops the cached Settings before
    and after the test.

    Yields:
        The temporary config directory (write config.yaml there to test
        YAML loading).
    """
    for key in list(_os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("COMPOUND_KEY_MAP_CONFIG_DIR", str(config_dir))
    config.reset_settings()
    yield config_dir
    config.reset_settings()


@_pytest.fixture
def clean_settings() -> config.Settings:
    """Settings with defaults only (no env vars, .env or YAML)."""
    return config.Settings.construct_without_dotenv()


@_pytest.fixture
def two_entry_map() -> ckm.CompoundKeyMap[int, int]:
    """Map with {1, 2} -> 3 and {4, 5} -> 6, in that order."""
    return ckm.CompoundKeyMap([([1, 2], 3), ([4, 5], 6)])
