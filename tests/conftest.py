"""
Pytest configuration and shared fixtures for settingsfile tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from settingsfile import StoreConfig
from settingsfile.logging import SilentLogger, set_global_logger


@pytest.fixture(autouse=True)
def silent_global_logger():
    """Restore the silent global logger after every test."""
    yield
    set_global_logger(SilentLogger())


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def config_dir(tmp_test_dir: Path, monkeypatch) -> Path:
    """Point the user config directory at a temporary directory."""
    path = tmp_test_dir / "config"
    path.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(path))
    return path


@pytest.fixture
def work_dir(tmp_test_dir: Path, monkeypatch) -> Path:
    """Run the test from a temporary working directory."""
    path = tmp_test_dir / "work"
    path.mkdir()
    monkeypatch.chdir(path)
    return path


@pytest.fixture
def sample_settings_data() -> dict[str, Any]:
    """
    Provide sample settings data.

    Covers every value type except null, so it is valid for all codecs.
    """
    return {
        "user": {
            "name": "snsvrno",
            "path": ["~/bin", "/usr/local/bin"],
        },
        "software": {
            "version": "1.2.3",
            "update_available": False,
            "retries": 3,
            "timeout": 2.5,
        },
    }


@pytest.fixture
def yaml_config() -> StoreConfig:
    """Provide a YAML store config with a hidden local file."""
    return StoreConfig(
        codec="yaml",
        folder="myapp",
        filename="settings",
        extension="yaml",
        local_filename=".myapp",
    )


@pytest.fixture
def toml_config() -> StoreConfig:
    """Provide a TOML store config."""
    return StoreConfig(
        codec="toml", folder="myapp", filename="settings", extension="toml"
    )


@pytest.fixture(params=["yaml", "json", "toml"])
def any_config(request) -> StoreConfig:
    """Provide a store config for each built-in codec."""
    return StoreConfig(
        codec=request.param,
        folder="myapp",
        filename="settings",
        extension=request.param,
    )


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("settings.yaml", {"key": "value"})
    """

    def _create(filename: str, data: dict[str, Any], base: Path | None = None) -> Path:
        path = (base or tmp_test_dir) / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data, f)
        return path

    return _create
