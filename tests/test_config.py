"""
Tests for settingsfile.config module.

Tests StoreConfig including:
- Codec resolution by name
- Global and local file naming
- Path resolution against the user config and working directories
"""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from settingsfile.codecs import JsonCodec, TomlCodec
from settingsfile.config import StoreConfig
from settingsfile.exceptions import UnknownCodecError
from settingsfile.value import wrap


class TestCodecResolution:
    """Tests for the codec field."""

    def test_codec_by_name(self):
        """Test that a codec name resolves to a codec instance."""
        config = StoreConfig(codec="toml", folder="app", filename="settings")

        assert isinstance(config.codec, TomlCodec)
        assert config.codec_name == "toml"

    def test_codec_instance(self):
        """Test that a codec instance is used as given."""
        codec = JsonCodec()
        config = StoreConfig(codec=codec, folder="app", filename="settings")

        assert config.codec is codec

    def test_unknown_codec_name_raises(self):
        """Test that unknown codec names fail at construction."""
        with pytest.raises(UnknownCodecError):
            StoreConfig(codec="ron", folder="app", filename="settings")

    def test_frozen(self):
        """Test that configs are immutable."""
        config = StoreConfig(codec="json", folder="app", filename="settings")

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.folder = "other"

    def test_encode_decode_delegate(self):
        """Test encode/decode go through the configured codec."""
        config = StoreConfig(codec="json", folder="app", filename="settings")

        assert config.decode(config.encode(wrap({"a": 1}))) == {"a": wrap(1)}


class TestNaming:
    """Tests for base_filename and local_base_filename."""

    def test_without_extension(self):
        """Test names without an extension."""
        config = StoreConfig(codec="toml", folder="app", filename="settings")

        assert config.base_filename() == "settings"
        assert config.local_base_filename() == "settings"

    def test_with_extension(self, toml_config):
        """Test the extension is appended with a dot."""
        assert toml_config.base_filename() == "settings.toml"
        assert toml_config.local_base_filename() == "settings.toml"

    def test_local_overrides(self):
        """Test local filename and extension override the global naming."""
        config = StoreConfig(
            codec="yaml",
            folder="app",
            filename="settings",
            extension="yaml",
            local_filename=".app",
            local_extension="yml",
        )

        assert config.base_filename() == "settings.yaml"
        assert config.local_base_filename() == ".app.yml"

    def test_local_filename_keeps_global_extension(self, yaml_config):
        """Test that only the unset local parts fall back."""
        assert yaml_config.local_base_filename() == ".myapp.yaml"


class TestPaths:
    """Tests for global_path and local_path."""

    def test_global_path_explicit_dir(self, toml_config, tmp_path):
        """Test the global path under an explicit config directory."""
        assert toml_config.global_path(tmp_path) == tmp_path / "myapp" / "settings.toml"

    def test_global_path_uses_user_config_dir(self, toml_config, config_dir):
        """Test the global path defaults to the user config directory."""
        assert toml_config.global_path() == config_dir / "myapp" / "settings.toml"

    def test_local_path_explicit_dir(self, yaml_config, tmp_path):
        """Test the local path under an explicit directory."""
        assert yaml_config.local_path(tmp_path) == tmp_path / ".myapp.yaml"

    def test_local_path_uses_cwd(self, yaml_config, work_dir):
        """Test the local path defaults to the working directory."""
        assert yaml_config.local_path() == Path.cwd() / ".myapp.yaml"
