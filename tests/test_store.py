"""
Tests for settingsfile.store module.

Tests the Store including:
- Loading from buffers and files
- Saving to streams and files
- Delegated tree operations and merging
"""

from __future__ import annotations

import io

import pytest

from settingsfile.config import StoreConfig
from settingsfile.exceptions import DecodeError, EncodeError, StorageError
from settingsfile.logging import get_logger, set_global_logger
from settingsfile.store import Store
from settingsfile.value import Int, Null, Text


@pytest.fixture
def json_store() -> Store:
    """Provide an empty JSON-backed store."""
    return Store(StoreConfig(codec="json", folder="app", filename="settings"))


class TestStoreLoad:
    """Tests for Store.load and friends."""

    def test_new_store_is_empty(self, toml_config):
        """Test a new store has no keys."""
        store = Store(toml_config)

        assert store.keys() == []
        assert len(store.tree) == 0

    def test_load_bytes(self, toml_config):
        """Test decoding a byte buffer."""
        store = Store.load(b'[user]\nname = "snsvrno"\n', toml_config)

        assert store.get("user.name") == Text("snsvrno")

    def test_load_str(self, yaml_config):
        """Test a str buffer is accepted."""
        store = Store.load("user:\n  name: snsvrno\n", yaml_config)

        assert store.get("user.name") == Text("snsvrno")

    @pytest.mark.parametrize("buffer", [b"", ""])
    def test_load_empty_raises(self, any_config, buffer):
        """Test that an empty buffer is an error, not an empty store."""
        with pytest.raises(DecodeError, match="empty"):
            Store.load(buffer, any_config)

    def test_load_malformed_raises(self, toml_config):
        """Test that codec failures propagate as DecodeError."""
        with pytest.raises(DecodeError):
            Store.load(b"a = = 1", toml_config)

    def test_load_or_empty(self, toml_config):
        """Test load_or_empty substitutes an empty store on failure."""
        assert Store.load_or_empty(b"", toml_config).keys() == []
        assert Store.load_or_empty(b"a = = 1", toml_config).keys() == []
        assert Store.load_or_empty(b"a = 1", toml_config).get("a") == Int(1)

    def test_load_or_empty_logs(self, toml_config, capsys):
        """Test the swallowed error is reported at verbose level."""
        set_global_logger(get_logger(verbose=True))

        Store.load_or_empty(b"", toml_config)

        assert "[STORE] Starting with empty settings" in capsys.readouterr().out

    def test_load_file(self, yaml_config, create_yaml_file, sample_settings_data):
        """Test loading a file written elsewhere."""
        path = create_yaml_file("settings.yaml", sample_settings_data)

        store = Store.load_file(path, yaml_config)

        assert store.tree.to_native() == sample_settings_data

    def test_load_unaddressable_key_raises(self, any_config):
        """Test a document with a dotted key is rejected instead of stored."""
        buffer = {
            "json": b'{"a": 1, "a.b": 2}',
            "yaml": b"a: 1\na.b: 2\n",
            "toml": b'a = 1\n"a.b" = 2\n',
        }[any_config.codec_name]

        with pytest.raises(DecodeError, match="contains"):
            Store.load(buffer, any_config)

    def test_load_missing_file_raises(self, toml_config, tmp_path):
        """Test a missing file raises StorageError."""
        with pytest.raises(StorageError) as exc_info:
            Store.load_file(tmp_path / "missing.toml", toml_config)

        assert exc_info.value.operation == "read"


class TestStoreSave:
    """Tests for dumps, save and save_file."""

    def test_save_to_stream(self, any_config, sample_settings_data):
        """Test save writes the encoded document to a stream."""
        store = Store(any_config)
        for key, value in sample_settings_data.items():
            store.set(key, value)
        stream = io.BytesIO()

        store.save(stream)

        assert stream.getvalue() == store.dumps()
        assert Store.load(stream.getvalue(), any_config) == store

    def test_save_file_creates_parents(self, toml_config, tmp_path):
        """Test save_file creates missing directories."""
        store = Store(toml_config)
        store.set("theme", "dark")
        path = store.global_path(tmp_path)

        store.save_file(path)

        assert path == tmp_path / "myapp" / "settings.toml"
        assert Store.load_file(path, toml_config).get("theme") == Text("dark")

    def test_save_file_encode_error_writes_nothing(self, toml_config, tmp_path):
        """Test nothing is written when the tree cannot be encoded."""
        store = Store(toml_config)
        store.set("a", None)
        path = tmp_path / "settings.toml"

        with pytest.raises(EncodeError):
            store.save_file(path)

        assert not path.exists()

    def test_global_path_uses_user_config_dir(self, toml_config, config_dir):
        """Test global_path defaults to the user config directory."""
        store = Store(toml_config)

        assert store.global_path() == config_dir / "myapp" / "settings.toml"


class TestStoreTreeOperations:
    """Tests for operations delegated to the tree."""

    def test_software_keys(self, toml_config):
        """Test keys() after setting two nested values."""
        store = Store(toml_config)
        store.set("software.version", "1.0.0")
        store.set("software.update_available", False)

        assert set(store.keys()) == {"software.version", "software.update_available"}
        assert "software.version" in store

    def test_get_set_delete(self, json_store):
        """Test the basic path operations."""
        json_store.set("a.b", 1)
        json_store.set("a.d", None)

        assert json_store.has("a.b")
        assert json_store.get("a.d") == Null()
        assert json_store.delete("a.b") == Int(1)
        assert json_store.get_or("a.b", "gone") == Text("gone")
        assert json_store.has("a.d")

    def test_flatten(self, json_store):
        """Test flatten returns a flat tree."""
        json_store.set("a.b.c", 1)

        assert not json_store.is_flat()
        assert json_store.flatten().is_flat()
        assert json_store.flatten().to_native() == {"a.b.c": 1}

    def test_merge(self, toml_config):
        """Test merge and the + operators are right-biased."""
        left = Store.load(b"[a]\nx = 1\ny = 2\n", toml_config)
        right = Store.load(b"[a]\nx = 9\n", toml_config)

        merged = left + right
        assert merged.tree.to_native() == {"a": {"x": 9, "y": 2}}
        assert merged.config is left.config

        left += right
        assert left == merged

    def test_merge_loaded_store_with_empty(self, any_config, sample_settings_data):
        """Test any loaded store can be merged without errors."""
        store = Store(any_config)
        for key, value in sample_settings_data.items():
            store.set(key, value)
        loaded = Store.load(store.dumps(), any_config)

        assert (loaded + Store(any_config)) == loaded
        assert (Store(any_config) + loaded) == loaded

