# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Single-file settings store.

A Store binds one PathTree to a StoreConfig. It is created empty or decoded
from a buffer, mutated in memory through key paths, and written back out
only when asked (there is no auto-save).

Loading
-------
- Store.load(buffer, config): decode bytes or str. An empty buffer is a
  DecodeError, never an empty store.
- Store.load_or_empty(buffer, config): same, but a DecodeError yields an
  empty store. Use it where a missing or corrupt file is expected.
- Store.load_file(path, config): read a file, then load. File errors raise
  StorageError.

Saving
------
- dumps(): encoded document as bytes
- save(stream): write the encoded document to a binary stream
- save_file(path): write to a file, creating parent directories

Example:
    Round trip through a file:
        ```python
        from pathlib import Path
        from settingsfile import Store, StoreConfig

        config = StoreConfig(codec="toml", folder="myapp", filename="settings",
                             extension="toml")
        store = Store(config)
        store.set("user.name", "snsvrno")
        store.set("user.path", ["~/bin"])
        store.save_file(store.global_path())

        again = Store.load_file(store.global_path(), config)
        again.get("user.name").to_text()  # "snsvrno"
        ```

"""

from __future__ import annotations

from pathlib import Path
from typing import Any, BinaryIO

from settingsfile.config import StoreConfig
from settingsfile.exceptions import DecodeError
from settingsfile.logging import get_global_logger
from settingsfile.paths import read_file, write_file
from settingsfile.tree import PathTree
from settingsfile.value import Value


class Store:
    """A PathTree persisted through one codec.

    Args:
        config: Codec and naming policy.
        tree: Initial contents. Defaults to an empty tree.
    """

    def __init__(self, config: StoreConfig, tree: PathTree | None = None):
        self.config = config
        self.tree = tree if tree is not None else PathTree()

    # -------------------------------
    # Loading
    # -------------------------------

    @classmethod
    def load(cls, buffer: bytes | str, config: StoreConfig) -> Store:
        """Decode a buffer into a new Store.

        Args:
            buffer: Encoded document. A str is encoded as UTF-8 first.
            config: Codec and naming policy for the new store.

        Returns:
            The decoded store.

        Raises:
            DecodeError: If the buffer is empty or the codec rejects it.
        """
        if isinstance(buffer, str):
            buffer = buffer.encode("utf-8")
        if not buffer:
            raise DecodeError(f"{config.codec_name}: buffer is empty")

        entries = config.decode(buffer)
        get_global_logger().debug(
            "STORE",
            f"Decoded {len(entries)} top-level key(s) with {config.codec_name}",
        )
        return cls(config, PathTree(entries))

    @classmethod
    def load_or_empty(cls, buffer: bytes | str, config: StoreConfig) -> Store:
        """Decode a buffer, returning an empty Store if decoding fails."""
        try:
            return cls.load(buffer, config)
        except DecodeError as err:
            get_global_logger().verbose(
                "STORE", f"Starting with empty settings: {err}"
            )
            return cls(config)

    @classmethod
    def load_file(cls, path: Path, config: StoreConfig) -> Store:
        """Read and decode a settings file.

        Raises:
            StorageError: If the file cannot be read.
            DecodeError: If the file is empty or malformed.
        """
        path = Path(path)
        store = cls.load(read_file(path), config)
        get_global_logger().verbose(
            "STORE", f"Loaded {len(store.keys())} key(s) from {path}"
        )
        return store

    # -------------------------------
    # Saving
    # -------------------------------

    def dumps(self) -> bytes:
        """Encode the whole tree.

        Raises:
            EncodeError: If the codec cannot represent the tree.
        """
        return self.config.encode(self.tree.to_value())

    def save(self, stream: BinaryIO) -> None:
        """Encode the whole tree and write it to a binary stream."""
        stream.write(self.dumps())

    def save_file(self, path: Path) -> None:
        """Encode the whole tree and write it to a file.

        Missing parent directories are created. Nothing is written if
        encoding fails.

        Raises:
            EncodeError: If the codec cannot represent the tree.
            StorageError: If a directory or the file cannot be written.
        """
        path = Path(path)
        data = self.dumps()
        write_file(path, data)
        get_global_logger().verbose(
            "STORE", f"Saved {len(self.keys())} key(s) to {path}"
        )

    def global_path(self, config_dir: Path | None = None) -> Path:
        """Return where this store lives in the user config dir."""
        return self.config.global_path(config_dir)

    # -------------------------------
    # Tree delegation
    # -------------------------------

    def get(self, key_path: str) -> Value | None:
        return self.tree.get(key_path)

    def get_or(self, key_path: str, default: Any) -> Value:
        return self.tree.get_or(key_path, default)

    def has(self, key_path: str) -> bool:
        return self.tree.has(key_path)

    def set(self, key_path: str, value: Any) -> None:
        self.tree.set(key_path, value)

    def delete(self, key_path: str) -> Value | None:
        return self.tree.delete(key_path)

    def keys(self) -> list[str]:
        return self.tree.keys()

    def is_flat(self) -> bool:
        return self.tree.is_flat()

    def flatten(self) -> PathTree:
        return self.tree.flatten()

    def merge(self, other: Store) -> Store:
        """Return a new Store with `other`'s entries overlaid on this one's.

        The result keeps this store's config.
        """
        return Store(self.config, self.tree.merge(other.tree))

    def merge_into(self, other: Store) -> None:
        self.tree.merge_into(other.tree)

    def __add__(self, other: Store) -> Store:
        if not isinstance(other, Store):
            return NotImplemented
        return self.merge(other)

    def __iadd__(self, other: Store) -> Store:
        if not isinstance(other, Store):
            return NotImplemented
        self.merge_into(other)
        return self

    def __contains__(self, key_path: object) -> bool:
        return key_path in self.tree

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Store):
            return NotImplemented
        return self.tree == other.tree

    def __repr__(self) -> str:
        return f"Store(codec={self.config.codec_name!r}, tree={self.tree!r})"
