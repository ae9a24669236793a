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

"""Exception hierarchy for settingsfile.

This module defines a custom exception hierarchy that allows library users
to distinguish between different types of errors:

- KeyPathError: Malformed key paths (empty string, empty segments)
- KeyConflictError: Ambiguous flat trees (one key is a prefix of another)
- UnsupportedTypeError: Native values that cannot be wrapped into a Value
- DecodeError / EncodeError: Codec failures while parsing or serializing
- StorageError: Filesystem failures (open, read, write, mkdir, delete)
- UnknownCodecError: Codec name not present in the registry

Missing keys are never errors. `get` and `delete` return None when a path
does not resolve, including when an intermediate segment is not a Complex.

All exceptions inherit from SettingsfileError, allowing users to catch all
settingsfile errors with a single except clause if needed.

Example:
    Catching specific error types:
        ```python
        from settingsfile import Store, StoreConfig
        from settingsfile.exceptions import DecodeError, StorageError

        config = StoreConfig(codec="toml", folder="myapp", filename="settings")
        try:
            store = Store.load_file(config.global_path(), config)
        except DecodeError as e:
            print(f"Malformed settings file: {e}")
        except StorageError as e:
            print(f"Could not {e.operation} {e.path}: {e}")
        ```

    Catching all settingsfile errors:
        ```python
        from settingsfile.exceptions import SettingsfileError

        try:
            store.save_file(config.global_path())
        except SettingsfileError as e:
            print(f"settingsfile error: {e}")
        ```
"""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "SettingsfileError",
    "KeyPathError",
    "KeyConflictError",
    "UnsupportedTypeError",
    "CodecError",
    "DecodeError",
    "EncodeError",
    "StorageError",
    "UnknownCodecError",
]


class SettingsfileError(Exception):
    """Base exception for all settingsfile errors.

    All settingsfile-specific exceptions inherit from this class, allowing
    users to catch all settingsfile errors with a single except clause.
    """

    pass


class KeyPathError(SettingsfileError, ValueError):
    """Raised for malformed key paths.

    A key path must be a non-empty string of dot-separated, non-empty
    segments. `""`, `"a..b"`, `".a"` and `"a."` are all rejected.
    """

    def __init__(self, key_path: object, reason: str):
        self.key_path = key_path
        super().__init__(f"Invalid key path {key_path!r}: {reason}")


class KeyConflictError(SettingsfileError):
    """Raised when a flat tree holds both a key and one of its extensions.

    Example:
        A flat tree with `"a"` and `"a.b"` cannot be unflattened: `"a"` would
        have to be both a leaf and a Complex.
    """

    def __init__(self, key: str, other: str):
        self.key = key
        self.other = other
        super().__init__(f"Flat key {key!r} conflicts with {other!r}")


class UnsupportedTypeError(SettingsfileError, TypeError):
    """Raised when a native object cannot be wrapped into a Value."""

    pass


class CodecError(SettingsfileError):
    """Base class for codec failures."""

    pass


class DecodeError(CodecError):
    """Raised when a buffer cannot be decoded into a tree.

    This covers syntax errors reported by the underlying format library,
    documents whose root is not a mapping, and empty buffers.
    """

    pass


class EncodeError(CodecError):
    """Raised when a tree cannot be serialized by a codec."""

    pass


class StorageError(SettingsfileError):
    """Raised for filesystem failures.

    Attributes:
        path: The file or directory being accessed.
        operation: Short verb describing the failed action ("read",
            "write", "mkdir", "delete").
    """

    def __init__(self, path: Path | str, operation: str, reason: str):
        self.path = Path(path)
        self.operation = operation
        super().__init__(f"Failed to {operation} {self.path}: {reason}")


class UnknownCodecError(SettingsfileError, KeyError):
    """Raised when a codec name is not registered."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        listed = ", ".join(available) or "(none)"
        super().__init__(f"Unknown codec: {name!r}. Available: {listed}")

    def __str__(self) -> str:
        return str(self.args[0])
