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

"""Codec base protocol and registry for settingsfile.

This module defines the foundational components for the codec system:

- Codec protocol: Interface that every text format must implement
- Codec registry: Global dict mapping codec names to implementations
- Registration and lookup functions: register_codec() and get_codec()

A codec only translates between bytes and a mapping of Values. It knows
nothing about key paths, tiers, or where files live; that is the job of
Store, ShadowStore and StoreConfig.

Design Philosophy:
    - Codecs are Protocol classes (structural subtyping, not inheritance)
    - Registration happens at module import time (codecs self-register)
    - Registry is a simple dict (no complex dependency injection needed)
    - Each codec is stateless and can be instantiated on-demand

Example:
    Implementing a custom codec:
        ```python
        from settingsfile.codecs.base import register_codec, decode_root
        from settingsfile.value import Value

        class IniCodec:
            name = "ini"

            def encode(self, root: Value) -> bytes:
                ...

            def decode(self, buffer: bytes) -> dict[str, Value]:
                data = parse_ini(buffer)
                return decode_root(data, self.name)

        register_codec("ini", IniCodec)
        ```

"""

from __future__ import annotations

from typing import Any, Protocol

from settingsfile.exceptions import (
    DecodeError,
    EncodeError,
    KeyPathError,
    UnknownCodecError,
    UnsupportedTypeError,
)
from settingsfile.logging import get_global_logger
from settingsfile.tree import check_keys
from settingsfile.value import Complex, Value, wrap


class Codec(Protocol):
    """Protocol for settings file formats.

    Attributes:
        name: Registry name of the codec (e.g., "toml").
    """

    name: str

    def encode(self, root: Value) -> bytes:
        """Serialize a whole settings tree.

        Args:
            root: The tree as a Complex value.

        Returns:
            UTF-8 encoded document.

        Raises:
            EncodeError: If the tree cannot be represented in this format.

        """
        ...

    def decode(self, buffer: bytes) -> dict[str, Value]:
        """Parse a document into top-level entries.

        Args:
            buffer: Raw document bytes. Never empty; Store rejects empty
                buffers before calling the codec.

        Returns:
            Mapping of top-level keys to Values.

        Raises:
            DecodeError: On syntax errors, unsupported values, or a
                document root that is not a mapping.

        """
        ...


def decode_root(data: Any, codec_name: str) -> dict[str, Value]:
    """Wrap a parsed document, checking that its root is a mapping.

    Args:
        data: Output of the underlying format parser.
        codec_name: Used in error messages.

    Returns:
        Mapping of top-level keys to Values.

    Raises:
        DecodeError: If the root is not a mapping, holds values outside
            the supported types, contains itself (YAML aliases can do
            that), or has a key that is empty or contains a dot.

    """
    if not isinstance(data, dict):
        raise DecodeError(
            f"{codec_name}: document root must be a mapping, got {type(data).__name__}"
        )
    try:
        root = wrap(data)
        check_keys(root)
    except (UnsupportedTypeError, KeyPathError) as err:
        raise DecodeError(f"{codec_name}: {err}") from err
    except RecursionError as err:
        raise DecodeError(f"{codec_name}: document is nested too deeply") from err
    return root.entries


def encode_root(root: Value, codec_name: str) -> dict[str, Any]:
    """Return the plain-data form of a tree for a format library.

    Raises:
        EncodeError: If `root` is not a Complex.

    """
    if not isinstance(root, Complex):
        raise EncodeError(
            f"{codec_name}: document root must be a Complex, got {type(root).__name__}"
        )
    return root.unwrap()


def decode_text(buffer: bytes, codec_name: str) -> str:
    """Decode UTF-8 bytes, reporting failures as DecodeError."""
    try:
        return buffer.decode("utf-8")
    except UnicodeDecodeError as err:
        raise DecodeError(f"{codec_name}: buffer is not valid UTF-8: {err}") from err


_CODEC_REGISTRY: dict[str, type[Codec]] = {}


def register_codec(name: str, codec_class: type[Codec]) -> None:
    """Register a codec by name in the global registry.

    Registering the same name twice overwrites the previous registration.

    Args:
        name: Codec name (e.g., "yaml"). Used by StoreConfig when a codec
            is given by name.
        codec_class: The codec class to register.

    """
    _CODEC_REGISTRY[name] = codec_class


def get_codec(name: str) -> Codec:
    """Get a codec instance by name from the global registry.

    Args:
        name: Codec name. Case-sensitive.

    Returns:
        A new instance of the requested codec.

    Raises:
        UnknownCodecError: If the name is not registered. The error lists
            the available codecs.

    """
    if name not in _CODEC_REGISTRY:
        raise UnknownCodecError(name, sorted(_CODEC_REGISTRY))
    get_global_logger().debug("CODEC", f"Using codec: {name}")
    return _CODEC_REGISTRY[name]()


def available_codecs() -> list[str]:
    """Return the registered codec names, sorted."""
    return sorted(_CODEC_REGISTRY)
