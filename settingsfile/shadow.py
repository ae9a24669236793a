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

"""Two-tier settings with local overrides.

A ShadowStore layers a local settings file (in the working directory) over
a global one (in the user config directory). Reads go through the local
tier first; writes always name the tier they target.

Read Semantics
--------------
get(key_path):

  - No local tier, or local has nothing at the path: the global value
  - Local value is not a Complex, or global has no Complex there: the
    local value
  - Both are Complex: the local Complex, with keys present only in the
    global Complex copied in. This fill-in is one level deep; a key
    present in both keeps the local value even when both sides are
    Complex.

Example:
    global: {"a": {"x": 1, "y": 2}}
    local:  {"a": {"x": 9}}
    get("a") -> {"x": 9, "y": 2}

Tier Lifecycle
--------------
The global Store always exists (empty until loaded or written). The local
Store is None until a local load succeeds or set_local is first called.
Deleting from the global tier never removes a local override.

Persistence
-----------
load() tries the global file, then the local file. A tier that fails to
load keeps its previous state. An unreadable or missing file is logged at
verbose level, since a missing local file is the normal case; a file that
exists but does not decode is logged as a warning.

save() always writes the global file and writes the local file only when a
local tier exists. Save errors propagate.

Example:
    from settingsfile import ShadowStore, StoreConfig

    shadow = ShadowStore(StoreConfig(codec="toml", folder="myapp",
                                     filename="settings", extension="toml",
                                     local_filename=".myapp"))
    shadow.load()
    shadow.set_local("editor.theme", "light")
    shadow.save()

"""

from __future__ import annotations

from pathlib import Path
from typing import Any, BinaryIO

from settingsfile.config import StoreConfig
from settingsfile.exceptions import DecodeError, StorageError
from settingsfile.logging import get_global_logger
from settingsfile.store import Store
from settingsfile.value import Complex, Value, wrap


class ShadowStore:
    """Global settings overridden by optional local settings.

    Args:
        config: Codec and naming policy shared by both tiers.

    Attributes:
        global_: The global tier. Always present.
        local: The local tier, or None until loaded or first written.
    """

    def __init__(self, config: StoreConfig):
        self.config = config
        self.global_ = Store(config)
        self.local: Store | None = None

    # -------------------------------
    # Reads
    # -------------------------------

    def get(self, key_path: str) -> Value | None:
        """Composite read; see the module docstring for the rules."""
        global_value = self.global_.get(key_path)
        local_value = self.get_local(key_path)
        if local_value is None:
            return global_value

        if isinstance(local_value, Complex) and isinstance(global_value, Complex):
            for key, value in global_value.entries.items():
                local_value.entries.setdefault(key, value)
        return local_value

    def get_global(self, key_path: str) -> Value | None:
        return self.global_.get(key_path)

    def get_local(self, key_path: str) -> Value | None:
        if self.local is None:
            return None
        return self.local.get(key_path)

    def get_or(self, key_path: str, default: Any) -> Value:
        found = self.get(key_path)
        return wrap(default) if found is None else found

    def has(self, key_path: str) -> bool:
        """True if either tier holds a value at the path."""
        if self.global_.has(key_path):
            return True
        return self.local is not None and self.local.has(key_path)

    def keys(self) -> list[str]:
        """Return every leaf key path of both tiers, global ones first."""
        keys = self.global_.keys()
        if self.local is not None:
            seen = set(keys)
            keys.extend(key for key in self.local.keys() if key not in seen)
        return keys

    # -------------------------------
    # Writes
    # -------------------------------

    def set_global(self, key_path: str, value: Any) -> None:
        self.global_.set(key_path, value)

    def set_local(self, key_path: str, value: Any) -> None:
        """Write to the local tier, creating it on first use."""
        if self.local is None:
            get_global_logger().debug("SHADOW", "Creating local settings tier")
            self.local = Store(self.config)
        self.local.set(key_path, value)

    def delete_global(self, key_path: str) -> Value | None:
        return self.global_.delete(key_path)

    def delete_local(self, key_path: str) -> Value | None:
        if self.local is None:
            return None
        return self.local.delete(key_path)

    # -------------------------------
    # Persistence
    # -------------------------------

    def load(
        self, config_dir: Path | None = None, working_dir: Path | None = None
    ) -> None:
        """Load both tiers from their files.

        Args:
            config_dir: Base directory for the global file. Defaults to the
                user config directory.
            working_dir: Directory holding the local file. Defaults to the
                current working directory.
        """
        logger = get_global_logger()

        try:
            self.global_ = Store.load_file(self.config.global_path(config_dir), self.config)
        except StorageError as err:
            logger.verbose("SHADOW", f"Global settings not loaded: {err}")
        except DecodeError as err:
            logger.warning("SHADOW", f"Ignoring malformed global settings: {err}")

        try:
            self.local = Store.load_file(self.config.local_path(working_dir), self.config)
        except StorageError as err:
            logger.verbose("SHADOW", f"Local settings not loaded: {err}")
        except DecodeError as err:
            logger.warning("SHADOW", f"Ignoring malformed local settings: {err}")

    def load_global(self, buffer: bytes | str) -> None:
        """Replace the global tier with a decoded buffer.

        Raises:
            DecodeError: If the buffer is empty or malformed.
        """
        self.global_ = Store.load(buffer, self.config)

    def load_local(self, buffer: bytes | str) -> None:
        """Replace the local tier with a decoded buffer.

        Raises:
            DecodeError: If the buffer is empty or malformed.
        """
        self.local = Store.load(buffer, self.config)

    def save(
        self, config_dir: Path | None = None, working_dir: Path | None = None
    ) -> None:
        """Write the global file, and the local file if a local tier exists.

        Raises:
            EncodeError: If a tier cannot be encoded.
            StorageError: If a file cannot be written.
        """
        self.global_.save_file(self.config.global_path(config_dir))
        if self.local is not None:
            self.local.save_file(self.config.local_path(working_dir))

    def save_global(self, stream: BinaryIO) -> None:
        self.global_.save(stream)

    def save_local(self, stream: BinaryIO) -> None:
        """Write the local tier to a stream. Writes nothing if it is absent."""
        if self.local is not None:
            self.local.save(stream)

    def __repr__(self) -> str:
        return f"ShadowStore(global_={self.global_!r}, local={self.local!r})"
