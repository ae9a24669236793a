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

"""Store configuration for settingsfile.

A StoreConfig bundles the codec with the naming policy that decides where a
settings file lives. It is immutable, so a ShadowStore can hand the same
instance to both of its tiers.

Persisted Layout
----------------
Global tier:

    <user-config-dir>/<folder>/<filename>[.<extension>]

Local tier (current working directory):

    <cwd>/<local_filename or filename>[.<local_extension or extension>]

Example:
    Hidden local override next to a global TOML file:

        from settingsfile import StoreConfig

        config = StoreConfig(
            codec="toml",
            folder="myapp",
            filename="settings",
            extension="toml",
            local_filename=".myapp",
        )
        config.base_filename()        # "settings.toml"
        config.local_base_filename()  # ".myapp.toml"

"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from settingsfile.codecs import Codec, get_codec
from settingsfile.paths import user_config_dir, working_dir
from settingsfile.value import Value


@dataclass(frozen=True)
class StoreConfig:
    """Codec and naming policy shared by the stores of one application.

    Attributes:
        codec: Codec instance, or the name of a registered codec
            ("yaml", "json", "toml"). Names are resolved on construction.
        folder: Directory under the user config dir holding the global file.
        filename: Base name of the global file, without extension.
        extension: Optional extension, without the dot.
        local_filename: Base name of the local file. Defaults to filename.
        local_extension: Extension of the local file. Defaults to extension.

    Raises:
        UnknownCodecError: If codec is a name that is not registered.
    """

    codec: Codec | str = field(compare=False)
    folder: str
    filename: str
    extension: str | None = None
    local_filename: str | None = None
    local_extension: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.codec, str):
            object.__setattr__(self, "codec", get_codec(self.codec))

    @property
    def codec_name(self) -> str:
        return self.codec.name

    def base_filename(self) -> str:
        """Return the global file name, with extension when configured."""
        return _join_extension(self.filename, self.extension)

    def local_base_filename(self) -> str:
        """Return the local file name, falling back to the global naming."""
        name = self.local_filename or self.filename
        extension = self.local_extension or self.extension
        return _join_extension(name, extension)

    def global_path(self, config_dir: Path | None = None) -> Path:
        """Return the global file path.

        Args:
            config_dir: Base directory to use instead of the user config dir.
        """
        base = config_dir if config_dir is not None else user_config_dir()
        return base / self.folder / self.base_filename()

    def local_path(self, cwd: Path | None = None) -> Path:
        """Return the local file path.

        Args:
            cwd: Directory to use instead of the current working directory.
        """
        base = cwd if cwd is not None else working_dir()
        return base / self.local_base_filename()

    def encode(self, root: Value) -> bytes:
        return self.codec.encode(root)

    def decode(self, buffer: bytes) -> dict[str, Value]:
        return self.codec.decode(buffer)


def _join_extension(name: str, extension: str | None) -> str:
    if extension:
        return f"{name}.{extension}"
    return name
