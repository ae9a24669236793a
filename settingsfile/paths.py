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

"""Filesystem helpers for settingsfile.

This module is the only place that touches the disk. It resolves the two
base directories a settings file can live in and wraps the handful of file
operations the stores need, turning OSError into StorageError with the path
and operation attached.

Directory Resolution
--------------------
- user_config_dir(): $XDG_CONFIG_HOME if set, %APPDATA% on Windows,
  otherwise ~/.config
- working_dir(): the process's current working directory (local tier)

Example:
    from settingsfile.paths import user_config_dir, write_file

    target = user_config_dir() / "myapp" / "settings.toml"
    write_file(target, b'theme = "dark"\n')  # creates ~/.config/myapp

"""

from __future__ import annotations

import os
from pathlib import Path

from settingsfile.exceptions import StorageError
from settingsfile.logging import get_global_logger


def user_config_dir() -> Path:
    """Return the per-user configuration directory."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    if os.name == "nt":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    return Path.home() / ".config"


def working_dir() -> Path:
    """Return the current working directory."""
    return Path.cwd()


def ensure_dir(directory: Path) -> None:
    """Create a directory and its parents if missing.

    Raises:
        StorageError: If the directory cannot be created.
    """
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise StorageError(directory, "mkdir", str(err)) from err


def read_file(path: Path) -> bytes:
    """Read a whole file.

    Raises:
        StorageError: If the file is missing or unreadable.
    """
    get_global_logger().debug("PATHS", f"Reading {path}")
    try:
        return path.read_bytes()
    except OSError as err:
        raise StorageError(path, "read", str(err)) from err


def write_file(path: Path, data: bytes) -> None:
    """Write a whole file, creating parent directories first.

    Raises:
        StorageError: If a directory or the file cannot be written.
    """
    ensure_dir(path.parent)
    get_global_logger().debug("PATHS", f"Writing {len(data)} byte(s) to {path}")
    try:
        path.write_bytes(data)
    except OSError as err:
        raise StorageError(path, "write", str(err)) from err


def remove_file(path: Path) -> bool:
    """Delete a file.

    Returns:
        True if a file was removed, False if it did not exist.

    Raises:
        StorageError: If the file exists but cannot be removed.
    """
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as err:
        raise StorageError(path, "delete", str(err)) from err
    return True
