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

"""Logging interface for settingsfile.

Library modules report what they load, save and skip through this module
instead of printing directly. The logger is configured globally by the
embedding application; the default is silent.

Output levels:

- Warning: Always printed (e.g., a settings file exists but is malformed)
- Verbose: Only printed when verbose mode is enabled
- Debug: Only printed when debug mode is enabled (implies verbose)

Every message carries a prefix naming the layer that produced it: STORE,
SHADOW, CODEC, PATHS or TREE.

Example:
    Configure global logger:
        ```python
        from settingsfile.logging import get_logger, set_global_logger

        set_global_logger(get_logger(verbose=True))
        ```

    Use in library code:
        ```python
        from settingsfile.logging import get_global_logger

        logger = get_global_logger()
        logger.verbose("STORE", "Saved 12 key(s) to ~/.config/app/settings.toml")
        logger.debug("SHADOW", "Creating local settings tier")
        ```
"""

from __future__ import annotations

from typing import Protocol, TextIO


class Logger(Protocol):
    """Protocol for logger implementations."""

    def warning(self, prefix: str, message: str) -> None:
        """Report a problem the library recovered from.

        Args:
            prefix: Message prefix (e.g., "SHADOW").
            message: Log message.
        """
        ...

    def verbose(self, prefix: str, message: str) -> None:
        """Print a verbose log message.

        Args:
            prefix: Message prefix (e.g., "STORE", "SHADOW").
            message: Log message.
        """
        ...

    def debug(self, prefix: str, message: str) -> None:
        """Print a debug log message.

        Args:
            prefix: Message prefix (e.g., "CODEC", "PATHS").
            message: Log message.
        """
        ...


class DefaultLogger:
    """Logger that prints "[PREFIX] message" lines.

    Args:
        verbose: If True, print verbose messages.
        debug: If True, print debug messages (implies verbose).
        stream: Text stream to write to. Defaults to sys.stdout at the
            time of each call.
    """

    def __init__(
        self, verbose: bool = False, debug: bool = False, stream: TextIO | None = None
    ) -> None:
        self._verbose = verbose or debug
        self._debug = debug
        self._stream = stream

    def warning(self, prefix: str, message: str) -> None:
        self._emit(prefix, f"WARNING: {message}")

    def verbose(self, prefix: str, message: str) -> None:
        if self._verbose:
            self._emit(prefix, message)

    def debug(self, prefix: str, message: str) -> None:
        if self._debug:
            self._emit(prefix, message)

    def _emit(self, prefix: str, message: str) -> None:
        print(f"[{prefix}] {message}", file=self._stream)


class SilentLogger:
    """Logger that suppresses all output."""

    def warning(self, prefix: str, message: str) -> None:
        pass

    def verbose(self, prefix: str, message: str) -> None:
        pass

    def debug(self, prefix: str, message: str) -> None:
        pass


# Global logger instance (defaults to silent)
_global_logger: Logger = SilentLogger()


def get_logger(
    verbose: bool = False, debug: bool = False, stream: TextIO | None = None
) -> Logger:
    """Get a printing logger with the given verbosity."""
    return DefaultLogger(verbose=verbose, debug=debug, stream=stream)


def get_global_logger() -> Logger:
    """Get the global logger instance.

    Note:
        The default global logger is silent, warnings included. Use
        set_global_logger() to configure it.
    """
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Set the global logger instance.

    Args:
        logger: Logger instance used by every settingsfile module that
            reports through get_global_logger().
    """
    global _global_logger
    _global_logger = logger
