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

"""Path-addressed value tree for settingsfile.

A PathTree is a mapping from top-level keys to Values, treated as the root
Complex of a settings document. Values anywhere in the tree are addressed
with key paths: dot-separated segments such as "user.name". Every segment
but the last must resolve to a Complex.

Flat Form
---------
A tree is flat when it has at least one entry and none of its top-level
values is a Complex. Flattening hoists every leaf to the top level under its
fully-qualified path:

    {"user": {"name": "snsvrno", "path": ["~/bin"]}}
    ->
    {"user.name": "snsvrno", "user.path": ["~/bin"]}

`from_flat` is the inverse. Empty Complex nodes have no leaves, so they
flatten to nothing and do not survive a flatten/from_flat round trip.

Merge Behavior
--------------
`merge` (and the `+` / `+=` operators) flattens both trees, overlays the
right-hand tree's entries on the left's, then unflattens:

  - **Same path**: right wins
  - **Structural clash** (left has "a", right has "a.b" or the reverse):
    right wins, the left entry is dropped
  - **Complex vs Complex**: merged leaf by leaf, as a side effect of
    flattening first

Error Handling
--------------
- Missing paths are not errors: get/delete return None
- Navigating through a non-Complex segment behaves like a missing path
- set replaces non-Complex intermediate values with empty Complex values
- KeyPathError: malformed key path ("", "a..b", ".a", "a."), or a stored
  key that is empty or contains a dot
- KeyConflictError: from_flat given both "a" and "a.b"

Example:
    >>> from settingsfile.tree import PathTree
    >>> tree = PathTree()
    >>> tree.set("a.b.c.d", "mortan")
    >>> tree.set("a.b.f", 4453)
    >>> tree.get("a.b.f").to_int()
    4453
    >>> sorted(tree.keys())
    ['a.b.c.d', 'a.b.f']
"""

from __future__ import annotations

from collections.abc import Mapping
import copy
from typing import Any

from settingsfile.exceptions import KeyConflictError, KeyPathError
from settingsfile.logging import get_global_logger
from settingsfile.value import Complex, Value, wrap

__all__ = ["PathTree", "check_keys", "split_key_path"]


def split_key_path(key_path: str) -> list[str]:
    """Split a key path into its segments.

    Args:
        key_path: Dot-separated path such as "user.name".

    Returns:
        The list of segments, at least one, none of them empty.

    Raises:
        KeyPathError: If `key_path` is not a string, is empty, or has an
            empty segment.
    """
    if not isinstance(key_path, str):
        raise KeyPathError(key_path, f"expected str, got {type(key_path).__name__}")
    if not key_path:
        raise KeyPathError(key_path, "path is empty")
    segments = key_path.split(".")
    if any(not segment for segment in segments):
        raise KeyPathError(key_path, "path has an empty segment")
    return segments


def check_keys(value: Value, parent: str | None = None) -> None:
    """Check that every Complex key under `value` is a valid path segment.

    A key that is empty or contains a dot could be stored but never
    addressed by a key path. Arrays are leaves and are not descended into.

    Args:
        value: Value to check. Anything but a Complex passes.
        parent: Key path of `value`, used in error messages.

    Raises:
        KeyPathError: Naming the full path of the first bad key.
    """
    if not isinstance(value, Complex):
        return
    for key, child in value.entries.items():
        path = key if parent is None else f"{parent}.{key}"
        if not key:
            raise KeyPathError(path, "key is empty")
        if "." in key:
            raise KeyPathError(path, f"key {key!r} contains '.'")
        check_keys(child, path)


def _proper_prefixes(key: str) -> list[str]:
    """Return "a", "a.b" for "a.b.c"."""
    segments = key.split(".")
    return [".".join(segments[:i]) for i in range(1, len(segments))]


class PathTree:
    """Nested settings tree addressed by dot-separated key paths.

    Every key in `entries`, at any depth, must be a single non-empty
    segment without dots. Use `from_flat` to build a tree from key paths.

    Args:
        entries: Optional initial top-level mapping. Values are wrapped
            with `settingsfile.value.wrap`.

    Raises:
        UnsupportedTypeError: If an entry cannot be wrapped.
        KeyPathError: If a key is empty or contains a dot.
    """

    def __init__(self, entries: Mapping[str, Any] | None = None):
        self._root: dict[str, Value] = {}
        if entries:
            root = wrap(dict(entries))
            check_keys(root)
            self._root = root.entries

    # -------------------------------
    # Constructors
    # -------------------------------

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> PathTree:
        """Build a tree from a (possibly nested) mapping of native data or Values."""
        return cls(mapping)

    @classmethod
    def from_value(cls, value: Complex) -> PathTree:
        """Build a tree whose root is a copy of `value`'s entries."""
        return cls(value.entries)

    @classmethod
    def from_flat(cls, flat: PathTree | Mapping[str, Any]) -> PathTree:
        """Rebuild a nested tree from a flat one.

        Calls `set` for every entry, in mapping order.

        Args:
            flat: Flat tree, or a mapping of key paths to values.

        Returns:
            A new nested tree.

        Raises:
            KeyConflictError: If one key is a dotted prefix of another
                (e.g., "a" and "a.b"); such input has no single nested form.
            KeyPathError: If a key is not a valid key path.
        """
        entries = flat._root if isinstance(flat, PathTree) else flat
        keys = set(entries)
        for key in entries:
            for prefix in _proper_prefixes(key):
                if prefix in keys:
                    raise KeyConflictError(prefix, key)

        tree = cls()
        for key, value in entries.items():
            tree.set(key, value)
        return tree

    # -------------------------------
    # Path operations
    # -------------------------------

    def get(self, key_path: str) -> Value | None:
        """Look up a key path.

        Args:
            key_path: Dot-separated path.

        Returns:
            A deep copy of the value, or None if any segment is missing or
            an intermediate segment is not a Complex.

        Raises:
            KeyPathError: If `key_path` is malformed.
        """
        node = self._lookup(split_key_path(key_path))
        return None if node is None else node.copy()

    def get_or(self, key_path: str, default: Any) -> Value:
        """Look up a key path, wrapping `default` when it is absent."""
        found = self.get(key_path)
        return wrap(default) if found is None else found

    def has(self, key_path: str) -> bool:
        return self._lookup(split_key_path(key_path)) is not None

    def set(self, key_path: str, value: Any) -> None:
        """Insert or replace the value at a key path.

        Intermediate segments that are missing, or that hold something other
        than a Complex, are replaced with empty Complex values. Whatever the
        non-Complex value held is lost.

        Args:
            key_path: Dot-separated path.
            value: A Value or any native object `wrap` accepts.

        Raises:
            KeyPathError: If `key_path` is malformed, or `value` holds a
                key that is empty or contains a dot.
            UnsupportedTypeError: If `value` cannot be wrapped.
        """
        segments = split_key_path(key_path)
        wrapped = wrap(value)
        check_keys(wrapped, key_path)

        entries = self._root
        for depth, segment in enumerate(segments[:-1]):
            child = entries.get(segment)
            if not isinstance(child, Complex):
                if child is not None:
                    get_global_logger().debug(
                        "TREE",
                        f"Replacing {type(child).__name__} at "
                        f"{'.'.join(segments[: depth + 1])} while setting {key_path}",
                    )
                child = Complex()
                entries[segment] = child
            entries = child.entries

        entries[segments[-1]] = wrapped

    def delete(self, key_path: str) -> Value | None:
        """Remove the value at a key path.

        Deleting a Complex removes its whole subtree. Sibling entries are
        untouched, and parents left empty stay in the tree as empty Complex
        values.

        Args:
            key_path: Dot-separated path.

        Returns:
            The removed value, or None if nothing was at the path.

        Raises:
            KeyPathError: If `key_path` is malformed.
        """
        segments = split_key_path(key_path)
        if len(segments) == 1:
            return self._root.pop(segments[0], None)
        parent = self._lookup(segments[:-1])
        if not isinstance(parent, Complex):
            return None
        return parent.entries.pop(segments[-1], None)

    def keys(self) -> list[str]:
        """Return the fully-qualified key path of every leaf."""
        return list(self.flatten()._root)

    def _lookup(self, segments: list[str]) -> Value | None:
        node: Value = Complex(self._root)
        for segment in segments:
            if not isinstance(node, Complex):
                return None
            found = node.entries.get(segment)
            if found is None:
                return None
            node = found
        return node

    # -------------------------------
    # Flatten and merge
    # -------------------------------

    def is_flat(self) -> bool:
        """True if non-empty and no top-level value is a Complex."""
        if not self._root:
            return False
        return not any(value.is_complex() for value in self._root.values())

    def flatten(self) -> PathTree:
        """Return a new tree keyed by fully-qualified key paths."""
        flat = PathTree()
        flat._root = Complex(self._root).flatten().entries
        return flat

    def merge(self, other: PathTree) -> PathTree:
        """Overlay `other` on this tree and return the result.

        Neither tree is modified.

        Args:
            other: Tree whose entries win on conflict.

        Returns:
            A new tree.
        """
        flat_self = self.flatten()._root
        flat_other = other.flatten()._root

        other_prefixes = {p for key in flat_other for p in _proper_prefixes(key)}
        overlay: dict[str, Value] = {}
        for key, value in flat_self.items():
            if key in other_prefixes:
                continue
            if any(prefix in flat_other for prefix in _proper_prefixes(key)):
                continue
            overlay[key] = value
        overlay.update(flat_other)

        return PathTree.from_flat(overlay)

    def merge_into(self, other: PathTree) -> None:
        """In-place form of `merge`."""
        self._root = self.merge(other)._root

    # -------------------------------
    # Conversion
    # -------------------------------

    def to_value(self) -> Complex:
        """Return the whole tree as a Complex (a deep copy)."""
        return Complex(copy.deepcopy(self._root))

    def to_native(self) -> dict[str, Any]:
        """Return the whole tree as plain Python data."""
        return Complex(self._root).unwrap()

    def copy(self) -> PathTree:
        clone = PathTree()
        clone._root = copy.deepcopy(self._root)
        return clone

    # -------------------------------
    # Dunder methods
    # -------------------------------

    def __add__(self, other: PathTree) -> PathTree:
        if not isinstance(other, PathTree):
            return NotImplemented
        return self.merge(other)

    def __iadd__(self, other: PathTree) -> PathTree:
        if not isinstance(other, PathTree):
            return NotImplemented
        self.merge_into(other)
        return self

    def __contains__(self, key_path: object) -> bool:
        if not isinstance(key_path, str):
            return False
        try:
            return self.has(key_path)
        except KeyPathError:
            return False

    def __len__(self) -> int:
        return len(self._root)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathTree):
            return NotImplemented
        return self._root == other._root

    def __repr__(self) -> str:
        return f"PathTree({Complex(self._root)})"
