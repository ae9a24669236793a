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

"""Value types for settingsfile.

Every datum stored in a settings tree is one of a closed set of variants:

- Text: a string
- Switch: a boolean
- Int: a 32-bit signed integer
- Float: a floating point number within the single-precision range
- Array: an ordered list of values (any variant, including Complex)
- Complex: a mapping from string keys to values, nestable to any depth
- Null: the absence marker

Equality is structural: two values are equal when they are the same variant
and hold equal contents, recursively. `Int(1)` is not equal to `Float(1.0)`
or `Switch(True)`.

Introspection (`is_*`) and checked downcast (`to_*`) never raise; a downcast
to the wrong variant returns None. Container downcasts return copies so the
caller can't mutate a tree through them.

Example:
    Wrapping and unwrapping native data:
        ```python
        from settingsfile.value import wrap

        value = wrap({"user": {"name": "snsvrno", "path": ["~/bin"]}})
        value.is_complex()                     # True
        value.to_complex()["user"].to_text()   # None, it's a Complex
        value.unwrap()                         # the wrapped dict again
        ```
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
import copy
import math
from dataclasses import dataclass, field
from typing import Any

from settingsfile.exceptions import UnsupportedTypeError

__all__ = [
    "Value",
    "Text",
    "Switch",
    "Int",
    "Float",
    "Array",
    "Complex",
    "Null",
    "INT_MIN",
    "INT_MAX",
    "FLOAT_MAX",
    "wrap",
]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
# Largest finite single-precision float
FLOAT_MAX = 3.4028234663852886e38


class Value(ABC):
    """Abstract base class of every value variant."""

    def is_text(self) -> bool:
        return isinstance(self, Text)

    def is_switch(self) -> bool:
        return isinstance(self, Switch)

    def is_int(self) -> bool:
        return isinstance(self, Int)

    def is_float(self) -> bool:
        return isinstance(self, Float)

    def is_array(self) -> bool:
        return isinstance(self, Array)

    def is_complex(self) -> bool:
        return isinstance(self, Complex)

    def is_none(self) -> bool:
        return isinstance(self, Null)

    def to_text(self) -> str | None:
        return self.value if isinstance(self, Text) else None

    def to_switch(self) -> bool | None:
        return self.value if isinstance(self, Switch) else None

    def to_int(self) -> int | None:
        return self.value if isinstance(self, Int) else None

    def to_float(self) -> float | None:
        return self.value if isinstance(self, Float) else None

    def to_array(self) -> list[Value] | None:
        if isinstance(self, Array):
            return copy.deepcopy(self.items)
        return None

    def to_complex(self) -> dict[str, Value] | None:
        if isinstance(self, Complex):
            return copy.deepcopy(self.entries)
        return None

    def copy(self) -> Value:
        """Return a deep copy of this value."""
        return copy.deepcopy(self)

    @abstractmethod
    def unwrap(self) -> Any:
        """Convert back to plain Python data (the inverse of wrap)."""

    def flatten(self, parent_key: str | None = None) -> Value:
        """Flatten this value.

        Anything but a Complex is returned as a copy. A Complex returns a
        one-level Complex whose keys are dot-joined paths to each leaf,
        prefixed with `parent_key` when given. Empty Complex children
        contribute no entries.
        """
        return self.copy()


@dataclass
class Text(Value):
    value: str

    def unwrap(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass
class Switch(Value):
    value: bool

    def unwrap(self) -> bool:
        return self.value

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass
class Int(Value):
    value: int

    def __post_init__(self) -> None:
        if not INT_MIN <= self.value <= INT_MAX:
            raise UnsupportedTypeError(
                f"Integer {self.value} is outside the 32-bit signed range"
            )

    def unwrap(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class Float(Value):
    value: float

    def __post_init__(self) -> None:
        if math.isfinite(self.value) and abs(self.value) > FLOAT_MAX:
            raise UnsupportedTypeError(
                f"Float {self.value} is outside the single-precision range"
            )

    def unwrap(self) -> float:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class Array(Value):
    items: list[Value] = field(default_factory=list)

    def unwrap(self) -> list[Any]:
        return [item.unwrap() for item in self.items]

    def __str__(self) -> str:
        return "[ " + ", ".join(str(item) for item in self.items) + " ]"


@dataclass
class Complex(Value):
    entries: dict[str, Value] = field(default_factory=dict)

    def unwrap(self) -> dict[str, Any]:
        return {key: value.unwrap() for key, value in self.entries.items()}

    def flatten(self, parent_key: str | None = None) -> Value:
        flat: dict[str, Value] = {}
        for key, value in self.entries.items():
            path = key if parent_key is None else f"{parent_key}.{key}"
            flattened = value.flatten(path)
            if isinstance(flattened, Complex):
                flat.update(flattened.entries)
            else:
                flat[path] = flattened
        return Complex(flat)

    def __str__(self) -> str:
        if not self.entries:
            return "{ }"
        body = ", ".join(f"{key} : {value}" for key, value in self.entries.items())
        return "{ " + body + " }"


@dataclass
class Null(Value):
    def unwrap(self) -> None:
        return None

    def __str__(self) -> str:
        return "[BLANK]"


def wrap(obj: Any) -> Value:
    """Wrap a native Python object into a Value.

    Supported types:

    - str -> Text
    - bool -> Switch
    - int (32-bit signed range) -> Int
    - float (single-precision range, or non-finite) -> Float
    - list, tuple -> Array (elements wrapped recursively)
    - Mapping with str keys -> Complex (values wrapped recursively)
    - None -> Null
    - Value -> deep copy

    Args:
        obj: Object to wrap.

    Returns:
        The wrapped value. Never shares mutable state with `obj`.

    Raises:
        UnsupportedTypeError: If `obj` (or anything nested in it) is not a
            supported type, a number is out of range, a mapping key is
            not a string, or a list or mapping contains itself.
    """
    return _wrap(obj, set())


def _wrap(obj: Any, active: set[int]) -> Value:
    # active holds the ids of the containers currently being wrapped
    if isinstance(obj, Value):
        return obj.copy()
    if obj is None:
        return Null()
    # bool is a subclass of int, so it must be checked first
    if isinstance(obj, bool):
        return Switch(obj)
    if isinstance(obj, int):
        return Int(obj)
    if isinstance(obj, float):
        return Float(obj)
    if isinstance(obj, str):
        return Text(obj)
    if isinstance(obj, (Mapping, list, tuple)):
        if id(obj) in active:
            raise UnsupportedTypeError(
                f"Recursive {type(obj).__name__} cannot be wrapped"
            )
        active.add(id(obj))
        try:
            return _wrap_container(obj, active)
        finally:
            active.discard(id(obj))
    raise UnsupportedTypeError(f"Unsupported value type: {type(obj).__name__}")


def _wrap_container(obj: Any, active: set[int]) -> Value:
    if isinstance(obj, Mapping):
        entries: dict[str, Value] = {}
        for key, item in obj.items():
            if not isinstance(key, str):
                raise UnsupportedTypeError(
                    f"Complex keys must be strings, got {type(key).__name__}: {key!r}"
                )
            entries[key] = _wrap(item, active)
        return Complex(entries)
    return Array([_wrap(item, active) for item in obj])
