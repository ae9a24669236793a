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

"""TOML codec for settingsfile.

Reading uses the standard library's `tomllib`; writing uses `tomli-w`.

TOML has no null, so a tree holding a Null anywhere can't be encoded. The
codec reports the offending key path instead of letting tomli-w fail with a
bare TypeError.
"""

from __future__ import annotations

import tomllib

import tomli_w

from settingsfile.codecs.base import (
    decode_root,
    decode_text,
    encode_root,
    register_codec,
)
from settingsfile.exceptions import DecodeError, EncodeError
from settingsfile.value import Array, Complex, Null, Value


def _find_null(value: Value, path: str) -> str | None:
    """Return the key path of the first Null under value, if any."""
    if isinstance(value, Null):
        return path
    if isinstance(value, Complex):
        for key, child in value.entries.items():
            found = _find_null(child, f"{path}.{key}" if path else key)
            if found is not None:
                return found
    if isinstance(value, Array):
        for index, child in enumerate(value.items):
            found = _find_null(child, f"{path}[{index}]")
            if found is not None:
                return found
    return None


class TomlCodec:
    """Codec for TOML documents."""

    name = "toml"

    def encode(self, root: Value) -> bytes:
        null_path = _find_null(root, "")
        if null_path is not None:
            raise EncodeError(f"{self.name}: cannot encode null value at {null_path!r}")
        data = encode_root(root, self.name)
        try:
            text = tomli_w.dumps(data)
        except (TypeError, ValueError) as err:
            raise EncodeError(f"{self.name}: {err}") from err
        return text.encode("utf-8")

    def decode(self, buffer: bytes) -> dict[str, Value]:
        text = decode_text(buffer, self.name)
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as err:
            raise DecodeError(f"{self.name}: {err}") from err
        return decode_root(data, self.name)


register_codec(TomlCodec.name, TomlCodec)
