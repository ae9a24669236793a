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

"""JSON codec for settingsfile.

Output is pretty-printed with 2-space indentation and a trailing newline.
Key order follows the tree.

NaN and infinity have no JSON representation, so they are rejected both
when writing and when reading (Python's json module would otherwise accept
the non-standard `NaN` and `Infinity` literals).
"""

from __future__ import annotations

import json
import math

from settingsfile.codecs.base import (
    decode_root,
    decode_text,
    encode_root,
    register_codec,
)
from settingsfile.exceptions import DecodeError, EncodeError
from settingsfile.value import Value


def _reject_constant(literal: str) -> float:
    raise ValueError(f"non-standard literal {literal} is not allowed")


def _parse_float(literal: str) -> float:
    # 1e400 overflows to infinity
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"number {literal} is out of range")
    return value


class JsonCodec:
    """Codec for JSON documents."""

    name = "json"

    def encode(self, root: Value) -> bytes:
        data = encode_root(root, self.name)
        try:
            text = json.dumps(data, indent=2, ensure_ascii=False, allow_nan=False)
        except ValueError as err:
            # NaN and infinity have no JSON representation
            raise EncodeError(f"{self.name}: {err}") from err
        return (text + "\n").encode("utf-8")

    def decode(self, buffer: bytes) -> dict[str, Value]:
        text = decode_text(buffer, self.name)
        try:
            data = json.loads(
                text, parse_constant=_reject_constant, parse_float=_parse_float
            )
        except ValueError as err:
            # includes json.JSONDecodeError
            raise DecodeError(f"{self.name}: {err}") from err
        return decode_root(data, self.name)


register_codec(JsonCodec.name, JsonCodec)
