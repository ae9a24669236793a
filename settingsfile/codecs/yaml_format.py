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

"""YAML codec for settingsfile, backed by PyYAML.

Documents are read with `yaml.safe_load` and written with `yaml.safe_dump`
in block style, preserving key insertion order.

Decoding rejects anything the value model can't hold, for example YAML
timestamps (which PyYAML turns into datetime objects) or integers outside
the 32-bit range.
"""

from __future__ import annotations

import yaml

from settingsfile.codecs.base import (
    decode_root,
    decode_text,
    encode_root,
    register_codec,
)
from settingsfile.exceptions import DecodeError, EncodeError
from settingsfile.value import Value


class YamlCodec:
    """Codec for YAML documents."""

    name = "yaml"

    def encode(self, root: Value) -> bytes:
        data = encode_root(root, self.name)
        try:
            text = yaml.safe_dump(
                data,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
        except yaml.YAMLError as err:
            raise EncodeError(f"{self.name}: {err}") from err
        return text.encode("utf-8")

    def decode(self, buffer: bytes) -> dict[str, Value]:
        text = decode_text(buffer, self.name)
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as err:
            raise DecodeError(f"{self.name}: {err}") from err
        return decode_root(data, self.name)


register_codec(YamlCodec.name, YamlCodec)
