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

"""Codecs for settingsfile.

A codec translates between raw bytes and a settings tree. Three formats are
built in and register themselves on import:

- yaml: PyYAML (safe_load / safe_dump)
- json: standard library json
- toml: tomllib for reading, tomli-w for writing

Public API:

- Codec: Protocol every codec implements
- register_codec / get_codec / available_codecs: Name-based registry

Example:
    from settingsfile.codecs import get_codec
    from settingsfile.value import wrap

    codec = get_codec("yaml")
    data = codec.encode(wrap({"user": {"name": "snsvrno"}}))
    entries = codec.decode(data)

"""

from .base import Codec, available_codecs, get_codec, register_codec
from .json_format import JsonCodec
from .toml_format import TomlCodec
from .yaml_format import YamlCodec

__all__ = [
    "Codec",
    "register_codec",
    "get_codec",
    "available_codecs",
    "JsonCodec",
    "TomlCodec",
    "YamlCodec",
]
