"""
settingsfile - Layered key-value settings files

A small library for reading and writing application settings: a tree of
typed values addressed by dot-separated key paths, persisted through a
pluggable text format, with optional local overrides of global settings.

settingsfile provides:
  - Typed values (text, switch, int, float, array, complex, null)
  - Dot-path get/set/delete that keeps sibling data intact
  - Flatten/unflatten and right-biased merging of trees
  - YAML, JSON and TOML codecs behind one registry
  - Global settings in the user config directory, shadowed by a local
    file in the working directory

Quick Start
-----------
    from settingsfile import ShadowStore, StoreConfig

    config = StoreConfig(codec="yaml", folder="myapp", filename="settings",
                         extension="yaml")
    shadow = ShadowStore(config)
    shadow.load()
    shadow.get_or("editor.theme", "dark").to_text()

Package Structure
-----------------
value : module
    The Value variants and wrap().
tree : module
    PathTree, the path-addressed tree with flatten and merge.
store : module
    Store, one tree persisted through one codec.
shadow : module
    ShadowStore, global settings with local overrides.
config : module
    StoreConfig, codec and file naming policy.
codecs : package
    Codec protocol, registry and the built-in formats.
paths : module
    Config directory resolution and file I/O.
logging : module
    Global logger used by the library.
exceptions : module
    Exception hierarchy rooted at SettingsfileError.

For more details, see the individual module docstrings.
"""

__version__ = "0.1.0"
__description__ = "Layered key-value settings files"

from settingsfile.config import StoreConfig
from settingsfile.exceptions import (
    DecodeError,
    EncodeError,
    KeyConflictError,
    KeyPathError,
    SettingsfileError,
    StorageError,
)
from settingsfile.shadow import ShadowStore
from settingsfile.store import Store
from settingsfile.tree import PathTree
from settingsfile.value import (
    Array,
    Complex,
    Float,
    Int,
    Null,
    Switch,
    Text,
    Value,
    wrap,
)

__all__ = [
    "__version__",
    "__description__",
    "StoreConfig",
    "Store",
    "ShadowStore",
    "PathTree",
    "Value",
    "Text",
    "Switch",
    "Int",
    "Float",
    "Array",
    "Complex",
    "Null",
    "wrap",
    "SettingsfileError",
    "KeyPathError",
    "KeyConflictError",
    "DecodeError",
    "EncodeError",
    "StorageError",
]
