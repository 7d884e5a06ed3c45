# Copyright 2025 CrownOps Engineering
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

"""modconf - typed, hierarchical configuration registry for mods.

Independently developed modules declare named, typed settings grouped into
sections. Each setting has a default value, optional change observers and an
optional "requires restart" marker, and every config is persisted to a
human-readable key/value file.
"""

from __future__ import annotations

from ._internal.error_codes import error_code_for
from ._internal.logging_utils import configure_logging
from .core import (
    LogFormat,
    ValueKind,
    Vector2,
    Vector2Int,
    Vector3,
    Vector3Int,
    Vector4,
    Vector4Int,
)
from .exceptions import (
    DuplicateEntryError,
    DuplicateIdentifierError,
    EntryTypeMismatchError,
    EntryValueError,
    ModconfError,
    ModconfTypeError,
    ModconfValidationError,
    UnsupportedValueKindError,
)
from .paths import make_valid_file_name
from .registry import Config, ConfigEntry, ConfigGroup, Registry
from .settings import RegistrySettings, load_settings

__all__ = [
    "Config",
    "ConfigEntry",
    "ConfigGroup",
    "DuplicateEntryError",
    "DuplicateIdentifierError",
    "EntryTypeMismatchError",
    "EntryValueError",
    "LogFormat",
    "ModconfError",
    "ModconfTypeError",
    "ModconfValidationError",
    "Registry",
    "RegistrySettings",
    "UnsupportedValueKindError",
    "ValueKind",
    "Vector2",
    "Vector2Int",
    "Vector3",
    "Vector3Int",
    "Vector4",
    "Vector4Int",
    "__version__",
    "configure_logging",
    "error_code_for",
    "load_settings",
    "make_valid_file_name",
]

__version__ = "0.1.0"
