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

"""Public exception types raised by modconf."""

from __future__ import annotations

from modconf._internal.exceptions import (
    DuplicateEntryError,
    DuplicateIdentifierError,
    EntryTypeMismatchError,
    EntryValueError,
    ModconfError,
    ModconfTypeError,
    ModconfValidationError,
    UnsupportedValueKindError,
)
from modconf.settings.models import (
    InvalidSettingsFileError,
    SettingsReadError,
    SettingsValidationError,
    UnsupportedSettingsVersionError,
)

__all__ = [
    "DuplicateEntryError",
    "DuplicateIdentifierError",
    "EntryTypeMismatchError",
    "EntryValueError",
    "InvalidSettingsFileError",
    "ModconfError",
    "ModconfTypeError",
    "ModconfValidationError",
    "SettingsReadError",
    "SettingsValidationError",
    "UnsupportedSettingsVersionError",
    "UnsupportedValueKindError",
]
