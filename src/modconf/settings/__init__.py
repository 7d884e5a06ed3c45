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

"""Settings for the modconf library itself.

This package decides where config files live and how they are encoded. It is
separate from the per-module configs managed by ``modconf.registry``.
"""

from __future__ import annotations

from .constants import CONFIG_DIR_ENV, DEFAULT_CONFIG_DIRNAME, DEFAULT_ENCODING, DEFAULT_FILE_EXTENSION
from .loader import LoadedSettings, load_settings, load_settings_with_metadata
from .models import (
    SETTINGS_VERSION,
    InvalidSettingsFileError,
    RegistrySettings,
    RegistrySettingsModel,
    SettingsReadError,
    SettingsValidationError,
    UnsupportedSettingsVersionError,
    settings_from_model,
)

__all__ = [
    "CONFIG_DIR_ENV",
    "DEFAULT_CONFIG_DIRNAME",
    "DEFAULT_ENCODING",
    "DEFAULT_FILE_EXTENSION",
    "SETTINGS_VERSION",
    "InvalidSettingsFileError",
    "LoadedSettings",
    "RegistrySettings",
    "RegistrySettingsModel",
    "SettingsReadError",
    "SettingsValidationError",
    "UnsupportedSettingsVersionError",
    "load_settings",
    "load_settings_with_metadata",
    "settings_from_model",
]
