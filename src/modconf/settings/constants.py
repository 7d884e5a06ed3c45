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

"""Shared defaults for modconf settings and file locations."""

from __future__ import annotations

from typing import Final

DEFAULT_CONFIG_DIRNAME: Final[str] = "Config"
DEFAULT_FILE_EXTENSION: Final[str] = ".ini"
DEFAULT_ENCODING: Final[str] = "utf-8"
SETTINGS_FILENAMES: Final[tuple[str, ...]] = ("modconf.toml", ".modconf.toml", "pyproject.toml")
CONFIG_DIR_ENV: Final[str] = "MODCONF_CONFIG_DIR"

__all__ = [
    "CONFIG_DIR_ENV",
    "DEFAULT_CONFIG_DIRNAME",
    "DEFAULT_ENCODING",
    "DEFAULT_FILE_EXTENSION",
    "SETTINGS_FILENAMES",
]
