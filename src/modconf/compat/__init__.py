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

"""Version shims used across modconf.

Modules import these names from here instead of branching on the interpreter
version themselves:

- tomllib: TOML parser (``tomli`` before 3.11)
- UTC: UTC timezone for log timestamps
- StrEnum: string-valued enum base for value kinds and log settings
- Self, TypedDict, override: typing helpers
"""

from __future__ import annotations

from .datetime import UTC
from .enums import StrEnum
from .toml import tomllib
from .typing import Self, TypedDict, override

__all__ = [
    "UTC",
    "Self",
    "StrEnum",
    "TypedDict",
    "override",
    "tomllib",
]
