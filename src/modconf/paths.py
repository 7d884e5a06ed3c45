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

"""File-name sanitisation and config file path derivation.

Config identifiers are free-form strings (often GUIDs or dotted module names),
so each one is coerced into a file-name component that is valid on every
mainstream filesystem before it is used as a path.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from modconf.settings.models import RegistrySettings

INVALID_FILE_NAME_CHARS: Final[str] = '<>:"/\\|?*' + "".join(chr(code) for code in range(32))

_INVALID_CLASS: Final[str] = "[" + re.escape(INVALID_FILE_NAME_CHARS) + "]"
_INVALID_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"({_INVALID_CLASS}*\.+\Z)|({_INVALID_CLASS}+)",
)


def make_valid_file_name(name: str, replacement: str = "_") -> str:
    """Return ``name`` with characters that are invalid in file names replaced.

    Every run of invalid characters becomes a single ``replacement``. Trailing
    dots, together with any invalid characters directly before them, are
    replaced as well because Windows silently drops them.

    Args:
        name: Candidate file name.
        replacement: Text substituted for each invalid run.

    Returns:
        The sanitised file name.
    """
    return _INVALID_PATTERN.sub(replacement, name)


def config_file_path(identifier: str, settings: RegistrySettings, *, cwd: Path | None = None) -> Path:
    """Derive the absolute file path backing the config ``identifier``.

    Args:
        identifier: Config identifier.
        settings: Registry settings providing directory and extension.
        cwd: Base for a relative ``config_dir``; defaults to the working directory.

    Returns:
        ``<config_dir>/<sanitised identifier><extension>`` as an absolute path.
    """
    config_dir = settings.config_dir
    if not config_dir.is_absolute():
        config_dir = (cwd or Path.cwd()).resolve() / config_dir
    return config_dir / f"{make_valid_file_name(identifier)}{settings.file_extension}"


__all__ = ["INVALID_FILE_NAME_CHARS", "config_file_path", "make_valid_file_name"]
