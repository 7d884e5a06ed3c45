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

"""Settings discovery and loading for modconf.

Settings come from a standalone ``modconf.toml`` / ``.modconf.toml`` file or
from a ``[tool.modconf]`` table in ``pyproject.toml``, searched in that order in
the working directory. The ``MODCONF_CONFIG_DIR`` environment variable
overrides the configured directory. Without any settings file the defaults are
used.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import cast

from pydantic import ValidationError

from modconf._internal.logging_utils import structured_extra
from modconf.compat import tomllib
from modconf.core.model_types import LogComponent

from .constants import CONFIG_DIR_ENV, SETTINGS_FILENAMES
from .models import (
    InvalidSettingsFileError,
    RegistrySettings,
    RegistrySettingsModel,
    SettingsReadError,
    settings_from_model,
)

logger: logging.Logger = logging.getLogger("modconf.settings")


@dataclass(slots=True, frozen=True)
class LoadedSettings:
    """Container for loaded settings and their source path.

    Attributes:
        settings: Resolved settings.
        path: File the settings were read from, or None when defaults are used.
    """

    settings: RegistrySettings
    path: Path | None


def load_settings(explicit_path: Path | None = None, *, cwd: Path | None = None) -> RegistrySettings:
    """Load modconf settings from a TOML file or use defaults.

    Args:
        explicit_path: Optional explicit settings file. When given, only this
            file is considered.
        cwd: Directory to search; defaults to the current working directory.

    Returns:
        Resolved settings.
    """
    return load_settings_with_metadata(explicit_path, cwd=cwd).settings


def load_settings_with_metadata(
    explicit_path: Path | None = None,
    *,
    cwd: Path | None = None,
) -> LoadedSettings:
    """Load modconf settings with metadata about the source file.

    Args:
        explicit_path: Optional explicit settings file. When given, only this
            file is considered and it must contain modconf settings.
        cwd: Directory to search; defaults to the current working directory.

    Returns:
        LoadedSettings: Resolved settings and the path they originated from.

    Raises:
        SettingsReadError: If a settings file exists but cannot be parsed.
        InvalidSettingsFileError: If a settings file fails validation.
    """
    base_dir = (cwd or Path.cwd()).resolve()
    if explicit_path is not None:
        candidates = [explicit_path if explicit_path.is_absolute() else base_dir / explicit_path]
    else:
        candidates = [base_dir / name for name in SETTINGS_FILENAMES]

    loaded = LoadedSettings(settings=_default_settings(base_dir), path=None)
    for candidate in candidates:
        found = _load_candidate(candidate, explicit=explicit_path is not None)
        if found is not None:
            loaded = found
            break
    return _apply_env_override(loaded, base_dir)


def _default_settings(base_dir: Path) -> RegistrySettings:
    return settings_from_model(base_dir, RegistrySettingsModel())


def _load_candidate(candidate: Path, *, explicit: bool) -> LoadedSettings | None:
    if not candidate.exists():
        if explicit:
            raise SettingsReadError(candidate, FileNotFoundError(candidate))
        return None
    try:
        raw_map: dict[str, object] = tomllib.loads(candidate.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise SettingsReadError(candidate, exc) from exc

    payload = _extract_payload(candidate, raw_map)
    if payload is None:
        if explicit:
            message = f"{candidate.name} does not define a [tool.modconf] table"
            raise InvalidSettingsFileError(candidate, ValueError(message))
        return None

    try:
        model = RegistrySettingsModel.model_validate(payload)
    except ValidationError as exc:
        raise InvalidSettingsFileError(candidate, exc) from exc

    resolved = candidate.resolve()
    logger.debug(
        "Loaded modconf settings from %s",
        resolved,
        extra=structured_extra(component=LogComponent.SETTINGS, path=resolved),
    )
    return LoadedSettings(settings=settings_from_model(resolved.parent, model), path=resolved)


def _extract_payload(candidate: Path, raw_map: dict[str, object]) -> dict[str, object] | None:
    if candidate.name != "pyproject.toml":
        return raw_map
    tool_section = raw_map.get("tool")
    if not isinstance(tool_section, dict):
        return None
    section = cast("dict[str, object]", tool_section).get("modconf")
    if section is None:
        return None
    if not isinstance(section, dict):
        message = "[tool.modconf] must be a TOML table"
        raise InvalidSettingsFileError(candidate, ValueError(message))
    return cast("dict[str, object]", section)


def _apply_env_override(loaded: LoadedSettings, base_dir: Path) -> LoadedSettings:
    env_value = os.getenv(CONFIG_DIR_ENV)
    if not env_value:
        return loaded
    config_dir = Path(env_value).expanduser()
    if not config_dir.is_absolute():
        config_dir = (base_dir / config_dir).resolve()
    return replace(loaded, settings=replace(loaded.settings, config_dir=config_dir))


__all__ = ["LoadedSettings", "load_settings", "load_settings_with_metadata"]
