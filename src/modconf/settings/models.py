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

"""Settings models and errors for the modconf library itself.

Settings decide where config files are written and how they are encoded. They
are validated with pydantic and converted into an immutable dataclass for
runtime use.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from modconf._internal.exceptions import ModconfValidationError

from .constants import (
    DEFAULT_CONFIG_DIRNAME,
    DEFAULT_ENCODING,
    DEFAULT_FILE_EXTENSION,
)

SETTINGS_VERSION: Final[int] = 1


class SettingsValidationError(ModconfValidationError):
    """Raised when settings data contains invalid values."""


class UnsupportedSettingsVersionError(SettingsValidationError):
    """Raised when a settings file declares an unknown schema version."""

    def __init__(self, version: int, expected: int) -> None:
        """Initialize with the declared and supported versions.

        Args:
            version: Version declared by the settings file.
            expected: Version supported by this release.
        """
        self.version = version
        self.expected = expected
        super().__init__(f"Unsupported settings_version {version}; expected {expected}")


class SettingsReadError(SettingsValidationError):
    """Raised when a settings file cannot be read from disk."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with file path and underlying error.

        Args:
            path: The path to the settings file that could not be read.
            error: The underlying exception that caused the read failure.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidSettingsFileError(SettingsValidationError):
    """Raised when a settings file fails validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with settings file path and validation error.

        Args:
            path: The path to the settings file that failed validation.
            error: The underlying validation exception.
        """
        self.path = path
        self.error = error
        super().__init__(f"Invalid modconf settings in {path}: {error}")


class RegistrySettingsModel(BaseModel):
    """Pydantic model for validating modconf settings read from TOML.

    Attributes:
        settings_version: Schema version number for the settings table.
        config_dir: Directory that receives one file per registered config.
        file_extension: Extension appended to each sanitized identifier.
        encoding: Text encoding used to read and write config files.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    settings_version: int = Field(default=SETTINGS_VERSION)
    config_dir: Path = Field(default=Path(DEFAULT_CONFIG_DIRNAME))
    file_extension: str = Field(default=DEFAULT_FILE_EXTENSION)
    encoding: str = Field(default=DEFAULT_ENCODING)

    @field_validator("file_extension")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            message = "file_extension must start with '.' and name an extension"
            raise ValueError(message)
        return value

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            return codecs.lookup(value).name
        except LookupError as exc:
            message = f"unknown encoding '{value}'"
            raise ValueError(message) from exc

    @model_validator(mode="after")
    def _check_version(self) -> RegistrySettingsModel:
        if self.settings_version != SETTINGS_VERSION:
            raise UnsupportedSettingsVersionError(self.settings_version, SETTINGS_VERSION)
        return self


@dataclass(slots=True, frozen=True)
class RegistrySettings:
    """Resolved settings used by a registry when deriving config file paths.

    Attributes:
        config_dir: Directory for config files. A relative directory is resolved
            against the working directory when a config is registered.
        file_extension: Extension appended to each sanitized identifier.
        encoding: Text encoding for reading and writing config files.
    """

    config_dir: Path = Path(DEFAULT_CONFIG_DIRNAME)
    file_extension: str = DEFAULT_FILE_EXTENSION
    encoding: str = DEFAULT_ENCODING


def settings_from_model(base_dir: Path, model: RegistrySettingsModel) -> RegistrySettings:
    """Convert a validated model into runtime settings.

    Args:
        base_dir: Directory relative ``config_dir`` values are resolved against.
        model: Validated settings model.

    Returns:
        Immutable runtime settings with an absolute ``config_dir``.
    """
    config_dir = model.config_dir
    if not config_dir.is_absolute():
        config_dir = (base_dir / config_dir).resolve()
    return RegistrySettings(
        config_dir=config_dir,
        file_extension=model.file_extension,
        encoding=model.encoding,
    )


__all__ = [
    "SETTINGS_VERSION",
    "InvalidSettingsFileError",
    "RegistrySettings",
    "RegistrySettingsModel",
    "SettingsReadError",
    "SettingsValidationError",
    "UnsupportedSettingsVersionError",
    "settings_from_model",
]
