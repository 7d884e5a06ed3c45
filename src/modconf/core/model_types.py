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

"""Model types and enumerations for modconf.

This module defines the closed enumerations shared across modconf:

- Log format and log component enumerations for structured logging
- The value kinds an entry can hold, one member per supported codec
"""

from __future__ import annotations

from typing import Final

from modconf.compat import StrEnum


class LogFormat(StrEnum):
    """Enumeration of log output formats.

    Attributes:
        TEXT: Human-readable text format.
        JSON: Machine-readable JSON format.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        """Create a LogFormat enum from a string value.

        Args:
            raw: String representation of the log format.

        Returns:
            LogFormat enum value.

        Raises:
            ValueError: If the string does not match any LogFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log format '{raw}'"
            raise ValueError(msg) from exc


class LogComponent(StrEnum):
    """Enumeration of loggable system components.

    Attributes:
        REGISTRY: Config registration and lookups.
        CONFIG: File-level load and save.
        ENTRY: Per-entry encode, decode and change notification.
        SETTINGS: Library settings discovery.
    """

    REGISTRY = "registry"
    CONFIG = "config"
    ENTRY = "entry"
    SETTINGS = "settings"

    @classmethod
    def from_str(cls, raw: str) -> LogComponent:
        """Create a LogComponent enum from a string value.

        Args:
            raw: String representation of the log component.

        Returns:
            LogComponent enum value.

        Raises:
            ValueError: If the string does not match any LogComponent value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log component '{raw}'"
            raise ValueError(msg) from exc


class ValueKind(StrEnum):
    """Closed set of value kinds an entry may hold.

    Every member has exactly one codec in ``modconf.registry.codecs``. Python has
    a single ``int`` type, so integer widths are distinguished by kind only and
    enforced when values are parsed or assigned.
    """

    BOOL = "bool"
    CHAR = "char"
    INT8 = "int8"
    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    DECIMAL = "decimal"
    STRING = "string"
    ENUM = "enum"
    VECTOR2 = "vector2"
    VECTOR3 = "vector3"
    VECTOR4 = "vector4"
    VECTOR2INT = "vector2int"
    VECTOR3INT = "vector3int"
    VECTOR4INT = "vector4int"

    @classmethod
    def from_str(cls, raw: str) -> ValueKind:
        """Create a ValueKind enum from a string value.

        Args:
            raw: String representation of the value kind.

        Returns:
            ValueKind enum value.

        Raises:
            ValueError: If the string does not match any ValueKind value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown value kind '{raw}'"
            raise ValueError(msg) from exc

    @property
    def is_integer(self) -> bool:
        """Return True for the fixed-width integer kinds."""
        return self in INTEGER_BOUNDS


INTEGER_BOUNDS: Final[dict[ValueKind, tuple[int, int]]] = {
    ValueKind.INT8: (-(2**7), 2**7 - 1),
    ValueKind.UINT8: (0, 2**8 - 1),
    ValueKind.INT16: (-(2**15), 2**15 - 1),
    ValueKind.UINT16: (0, 2**16 - 1),
    ValueKind.INT32: (-(2**31), 2**31 - 1),
    ValueKind.UINT32: (0, 2**32 - 1),
    ValueKind.INT64: (-(2**63), 2**63 - 1),
    ValueKind.UINT64: (0, 2**64 - 1),
}

__all__ = ["INTEGER_BOUNDS", "LogComponent", "LogFormat", "ValueKind"]
