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

"""Common exception hierarchy for modconf.

Only programmer errors are raised to callers: duplicate identifiers or entry
names, typed reads against the wrong type, and values a declared entry cannot
hold. Problems that originate in file content are logged and recovered from
inside the registry and never surface as exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from modconf.core.model_types import ValueKind

__all__ = [
    "DuplicateEntryError",
    "DuplicateIdentifierError",
    "EntryTypeMismatchError",
    "EntryValueError",
    "ModconfError",
    "ModconfTypeError",
    "ModconfValidationError",
    "UnsupportedValueKindError",
]


class ModconfError(Exception):
    """Base error for all modconf exceptions."""


class ModconfValidationError(ModconfError, ValueError):
    """Raised when input data fails validation checks."""


class ModconfTypeError(ModconfError, TypeError):
    """Raised when input data has an unexpected type."""


class DuplicateIdentifierError(ModconfValidationError):
    """Raised when a config identifier is registered twice.

    Attributes:
        identifier: The identifier that already exists.
    """

    def __init__(self, identifier: str) -> None:
        """Initialize with the duplicated identifier.

        Args:
            identifier: The identifier that already exists.
        """
        self.identifier = identifier
        super().__init__(f"Config '{identifier}' already exists.")


class DuplicateEntryError(ModconfValidationError):
    """Raised when an entry name is declared twice within one group.

    Attributes:
        name: The duplicated entry name.
        group: Name of the group that already owns the entry.
    """

    def __init__(self, name: str, group: str) -> None:
        """Initialize with the duplicated entry and its group.

        Args:
            name: The duplicated entry name.
            group: Name of the group that already owns the entry.
        """
        self.name = name
        self.group = group
        super().__init__(f"Config entry '{name}' already exists in group '{group}'.")


class EntryTypeMismatchError(ModconfTypeError):
    """Raised when an entry is read as a type other than its declared type.

    Attributes:
        entry: Full name of the entry.
        expected: The type requested by the caller.
        actual: The entry's declared value type.
    """

    def __init__(self, entry: str, expected: type, actual: type) -> None:
        """Initialize with the requested and declared types.

        Args:
            entry: Full name of the entry.
            expected: The type requested by the caller.
            actual: The entry's declared value type.
        """
        self.entry = entry
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Type mismatch for '{entry}'. Expected {expected.__name__}, got {actual.__name__}",
        )


class EntryValueError(ModconfValidationError):
    """Raised when a value cannot be held by an entry of the given kind.

    Attributes:
        entry: Full name of the entry (or the entry name during declaration).
        kind: Value kind of the entry.
        value: The rejected value.
    """

    def __init__(self, entry: str, kind: ValueKind, value: object, reason: str) -> None:
        """Initialize with the rejected value and the reason.

        Args:
            entry: Full name of the entry.
            kind: Value kind of the entry.
            value: The rejected value.
            reason: Human-readable explanation.
        """
        self.entry = entry
        self.kind = kind
        self.value = value
        super().__init__(f"Invalid {kind} value {value!r} for '{entry}': {reason}")


class UnsupportedValueKindError(ModconfTypeError):
    """Raised when no value kind can be inferred for a default value.

    Attributes:
        name: Name of the entry being declared.
        value_type: Python type of the default value.
    """

    def __init__(self, name: str, value_type: type) -> None:
        """Initialize with the entry name and the unsupported type.

        Args:
            name: Name of the entry being declared.
            value_type: Python type of the default value.
        """
        self.name = name
        self.value_type = value_type
        super().__init__(f"Unsupported config value type {value_type.__name__} for entry '{name}'")
