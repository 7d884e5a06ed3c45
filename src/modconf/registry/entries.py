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

"""Typed config entries.

An entry is one named, typed, defaulted setting inside a group. Declaring an
entry returns a live handle: reads are served from memory, and every ``set``
that changes the value notifies observers and rewrites the owning config file.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from modconf._internal.exceptions import EntryTypeMismatchError, EntryValueError
from modconf._internal.logging_utils import structured_extra
from modconf.compat import override
from modconf.core.model_types import LogComponent, ValueKind

from .codecs import coerce_value, decode_value, encode_value, values_equal

if TYPE_CHECKING:
    from collections.abc import Callable

    from modconf._internal.logging_utils import StructuredLogExtra

    from .groups import ConfigGroup

T = TypeVar("T")
V = TypeVar("V")

logger: logging.Logger = logging.getLogger("modconf.entry")


class ConfigEntry(Generic[T]):
    """A single named, typed setting with a fixed default.

    The value kind and concrete value type are fixed at declaration, and the
    current value always has that type. Only ``set`` and ``load`` change the
    value after construction.
    """

    __slots__ = (
        "_default",
        "_description",
        "_group",
        "_kind",
        "_name",
        "_observers",
        "_requires_restart",
        "_value",
        "_value_type",
    )

    def __init__(
        self,
        group: ConfigGroup,
        name: str,
        default: T,
        *,
        kind: ValueKind,
        value_type: type,
        requires_restart: bool = False,
        description: tuple[str, ...] = (),
        on_changed: Callable[[T, T], None] | None = None,
    ) -> None:
        """Create an entry; use :meth:`ConfigGroup.entry` instead of calling this.

        Args:
            group: Owning group.
            name: Entry name, unique within the group.
            default: Default value, already normalised for ``kind``.
            kind: Value kind selecting the codec.
            value_type: Concrete Python type of the value.
            requires_restart: Advisory flag for hosts.
            description: Comment lines written above the entry.
            on_changed: Optional first change observer.
        """
        self._group = group
        self._name = name
        self._kind = kind
        self._value_type = value_type
        self._requires_restart = requires_restart
        self._description = description
        self._default: T = default
        self._value: T = default
        self._observers: list[Callable[[T, T], None]] = []
        if on_changed is not None:
            self._observers.append(on_changed)

    @property
    def group(self) -> ConfigGroup:
        """Group that owns this entry."""
        return self._group

    @property
    def name(self) -> str:
        """Entry name within its group."""
        return self._name

    @property
    def full_name(self) -> str:
        """Dotted ``group.entry`` name used in log messages."""
        return f"{self._group.name}.{self._name}"

    @property
    def kind(self) -> ValueKind:
        """Value kind selecting the codec."""
        return self._kind

    @property
    def value_type(self) -> type:
        """Concrete Python type of the value (the enum class for enum entries)."""
        return self._value_type

    @property
    def requires_restart(self) -> bool:
        """Whether a change only takes effect after the host restarts."""
        return self._requires_restart

    @property
    def description(self) -> tuple[str, ...]:
        """Comment lines written above the entry."""
        return self._description

    @property
    def default(self) -> T:
        """Default value fixed at declaration."""
        return self._default

    @property
    def value(self) -> T:
        """Current value."""
        return self._value

    def get(self) -> T:
        """Return the current value."""
        return self._value

    def get_as(self, expected_type: type[V]) -> V:
        """Return the current value after checking the caller's expected type.

        Args:
            expected_type: Exact type the caller expects the value to have.

        Returns:
            The current value.

        Raises:
            EntryTypeMismatchError: If ``expected_type`` is not the entry's value type.
        """
        if expected_type is not self._value_type:
            raise EntryTypeMismatchError(self.full_name, expected_type, self._value_type)
        value: Any = self._value
        return value

    def set(self, value: T) -> None:
        """Change the current value.

        Setting a value equal to the current one does nothing; NaN counts as
        equal to NaN, also inside float vectors. Otherwise the value is stored,
        observers are called in order with ``(old, new)``, and the owning
        config is saved.

        Raises:
            EntryValueError: If ``value`` cannot be held by this entry's kind.
        """
        try:
            new_value: T = coerce_value(self._kind, value, self._value_type)
        except (TypeError, ValueError, OverflowError) as exc:
            raise EntryValueError(self.full_name, self._kind, value, str(exc)) from exc
        if values_equal(new_value, self._value):
            return

        old_value = self._value
        self._value = new_value
        for observer in list(self._observers):
            observer(old_value, new_value)
        _ = self._group.config.save()

    def subscribe(self, observer: Callable[[T, T], None]) -> None:
        """Register ``observer`` to be called with ``(old, new)`` on change."""
        self._observers.append(observer)

    def unsubscribe(self, observer: Callable[[T, T], None]) -> bool:
        """Remove the first registration of ``observer``.

        Returns:
            True when the observer was registered.
        """
        try:
            self._observers.remove(observer)
        except ValueError:
            return False
        return True

    def load(self, source: str) -> None:
        """Set the value from file text without notifying observers.

        Text that cannot be parsed resets the entry to its default and is
        logged; this method never raises.

        Args:
            source: Trimmed value text from the config file.
        """
        result = decode_value(self._kind, source, self._value_type)
        if result is None:
            logger.warning(
                "Unsupported config value type %s in '%s'. Using default.",
                self._kind,
                self.full_name,
                extra=self._log_extra(),
            )
            self._value = self._default
            return
        if not result.ok:
            logger.warning(
                "Failed to parse config value '%s' in '%s' as %s. Using default.",
                source,
                self.full_name,
                self._kind,
                extra=self._log_extra(details={"error": result.error}),
            )
            self._value = self._default
            return
        self._value = result.value

    def save(self) -> str:
        """Return the serialized current value, or an empty string on failure."""
        result = encode_value(self._kind, self._value)
        if result is None:
            logger.warning(
                "Unsupported config value type %s in '%s'.",
                self._kind,
                self.full_name,
                extra=self._log_extra(),
            )
            return ""
        if not result.ok or result.value is None:
            logger.warning(
                "Failed to save config value '%s' for '%s'.",
                self._value,
                self.full_name,
                extra=self._log_extra(details={"error": result.error}),
            )
            return ""
        return result.value

    def _log_extra(self, details: dict[str, object] | None = None) -> StructuredLogExtra:
        return structured_extra(
            component=LogComponent.ENTRY,
            config=self._group.config.identifier,
            group=self._group.name,
            entry=self._name,
            kind=self._kind,
            details=details or {},
        )

    @override
    def __str__(self) -> str:
        return str(self._value)

    @override
    def __repr__(self) -> str:
        return f"ConfigEntry({self.full_name!r}, kind={self._kind.value!r}, value={self._value!r})"


__all__ = ["ConfigEntry"]
