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

"""Named sections of a config, each owning an ordered set of entries."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar, cast

from modconf._internal.exceptions import DuplicateEntryError, EntryValueError, UnsupportedValueKindError
from modconf.compat import override
from modconf.core.model_types import ValueKind

from .codecs import coerce_value, infer_kind, python_type_for
from .entries import ConfigEntry

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator
    from typing import Any, TextIO

    from .configs import Config

T = TypeVar("T")


def normalise_description(lines: Iterable[str]) -> tuple[str, ...]:
    """Split description arguments into single comment lines."""
    result: list[str] = []
    for line in lines:
        result.extend(line.splitlines() or [""])
    return tuple(result)


class ConfigGroup:
    """A ``[section]`` of a config file.

    Entries keep their declaration order, which is also the order they are
    written in. Entry names are unique within the group.
    """

    __slots__ = ("_config", "_description", "_entries", "_name")

    def __init__(self, config: Config, name: str, description: tuple[str, ...] = ()) -> None:
        self._config = config
        self._name = name
        self._description = description
        self._entries: dict[str, ConfigEntry[Any]] = {}

    @property
    def config(self) -> Config:
        """Config that owns this group."""
        return self._config

    @property
    def name(self) -> str:
        """Section name."""
        return self._name

    @property
    def description(self) -> tuple[str, ...]:
        """Comment lines written above the section header."""
        return self._description

    def end_group(self) -> Config:
        """Return the owning config, for chained declarations."""
        return self._config

    def entry(
        self,
        name: str,
        default: T,
        *description: str,
        requires_restart: bool = False,
        on_changed: Callable[[T, T], None] | None = None,
        kind: ValueKind | None = None,
    ) -> ConfigEntry[T]:
        """Declare a typed entry and return its live handle.

        Args:
            name: Entry name, unique within this group.
            default: Default value; also fixes the entry's value type.
            *description: Comment lines written above the entry.
            requires_restart: Advisory flag marking the entry as restart-only.
            on_changed: Observer called with ``(old, new)`` when the value changes.
            kind: Explicit value kind. Inferred from ``default`` when omitted;
                required for ``char``, ``float32`` and integer widths other
                than ``int32``.

        Returns:
            The new entry.

        Raises:
            DuplicateEntryError: If ``name`` is already declared in this group.
            UnsupportedValueKindError: If no kind can be inferred for ``default``.
            EntryValueError: If ``default`` cannot be held by ``kind``.
        """
        if name in self._entries:
            raise DuplicateEntryError(name, self._name)

        resolved_kind = kind if kind is not None else infer_kind(type(default))
        if resolved_kind is None:
            raise UnsupportedValueKindError(name, type(default))
        value_type = python_type_for(resolved_kind) or type(default)
        if resolved_kind is ValueKind.ENUM and not issubclass(value_type, Enum):
            raise UnsupportedValueKindError(name, value_type)
        try:
            normalised = cast("T", coerce_value(resolved_kind, default, value_type))
        except (TypeError, ValueError, OverflowError) as exc:
            raise EntryValueError(f"{self._name}.{name}", resolved_kind, default, str(exc)) from exc

        created = ConfigEntry(
            self,
            name,
            normalised,
            kind=resolved_kind,
            value_type=value_type,
            requires_restart=requires_restart,
            description=normalise_description(description),
            on_changed=on_changed,
        )
        self._entries[name] = created
        return created

    def try_get_entry(self, name: str) -> ConfigEntry[Any] | None:
        """Return the entry called ``name``, or None."""
        return self._entries.get(name)

    def save(self, writer: TextIO) -> None:
        """Write every entry in declaration order.

        Each entry is preceded by a blank line and its comment lines, followed
        by ``Name = <serialized value>``.
        """
        for name, item in self._entries.items():
            writer.write("\n")
            for line in item.description:
                writer.write(f"# {line}\n")
            writer.write(f"{name} = {item.save()}\n")

    def __getitem__(self, name: str) -> ConfigEntry[Any]:
        return self._entries[name]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[ConfigEntry[Any]]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    @override
    def __repr__(self) -> str:
        return f"ConfigGroup({self._name!r}, entries={len(self._entries)})"


__all__ = ["ConfigGroup", "normalise_description"]
