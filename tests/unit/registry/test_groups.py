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

"""Unit tests for ConfigGroup declarations."""

from __future__ import annotations

import enum
import io
from decimal import Decimal

import pytest

from modconf import (
    DuplicateEntryError,
    EntryValueError,
    Registry,
    UnsupportedValueKindError,
    ValueKind,
    Vector2,
)

pytestmark = pytest.mark.unit


class Color(enum.Enum):
    RED = 1
    GREEN = 2


def test_duplicate_entry_name_fails(registry: Registry) -> None:
    group = registry.register("groups").group("general")
    _ = group.entry("maxWorkers", 4)
    with pytest.raises(DuplicateEntryError) as excinfo:
        _ = group.entry("maxWorkers", 8)
    assert excinfo.value.name == "maxWorkers"
    assert excinfo.value.group == "general"
    assert group["maxWorkers"].default == 4


def test_same_entry_name_in_different_groups_is_allowed(registry: Registry) -> None:
    config = registry.register("groups")
    first = config.group("a").entry("value", 1)
    second = config.group("b").entry("value", 2)
    assert first is not second


def test_kinds_are_inferred_from_defaults(registry: Registry) -> None:
    group = registry.register("groups").group("general")
    assert group.entry("flag", False).kind is ValueKind.BOOL
    assert group.entry("count", 1).kind is ValueKind.INT32
    assert group.entry("ratio", 0.5).kind is ValueKind.FLOAT64
    assert group.entry("price", Decimal("9.99")).kind is ValueKind.DECIMAL
    assert group.entry("title", "x").kind is ValueKind.STRING
    assert group.entry("color", Color.RED).kind is ValueKind.ENUM
    assert group.entry("offset", Vector2(1, 2)).kind is ValueKind.VECTOR2
    assert group["color"].value_type is Color


def test_explicit_kinds_normalise_defaults(registry: Registry) -> None:
    group = registry.register("groups").group("general")
    ratio = group.entry("ratio", 1, kind=ValueKind.FLOAT64)
    assert ratio.get() == 1.0
    assert type(ratio.get()) is float
    assert group.entry("hotkey", "k", kind=ValueKind.CHAR).kind is ValueKind.CHAR
    assert group.entry("small", 0.1, kind=ValueKind.FLOAT32).get() != 0.1


def test_invalid_defaults_fail(registry: Registry) -> None:
    group = registry.register("groups").group("general")
    with pytest.raises(UnsupportedValueKindError):
        _ = group.entry("items", [1, 2])
    with pytest.raises(EntryValueError):
        _ = group.entry("tiny", 300, kind=ValueKind.INT8)
    with pytest.raises(EntryValueError):
        _ = group.entry("hotkey", "ab", kind=ValueKind.CHAR)
    with pytest.raises(UnsupportedValueKindError):
        _ = group.entry("mode", 3, kind=ValueKind.ENUM)
    assert len(group) == 0


def test_group_iterates_entries_in_declaration_order(registry: Registry) -> None:
    config = registry.register("groups")
    group = config.group("general")
    _ = group.entry("b", 1)
    _ = group.entry("a", 2)
    _ = group.entry("c", 3)
    assert [entry.name for entry in group] == ["b", "a", "c"]
    assert len(group) == 3
    assert "a" in group
    assert "z" not in group
    assert group.try_get_entry("z") is None
    assert group.end_group() is config


def test_group_save_writes_entries_with_descriptions(registry: Registry) -> None:
    group = registry.register("groups").group("general")
    _ = group.entry("maxWorkers", 4, "Worker threads.\nRestart to apply.")
    _ = group.entry("enableFoo", False)
    buffer = io.StringIO()
    group.save(buffer)
    assert buffer.getvalue() == (
        "\n# Worker threads.\n# Restart to apply.\nmaxWorkers = 4\n\nenableFoo = false\n"
    )
