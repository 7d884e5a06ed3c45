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

"""Unit tests for ConfigEntry get/set/load/save behaviour."""

from __future__ import annotations

import enum
import logging
from decimal import Decimal
from typing import TYPE_CHECKING

import pytest

import modconf.registry.entries as entries_module
from modconf import EntryTypeMismatchError, EntryValueError, Registry, ValueKind, Vector2
from modconf.registry import CodecResult, Config

if TYPE_CHECKING:
    from modconf.registry import ConfigGroup

pytestmark = pytest.mark.unit


class Access(enum.IntFlag):
    READ = 1
    WRITE = 2
    DELETE = 4


@pytest.fixture
def group(registry: Registry) -> ConfigGroup:
    return registry.register("entries").group("general")


@pytest.fixture
def save_calls(monkeypatch: pytest.MonkeyPatch) -> list[Config]:
    calls: list[Config] = []

    def _record(self: Config) -> bool:
        calls.append(self)
        return True

    monkeypatch.setattr(Config, "save", _record)
    return calls


def test_entry_exposes_declaration_metadata(group: ConfigGroup) -> None:
    entry = group.entry("maxWorkers", 4, "Worker threads", requires_restart=True)
    assert entry.name == "maxWorkers"
    assert entry.full_name == "general.maxWorkers"
    assert entry.group is group
    assert entry.kind is ValueKind.INT32
    assert entry.value_type is int
    assert entry.default == 4
    assert entry.requires_restart is True
    assert entry.description == ("Worker threads",)
    assert entry.get() == 4
    assert str(entry) == "4"


def test_set_equal_value_is_a_no_op(group: ConfigGroup, save_calls: list[Config]) -> None:
    changes: list[tuple[int, int]] = []
    entry = group.entry("maxWorkers", 4, on_changed=lambda old, new: changes.append((old, new)))
    entry.set(4)
    assert changes == []
    assert save_calls == []


def test_set_nan_over_nan_is_a_no_op(group: ConfigGroup, save_calls: list[Config]) -> None:
    changes: list[tuple[object, object]] = []
    ratio = group.entry("ratio", 1.0, on_changed=lambda old, new: changes.append((old, new)))
    offset = group.entry(
        "offset",
        Vector2(0.0, 1.0),
        on_changed=lambda old, new: changes.append((old, new)),
    )
    ratio.load("nan")
    ratio.set(float("nan"))
    offset.load("(nan, 1.0)")
    offset.set(Vector2(float("nan"), 1.0))
    assert changes == []
    assert save_calls == []
    ratio.set(2.0)
    assert ratio.get() == 2.0
    assert len(save_calls) == 1


def test_set_new_value_notifies_once_and_saves_once(group: ConfigGroup, save_calls: list[Config]) -> None:
    changes: list[tuple[int, int]] = []
    entry = group.entry("maxWorkers", 4, on_changed=lambda old, new: changes.append((old, new)))
    entry.set(8)
    assert entry.get() == 8
    assert changes == [(4, 8)]
    assert save_calls == [group.config]


def test_observers_run_in_registration_order(group: ConfigGroup, save_calls: list[Config]) -> None:
    calls: list[str] = []
    entry = group.entry("name", "a", on_changed=lambda _old, _new: calls.append("first"))

    def second(_old: str, _new: str) -> None:
        calls.append("second")

    entry.subscribe(second)
    entry.subscribe(lambda _old, _new: calls.append("third"))
    entry.set("b")
    assert calls == ["first", "second", "third"]

    calls.clear()
    assert entry.unsubscribe(second) is True
    assert entry.unsubscribe(second) is False
    entry.set("c")
    assert calls == ["first", "third"]
    assert len(save_calls) == 2


def test_observer_error_propagates_after_value_update(group: ConfigGroup, save_calls: list[Config]) -> None:
    def failing(_old: bool, _new: bool) -> None:
        raise RuntimeError("observer failed")

    entry = group.entry("enabled", False, on_changed=failing)
    with pytest.raises(RuntimeError, match="observer failed"):
        entry.set(True)
    assert entry.get() is True
    assert save_calls == []


def test_set_rejects_values_of_another_type(group: ConfigGroup, save_calls: list[Config]) -> None:
    entry = group.entry("maxWorkers", 4)
    with pytest.raises(EntryValueError):
        entry.set("8")  # pyright: ignore[reportArgumentType]
    with pytest.raises(EntryValueError):
        entry.set(True)
    assert entry.get() == 4
    assert save_calls == []


def test_set_enforces_integer_width(group: ConfigGroup) -> None:
    entry = group.entry("volume", 10, kind=ValueKind.UINT8)
    with pytest.raises(EntryValueError, match="outside"):
        entry.set(256)
    with pytest.raises(EntryValueError):
        entry.set(-1)


def test_get_as_checks_exact_type(group: ConfigGroup) -> None:
    count = group.entry("count", 3)
    flag = group.entry("flag", True)
    assert count.get_as(int) == 3
    assert flag.get_as(bool) is True
    with pytest.raises(EntryTypeMismatchError) as excinfo:
        flag.get_as(int)
    assert excinfo.value.expected is int
    assert excinfo.value.actual is bool
    with pytest.raises(EntryTypeMismatchError):
        count.get_as(float)


def test_load_parses_without_notifying(group: ConfigGroup, save_calls: list[Config]) -> None:
    changes: list[tuple[int, int]] = []
    entry = group.entry("maxWorkers", 4, on_changed=lambda old, new: changes.append((old, new)))
    entry.load("16")
    assert entry.get() == 16
    assert changes == []
    assert save_calls == []


def test_load_failure_reverts_to_default_and_logs(group: ConfigGroup, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="modconf")
    entry = group.entry("maxWorkers", 4)
    entry.load("16")
    entry.load("sixteen")
    assert entry.get() == 4
    assert "Failed to parse config value 'sixteen' in 'general.maxWorkers'" in caplog.text


def test_load_without_codec_reverts_to_default(
    group: ConfigGroup,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.DEBUG, logger="modconf")
    entry = group.entry("maxWorkers", 4)
    entry.load("16")
    monkeypatch.setattr(entries_module, "decode_value", lambda *_args: None)
    entry.load("32")
    assert entry.get() == 4
    assert "Unsupported config value type" in caplog.text


def test_save_failure_returns_empty_text(
    group: ConfigGroup,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.DEBUG, logger="modconf")
    entry = group.entry("maxWorkers", 4)
    assert entry.save() == "4"
    monkeypatch.setattr(entries_module, "encode_value", lambda *_args: CodecResult(error="boom"))
    assert entry.save() == ""
    monkeypatch.setattr(entries_module, "encode_value", lambda *_args: None)
    assert entry.save() == ""
    assert "Failed to save config value '4' for 'general.maxWorkers'" in caplog.text


@pytest.mark.parametrize("text", ["NaN", "sNaN", "Infinity"])
def test_non_finite_decimal_text_reverts_to_default(
    group: ConfigGroup,
    save_calls: list[Config],
    text: str,
) -> None:
    price = group.entry("price", Decimal("1.50"))
    price.load(text)
    assert price.get() == Decimal("1.50")
    price.set(Decimal(2))
    assert price.get() == Decimal(2)
    assert save_calls == [group.config]
    with pytest.raises(EntryValueError):
        price.set(Decimal(text))


def test_flag_entry_round_trips_combined_members(group: ConfigGroup) -> None:
    access = group.entry("access", Access.READ)
    access.set(Access.READ | Access.WRITE)
    text = access.save()
    assert text == "READ|WRITE"
    access.load("read")
    access.load(text)
    assert access.get() == Access.READ | Access.WRITE
