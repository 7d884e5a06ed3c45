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

"""Unit tests for the shared model enumerations."""

from __future__ import annotations

import pytest

from modconf.core.model_types import INTEGER_BOUNDS, LogComponent, LogFormat, ValueKind

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("enum_type", "raw", "expected"),
    [
        (LogFormat, " JSON ", LogFormat.JSON),
        (LogComponent, "Settings", LogComponent.SETTINGS),
        (ValueKind, "Vector3Int", ValueKind.VECTOR3INT),
        (ValueKind, "uint64", ValueKind.UINT64),
    ],
)
def test_from_str_is_case_insensitive(enum_type: type[ValueKind], raw: str, expected: object) -> None:
    assert enum_type.from_str(raw) is expected


def test_from_str_rejects_unknown_values() -> None:
    with pytest.raises(ValueError, match="Unknown value kind 'list'"):
        _ = ValueKind.from_str("list")
    with pytest.raises(ValueError, match="Unknown log component 'cli'"):
        _ = LogComponent.from_str("cli")


def test_integer_kinds_have_bounds() -> None:
    integer_kinds = {kind for kind in ValueKind if kind.is_integer}
    assert integer_kinds == set(INTEGER_BOUNDS)
    assert len(integer_kinds) == 8
    assert INTEGER_BOUNDS[ValueKind.INT8] == (-128, 127)
    assert INTEGER_BOUNDS[ValueKind.UINT64] == (0, 18_446_744_073_709_551_615)
    assert not ValueKind.FLOAT32.is_integer


def test_value_kinds_are_strings() -> None:
    assert ValueKind.DECIMAL == "decimal"
    assert f"{ValueKind.VECTOR2}" == "vector2"
