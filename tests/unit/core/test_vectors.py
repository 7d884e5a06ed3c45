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

"""Unit tests for vector value types."""

from __future__ import annotations

import dataclasses

import pytest

from modconf.core.vectors import (
    Vector2,
    Vector2Int,
    Vector3,
    Vector3Int,
    Vector4,
    Vector4Int,
    format_float,
    parse_float_text,
    parse_int_text,
)

pytestmark = pytest.mark.unit


def test_float_vectors_normalise_components() -> None:
    vector = Vector3(1, 2, 3)
    assert vector == Vector3(1.0, 2.0, 3.0)
    assert all(type(value) is float for value in dataclasses.astuple(vector))
    assert str(vector) == "(1.0, 2.0, 3.0)"
    assert str(Vector4(0.1, -2.5, 1e-7, 0)) == "(0.1, -2.5, 1e-07, 0.0)"


def test_int_vectors_reject_non_integers() -> None:
    assert str(Vector3Int(1, -2, 3)) == "(1, -2, 3)"
    with pytest.raises(TypeError, match=r"Vector2Int\.y must be an int"):
        _ = Vector2Int(1, 2.5)  # pyright: ignore[reportArgumentType]
    with pytest.raises(TypeError):
        _ = Vector4Int(1, 2, 3, True)


def test_vectors_are_immutable_values() -> None:
    vector = Vector2(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        vector.x = 3.0  # pyright: ignore[reportAttributeAccessIssue]
    assert hash(vector) == hash(Vector2(1.0, 2.0))
    assert Vector2() == Vector2(0.0, 0.0)


@pytest.mark.parametrize(
    ("vector_type", "text", "expected"),
    [
        (Vector2, "(1.5, -2)", Vector2(1.5, -2.0)),
        (Vector3, " (0,0 , 1e3) ", Vector3(0.0, 0.0, 1000.0)),
        (Vector2Int, "(+4, -5)", Vector2Int(4, -5)),
        (Vector4Int, "(1, 2, 3, 4)", Vector4Int(1, 2, 3, 4)),
    ],
)
def test_parse_accepts_canonical_text(vector_type: type, text: str, expected: object) -> None:
    assert vector_type.parse(text) == expected


@pytest.mark.parametrize(
    ("vector_type", "text"),
    [
        (Vector2, "1, 2"),
        (Vector2, "(1, 2, 3)"),
        (Vector3, "(1, 2)"),
        (Vector2Int, "(1.0, 2)"),
        (Vector3Int, "(1, , 3)"),
        (Vector2, "(a, b)"),
        (Vector2, "(1_000, 2)"),
        (Vector3, "(1 0, 2, 3)"),
    ],
)
def test_parse_rejects_malformed_text(vector_type: type, text: str) -> None:
    with pytest.raises(ValueError):
        vector_type.parse(text)


def test_parse_int_text_accepts_plain_decimals_only() -> None:
    assert parse_int_text(" -42 ") == -42
    assert parse_int_text("+7") == 7
    for text in ("", "1_000", "0x10", "1.0", "١٢"):
        with pytest.raises(ValueError, match="invalid integer literal"):
            _ = parse_int_text(text)


def test_parse_float_text_rejects_separators() -> None:
    assert parse_float_text(" 1e-07 ") == 1e-07
    assert parse_float_text("-inf") == float("-inf")
    for text in ("", "1_000", "1 000", "0x10", "١٢", "1e"):
        with pytest.raises(ValueError, match="invalid float literal"):
            _ = parse_float_text(text)


def test_format_float_round_trips() -> None:
    assert format_float(0.1) == "0.1"
    assert format_float(3) == "3.0"
    assert float(format_float(1 / 3)) == 1 / 3
