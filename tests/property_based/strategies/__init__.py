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

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

import enum

from hypothesis import strategies as st

from modconf.core.model_types import INTEGER_BOUNDS, ValueKind
from modconf.core.vectors import Vector2, Vector2Int, Vector3, Vector3Int, Vector4, Vector4Int

__all__ = [
    "Color",
    "file_names",
    "values_for",
]


class Color(enum.Enum):
    """Enum used by the enum kind strategies."""

    RED = 1
    GREEN = 2
    BLUE = 3
    DARK_BLUE = 4


def _finite_floats(*, width: int = 64) -> st.SearchStrategy[float]:
    return st.floats(allow_nan=False, width=width)


def _float_vectors(vector_type: type, count: int) -> st.SearchStrategy[object]:
    return st.builds(vector_type, *(_finite_floats() for _ in range(count)))


def _int_vectors(vector_type: type, count: int) -> st.SearchStrategy[object]:
    return st.builds(vector_type, *(st.integers() for _ in range(count)))


def values_for(kind: ValueKind) -> st.SearchStrategy[object]:
    """Return a strategy producing values an entry of ``kind`` can hold.

    Args:
        kind: Value kind under test.

    Returns:
        Hypothesis strategy emitting valid values; enum values come from ``Color``.
    """
    if kind.is_integer:
        low, high = INTEGER_BOUNDS[kind]
        return st.integers(min_value=low, max_value=high)
    strategies: dict[ValueKind, st.SearchStrategy[object]] = {
        ValueKind.BOOL: st.booleans(),
        ValueKind.CHAR: st.characters(exclude_categories=("Cs",)),
        ValueKind.FLOAT32: _finite_floats(width=32),
        ValueKind.FLOAT64: _finite_floats(),
        ValueKind.DECIMAL: st.decimals(allow_nan=False, allow_infinity=False),
        ValueKind.STRING: st.text(),
        ValueKind.ENUM: st.sampled_from(Color),
        ValueKind.VECTOR2: _float_vectors(Vector2, 2),
        ValueKind.VECTOR3: _float_vectors(Vector3, 3),
        ValueKind.VECTOR4: _float_vectors(Vector4, 4),
        ValueKind.VECTOR2INT: _int_vectors(Vector2Int, 2),
        ValueKind.VECTOR3INT: _int_vectors(Vector3Int, 3),
        ValueKind.VECTOR4INT: _int_vectors(Vector4Int, 4),
    }
    return strategies[kind]


def file_names(max_size: int = 40) -> st.SearchStrategy[str]:
    """Return a strategy that yields identifiers biased towards awkward characters."""
    awkward = st.sampled_from(list('<>:"/\\|?*.\x00\x1f '))
    return st.text(st.one_of(awkward, st.characters(exclude_categories=("Cs",))), max_size=max_size)
