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

"""Fixed codec table mapping each value kind to a serializer and deserializer.

The table is closed: there is exactly one codec per :class:`ValueKind` and no
run-time registration. All enum types share the ``enum`` codec, which receives
the concrete enum class when parsing. Codec failures are reported as
:class:`CodecResult` values rather than exceptions so that entries can apply
their own recovery policy.
"""

from __future__ import annotations

import math
import re
import struct
from dataclasses import astuple, dataclass
from decimal import Decimal
from enum import Enum, Flag
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, Generic, NamedTuple, TypeVar

from modconf.core.model_types import INTEGER_BOUNDS, ValueKind
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

from .escaping import escape, unescape

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

_CODEC_ERRORS: Final[tuple[type[Exception], ...]] = (
    ValueError,
    TypeError,
    AttributeError,
    ArithmeticError,
)
_DECIMAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?",
    re.ASCII | re.IGNORECASE,
)
_FLAG_SEPARATOR: Final[re.Pattern[str]] = re.compile(r"[|,]")


@dataclass(slots=True, frozen=True)
class CodecResult(Generic[T]):
    """Outcome of a single encode or decode call.

    Attributes:
        value: Produced value when the call succeeded.
        error: Failure description, or None on success.
    """

    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Return True when the call succeeded."""
        return self.error is None


class Codec(NamedTuple):
    """Serializer and deserializer pair for one value kind."""

    encode: Callable[[Any], str]
    decode: Callable[[str, type], Any]


def _encode_bool(value: bool) -> str:
    return "true" if value else "false"


def _decode_bool(text: str, _value_type: type) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    message = f"invalid boolean: {text!r}"
    raise ValueError(message)


def _encode_char(value: str) -> str:
    if value == "\\" or value.isspace() or not value.isprintable():
        return escape(value)
    return value


def _decode_char(text: str, _value_type: type) -> str:
    if len(text) > 1 and text.startswith("\\"):
        text = unescape(text)
    return text[0] if text else "\0"


def _integer_codec(kind: ValueKind) -> Codec:
    low, high = INTEGER_BOUNDS[kind]

    def _decode(text: str, _value_type: type) -> int:
        value = parse_int_text(text)
        if not low <= value <= high:
            message = f"{value} is outside the {kind} range [{low}, {high}]"
            raise OverflowError(message)
        return value

    return Codec(encode=lambda value: str(int(value)), decode=_decode)


def round_float32(value: float) -> float:
    """Round ``value`` to the nearest single-precision float.

    Raises:
        OverflowError: If the finite value exceeds the single-precision range.
    """
    packed: bytes = struct.pack("<f", value)
    result: float = struct.unpack("<f", packed)[0]
    return result


def _encode_float32(value: float) -> str:
    if not math.isfinite(value):
        return format_float(value)
    for digits in range(1, 10):
        candidate = float(f"{value:.{digits}g}")
        try:
            if round_float32(candidate) == value:
                return format_float(candidate)
        except OverflowError:
            # Rounding near the single-precision maximum can leave its range.
            continue
    return format_float(value)


def _decode_float32(text: str, _value_type: type) -> float:
    return round_float32(parse_float_text(text))


def _decode_float64(text: str, _value_type: type) -> float:
    return parse_float_text(text)


def _decode_decimal(text: str, _value_type: type) -> Decimal:
    # Finite literals only; NaN, sNaN and Infinity are rejected.
    stripped = text.strip()
    if not _DECIMAL_PATTERN.fullmatch(stripped):
        message = f"invalid decimal literal: {text!r}"
        raise ValueError(message)
    return Decimal(stripped)


def _decode_string(text: str, _value_type: type) -> str:
    return unescape(text)


def _flag_names(value: Flag) -> list[str]:
    # Single-bit members only; named composites would repeat bits.
    members = [
        member
        for member in type(value)
        if member.value and member.value & (member.value - 1) == 0 and member & value == member
    ]
    covered = 0
    for member in members:
        covered |= member.value
    if covered != value.value:
        message = f"{value!r} has bits without a member name"
        raise ValueError(message)
    return [str(member.name) for member in members]


def _encode_enum(value: Enum) -> str:
    if value.name is not None and value.name in type(value).__members__:
        return value.name
    if isinstance(value, Flag):
        return "|".join(_flag_names(value))
    message = f"{value!r} has no member name"
    raise ValueError(message)


def _lookup_member(enum_type: type[E], text: str) -> E:
    members: Mapping[str, E] = enum_type.__members__
    if text in members:
        return members[text]
    folded = text.casefold()
    for name, member in members.items():
        if name.casefold() == folded:
            return member
    message = f"'{text}' is not a member of {enum_type.__name__}"
    raise ValueError(message)


def _decode_enum(text: str, value_type: type) -> Enum:
    if not issubclass(value_type, Enum):
        message = f"{value_type.__name__} is not an enum type"
        raise TypeError(message)
    if not issubclass(value_type, Flag):
        return _lookup_member(value_type, text)
    result = value_type(0)
    if not text.strip():
        return result
    for part in _FLAG_SEPARATOR.split(text):
        name = part.strip()
        if not name:
            message = f"empty flag name in {text!r}"
            raise ValueError(message)
        result |= _lookup_member(value_type, name)
    return result


def _vector_codec(vector_type: type[Any]) -> Codec:
    return Codec(encode=str, decode=lambda text, _value_type: vector_type.parse(text))


_CODECS: Final[Mapping[ValueKind, Codec]] = MappingProxyType(
    {
        ValueKind.BOOL: Codec(_encode_bool, _decode_bool),
        ValueKind.CHAR: Codec(_encode_char, _decode_char),
        **{kind: _integer_codec(kind) for kind in INTEGER_BOUNDS},
        ValueKind.FLOAT32: Codec(_encode_float32, _decode_float32),
        ValueKind.FLOAT64: Codec(format_float, _decode_float64),
        ValueKind.DECIMAL: Codec(str, _decode_decimal),
        ValueKind.STRING: Codec(escape, _decode_string),
        ValueKind.ENUM: Codec(_encode_enum, _decode_enum),
        ValueKind.VECTOR2: _vector_codec(Vector2),
        ValueKind.VECTOR3: _vector_codec(Vector3),
        ValueKind.VECTOR4: _vector_codec(Vector4),
        ValueKind.VECTOR2INT: _vector_codec(Vector2Int),
        ValueKind.VECTOR3INT: _vector_codec(Vector3Int),
        ValueKind.VECTOR4INT: _vector_codec(Vector4Int),
    },
)

_KIND_BY_TYPE: Final[Mapping[type, ValueKind]] = MappingProxyType(
    {
        bool: ValueKind.BOOL,
        int: ValueKind.INT32,
        float: ValueKind.FLOAT64,
        Decimal: ValueKind.DECIMAL,
        str: ValueKind.STRING,
        Vector2: ValueKind.VECTOR2,
        Vector3: ValueKind.VECTOR3,
        Vector4: ValueKind.VECTOR4,
        Vector2Int: ValueKind.VECTOR2INT,
        Vector3Int: ValueKind.VECTOR3INT,
        Vector4Int: ValueKind.VECTOR4INT,
    },
)

_TYPE_BY_KIND: Final[Mapping[ValueKind, type]] = MappingProxyType(
    {
        ValueKind.BOOL: bool,
        ValueKind.CHAR: str,
        **dict.fromkeys(INTEGER_BOUNDS, int),
        ValueKind.FLOAT32: float,
        ValueKind.FLOAT64: float,
        ValueKind.DECIMAL: Decimal,
        ValueKind.STRING: str,
        ValueKind.VECTOR2: Vector2,
        ValueKind.VECTOR3: Vector3,
        ValueKind.VECTOR4: Vector4,
        ValueKind.VECTOR2INT: Vector2Int,
        ValueKind.VECTOR3INT: Vector3Int,
        ValueKind.VECTOR4INT: Vector4Int,
    },
)


def codec_for(kind: ValueKind) -> Codec | None:
    """Return the codec registered for ``kind``, or None."""
    return _CODECS.get(kind)


def infer_kind(value_type: type) -> ValueKind | None:
    """Infer the value kind for a Python type.

    Lookup is by exact type, so ``bool`` is not treated as ``int`` and ``str``
    subclasses are not strings. Any enum class maps to the shared enum kind.

    Args:
        value_type: Type of an entry's default value.

    Returns:
        The matching kind, or None when the type is not supported.
    """
    kind = _KIND_BY_TYPE.get(value_type)
    if kind is not None:
        return kind
    if isinstance(value_type, type) and issubclass(value_type, Enum):
        return ValueKind.ENUM
    return None


def python_type_for(kind: ValueKind) -> type | None:
    """Return the Python type held by ``kind``; None for the enum kind."""
    return _TYPE_BY_KIND.get(kind)


def coerce_value(kind: ValueKind, value: object, value_type: type) -> Any:  # noqa: ANN401
    """Validate ``value`` for ``kind`` and normalise it to the kind's Python type.

    Args:
        kind: Value kind of the entry.
        value: Candidate value.
        value_type: Concrete type held by the entry (the enum class for enums).

    Returns:
        The normalised value.

    Raises:
        TypeError: If the value has the wrong type for the kind.
        ValueError: If the value is out of range for the kind.
    """
    if kind is ValueKind.ENUM:
        if not isinstance(value, value_type):
            message = f"expected a {value_type.__name__} member"
            raise TypeError(message)
        return value
    if kind is ValueKind.BOOL:
        if not isinstance(value, bool):
            message = "expected a bool"
            raise TypeError(message)
        return value
    if kind in {ValueKind.CHAR, ValueKind.STRING}:
        if not isinstance(value, str) or isinstance(value, Enum):
            message = "expected a str"
            raise TypeError(message)
        if kind is ValueKind.CHAR and len(value) != 1:
            message = "expected a single character"
            raise ValueError(message)
        return str(value)
    if kind.is_integer:
        return _coerce_integer(kind, value)
    if kind in {ValueKind.FLOAT32, ValueKind.FLOAT64}:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            message = "expected a float"
            raise TypeError(message)
        return round_float32(float(value)) if kind is ValueKind.FLOAT32 else float(value)
    if kind is ValueKind.DECIMAL:
        if isinstance(value, bool) or not isinstance(value, (int, Decimal)):
            message = "expected a Decimal"
            raise TypeError(message)
        if isinstance(value, Decimal) and not value.is_finite():
            message = f"decimal value must be finite, got {value}"
            raise ValueError(message)
        return Decimal(value)
    if type(value) is not value_type:
        message = f"expected a {value_type.__name__}"
        raise TypeError(message)
    return value


def _coerce_integer(kind: ValueKind, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or isinstance(value, Enum):
        message = "expected an int"
        raise TypeError(message)
    low, high = INTEGER_BOUNDS[kind]
    if not low <= value <= high:
        message = f"{value} is outside the {kind} range [{low}, {high}]"
        raise ValueError(message)
    return int(value)


def values_equal(left: object, right: object) -> bool:
    """Compare two entry values, treating NaN as equal to NaN.

    Float vectors are compared component by component under the same rule.
    """
    if isinstance(left, float) and isinstance(right, float):
        return left == right or (math.isnan(left) and math.isnan(right))
    if isinstance(left, (Vector2, Vector3, Vector4)) and type(left) is type(right):
        return all(
            values_equal(a, b)
            for a, b in zip(astuple(left), astuple(right))  # pyright: ignore[reportArgumentType]
        )
    return left == right


def encode_value(kind: ValueKind, value: object) -> CodecResult[str] | None:
    """Serialize ``value`` with the codec for ``kind``.

    Returns:
        None when no codec exists for the kind, otherwise the encode result.
    """
    codec = codec_for(kind)
    if codec is None:
        return None
    try:
        return CodecResult(value=codec.encode(value))
    except _CODEC_ERRORS as exc:
        return CodecResult(error=f"{type(exc).__name__}: {exc}")


def decode_value(kind: ValueKind, text: str, value_type: type) -> CodecResult[Any] | None:
    """Parse ``text`` with the codec for ``kind``.

    Args:
        kind: Value kind of the entry.
        text: Trimmed value text from a config file.
        value_type: Concrete type held by the entry (the enum class for enums).

    Returns:
        None when no codec exists for the kind, otherwise the decode result.
    """
    codec = codec_for(kind)
    if codec is None:
        return None
    try:
        return CodecResult(value=codec.decode(text, value_type))
    except _CODEC_ERRORS as exc:
        return CodecResult(error=f"{type(exc).__name__}: {exc}")


__all__ = [
    "Codec",
    "CodecResult",
    "codec_for",
    "coerce_value",
    "decode_value",
    "encode_value",
    "infer_kind",
    "python_type_for",
    "round_float32",
    "values_equal",
]
