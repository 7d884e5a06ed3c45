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

"""Small vector value types stored by vector entries.

Each type is an immutable value object with value equality. ``str()`` yields the
canonical text form ``(x, y[, z[, w]])`` and ``parse`` reads the same form back.
Float components are written in shortest round-trip form, so text produced by
``str()`` always parses back to an equal vector.
"""

from __future__ import annotations

import re
from dataclasses import astuple, dataclass, fields
from typing import TYPE_CHECKING, ClassVar, Final

from modconf.compat import Self, override

if TYPE_CHECKING:
    from collections.abc import Callable

_INT_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+", re.ASCII)
_FLOAT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.ASCII | re.IGNORECASE,
)


def parse_int_text(text: str) -> int:
    """Parse an optionally signed run of ASCII digits.

    Args:
        text: Text to parse; surrounding whitespace is ignored.

    Returns:
        The parsed integer.

    Raises:
        ValueError: If the text is not a plain decimal integer.
    """
    stripped = text.strip()
    if not _INT_PATTERN.fullmatch(stripped):
        message = f"invalid integer literal: {text!r}"
        raise ValueError(message)
    return int(stripped)


def parse_float_text(text: str) -> float:
    """Parse an ASCII decimal or exponent float literal, ``inf`` or ``nan``.

    Digit separators and embedded whitespace are rejected even though
    ``float()`` itself would accept some of them.

    Raises:
        ValueError: If the text is not a plain float literal.
    """
    stripped = text.strip()
    if not _FLOAT_PATTERN.fullmatch(stripped):
        message = f"invalid float literal: {text!r}"
        raise ValueError(message)
    return float(stripped)


def format_float(value: float) -> str:
    """Return the culture-invariant shortest round-trip text for a float."""
    return repr(float(value))


def _split_components(text: str, count: int) -> list[str]:
    stripped = text.strip()
    if not (stripped.startswith("(") and stripped.endswith(")")):
        message = f"vector text must be enclosed in parentheses: {text!r}"
        raise ValueError(message)
    parts = [part.strip() for part in stripped[1:-1].split(",")]
    if len(parts) != count:
        message = f"expected {count} components, got {len(parts)}: {text!r}"
        raise ValueError(message)
    return parts


class _Vector:
    __slots__ = ()

    _component_parser: ClassVar[Callable[[str], float | int]]
    _component_formatter: ClassVar[Callable[[float | int], str]]

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse the canonical ``(x, y, ...)`` form of this vector type.

        Args:
            text: Canonical text form.

        Returns:
            Parsed vector.

        Raises:
            ValueError: If the text is malformed or has the wrong arity.
        """
        parts = _split_components(text, len(fields(cls)))  # pyright: ignore[reportArgumentType]
        return cls(*(cls._component_parser(part) for part in parts))

    @override
    def __str__(self) -> str:
        values = astuple(self)  # pyright: ignore[reportArgumentType]
        return "(" + ", ".join(type(self)._component_formatter(value) for value in values) + ")"


class _FloatVector(_Vector):
    __slots__ = ()
    _component_parser = staticmethod(parse_float_text)
    _component_formatter = staticmethod(format_float)

    def __post_init__(self) -> None:
        for item in fields(self):  # pyright: ignore[reportArgumentType]
            object.__setattr__(self, item.name, float(getattr(self, item.name)))


class _IntVector(_Vector):
    __slots__ = ()
    _component_parser = staticmethod(parse_int_text)
    _component_formatter = staticmethod(str)

    def __post_init__(self) -> None:
        for item in fields(self):  # pyright: ignore[reportArgumentType]
            value = getattr(self, item.name)
            if isinstance(value, bool) or not isinstance(value, int):
                message = f"{type(self).__name__}.{item.name} must be an int"
                raise TypeError(message)


@dataclass(frozen=True, slots=True)
class Vector2(_FloatVector):
    """Two-component float vector."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True, slots=True)
class Vector3(_FloatVector):
    """Three-component float vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True, slots=True)
class Vector4(_FloatVector):
    """Four-component float vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


@dataclass(frozen=True, slots=True)
class Vector2Int(_IntVector):
    """Two-component integer vector."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True, slots=True)
class Vector3Int(_IntVector):
    """Three-component integer vector."""

    x: int = 0
    y: int = 0
    z: int = 0


@dataclass(frozen=True, slots=True)
class Vector4Int(_IntVector):
    """Four-component integer vector."""

    x: int = 0
    y: int = 0
    z: int = 0
    w: int = 0


__all__ = [
    "Vector2",
    "Vector2Int",
    "Vector3",
    "Vector3Int",
    "Vector4",
    "Vector4Int",
    "format_float",
    "parse_float_text",
    "parse_int_text",
]
