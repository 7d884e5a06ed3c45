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

"""Escaping for string values stored on a single ``key = value`` line.

Loading trims values and reads the file line by line, so escaped text never
contains a line break, a non-printable character, or a space at either end.
Unknown escape sequences are kept verbatim on unescape so that hand-edited
values such as Windows paths survive.
"""

from __future__ import annotations

from typing import Final

_ESCAPES: Final[dict[str, str]] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}
_UNESCAPES: Final[dict[str, str]] = {escaped[1]: raw for raw, escaped in _ESCAPES.items()}
_HEX_WIDTH: Final[dict[str, int]] = {"u": 4, "U": 8}


def _escape_char(char: str) -> str:
    code = ord(char)
    if code <= 0xFFFF:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def escape(text: str) -> str:
    """Escape ``text`` so it survives a trimmed, single-line round trip."""
    last = len(text) - 1
    parts: list[str] = []
    for index, char in enumerate(text):
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif not char.isprintable() or (char == " " and index in {0, last}):
            parts.append(_escape_char(char))
        else:
            parts.append(char)
    return "".join(parts)


def unescape(text: str) -> str:
    """Reverse :func:`escape`.

    Args:
        text: Escaped text as read from a config file.

    Returns:
        The original string.
    """
    parts: list[str] = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char != "\\" or index + 1 >= length:
            parts.append(char)
            index += 1
            continue
        marker = text[index + 1]
        if marker in _UNESCAPES:
            parts.append(_UNESCAPES[marker])
            index += 2
            continue
        width = _HEX_WIDTH.get(marker)
        digits = text[index + 2 : index + 2 + width] if width else ""
        if width and len(digits) == width and all(c in "0123456789abcdefABCDEF" for c in digits):
            code = int(digits, 16)
            if code <= 0x10FFFF:
                parts.append(chr(code))
                index += 2 + width
                continue
        parts.append(char)
        index += 1
    return "".join(parts)


__all__ = ["escape", "unescape"]
