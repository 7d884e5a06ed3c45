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

"""Conversion of log payloads into JSON-compatible values."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

from pydantic import JsonValue

__all__ = ["to_json_value"]


def to_json_value(value: object) -> JsonValue:
    """Convert ``value`` into something ``json.dumps`` accepts.

    Enum members become their values, mappings get string keys, tuples become
    lists, and any other object (paths, decimals, vectors) is rendered with
    ``str()``.
    """
    match value:
        case Enum():
            return to_json_value(value.value)
        case None | bool() | int() | float() | str():
            return value
        case Mapping():
            return {str(to_json_value(key)): to_json_value(item) for key, item in value.items()}
        case list() | tuple():
            return [to_json_value(item) for item in value]
        case _:
            return str(value)
