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

"""Core value types and enumerations shared across modconf."""

from __future__ import annotations

from .model_types import INTEGER_BOUNDS, LogComponent, LogFormat, ValueKind
from .vectors import Vector2, Vector2Int, Vector3, Vector3Int, Vector4, Vector4Int

__all__ = [
    "INTEGER_BOUNDS",
    "LogComponent",
    "LogFormat",
    "ValueKind",
    "Vector2",
    "Vector2Int",
    "Vector3",
    "Vector3Int",
    "Vector4",
    "Vector4Int",
]
