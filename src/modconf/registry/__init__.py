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

"""Typed, hierarchical config registry.

Modules register a :class:`Config` under a stable identifier, declare
:class:`ConfigGroup` sections and typed :class:`ConfigEntry` settings, then
load values from and save them to one key/value file per config.
"""

from __future__ import annotations

from .codecs import Codec, CodecResult, codec_for, decode_value, encode_value, infer_kind
from .configs import COMMENT_MARKER, Config
from .entries import ConfigEntry
from .escaping import escape, unescape
from .groups import ConfigGroup
from .registry import Registry

__all__ = [
    "COMMENT_MARKER",
    "Codec",
    "CodecResult",
    "Config",
    "ConfigEntry",
    "ConfigGroup",
    "Registry",
    "codec_for",
    "decode_value",
    "encode_value",
    "escape",
    "infer_kind",
    "unescape",
]
