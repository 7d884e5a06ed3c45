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

"""Typing constructs newer than the oldest supported interpreter.

``typing_extensions`` provides every name on older interpreters; the standard
library version is used when it exists.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing_extensions import Self, TypedDict, override
elif sys.version_info >= (3, 12):
    from typing import Self, TypedDict, override
elif sys.version_info >= (3, 11):
    from typing import Self

    from typing_extensions import TypedDict, override
else:
    from typing_extensions import Self, TypedDict, override

__all__ = ["Self", "TypedDict", "override"]
