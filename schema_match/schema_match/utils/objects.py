# Copyright 2026 TIER IV, inc.
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

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Optional


def extend_object(dest: MutableMapping, *sources: Optional[Mapping]) -> MutableMapping:
    """Shallow-merge the items of each source into ``dest``, left to right.

    ``None`` sources are skipped. Returns ``dest``.

    Raises:
        TypeError: If ``dest`` is None.
    """
    if dest is None:
        raise TypeError("Cannot extend None")

    for source in sources:
        if source is None:
            continue
        for key, value in source.items():
            dest[key] = value
    return dest


def has_member(value: Any, key: str) -> bool:
    return isinstance(value, Mapping) and key in value
