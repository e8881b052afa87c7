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

from enum import Enum
from typing import Any, List, Optional, Sequence, Union


class DataType(str, Enum):
    """Closed vocabulary of type tags understood by the base predicate."""

    ANY = "any"
    ARRAY = "array"
    BOOLEAN = "boolean"
    DATE = "date"
    FUNCTION = "function"
    INTEGER = "integer"
    NULL = "null"
    NUMBER = "number"
    OBJECT = "object"
    REGEXP = "regexp"
    STRING = "string"

    def __str__(self) -> str:
        return self.value


TypeTag = Union[DataType, str]
TypeTags = Union[TypeTag, Sequence[TypeTag]]

_TAG_VALUES = {member.value for member in DataType}


def to_data_type(raw: Any) -> Optional[DataType]:
    """Return the DataType for a raw tag, or None when it is not a member."""
    if isinstance(raw, DataType):
        return raw
    if isinstance(raw, str) and raw in _TAG_VALUES:
        return DataType(raw)
    return None


def as_tag_list(raw: Any) -> List[Any]:
    if isinstance(raw, (list, tuple)):
        return list(raw)
    return [raw]


def is_valid_type_tag(raw: Any) -> bool:
    """Check a single tag or a non-empty list/tuple of tags.

    Every entry must be a DataType member (or its string value).
    """
    if raw is None:
        return False
    tags = as_tag_list(raw)
    if not tags:
        return False
    return all(to_data_type(tag) is not None for tag in tags)


def contains_any(raw: Any) -> bool:
    return any(to_data_type(tag) is DataType.ANY for tag in as_tag_list(raw))
