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

"""Refinement options attached to a type check.

Two ways to check a raw options mapping:

* :func:`is_valid_options` answers with a boolean and never raises.
* :class:`Options` builds a fully defaulted, immutable instance and raises
  :class:`~schema_match.exceptions.OptionsError` on the first bad field.

Both share the same per-field checks, so a mapping accepted by
``is_valid_options`` always constructs.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple, Union

from ..exceptions import OptionsError
from ..utils.numeric import is_number
from ..utils.objects import extend_object
from .data_type import DataType, as_tag_list, is_valid_type_tag, to_data_type

logger = logging.getLogger(__name__)


# Describes the shape of a schema node. Used to check the `schema` option.
SCHEMA_NODE_META_SCHEMA: Dict[str, Any] = {
    "type": DataType.OBJECT,
    "props": {
        "type": [
            {"type": DataType.STRING},
            {"type": DataType.ARRAY, "items": {"type": DataType.STRING}},
        ],
        "props": {"type": DataType.OBJECT},
        "items": [
            {"type": DataType.OBJECT},
            {"type": DataType.ARRAY, "items": {"type": DataType.OBJECT}},
        ],
        "required": {"type": DataType.BOOLEAN},
        "options": {"type": DataType.OBJECT},
    },
}


def _valid_schema(value: Any) -> bool:
    from ..matcher import matches_schema

    if value is None:
        return True
    if isinstance(value, (list, tuple)):
        return all(matches_schema(node, SCHEMA_NODE_META_SCHEMA) for node in value)
    return matches_schema(value, SCHEMA_NODE_META_SCHEMA)


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


# raw key -> (attribute name, check)
_FIELDS: Dict[str, Tuple[str, Callable[[Any], bool]]] = {
    "type": ("type", is_valid_type_tag),
    "min": ("min", is_number),
    "max": ("max", is_number),
    "exclMin": ("excl_min", _is_boolean),
    "exclMax": ("excl_max", _is_boolean),
    "multipleOf": ("multiple_of", is_number),
    "pattern": ("pattern", _is_string),
    "patternFlags": ("pattern_flags", _is_string),
    "exclEmpty": ("excl_empty", _is_boolean),
    "allowNull": ("allow_null", _is_boolean),
    "arrayAsObject": ("array_as_object", _is_boolean),
    "schema": ("schema", _valid_schema),
}

OPTION_KEYS = tuple(_FIELDS)


def _normalize_type(raw: Any) -> Union[DataType, Tuple[DataType, ...]]:
    if isinstance(raw, (list, tuple)):
        return tuple(to_data_type(tag) for tag in raw)
    return to_data_type(raw)


def is_valid_options(raw: Any) -> bool:
    """Check whether ``raw`` is a well-formed options mapping.

    ``None`` and non-mapping input count as an empty (valid) options object.
    Unknown keys do not affect the result.
    """
    if isinstance(raw, Options):
        return True
    if not isinstance(raw, Mapping):
        return True

    for key, value in raw.items():
        field = _FIELDS.get(key)
        if field is None:
            continue
        _, check = field
        if not check(value):
            logger.debug(f"Option '{key}' failed its check: {value!r}")
            return False
    return True


@dataclass(frozen=True, init=False)
class Options:
    """Normalized, immutable refinement options.

    Args:
        raw: Options mapping, another Options instance, or None for defaults.

    Raises:
        OptionsError: On the first known key whose value fails its check,
            or when ``raw`` is not a mapping.
    """

    type: Union[DataType, Tuple[DataType, ...]] = DataType.ANY
    min: float = -math.inf
    max: float = math.inf
    excl_min: bool = False
    excl_max: bool = False
    multiple_of: float = 0
    pattern: str = r"[\s\S]*"
    pattern_flags: str = ""
    excl_empty: bool = False
    allow_null: bool = False
    array_as_object: bool = False
    schema: Optional[Any] = None

    def __init__(self, raw: Optional[Any] = None):
        if raw is None:
            return
        if isinstance(raw, Options):
            raw = raw.to_dict()
        if not isinstance(raw, Mapping):
            raise OptionsError(
                key="<root>",
                raw=raw,
                message=f"Options must be a mapping, got {type(raw).__name__}: {raw!r}",
            )

        for key, value in raw.items():
            field = _FIELDS.get(key)
            if field is None:
                continue
            attr, check = field
            if not check(value):
                raise OptionsError(key=key, raw=dict(raw))
            if attr == "type":
                value = _normalize_type(value)
            object.__setattr__(self, attr, value)

    @property
    def types(self) -> Tuple[DataType, ...]:
        """The ``type`` field as a tuple of tags."""
        return tuple(as_tag_list(self.type))

    def to_dict(self) -> Dict[str, Any]:
        """Return the options keyed by their raw (camelCase) names."""
        result = {}
        for key, (attr, _) in _FIELDS.items():
            value = getattr(self, attr)
            if attr == "type" and isinstance(value, tuple):
                value = list(value)
            result[key] = value
        return result

    def extend(self, *sources: Optional[Mapping]) -> "Options":
        """Return a new instance with ``sources`` merged over these options."""
        return Options(extend_object({}, self.to_dict(), *sources))


def coerce_options(raw: Any) -> Options:
    """Return ``raw`` as Options, falling back to defaults when it is malformed."""
    if isinstance(raw, Options):
        return raw
    if isinstance(raw, Mapping) and is_valid_options(raw):
        return Options(raw)
    if raw is not None:
        logger.debug(f"Ignoring malformed options: {raw!r}")
    return Options()
