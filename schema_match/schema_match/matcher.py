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

"""Recursive matching of values against schema nodes.

A schema is a single node or a list of nodes. A value matches a list when
it matches at least one node. Within one node the type, required-property,
nested-property and items checks must all pass.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any, List, Optional

from .exceptions import SchemaDepthError
from .models.data_type import DataType, as_tag_list, contains_any, is_valid_type_tag, to_data_type
from .models.options import Options
from .predicate import matches_any_type
from .utils.objects import has_member

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 100
MAX_DEPTH_ENV = "SCHEMA_MATCH_MAX_DEPTH"


def get_default_max_depth() -> int:
    """Return the recursion limit, honoring ``SCHEMA_MATCH_MAX_DEPTH``."""
    env_value = os.environ.get(MAX_DEPTH_ENV)
    if env_value is None:
        return DEFAULT_MAX_DEPTH
    try:
        depth = int(env_value)
    except ValueError:
        logger.warning(f"Ignoring invalid {MAX_DEPTH_ENV}={env_value!r}; using {DEFAULT_MAX_DEPTH}")
        return DEFAULT_MAX_DEPTH
    if depth < 1:
        logger.warning(f"Ignoring non-positive {MAX_DEPTH_ENV}={depth}; using {DEFAULT_MAX_DEPTH}")
        return DEFAULT_MAX_DEPTH
    return depth


def _alternatives(schema: Any) -> List[Any]:
    if isinstance(schema, (list, tuple)):
        return list(schema)
    return [schema]


class _SchemaWalker:
    """Walks a (value, schema) pair, tracking nesting depth."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth

    def match(self, value: Any, schema: Any, depth: int = 0) -> bool:
        if depth > self.max_depth:
            raise SchemaDepthError(self.max_depth)
        return any(self._match_node(value, node, depth) for node in _alternatives(schema))

    def _match_node(self, value: Any, node: Any, depth: int) -> bool:
        if not isinstance(node, Mapping):
            logger.debug(f"Skipping schema alternative that is not a mapping: {node!r}")
            return False

        raw_type = node.get("type")
        if raw_type is None:
            raw_type = DataType.ANY
        elif not is_valid_type_tag(raw_type):
            logger.debug(f"Schema alternative has invalid type {raw_type!r}")
            return False

        options = node.get("options")
        if not isinstance(options, (Mapping, Options)):
            options = None

        def nested(child_value: Any, child_schema: Any) -> bool:
            return self.match(child_value, child_schema, depth + 1)

        is_any = contains_any(raw_type)
        if not (is_any or matches_any_type(value, raw_type, options, schema_matcher=nested)):
            return False

        props = node.get("props")
        if isinstance(props, Mapping) and props:
            for key, prop_schema in props.items():
                if (
                    isinstance(prop_schema, Mapping)
                    and prop_schema.get("required") is True
                    and not has_member(value, key)
                ):
                    return False
            for key, prop_schema in props.items():
                if has_member(value, key) and not nested(value[key], prop_schema):
                    return False

        items = node.get("items")
        if items is not None and isinstance(value, (list, tuple)):
            tags = {to_data_type(tag) for tag in as_tag_list(raw_type)}
            # Only a lone array or any tag checks items; unions never do.
            if tags == {DataType.ARRAY} or tags == {DataType.ANY}:
                return all(nested(item, items) for item in value)

        return True


def matches_schema(value: Any, schema: Any, *, max_depth: Optional[int] = None) -> bool:
    """Test ``value`` against a schema node or a list of alternative nodes.

    Malformed nodes never raise; they simply do not match.

    Args:
        value: Value to test
        schema: Schema node mapping or list/tuple of nodes
        max_depth: Recursion limit; defaults to :func:`get_default_max_depth`

    Returns:
        True when at least one alternative matches.

    Raises:
        SchemaDepthError: If nesting exceeds ``max_depth`` (e.g. cyclic schemas).
    """
    if max_depth is None:
        max_depth = get_default_max_depth()
    return _SchemaWalker(max_depth).match(value, schema)
