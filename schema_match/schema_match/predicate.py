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

"""Single-tag type checks and the type-union resolver built on them."""

from __future__ import annotations

import datetime
import logging
import re
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional

from .models.data_type import DataType, TypeTags, as_tag_list, contains_any, to_data_type
from .models.options import Options, coerce_options
from .utils.numeric import is_multiple_of, is_number

logger = logging.getLogger(__name__)

SchemaMatcher = Callable[[Any, Any], bool]

_PATTERN_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}
# Accepted for compatibility with JavaScript-style flag strings; no effect.
_IGNORED_PATTERN_FLAGS = frozenset("guy")


def _default_schema_matcher(value: Any, schema: Any) -> bool:
    from .matcher import matches_schema

    return matches_schema(value, schema)


def _compile_pattern(pattern: str, flag_letters: str) -> Optional[re.Pattern]:
    flags = 0
    for letter in flag_letters:
        if letter in _PATTERN_FLAGS:
            flags |= _PATTERN_FLAGS[letter]
        elif letter not in _IGNORED_PATTERN_FLAGS:
            logger.debug(f"Unsupported pattern flag '{letter}' in '{flag_letters}'")
            return None
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        logger.debug(f"Invalid pattern '{pattern}': {e}")
        return None


def _within_bounds(amount: float, options: Options) -> bool:
    if options.excl_min:
        if not amount > options.min:
            return False
    elif not amount >= options.min:
        return False

    if options.excl_max:
        return amount < options.max
    return amount <= options.max


def _check_any(value: Any, options: Options, match: SchemaMatcher) -> bool:
    return True


def _check_null(value: Any, options: Options, match: SchemaMatcher) -> bool:
    return value is None


def _check_boolean(value: Any, options: Options, match: SchemaMatcher) -> bool:
    return isinstance(value, bool)


def _check_number(value: Any, options: Options, match: SchemaMatcher) -> bool:
    return (
        is_number(value)
        and _within_bounds(value, options)
        and is_multiple_of(value, options.multiple_of)
    )


def _check_integer(value: Any, options: Options, match: SchemaMatcher) -> bool:
    if not _check_number(value, options, match):
        return False
    return isinstance(value, int) or float(value).is_integer()


def _check_string(value: Any, options: Options, match: SchemaMatcher) -> bool:
    if not isinstance(value, str):
        return False
    if options.excl_empty and not value:
        return False
    if not _within_bounds(len(value), options):
        return False
    compiled = _compile_pattern(options.pattern, options.pattern_flags)
    return compiled is not None and compiled.search(value) is not None


def _check_array(value: Any, options: Options, match: SchemaMatcher) -> bool:
    if not isinstance(value, (list, tuple)):
        return False
    if options.excl_empty and not value:
        return False
    if not _within_bounds(len(value), options):
        return False
    if not all(matches_any_type(item, options.type, schema_matcher=match) for item in value):
        return False
    if options.schema is not None:
        return all(match(item, options.schema) for item in value)
    return True


def _check_object(value: Any, options: Options, match: SchemaMatcher) -> bool:
    is_object = isinstance(value, Mapping) or (
        options.array_as_object and isinstance(value, (list, tuple))
    )
    if not is_object:
        return False
    if options.excl_empty and not value:
        return False
    if options.schema is not None:
        return match(value, options.schema)
    return True


def _check_date(value: Any, options: Options, match: SchemaMatcher) -> bool:
    return isinstance(value, datetime.date)


def _check_function(value: Any, options: Options, match: SchemaMatcher) -> bool:
    return callable(value) and not isinstance(value, type)


def _check_regexp(value: Any, options: Options, match: SchemaMatcher) -> bool:
    return isinstance(value, re.Pattern)


_TYPE_CHECKS: Dict[DataType, Callable[[Any, Options, SchemaMatcher], bool]] = {
    DataType.ANY: _check_any,
    DataType.ARRAY: _check_array,
    DataType.BOOLEAN: _check_boolean,
    DataType.DATE: _check_date,
    DataType.FUNCTION: _check_function,
    DataType.INTEGER: _check_integer,
    DataType.NULL: _check_null,
    DataType.NUMBER: _check_number,
    DataType.OBJECT: _check_object,
    DataType.REGEXP: _check_regexp,
    DataType.STRING: _check_string,
}


def is_of_type(
    value: Any,
    tag: Any,
    options: Any = None,
    *,
    schema_matcher: Optional[SchemaMatcher] = None,
) -> bool:
    """Test ``value`` against a single type tag.

    Args:
        value: Value to test
        tag: A DataType member or its string value
        options: Options instance or mapping; malformed mappings fall back
            to defaults
        schema_matcher: Callable used for the ``schema`` option. Defaults to
            :func:`schema_match.matcher.matches_schema`.

    Returns:
        False for unknown tags, otherwise the result of the tag's check.
    """
    data_type = to_data_type(tag)
    if data_type is None:
        return False

    opts = coerce_options(options)
    if value is None and opts.allow_null:
        return True

    return _TYPE_CHECKS[data_type](value, opts, schema_matcher or _default_schema_matcher)


def matches_any_type(
    value: Any,
    tags: TypeTags,
    options: Any = None,
    *,
    schema_matcher: Optional[SchemaMatcher] = None,
) -> bool:
    """Test ``value`` against one or more type tags (logical OR).

    ``any`` anywhere in ``tags`` matches immediately. Entries that are not
    valid tags are dropped; if none remain the result is False.
    """
    if contains_any(tags):
        return True

    valid_tags = [t for t in (to_data_type(tag) for tag in as_tag_list(tags)) if t is not None]
    if not valid_tags:
        return False

    opts = coerce_options(options)
    return any(
        is_of_type(value, tag, opts, schema_matcher=schema_matcher) for tag in valid_tags
    )
