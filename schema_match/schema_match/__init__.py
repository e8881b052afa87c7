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

"""Structural value validation against declarative schemas."""

__version__ = "0.1.0"

# Schema document format understood by this version of the tool.
SCHEMA_FORMAT_VERSION = "0.1.0"

from .exceptions import (
    FormatVersionError,
    OptionsError,
    SchemaDepthError,
    SchemaLoadError,
    SchemaMatchError,
    ValidationError,
)
from .file_io.schema_loader import SchemaDocument, load_schema_document
from .matcher import DEFAULT_MAX_DEPTH, matches_schema
from .models.data_type import DataType, is_valid_type_tag
from .models.options import SCHEMA_NODE_META_SCHEMA, Options, is_valid_options
from .predicate import is_of_type, matches_any_type
from .utils.numeric import is_multiple_of
from .utils.objects import extend_object

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "SCHEMA_FORMAT_VERSION",
    "SCHEMA_NODE_META_SCHEMA",
    "DataType",
    "FormatVersionError",
    "Options",
    "OptionsError",
    "SchemaDepthError",
    "SchemaDocument",
    "SchemaLoadError",
    "SchemaMatchError",
    "ValidationError",
    "extend_object",
    "is_multiple_of",
    "is_of_type",
    "is_valid_options",
    "is_valid_type_tag",
    "load_schema_document",
    "matches_any_type",
    "matches_schema",
]
