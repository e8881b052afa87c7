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

"""Custom exceptions for the schema_match package."""


class SchemaMatchError(Exception):
    """Base exception for schema_match related errors."""
    pass


class ValidationError(SchemaMatchError):
    """Exception raised for validation errors."""
    pass


class OptionsError(ValidationError, ValueError):
    """Exception raised when an options object cannot be constructed."""

    def __init__(self, key: str, raw: object, message: str = None):
        self.key = key
        self.raw = raw
        super().__init__(message or f"Invalid option {key} provided: {raw!r}")


class FormatVersionError(ValidationError):
    """Exception raised when a schema document's format version is incompatible."""
    pass


class SchemaDepthError(SchemaMatchError, RecursionError):
    """Exception raised when schema recursion exceeds the configured depth.

    Usually the sign of a cyclic schema graph.
    """

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(
            f"Schema nesting exceeds maximum depth of {max_depth}; "
            "the schema may be cyclic"
        )


class SchemaLoadError(SchemaMatchError):
    """Exception raised when a schema document cannot be loaded."""
    pass
