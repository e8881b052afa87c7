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

"""The ``schema_match_format`` field of a schema document.

A document may declare the format it was written for as ``MAJOR.MINOR.PATCH``.
The major part must equal the tool's; a newer minor part only warns.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from .. import SCHEMA_FORMAT_VERSION
from ..exceptions import FormatVersionError

FORMAT_VERSION_FIELD = "schema_match_format"

_MAJOR_MINOR_RE = re.compile(r"v?(\d+)\.(\d+)\.\d+")


def major_minor(raw) -> Tuple[int, int]:
    """Return the (major, minor) pair of a format version string."""
    m = _MAJOR_MINOR_RE.fullmatch(raw.strip()) if isinstance(raw, str) else None
    if m is None:
        raise FormatVersionError(
            f"'{FORMAT_VERSION_FIELD}' must look like '{SCHEMA_FORMAT_VERSION}', got {raw!r}"
        )
    return int(m.group(1)), int(m.group(2))


def check_document_format(raw) -> Optional[str]:
    """Check a declared format against ``SCHEMA_FORMAT_VERSION``.

    Returns a warning message when the document uses a newer minor format,
    otherwise None.

    Raises:
        FormatVersionError: If the version is malformed or its major differs.
    """
    major, minor = major_minor(raw)
    tool_major, tool_minor = major_minor(SCHEMA_FORMAT_VERSION)
    if major != tool_major:
        raise FormatVersionError(
            f"Document format {raw} is not supported; "
            f"this tool reads format {tool_major}.x ({SCHEMA_FORMAT_VERSION})"
        )
    if minor > tool_minor:
        return (
            f"Document format {raw} has a newer minor version than "
            f"{SCHEMA_FORMAT_VERSION}; newer features are not checked"
        )
    return None
