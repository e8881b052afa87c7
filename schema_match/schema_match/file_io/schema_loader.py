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

"""Loading of schema documents and data files from YAML or JSON."""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import jsonschema
import yaml

from ..exceptions import FormatVersionError, SchemaDepthError, SchemaLoadError
from ..matcher import get_default_max_depth, matches_schema
from ..models.data_type import is_valid_type_tag
from ..models.options import SCHEMA_NODE_META_SCHEMA, is_valid_options
from ..utils.format_version import FORMAT_VERSION_FIELD, check_document_format

logger = logging.getLogger(__name__)

JsonPointer = str

# Document cache keyed by (resolved path, mtime)
_DOCUMENT_CACHE: Dict[Tuple[Path, float], "SchemaDocument"] = {}
_ENVELOPE_SCHEMA: Optional[dict] = None


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    yaml_path: Optional[JsonPointer] = None


@dataclass(frozen=True)
class SchemaDocument:
    """A schema loaded from a document, ready for matching."""

    schema: Any
    name: Optional[str] = None
    format_version: Optional[str] = None
    source: Optional[Path] = None

    def matches(self, value: Any, *, max_depth: Optional[int] = None) -> bool:
        return matches_schema(value, self.schema, max_depth=max_depth)


def _jp_escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def _join_path(base: Optional[JsonPointer], token: Union[str, int]) -> JsonPointer:
    token = _jp_escape(str(token))
    if not base:
        return f"/{token}"
    return f"{base}/{token}"


def get_envelope_schema_path() -> Path:
    return Path(__file__).parent.parent / "schema" / "document.json"


def load_envelope_schema() -> dict:
    """Load the JSON Schema describing a schema document (cached)."""
    global _ENVELOPE_SCHEMA
    if _ENVELOPE_SCHEMA is None:
        with open(get_envelope_schema_path(), "r", encoding="utf-8") as f:
            _ENVELOPE_SCHEMA = json.load(f)
    return _ENVELOPE_SCHEMA


def _check_envelope(data: Any) -> List[SchemaIssue]:
    validator = jsonschema.Draft7Validator(load_envelope_schema())
    issues = []
    for error in sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path]):
        path = "/" + "/".join(str(p) for p in error.absolute_path) if error.absolute_path else ""
        issues.append(SchemaIssue(message=error.message, yaml_path=path))
    return issues


def check_schema_nodes(
    schema: Any,
    *,
    path: JsonPointer = "/schema",
    max_depth: Optional[int] = None,
) -> List[SchemaIssue]:
    """Check every node of a schema tree for well-formedness.

    The matcher tolerates malformed nodes; this walk reports them so that
    authoring mistakes are not silently treated as non-matching.

    Raises:
        SchemaDepthError: If the tree nests deeper than ``max_depth``.
    """
    if max_depth is None:
        max_depth = get_default_max_depth()
    issues: List[SchemaIssue] = []
    _check_alternatives(schema, path, 0, max_depth, issues)
    return issues


def _check_alternatives(schema: Any, path: JsonPointer, depth: int, max_depth: int, issues: List[SchemaIssue]) -> None:
    if depth > max_depth:
        raise SchemaDepthError(max_depth)

    if isinstance(schema, (list, tuple)):
        if not schema:
            issues.append(SchemaIssue(message="Empty list of schema alternatives never matches", yaml_path=path))
        for idx, node in enumerate(schema):
            _check_node(node, _join_path(path, idx), depth, max_depth, issues)
    else:
        _check_node(schema, path, depth, max_depth, issues)


def _check_node(node: Any, path: JsonPointer, depth: int, max_depth: int, issues: List[SchemaIssue]) -> None:
    if not matches_schema(node, SCHEMA_NODE_META_SCHEMA, max_depth=max_depth):
        issues.append(SchemaIssue(message="Malformed schema node", yaml_path=path))
        return

    if "type" in node and node["type"] is not None:
        if not is_valid_type_tag(node["type"]):
            issues.append(SchemaIssue(message=f"Unknown type tag in {node['type']!r}", yaml_path=_join_path(path, "type")))

    if "options" in node and not is_valid_options(node["options"]):
        issues.append(SchemaIssue(message="Invalid options", yaml_path=_join_path(path, "options")))

    props = node.get("props")
    if isinstance(props, Mapping):
        props_path = _join_path(path, "props")
        for key, prop_schema in props.items():
            _check_alternatives(prop_schema, _join_path(props_path, key), depth + 1, max_depth, issues)

    if node.get("items") is not None:
        _check_alternatives(node["items"], _join_path(path, "items"), depth + 1, max_depth, issues)


def parse_schema_document(data: Any, source: Optional[Path] = None) -> SchemaDocument:
    """Build a SchemaDocument from parsed YAML/JSON data.

    Raises:
        SchemaLoadError: If the document envelope or any schema node is malformed.
        FormatVersionError: If the declared format version is incompatible.
    """
    where = f" ({source})" if source else ""

    issues = _check_envelope(data)
    if issues:
        raise SchemaLoadError(_format_issues(f"Invalid schema document{where}", issues))

    raw_version = data.get(FORMAT_VERSION_FIELD)
    if raw_version is None:
        logger.debug(f"No '{FORMAT_VERSION_FIELD}' declared{where}")
    else:
        try:
            warning = check_document_format(raw_version)
        except FormatVersionError as e:
            raise FormatVersionError(f"{e}{where}") from e
        if warning:
            logger.warning(f"{warning}{where}")

    issues = check_schema_nodes(data["schema"])
    if issues:
        raise SchemaLoadError(_format_issues(f"Invalid schema{where}", issues))

    return SchemaDocument(
        schema=data["schema"],
        name=data.get("name"),
        format_version=raw_version,
        source=source,
    )


def _format_issues(header: str, issues: List[SchemaIssue]) -> str:
    lines = [f"{header}:"]
    for issue in issues:
        location = f"{issue.yaml_path}: " if issue.yaml_path else ""
        lines.append(f"  - {location}{issue.message}")
    return "\n".join(lines)


def load_data_file(file_path: Union[str, Path]) -> Any:
    """Load a YAML or JSON file.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
    """
    path = Path(file_path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix == ".json":
                return json.load(f)
            return yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        logger.error(f"Failed to load {path}: {e}")
        raise SchemaLoadError(f"Error loading file {path}: {e}") from e


def load_schema_document(file_path: Union[str, Path]) -> SchemaDocument:
    """Load and check a schema document, reusing cached results for unchanged files."""
    path = Path(file_path).resolve()
    try:
        cache_key = (path, path.stat().st_mtime)
    except OSError as e:
        raise SchemaLoadError(f"Schema file not found: {path}") from e

    if cache_key in _DOCUMENT_CACHE:
        return _DOCUMENT_CACHE[cache_key]

    document = parse_schema_document(load_data_file(path), source=path)
    _DOCUMENT_CACHE[cache_key] = document
    logger.debug(f"Loaded schema document {document.name or path.name} from {path}")
    return document


def clear_cache() -> None:
    """Clear the document cache. Useful for testing."""
    _DOCUMENT_CACHE.clear()
