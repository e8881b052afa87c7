"""
Tests for loading schema documents
"""

import pytest

from schema_match import (
    SCHEMA_FORMAT_VERSION,
    FormatVersionError,
    SchemaDepthError,
    SchemaDocument,
    SchemaLoadError,
    load_schema_document,
)
from schema_match.file_io.schema_loader import (
    check_schema_nodes,
    load_data_file,
    load_envelope_schema,
    parse_schema_document,
)
from schema_match.utils.format_version import check_document_format, major_minor


class TestParseSchemaDocument:
    """Tests for building documents from parsed data"""

    def test_minimal_document(self):
        document = parse_schema_document({"schema": {"type": "string"}})
        assert isinstance(document, SchemaDocument)
        assert document.schema == {"type": "string"}
        assert document.name is None
        assert document.matches("a") is True
        assert document.matches(1) is False

    def test_full_document(self, person_schema):
        document = parse_schema_document(
            {
                "schema_match_format": SCHEMA_FORMAT_VERSION,
                "name": "person",
                "description": "A person record",
                "schema": person_schema,
            }
        )
        assert document.name == "person"
        assert document.format_version == SCHEMA_FORMAT_VERSION
        assert document.matches({"name": "Ada"}) is True

    def test_alternatives_list(self):
        document = parse_schema_document({"schema": [{"type": "string"}, {"type": "null"}]})
        assert document.matches(None) is True

    def test_root_must_be_mapping(self):
        with pytest.raises(SchemaLoadError):
            parse_schema_document(["schema"])

    def test_missing_schema(self):
        with pytest.raises(SchemaLoadError) as exc_info:
            parse_schema_document({"name": "x"})
        assert "schema" in str(exc_info.value)

    def test_unknown_envelope_key(self):
        with pytest.raises(SchemaLoadError):
            parse_schema_document({"schema": {}, "extra": 1})

    def test_empty_alternatives_rejected_by_envelope(self):
        with pytest.raises(SchemaLoadError):
            parse_schema_document({"schema": []})

    def test_unknown_type_tag_is_reported_with_path(self):
        with pytest.raises(SchemaLoadError) as exc_info:
            parse_schema_document({"schema": {"props": {"a": {"type": "text"}}}})
        assert "/schema/props/a/type" in str(exc_info.value)

    def test_invalid_options_are_reported(self):
        with pytest.raises(SchemaLoadError) as exc_info:
            parse_schema_document({"schema": {"type": "number", "options": {"min": "3"}}})
        assert "/schema/options" in str(exc_info.value)

    def test_malformed_nested_node(self):
        with pytest.raises(SchemaLoadError) as exc_info:
            parse_schema_document({"schema": {"type": "array", "items": {"required": "no"}}})
        assert "/schema/items" in str(exc_info.value)

    def test_incompatible_major_version(self):
        with pytest.raises(FormatVersionError):
            parse_schema_document({"schema_match_format": "9.0.0", "schema": {}})

    def test_unparsable_version(self):
        with pytest.raises(FormatVersionError):
            parse_schema_document({"schema_match_format": "latest", "schema": {}})

    def test_newer_minor_version_warns(self, caplog):
        major, minor = major_minor(SCHEMA_FORMAT_VERSION)
        newer = f"{major}.{minor + 1}.0"
        with caplog.at_level("WARNING"):
            document = parse_schema_document({"schema_match_format": newer, "schema": {}})
        assert document.format_version == newer
        assert "newer minor version" in caplog.text


class TestCheckSchemaNodes:
    """Tests for the node-by-node walk"""

    def test_well_formed_tree_has_no_issues(self, person_schema):
        assert check_schema_nodes(person_schema) == []

    def test_empty_alternative_list_in_props(self):
        issues = check_schema_nodes({"props": {"a": []}})
        assert [issue.yaml_path for issue in issues] == ["/schema/props/a"]

    def test_path_escaping(self):
        issues = check_schema_nodes({"props": {"a/b": {"type": "nope"}}})
        assert issues[0].yaml_path == "/schema/props/a~1b/type"

    def test_cyclic_schema_raises(self):
        node = {"props": {}}
        node["props"]["self"] = node
        with pytest.raises(SchemaDepthError):
            check_schema_nodes(node, max_depth=10)


class TestLoadFiles:
    """Tests for reading schema documents and data from disk"""

    def test_load_yaml_document(self, write_yaml, person_schema):
        path = write_yaml("person.yaml", {"name": "person", "schema": person_schema})
        document = load_schema_document(path)
        assert document.source == path.resolve()
        assert document.matches({"name": "Ada"}) is True

    def test_load_json_document(self, write_json):
        path = write_json("numbers.json", {"schema": {"type": "array", "items": {"type": "number"}}})
        document = load_schema_document(str(path))
        assert document.matches([1, 2]) is True

    def test_documents_are_cached(self, write_yaml):
        path = write_yaml("s.yaml", {"schema": {}})
        assert load_schema_document(path) is load_schema_document(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaLoadError):
            load_schema_document(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("schema: [unclosed\n", encoding="utf-8")
        with pytest.raises(SchemaLoadError):
            load_schema_document(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(SchemaLoadError):
            load_data_file(path)

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "binary.yaml"
        path.write_bytes(b"\xff\xfe\x00x: 1\n")
        with pytest.raises(SchemaLoadError):
            load_data_file(path)

    def test_envelope_schema_is_packaged(self):
        assert load_envelope_schema()["required"] == ["schema"]


class TestFormatVersion:
    """Tests for the schema_match_format check"""

    def test_major_minor(self):
        assert major_minor("v1.2.3") == (1, 2)
        assert major_minor(" 0.10.4 ") == (0, 10)

    def test_malformed_versions_are_rejected(self):
        for raw in (1.0, "1.2", "1.2.3-rc1", None):
            with pytest.raises(FormatVersionError):
                major_minor(raw)

    def test_supported_version_has_no_warning(self):
        assert check_document_format(SCHEMA_FORMAT_VERSION) is None

    def test_older_minor_has_no_warning(self):
        major, _ = major_minor(SCHEMA_FORMAT_VERSION)
        assert check_document_format(f"{major}.0.9") is None

    def test_other_major_is_rejected(self):
        major, _ = major_minor(SCHEMA_FORMAT_VERSION)
        with pytest.raises(FormatVersionError) as exc_info:
            check_document_format(f"{major + 1}.0.0")
        assert "not supported" in str(exc_info.value)

    def test_newer_minor_returns_warning(self):
        major, minor = major_minor(SCHEMA_FORMAT_VERSION)
        warning = check_document_format(f"{major}.{minor + 1}.0")
        assert "newer minor version" in warning
