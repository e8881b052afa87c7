"""
Tests for the schema-match command line
"""

import json
import logging

import pytest

from schema_match.cli import check_files, main
from schema_match.file_io.schema_loader import parse_schema_document


@pytest.fixture(autouse=True)
def restore_root_logging():
    """The CLI reconfigures root logging; put it back after each test"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def schema_file(write_yaml):
    return write_yaml(
        "point.yaml",
        {
            "schema_match_format": "0.1.0",
            "name": "point",
            "schema": {
                "type": "object",
                "props": {
                    "x": {"type": "number", "required": True},
                    "y": {"type": "number", "required": True},
                },
            },
        },
    )


def run_main(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestMain:
    """Tests for the CLI entry point"""

    def test_matching_file(self, schema_file, write_yaml, capsys):
        data = write_yaml("p.yaml", {"x": 1, "y": 2})
        assert run_main([str(schema_file), str(data)]) == 0
        assert f"{data}: OK" in capsys.readouterr().out

    def test_non_matching_file(self, schema_file, write_yaml, capsys):
        data = write_yaml("p.yaml", {"x": 1})
        assert run_main([str(schema_file), str(data)]) == 1
        assert "does not match 'point'" in capsys.readouterr().out

    def test_json_output(self, schema_file, write_yaml, write_json, capsys):
        good = write_json("good.json", {"x": 1, "y": 2})
        bad = write_yaml("bad.yaml", {"x": "1", "y": 2})
        assert run_main([str(schema_file), str(good), str(bad), "--format", "json"]) == 1
        report = json.loads(capsys.readouterr().out)
        assert report["files"] == 2
        assert report["matched"] == 1
        assert report["failed"] == 1
        assert [r["matched"] for r in report["results"]] == [True, False]

    def test_unreadable_data_file(self, schema_file, tmp_path, capsys):
        assert run_main([str(schema_file), str(tmp_path / "missing.yaml")]) == 1
        assert "ERROR" in capsys.readouterr().out

    def test_non_utf8_data_file(self, schema_file, tmp_path, capsys):
        """A data file that is not valid UTF-8 is reported, not raised"""
        data = tmp_path / "binary.yaml"
        data.write_bytes(b"\xff\xfe\x00x: 1\n")
        assert run_main([str(schema_file), str(data)]) == 1
        assert f"{data}: ERROR" in capsys.readouterr().out

    def test_invalid_schema_document(self, write_yaml, capsys):
        schema = write_yaml("bad_schema.yaml", {"schema": {"type": "nope"}})
        data = write_yaml("p.yaml", {})
        assert run_main([str(schema), str(data)]) == 1
        captured = capsys.readouterr()
        assert "ERROR: Invalid schema" in captured.err
        assert "Invalid schema" not in captured.out

    def test_depth_limit(self, write_yaml, capsys):
        schema = write_yaml(
            "deep.yaml",
            {"schema": {"props": {"a": {"props": {"b": {"props": {"c": {}}}}}}}},
        )
        data = write_yaml("deep_data.yaml", {"a": {"b": {"c": 1}}})
        assert run_main([str(schema), str(data), "--max-depth", "2"]) == 1
        assert "maximum depth" in capsys.readouterr().out

    def test_missing_arguments(self):
        assert run_main([]) == 2


class TestCheckFiles:
    """Tests for check_files"""

    def test_results_per_file(self, write_yaml):
        document = parse_schema_document({"schema": {"type": "array"}})
        paths = [write_yaml("a.yaml", [1]), write_yaml("b.yaml", {"a": 1})]
        results = check_files(document, paths)
        assert [r.ok for r in results] == [True, False]
        assert results[1].to_dict()["matched"] is False
