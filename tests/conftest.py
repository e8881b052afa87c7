"""
Shared test fixtures for pytest
"""

import json

import pytest
import yaml

from schema_match.file_io import schema_loader


@pytest.fixture(autouse=True)
def clear_document_cache():
    """Start every test with an empty schema document cache"""
    schema_loader.clear_cache()
    yield
    schema_loader.clear_cache()


@pytest.fixture
def write_yaml(tmp_path):
    """Write data to a YAML file under tmp_path and return its path"""

    def _write(name, data):
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_json(tmp_path):
    """Write data to a JSON file under tmp_path and return its path"""

    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def person_schema():
    """A two-level object schema used across tests"""
    return {
        "type": "object",
        "props": {
            "name": {"type": "string", "required": True, "options": {"exclEmpty": True}},
            "age": {"type": "integer", "options": {"min": 0}},
            "tags": {"type": "array", "items": {"type": "string"}},
            "address": {
                "type": "object",
                "props": {
                    "city": {"type": "string", "required": True},
                    "zip": {"type": ["string", "integer"]},
                },
            },
        },
    }
