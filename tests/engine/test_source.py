"""
Unit tests for document sources and JSON value helpers.
"""

import json
from pathlib import Path

import pytest

from rsv.core.errors import DocumentError
from rsv.engine.jsonvalue import describe, scalar_text
from rsv.engine.source import DocumentSource, as_source


class TestDocumentSource:
    """Tests for resolving documents."""

    def test_from_value_returns_value(self):
        source = DocumentSource.from_value({"a": 1})

        assert source.resolve() == {"a": 1}
        assert source.label == "<memory>"

    def test_from_path_reads_json(self, tmp_path):
        path = tmp_path / "doc.json"
        path.write_text(json.dumps([{"a": 1}]))

        source = DocumentSource.from_path(path)

        assert source.resolve() == [{"a": 1}]
        assert source.label == str(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentError, match="not found"):
            DocumentSource.from_path(tmp_path / "missing.json").resolve()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "doc.json"
        path.write_text("{nope")

        with pytest.raises(DocumentError, match="Cannot read"):
            DocumentSource.from_path(path).resolve()

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "doc.json"
        path.write_bytes(b'{"a": "\xff\xfe"}')

        with pytest.raises(DocumentError, match="Cannot read"):
            DocumentSource.from_path(path).resolve()

    def test_oversized_integer_literal(self, tmp_path):
        path = tmp_path / "doc.json"
        path.write_text('{"a": ' + "9" * 5000 + "}")

        with pytest.raises(DocumentError, match="Cannot read"):
            DocumentSource.from_path(path).resolve()


class TestAsSource:
    """Tests for coercing caller arguments."""

    def test_paths_and_strings_are_files(self):
        assert as_source(Path("a.json")).path == Path("a.json")
        assert as_source("a.json").path == Path("a.json")

    def test_json_values_are_in_memory(self):
        assert as_source({"a": 1}).path is None
        assert as_source([]).value == []

    def test_source_passes_through(self):
        source = DocumentSource.from_value({})

        assert as_source(source) is source


class TestScalarText:
    """Tests for rendering scalars as text."""

    def test_strings_unchanged(self):
        assert scalar_text("12.5") == "12.5"

    def test_booleans_lowercase(self):
        assert scalar_text(True) == "true"
        assert scalar_text(False) == "false"

    def test_numbers_in_json_spelling(self):
        assert scalar_text(30) == "30"
        assert scalar_text(-2.5) == "-2.5"

    @pytest.mark.parametrize("value", [None, {}, []])
    def test_non_scalars_raise(self, value):
        with pytest.raises(TypeError):
            scalar_text(value)

    def test_describe(self):
        assert describe(None) == "null"
        assert describe(True) == "boolean"
        assert describe(1) == "number"
        assert describe({}) == "object"
