"""Tests for JSON parsing and file reading."""

import io

import pytest

from json_flattener.errors import FlattenError, ParseError
from json_flattener.io_utils import parse_json_text, read_json_content


class TestParseJsonText:
    """Tests for parsing raw input text."""

    def test_parses_object(self):
        """Test valid JSON is returned as Python data."""
        assert parse_json_text('{"a": [1, null]}') == {"a": [1, None]}

    def test_preserves_key_order(self):
        """Test object keys keep their input order."""
        assert list(parse_json_text('{"z": 1, "a": 2, "m": 3}')) == ["z", "a", "m"]

    @pytest.mark.parametrize("text", ["", "   \n", None])
    def test_empty_input(self, text):
        """Test empty input is a parse error."""
        with pytest.raises(ParseError):
            parse_json_text(text)

    def test_malformed_input(self):
        """Test malformed JSON reports its position."""
        with pytest.raises(ParseError) as exc:
            parse_json_text('{"a": 1,\n "b": }')

        assert exc.value.lineno == 2
        assert exc.value.colno is not None
        assert "line 2" in str(exc.value)

    def test_parse_error_hierarchy(self):
        """Test ParseError is both a FlattenError and a ValueError."""
        with pytest.raises(FlattenError):
            parse_json_text("{")
        with pytest.raises(ValueError):
            parse_json_text("{")


class TestReadJsonContent:
    """Tests for reading uploaded files."""

    def test_reads_bytes_stream(self):
        """Test a binary file-like object is decoded."""
        assert read_json_content(io.BytesIO(b'{"a": 1}')) == '{"a": 1}'

    def test_reads_path(self, tmp_path):
        """Test a file path is read as text."""
        path = tmp_path / "data.json"
        path.write_text('[{"a": 1}]', encoding="utf-8")

        assert read_json_content(str(path)) == '[{"a": 1}]'

    def test_reads_object_with_name(self, tmp_path):
        """Test upload objects exposing .name are read from disk."""
        path = tmp_path / "data.json"
        path.write_text('{"b": 2}', encoding="utf-8")

        class Upload:
            name = str(path)

        assert read_json_content(Upload()) == '{"b": 2}'

    def test_strips_bom(self):
        """Test a UTF-8 byte order mark is dropped."""
        assert read_json_content(io.BytesIO(b'\xef\xbb\xbf{"a": 1}')) == '{"a": 1}'

    def test_missing_file(self):
        """Test no upload is rejected."""
        with pytest.raises(ValueError):
            read_json_content(None)
