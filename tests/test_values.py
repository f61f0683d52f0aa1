"""Tests for value classification and display strings."""

from datetime import date

import pytest

from json_flattener.values import Cell, JsonKind, classify, describe_kind, is_primitive, to_display_string


class TestClassify:
    """Tests for resolving JSON value kinds."""

    @pytest.mark.parametrize(
        "value,kind",
        [
            (None, JsonKind.NULL),
            (True, JsonKind.SCALAR),
            (0, JsonKind.SCALAR),
            (1.5, JsonKind.SCALAR),
            ("", JsonKind.SCALAR),
            ([], JsonKind.ARRAY),
            ((1, 2), JsonKind.ARRAY),
            ({}, JsonKind.OBJECT),
            (date(2024, 1, 1), JsonKind.OTHER),
            ({1, 2}, JsonKind.OTHER),
        ],
    )
    def test_kinds(self, value, kind):
        """Test each value resolves to its kind."""
        assert classify(value) is kind

    def test_is_primitive(self):
        """Test nulls and scalars are primitive, containers are not."""
        assert is_primitive(None)
        assert is_primitive("x")
        assert not is_primitive([1])
        assert not is_primitive({"a": 1})

    def test_describe_kind(self):
        """Test kind names used in messages."""
        assert describe_kind(3) == "int"
        assert describe_kind([]) == "array"
        assert describe_kind(None) == "null"
        assert describe_kind(date(2024, 1, 1)) == "unsupported type date"


class TestDisplayString:
    """Tests for browser-style string rendering."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (True, "true"),
            (False, "false"),
            (3, "3"),
            (3.0, "3"),
            (0.1, "0.1"),
            (1e-7, "1e-7"),
            (1e-6, "0.000001"),
            (1.5e-6, "0.0000015"),
            (-2.5e-8, "-2.5e-8"),
            (1e21, "1e+21"),
            (1.5e22, "1.5e+22"),
            (123.456, "123.456"),
            (float("nan"), "NaN"),
            (float("inf"), "Infinity"),
            (float("-inf"), "-Infinity"),
            ("abc", "abc"),
            ([1, [2, 3]], "1,2,3"),
            ([], ""),
            ({"a": 1}, "[object Object]"),
            (None, "null"),
        ],
    )
    def test_values(self, value, expected):
        """Test rendering of each value kind."""
        assert to_display_string(value) == expected


class TestCell:
    """Tests for the tagged cell type."""

    def test_to_dict(self):
        """Test cells serialize to kind/value mappings."""
        assert Cell.primitive(1).to_dict() == {"kind": "primitive", "value": 1}
        assert Cell.array((1, None)).to_dict() == {"kind": "array", "value": [1, None]}

    def test_is_null(self):
        """Test only a null primitive counts as null."""
        assert Cell.primitive(None).is_null
        assert not Cell.primitive(0).is_null
        assert not Cell.array([]).is_null

    def test_array_copies_input(self):
        """Test array cells do not alias the source list."""
        source = [1, 2]
        cell = Cell.array(source)
        source.append(3)

        assert cell.value == [1, 2]
