"""
Tests for unwrapping Sheets ExtendedValue objects.
"""

import pytest

from ooo_app.extended import get_actual_value_from_extended_value


class TestRecognizedShapes:
    @pytest.mark.parametrize(
        "extended,expected",
        [
            ({"stringValue": "Vacation"}, "Vacation"),
            ({"numberValue": 42.5}, 42.5),
            ({"numberValue": 0}, 0),
            ({"boolValue": False}, False),
            ({"formulaValue": '=HYPERLINK("x", "OOO")'}, '=HYPERLINK("x", "OOO")'),
            ({"errorValue": {"type": "REF", "message": "Reference does not exist"}}, "Reference does not exist"),
            ({"errorValue": {"type": "DIVIDE_BY_ZERO"}}, "DIVIDE_BY_ZERO"),
        ],
    )
    def test_returns_scalar(self, extended, expected) -> None:
        assert get_actual_value_from_extended_value(extended) == expected


class TestUnrecognizedShapes:
    @pytest.mark.parametrize(
        "extended",
        [
            None,
            {},
            "stringValue",
            [{"stringValue": "x"}],
            {"somethingElse": 1},
            {"numberValue": "12"},
            {"boolValue": "yes"},
            {"errorValue": "broken"},
            {"errorValue": {}},
        ],
    )
    def test_returns_none(self, extended) -> None:
        assert get_actual_value_from_extended_value(extended) is None
