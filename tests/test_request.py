"""Tests for building a ConvertRequest from parsed options."""

import pytest

from cvtools.errors import ArgumentError
from cvtools.request import ConvertRequest, parse_value


class TestParseValue:
    """Tests for parse_value()."""

    @pytest.mark.parametrize(
        "raw,expected",
        [("1", 1.0), ("-40", -40.0), ("2.5", 2.5), ("1e3", 1000.0), (" 7 ", 7.0)],
    )
    def test_numbers(self, raw, expected):
        assert parse_value(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", "1,5", "12abc", "inf", "-inf", "nan"])
    def test_not_numbers(self, raw):
        with pytest.raises(ArgumentError, match="valid number"):
            parse_value(raw)


class TestConvertRequest:
    """Tests for ConvertRequest.from_options()."""

    def test_units_are_normalized(self):
        request = ConvertRequest.from_options("Miles", "kilometres", "3")
        assert request.from_unit == "mi"
        assert request.to_unit == "km"
        assert request.value == 3.0
        assert not request.informational

    def test_unknown_units_pass_through(self):
        """Unit validity is checked during conversion, not here."""
        request = ConvertRequest.from_options("Kg", "bogus", "1")
        assert request.from_unit == "Kg"
        assert request.to_unit == "bogus"

    @pytest.mark.parametrize(
        "options,missing",
        [
            ((None, "mi", "1"), "-f/--from"),
            (("km", None, "1"), "-t/--to"),
            (("km", "mi", None), "value"),
        ],
    )
    def test_missing_required(self, options, missing):
        with pytest.raises(ArgumentError, match="Missing required arguments") as ex:
            ConvertRequest.from_options(*options)
        assert missing in str(ex.value)

    def test_nothing_given(self):
        with pytest.raises(ArgumentError, match="-f/--from, -t/--to, value"):
            ConvertRequest.from_options(None, None, None)

    @pytest.mark.parametrize("options", [("", "mi", "1"), ("km", "", "1")])
    def test_empty_units(self, options):
        with pytest.raises(ArgumentError, match="cannot be empty"):
            ConvertRequest.from_options(*options)

    @pytest.mark.parametrize("flag", ["show_help", "list_units", "show_version"])
    def test_informational_modes_need_nothing(self, flag):
        request = ConvertRequest.from_options(None, None, None, **{flag: True})
        assert request.informational
        assert getattr(request, flag)

    def test_bad_value_fails_even_in_informational_mode(self):
        with pytest.raises(ArgumentError):
            ConvertRequest.from_options(None, None, "abc", show_help=True)

    def test_request_is_frozen(self):
        request = ConvertRequest.from_options("km", "mi", "1")
        with pytest.raises(AttributeError):
            request.value = 2.0
