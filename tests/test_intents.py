"""
Tests for pulling the /ooo date range out of comment bodies.
"""

from datetime import date

import pytest

from ooo_app.intents import extract_ooo_command_dates
from ooo_app.models import OooCommandRange

MAR_1 = date(2021, 3, 1)
MAR_5 = date(2021, 3, 5)


class TestCommandFound:
    def test_iso_range(self) -> None:
        assert extract_ooo_command_dates("/ooo 2021-03-01 to 2021-03-05") == OooCommandRange(MAR_1, MAR_5)

    def test_single_date_is_one_day_range(self) -> None:
        result = extract_ooo_command_dates("/ooo 2021-03-01")
        assert result == OooCommandRange(MAR_1, MAR_1)

    @pytest.mark.parametrize(
        "body",
        [
            "/OOO 2021-03-01 - 2021-03-05",
            "/ooo 2021-03-01 – 2021-03-05",
            "/ooo 2021-03-01—2021-03-05",
            "/ooo March 1, 2021 until March 5, 2021.",
            "/ooo from 3/1/2021 through 3/5/2021",
            "Heads up!\n\n  /ooo: Mar 1 2021 thru Mar 5 2021  \nthanks",
            "`/ooo 2021-03-01 to 2021-03-05`",
        ],
    )
    def test_tolerant_forms(self, body: str) -> None:
        assert extract_ooo_command_dates(body) == OooCommandRange(MAR_1, MAR_5)

    @pytest.mark.parametrize(
        "body",
        [
            "/ooo 2021-03-01 to 2021-03-05 for spring break",
            "/ooo 2021-03-01 to 2021-03-05 (vacation)",
            "/ooo Mar 1-5 2021",
            "/ooo March 1st - 5th, 2021: family visit",
        ],
    )
    def test_notes_after_the_dates(self, body: str) -> None:
        assert extract_ooo_command_dates(body) == OooCommandRange(MAR_1, MAR_5)

    def test_days_without_month_are_none(self) -> None:
        assert extract_ooo_command_dates("/ooo 15th to 17th") == OooCommandRange(None, None)

    def test_ambiguous_numeric_date_is_month_first(self) -> None:
        result = extract_ooo_command_dates("/ooo 01/02/2020")
        assert result.start_date == date(2020, 1, 2)

    def test_unparseable_dates_are_none(self) -> None:
        assert extract_ooo_command_dates("/ooo sometime next week") == OooCommandRange(None, None)

    def test_bare_command_has_no_dates(self) -> None:
        assert extract_ooo_command_dates("/ooo") == OooCommandRange(None, None)

    def test_only_one_side_parses(self) -> None:
        result = extract_ooo_command_dates("/ooo 2021-03-01 to whenever")
        assert result.start_date == MAR_1
        assert result.end_date is None
        assert not result.complete


class TestNoCommand:
    @pytest.mark.parametrize(
        "body",
        [
            "no command here",
            "",
            None,
            "I am ooo 2021-03-01",
            "/oops 2021-03-01",
            "see docs/ooo 2021-03-01",
        ],
    )
    def test_returns_none(self, body) -> None:
        assert extract_ooo_command_dates(body) is None
