"""Tests for XML value formatting."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from fundreport.domain.errors import ValidationError
from fundreport.serializers.formatting import escape_xml, format_amount, format_wareki_date


class TestFormatAmount:
    """Tests for yen amount formatting."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (150000, "150000"),
            (0, "0"),
            (-5000, "-5000"),
            (Decimal("150000.00"), "150000"),
            (Decimal("1000.5"), "1001"),
            (1000.4, "1000"),
            ("2500", "2500"),
        ],
    )
    def test_numbers(self, value, expected):
        assert format_amount(value) == expected

    @pytest.mark.parametrize(
        "value", [None, "abc", Decimal("NaN"), Decimal("Infinity"), float("inf"), True]
    )
    def test_unusable_values_become_zero(self, value):
        assert format_amount(value) == "0"


class TestFormatWarekiDate:
    """Tests for era date conversion."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (date(2025, 1, 15), "R7/1/15"),
            (date(2019, 5, 1), "R1/5/1"),
            (date(2019, 4, 30), "H31/4/30"),
            (date(1989, 1, 8), "H1/1/8"),
            (date(1989, 1, 7), "S64/1/7"),
            (date(1926, 12, 25), "S1/12/25"),
            (datetime(2024, 12, 31, 23, 59), "R6/12/31"),
        ],
    )
    def test_era_boundaries(self, value, expected):
        assert format_wareki_date(value) == expected

    def test_missing_date(self):
        assert format_wareki_date(None) == ""
        assert format_wareki_date("2024-01-01") == ""

    def test_dates_before_showa_are_rejected(self):
        with pytest.raises(ValidationError, match="Unsupported date"):
            format_wareki_date(date(1926, 12, 24))


class TestEscapeXml:
    """Tests for XML escaping."""

    def test_escapes_all_special_characters(self):
        assert escape_xml("<a href=\"x\">'&'</a>") == (
            "&lt;a href=&quot;x&quot;&gt;&apos;&amp;&apos;&lt;/a&gt;"
        )

    def test_ampersand_is_escaped_first(self):
        assert escape_xml("&lt;") == "&amp;lt;"

    def test_plain_text_is_unchanged(self):
        assert escape_xml("テスト 123") == "テスト 123"
