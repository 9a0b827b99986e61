"""Tests for income section aggregation."""

from datetime import date
from decimal import Decimal

from conftest import make_transaction
from fundreport.domain.income import (
    build_business_income_section,
    build_grant_income_section,
    build_loan_income_section,
    build_other_income_section,
)


def _check_total(section):
    itemized = sum(row.kingaku for row in section.rows)
    assert section.total_amount == itemized + (section.under_threshold_amount or 0)


class TestOtherIncome:
    """Tests for other income (100,000 yen threshold)."""

    def test_splits_rows_at_threshold(self):
        section = build_other_income_section(
            [
                make_transaction("1", 150000, label="テスト取引1"),
                make_transaction("2", 90000, label="テスト取引2"),
            ]
        )

        assert section.total_amount == 240000
        assert section.under_threshold_amount == 90000
        assert len(section.rows) == 1
        row = section.rows[0]
        assert row.ichiren_no == "1"
        assert row.kingaku == 150000
        assert row.tekiyou == "テスト取引1"
        assert "MF行番号: 1" in row.bikou
        _check_total(section)

    def test_threshold_is_inclusive(self):
        section = build_other_income_section(
            [
                make_transaction("1", 100000, label="ちょうど"),
                make_transaction("2", 99999, label="未満"),
            ]
        )

        assert [row.kingaku for row in section.rows] == [100000]
        assert section.under_threshold_amount == 99999

    def test_threshold_compares_unrounded_amount(self):
        section = build_other_income_section(
            [make_transaction("1", credit_amount=Decimal("99999.5"), debit_amount=Decimal("0"))]
        )

        assert section.rows == ()
        assert section.under_threshold_amount == 100000
        assert section.total_amount == 100000

    def test_empty_input_keeps_zero_bucket(self):
        section = build_other_income_section([])

        assert section.total_amount == 0
        assert section.under_threshold_amount == 0
        assert section.rows == ()
        assert not section.should_output_sheet()

    def test_rows_are_numbered_in_input_order(self):
        section = build_other_income_section(
            [
                make_transaction("10", 200000, label="A"),
                make_transaction("11", 1000, label="小口"),
                make_transaction("12", 300000, label="B"),
            ]
        )

        assert [(row.ichiren_no, row.tekiyou) for row in section.rows] == [("1", "A"), ("2", "B")]
        _check_total(section)

    def test_tekiyou_fallback_chain(self):
        section = build_other_income_section(
            [
                make_transaction("1", 100000, friendly_category="雑収入", label="ラベル"),
                make_transaction("2", 100000, description="説明のみ"),
                make_transaction("3", 100000),
            ]
        )

        assert [row.tekiyou for row in section.rows] == ["雑収入", "説明のみ", "3"]


class TestFullyDisclosedIncome:
    """Tests for sections without a below-threshold bucket."""

    def test_loan_income_itemizes_everything(self):
        section = build_loan_income_section(
            [
                make_transaction("1", 1000, counterpart_name="山田太郎"),
                make_transaction("2", 500000, label="銀行借入"),
            ]
        )

        assert section.under_threshold_amount is None
        assert section.total_amount == 501000
        assert [row.kariiresaki for row in section.rows] == ["山田太郎", "銀行借入"]
        _check_total(section)

    def test_empty_loan_section_has_no_bucket(self):
        section = build_loan_income_section([])

        assert section.total_amount == 0
        assert section.under_threshold_amount is None

    def test_grant_income_row_fields(self):
        section = build_grant_income_section(
            [
                make_transaction(
                    "5",
                    300000,
                    transaction_date=date(2024, 6, 30),
                    counterpart_name="○○党本部",
                    counterpart_address="東京都千代田区",
                    memo="交付金",
                )
            ]
        )

        row = section.rows[0]
        assert row.honsibu_nm == "○○党本部"
        assert row.jimu_adr == "東京都千代田区"
        assert row.dt == date(2024, 6, 30)
        assert row.bikou == "交付金 / MF行番号: 5"
        assert section.under_threshold_amount is None

    def test_business_income_row_fields(self):
        section = build_business_income_section(
            [make_transaction("1", 3000, friendly_category="機関紙発行", label="7月号")]
        )

        assert section.rows[0].gigyou_syurui == "機関紙発行"
        assert section.rows[0].kingaku == 3000
        assert section.under_threshold_amount is None
