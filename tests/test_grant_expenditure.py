"""Tests for grant expenditure extraction and the flag service."""

import asyncio
from datetime import date

import pytest

from fundreport.domain.entities import (
    ExpenseRow,
    PoliticalActivitySection,
    Section,
    SectionKind,
    TransactionType,
)
from fundreport.domain.errors import (
    GRANT_EXPENDITURE_EXPENSE_ONLY,
    NotFoundError,
    ValidationError,
)
from fundreport.domain.grant_expenditure import (
    GrantExpenditureFlagService,
    build_grant_expenditure_section,
    validate_grant_expenditure_flag_update,
)


def _expense_row(ichiren_no, kingaku, koufukin, nm="支払先"):
    return ExpenseRow(
        ichiren_no=ichiren_no,
        mokuteki="目的",
        kingaku=kingaku,
        dt=date(2024, 7, 1),
        nm=nm,
        adr="東京都",
        bikou=f"MF行番号: {ichiren_no}",
        koufukin=koufukin,
    )


class TestFlagValidation:
    """Tests for the expense-only flag rule."""

    def test_expense_is_allowed(self):
        validation = validate_grant_expenditure_flag_update(TransactionType.EXPENSE)
        assert validation.is_valid
        assert validation.error_message is None

    def test_income_is_rejected(self):
        validation = validate_grant_expenditure_flag_update("income")
        assert not validation.is_valid
        assert validation.error_message == GRANT_EXPENDITURE_EXPENSE_ONLY

    def test_unknown_type_raises_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_grant_expenditure_flag_update("transfer")

        assert exc_info.value.field == "transaction_type"
        assert exc_info.value.value == "transfer"


class TestBuildGrantExpenditureSection:
    """Tests for collecting flagged expense rows."""

    def test_collects_flagged_rows_and_renumbers(self):
        utility = Section(
            total_amount=160000,
            under_threshold_amount=0,
            rows=(_expense_row("1", 60000, False), _expense_row("2", 100000, True, nm="電力会社")),
        )
        supplies = Section(total_amount=0, under_threshold_amount=0)
        office = Section(
            total_amount=70000,
            under_threshold_amount=0,
            rows=(_expense_row("1", 70000, True, nm="大家"),),
        )

        section = build_grant_expenditure_section(utility, supplies, office)

        assert section.total_amount == 170000
        assert section.under_threshold_amount is None
        assert [
            (row.ichiren_no, row.shisyutu_kmk, row.honsibu_nm, row.kingaku)
            for row in section.rows
        ] == [
            ("1", "光熱水費", "電力会社", 100000),
            ("2", "事務所費", "大家", 70000),
        ]
        assert section.rows[0].bikou == "MF行番号: 2"

    def test_political_activity_rows_follow_regular_rows(self):
        office = Section(
            total_amount=70000,
            under_threshold_amount=0,
            rows=(_expense_row("1", 70000, True, nm="大家"),),
        )
        organization = (
            PoliticalActivitySection(
                total_amount=90000,
                under_threshold_amount=0,
                rows=(_expense_row("1", 90000, True, nm="本部"),),
                himoku="会議費",
            ),
        )
        donation_grant = (
            PoliticalActivitySection(
                total_amount=150000,
                under_threshold_amount=0,
                rows=(
                    _expense_row("1", 50000, False),
                    _expense_row("2", 100000, True, nm="テスト支部"),
                ),
            ),
        )

        section = build_grant_expenditure_section(
            Section(),
            Section(),
            office,
            (
                (SectionKind.ORGANIZATION_EXPENSE, organization),
                (SectionKind.DONATION_GRANT_EXPENSE, donation_grant),
            ),
        )

        assert [
            (row.ichiren_no, row.shisyutu_kmk, row.honsibu_nm) for row in section.rows
        ] == [
            ("1", "事務所費", "大家"),
            ("2", "組織活動費", "本部"),
            ("3", "寄附・交付金", "テスト支部"),
        ]
        assert section.total_amount == 260000

    def test_no_flagged_rows(self):
        section = build_grant_expenditure_section(Section(), Section(), Section())

        assert section.rows == ()
        assert section.total_amount == 0


class TestGrantExpenditureFlagService:
    """Tests for GrantExpenditureFlagService."""

    def test_sets_flag_on_expense(self, fake_repository):
        service = GrantExpenditureFlagService(fake_repository)

        asyncio.run(service.update_flag("2", True))

        assert fake_repository.flag_updates == [(2, True)]

    def test_clears_flag(self, fake_repository):
        service = GrantExpenditureFlagService(fake_repository)

        asyncio.run(service.update_flag(" 2 ", False))

        assert fake_repository.flag_updates == [(2, False)]

    def test_income_transaction_is_rejected(self, fake_repository):
        service = GrantExpenditureFlagService(fake_repository)

        with pytest.raises(ValidationError) as exc_info:
            asyncio.run(service.update_flag("1", True))

        assert str(exc_info.value) == GRANT_EXPENDITURE_EXPENSE_ONLY
        assert fake_repository.flag_updates == []

    def test_unknown_transaction(self, fake_repository):
        service = GrantExpenditureFlagService(fake_repository)

        with pytest.raises(NotFoundError, match="Transaction 99 not found"):
            asyncio.run(service.update_flag("99", True))

    @pytest.mark.parametrize("transaction_id", ["", "abc", "-1", "1.5"])
    def test_malformed_transaction_id(self, fake_repository, transaction_id):
        service = GrantExpenditureFlagService(fake_repository)

        with pytest.raises(ValidationError) as exc_info:
            asyncio.run(service.update_flag(transaction_id, True))

        assert exc_info.value.field == "transaction_id"
