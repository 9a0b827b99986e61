"""Tests for report assembly and export."""

import asyncio
from decimal import Decimal

import pytest

from conftest import FakeReportRepository, make_transaction
from fundreport.domain.entities import SectionKind
from fundreport.domain.errors import NotFoundError, ValidationError
from fundreport.domain.report import ReportAssembler, ReportExportService, validate_report_key


def _expense(transaction_no, amount, **fields):
    return make_transaction(
        transaction_no, debit_amount=Decimal(str(amount)), credit_amount=Decimal("0"), **fields
    )


@pytest.fixture
def populated_repository(fake_repository):
    fake_repository.transactions = {
        SectionKind.OTHER_INCOME: [
            make_transaction("1", 150000, label="テスト取引1"),
            make_transaction("2", 90000, label="テスト取引2"),
        ],
        SectionKind.PERSONAL_DONATION: [
            make_transaction("3", 20000, counterpart_name="山田太郎"),
        ],
        SectionKind.UTILITY_EXPENSE: [
            _expense("4", 60000, label="電気代", is_grant_expenditure=True),
            _expense("5", 3000, label="水道代"),
        ],
        SectionKind.OFFICE_EXPENSE: [
            _expense("6", 80000, label="家賃"),
        ],
    }
    return fake_repository


class TestValidateReportKey:
    """Tests for organization/year validation."""

    def test_valid_key_is_normalized(self):
        assert validate_report_key(" 12 ", 2024) == "12"

    @pytest.mark.parametrize("organization_id", ["", "   ", None])
    def test_blank_organization_id(self, organization_id):
        with pytest.raises(ValidationError) as exc_info:
            validate_report_key(organization_id, 2024)
        assert exc_info.value.field == "political_organization_id"

    @pytest.mark.parametrize("year", [0, -1, "2024", True, 2024.0])
    def test_invalid_year(self, year):
        with pytest.raises(ValidationError) as exc_info:
            validate_report_key("1", year)
        assert exc_info.value.field == "financial_year"


class TestReportAssembler:
    """Tests for ReportAssembler."""

    def test_assembles_every_section(self, populated_repository):
        assembler = ReportAssembler(populated_repository, populated_repository)

        report_data = asyncio.run(assembler.assemble("1", 2024))

        assert report_data.profile.official_name == "テスト政治団体"
        assert report_data.other_income.total_amount == 240000
        assert report_data.other_income.under_threshold_amount == 90000
        assert report_data.personal_donations.total_amount == 20000
        assert report_data.utility_expenses.total_amount == 63000
        assert report_data.utility_expenses.under_threshold_amount == 3000
        assert report_data.office_expenses.rows[0].mokuteki == "家賃"
        assert report_data.loan_income.under_threshold_amount is None
        assert [row.kingaku for row in report_data.grant_expenditures.rows] == [60000]

    def test_assembles_political_activity_and_personnel(self, fake_repository):
        fake_repository.transactions = {
            SectionKind.PERSONNEL_EXPENSE: [_expense("1", 250000, label="給与")],
            SectionKind.ELECTION_EXPENSE: [
                _expense("2", 70000, friendly_category="ポスター"),
                _expense("3", 5000, friendly_category="ポスター"),
            ],
            SectionKind.DONATION_GRANT_EXPENSE: [
                _expense(
                    "4",
                    100000,
                    friendly_category="支部交付金",
                    counterpart_name="テスト支部",
                    is_grant_expenditure=True,
                ),
            ],
        }
        assembler = ReportAssembler(fake_repository, fake_repository)

        report_data = asyncio.run(assembler.assemble("1", 2024))

        assert report_data.personnel_expenses.total_amount == 250000
        assert report_data.personnel_expenses.rows == ()
        (posters,) = report_data.election_expenses
        assert posters.himoku == "ポスター"
        assert posters.total_amount == 75000
        assert posters.under_threshold_amount == 5000
        assert report_data.organization_expenses == ()
        assert [
            (row.shisyutu_kmk, row.honsibu_nm) for row in report_data.grant_expenditures.rows
        ] == [("寄附・交付金", "テスト支部")]
        assert report_data.should_output_political_activity_sheet()

    def test_every_section_is_queried_with_the_key(self, populated_repository):
        assembler = ReportAssembler(populated_repository, populated_repository)

        asyncio.run(assembler.assemble(" 1 ", 2024))

        assert {kind for kind, _, _ in populated_repository.calls} == set(SectionKind)
        assert {(org, year) for _, org, year in populated_repository.calls} == {("1", 2024)}

    def test_missing_profile(self, fake_repository):
        fake_repository.profile = None
        assembler = ReportAssembler(fake_repository, fake_repository)

        with pytest.raises(NotFoundError, match="Profile not found"):
            asyncio.run(assembler.assemble("1", 2024))

    def test_invalid_key_is_rejected_before_querying(self, fake_repository):
        assembler = ReportAssembler(fake_repository, fake_repository)

        with pytest.raises(ValidationError):
            asyncio.run(assembler.assemble("", 2024))
        assert fake_repository.calls == []

    def test_repository_errors_propagate(self, sample_profile):
        class BrokenRepository(FakeReportRepository):
            async def find_loan_income_transactions(self, political_organization_id, financial_year):
                raise ConnectionError("database unavailable")

        repository = BrokenRepository(profile=sample_profile)
        assembler = ReportAssembler(repository, repository)

        with pytest.raises(ConnectionError, match="database unavailable"):
            asyncio.run(assembler.assemble("1", 2024))


class TestReportExportService:
    """Tests for ReportExportService."""

    def test_export_report(self, populated_repository):
        service = ReportExportService(ReportAssembler(populated_repository, populated_repository))

        result = asyncio.run(service.export_report("1", 2024))

        assert result.filename == "report_1_2024.xml"
        assert result.report_data.other_income.total_amount == 240000
        assert result.xml.startswith('<?xml version="1.0" encoding="Shift_JIS"?>')
        for form_id in ("SYUUSHI07_01", "SYUUSHI07_02", "SYUUSHI07_06", "SYUUSHI07_07", "SYUUSHI07_14", "SYUUSHI07_16"):
            assert f"<{form_id}>" in result.xml
        assert "<SYUUSHI07_03>" not in result.xml

    def test_export_is_repeatable(self, populated_repository):
        service = ReportExportService(ReportAssembler(populated_repository, populated_repository))

        first = asyncio.run(service.export_report("1", 2024))
        second = asyncio.run(service.export_report("1", 2024))

        assert first.xml == second.xml
