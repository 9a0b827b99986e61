"""Report assembly and XML export domain services."""

import asyncio
import logging
from dataclasses import replace

from fundreport.database.base import (
    OrganizationProfileRepository,
    ReportTransactionRepository,
)
from fundreport.domain.donation import build_personal_donation_section
from fundreport.domain.entities import ExportResult, ReportData, SectionKind
from fundreport.domain.errors import (
    NotFoundError,
    ValidationError,
    invalid_financial_year,
    invalid_organization_id,
    profile_not_found,
)
from fundreport.domain.expense import (
    build_office_expense_section,
    build_personnel_expense_section,
    build_supplies_expense_section,
    build_utility_expense_section,
)
from fundreport.domain.grant_expenditure import build_grant_expenditure_section
from fundreport.domain.income import (
    build_business_income_section,
    build_grant_income_section,
    build_loan_income_section,
    build_other_income_section,
)
from fundreport.domain.political_activity import build_political_activity_sections
from fundreport.serializers.document import serialize_report_data

logger = logging.getLogger(__name__)


def validate_report_key(political_organization_id: str, financial_year: int) -> str:
    """Check the (organization, year) pair and return the normalized org ID.

    Raises:
        ValidationError: If the organization ID is empty or the year is not
            a positive integer
    """
    organization_id = "" if political_organization_id is None else str(political_organization_id).strip()
    if not organization_id:
        raise ValidationError(
            invalid_organization_id(political_organization_id),
            field="political_organization_id",
            value=political_organization_id,
        )
    if isinstance(financial_year, bool) or not isinstance(financial_year, int) or financial_year <= 0:
        raise ValidationError(
            invalid_financial_year(financial_year),
            field="financial_year",
            value=financial_year,
        )
    return organization_id


class ReportAssembler:
    """Builds ReportData for one organization and financial year."""

    def __init__(
        self,
        transaction_repository: ReportTransactionRepository,
        profile_repository: OrganizationProfileRepository,
    ):
        """Initialize report assembler.

        Args:
            transaction_repository: Source of per-section ledger rows
            profile_repository: Source of the organization report profile
        """
        self.transaction_repository = transaction_repository
        self.profile_repository = profile_repository

    async def assemble(self, political_organization_id: str, financial_year: int) -> ReportData:
        """Fetch every section concurrently and aggregate it.

        Repository failures propagate unchanged; nothing is retried.

        Raises:
            ValidationError: If the organization ID or year is malformed
            NotFoundError: If no profile exists for the organization and year
        """
        organization_id = validate_report_key(political_organization_id, financial_year)
        repo = self.transaction_repository
        key = (organization_id, financial_year)

        (
            profile,
            personal_donations,
            business_income,
            loan_income,
            grant_income,
            other_income,
            personnel_expenses,
            utility_expenses,
            supplies_expenses,
            office_expenses,
            organization_expenses,
            election_expenses,
            publication_expenses,
            advertising_expenses,
            fundraising_party_expenses,
            other_business_expenses,
            research_expenses,
            donation_grant_expenses,
            other_political_expenses,
        ) = await asyncio.gather(
            self.profile_repository.find_profile(*key),
            repo.find_personal_donation_transactions(*key),
            repo.find_business_income_transactions(*key),
            repo.find_loan_income_transactions(*key),
            repo.find_grant_income_transactions(*key),
            repo.find_other_income_transactions(*key),
            repo.find_personnel_expense_transactions(*key),
            repo.find_utility_expense_transactions(*key),
            repo.find_supplies_expense_transactions(*key),
            repo.find_office_expense_transactions(*key),
            repo.find_organization_expense_transactions(*key),
            repo.find_election_expense_transactions(*key),
            repo.find_publication_expense_transactions(*key),
            repo.find_advertising_expense_transactions(*key),
            repo.find_fundraising_party_expense_transactions(*key),
            repo.find_other_business_expense_transactions(*key),
            repo.find_research_expense_transactions(*key),
            repo.find_donation_grant_expense_transactions(*key),
            repo.find_other_political_expense_transactions(*key),
        )

        if profile is None:
            raise NotFoundError(profile_not_found(organization_id, financial_year))

        report_data = ReportData(
            profile=profile,
            personal_donations=build_personal_donation_section(personal_donations),
            business_income=build_business_income_section(business_income),
            loan_income=build_loan_income_section(loan_income),
            grant_income=build_grant_income_section(grant_income),
            other_income=build_other_income_section(other_income),
            utility_expenses=build_utility_expense_section(utility_expenses),
            supplies_expenses=build_supplies_expense_section(supplies_expenses),
            office_expenses=build_office_expense_section(office_expenses),
            personnel_expenses=build_personnel_expense_section(personnel_expenses),
            organization_expenses=build_political_activity_sections(
                SectionKind.ORGANIZATION_EXPENSE, organization_expenses
            ),
            election_expenses=build_political_activity_sections(
                SectionKind.ELECTION_EXPENSE, election_expenses
            ),
            publication_expenses=build_political_activity_sections(
                SectionKind.PUBLICATION_EXPENSE, publication_expenses
            ),
            advertising_expenses=build_political_activity_sections(
                SectionKind.ADVERTISING_EXPENSE, advertising_expenses
            ),
            fundraising_party_expenses=build_political_activity_sections(
                SectionKind.FUNDRAISING_PARTY_EXPENSE, fundraising_party_expenses
            ),
            other_business_expenses=build_political_activity_sections(
                SectionKind.OTHER_BUSINESS_EXPENSE, other_business_expenses
            ),
            research_expenses=build_political_activity_sections(
                SectionKind.RESEARCH_EXPENSE, research_expenses
            ),
            donation_grant_expenses=build_political_activity_sections(
                SectionKind.DONATION_GRANT_EXPENSE, donation_grant_expenses
            ),
            other_political_expenses=build_political_activity_sections(
                SectionKind.OTHER_POLITICAL_EXPENSE, other_political_expenses
            ),
        )
        report_data = replace(
            report_data,
            grant_expenditures=build_grant_expenditure_section(
                report_data.utility_expenses,
                report_data.supplies_expenses,
                report_data.office_expenses,
                report_data.political_activity_expenses(),
            ),
        )
        logger.info(
            "Assembled report for organization %s, year %s",
            organization_id,
            financial_year,
        )
        return report_data


class ReportExportService:
    """Service for exporting a report as XML text."""

    def __init__(self, assembler: ReportAssembler):
        """Initialize export service.

        Args:
            assembler: Report assembler to gather data with
        """
        self.assembler = assembler

    async def export_report(self, political_organization_id: str, financial_year: int) -> ExportResult:
        """Assemble and serialize one report.

        The XML is returned as text; encoding it to Shift_JIS bytes is up to
        the caller.
        """
        report_data = await self.assembler.assemble(political_organization_id, financial_year)
        xml = serialize_report_data(report_data)
        organization_id = str(political_organization_id).strip()
        return ExportResult(
            xml=xml,
            report_data=report_data,
            filename=f"report_{organization_id}_{financial_year}.xml",
        )
