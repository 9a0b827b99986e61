"""Shared pytest fixtures for fundreport tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from fundreport.database.base import (
    OrganizationProfileRepository,
    ReportTransactionRepository,
)
from fundreport.database.factories import create_sqlite_database
from fundreport.domain.entities import (
    ContactPerson,
    OrganizationProfile,
    PersonName,
    SectionKind,
    TransactionRow,
    TransactionType,
)


def make_transaction(
    transaction_no="1",
    amount=None,
    transaction_date=date(2024, 4, 1),
    debit_amount=None,
    credit_amount=None,
    **fields,
) -> TransactionRow:
    """Build a TransactionRow with the amount on both ledger sides."""
    if amount is not None:
        amount = Decimal(str(amount))
        debit_amount = amount if debit_amount is None else debit_amount
        credit_amount = amount if credit_amount is None else credit_amount
    return TransactionRow(
        transaction_no=transaction_no,
        transaction_date=transaction_date,
        debit_account=fields.pop("debit_account", ""),
        debit_amount=debit_amount,
        credit_account=fields.pop("credit_account", ""),
        credit_amount=credit_amount,
        **fields,
    )


class FakeReportRepository(ReportTransactionRepository, OrganizationProfileRepository):
    """In-memory repository serving fixed rows per section."""

    def __init__(self, profile=None, transactions=None, transaction_types=None):
        self.profile = profile
        self.transactions = transactions or {}
        self.transaction_types = transaction_types or {}
        self.flag_updates = []
        self.calls = []

    async def _rows(self, kind, political_organization_id, financial_year):
        self.calls.append((kind, political_organization_id, financial_year))
        return list(self.transactions.get(kind, []))

    async def find_business_income_transactions(self, political_organization_id, financial_year):
        return await self._rows(SectionKind.BUSINESS_INCOME, political_organization_id, financial_year)

    async def find_loan_income_transactions(self, political_organization_id, financial_year):
        return await self._rows(SectionKind.LOAN_INCOME, political_organization_id, financial_year)

    async def find_grant_income_transactions(self, political_organization_id, financial_year):
        return await self._rows(SectionKind.GRANT_INCOME, political_organization_id, financial_year)

    async def find_other_income_transactions(self, political_organization_id, financial_year):
        return await self._rows(SectionKind.OTHER_INCOME, political_organization_id, financial_year)

    async def find_personal_donation_transactions(self, political_organization_id, financial_year):
        return await self._rows(SectionKind.PERSONAL_DONATION, political_organization_id, financial_year)

    async def find_utility_expense_transactions(self, political_organization_id, financial_year):
        return await self._rows(SectionKind.UTILITY_EXPENSE, political_organization_id, financial_year)

    async def find_supplies_expense_transactions(self, political_organization_id, financial_year):
        return await self._rows(SectionKind.SUPPLIES_EXPENSE, political_organization_id, financial_year)

    async def find_office_expense_transactions(self, political_organization_id, financial_year):
        return await self._rows(SectionKind.OFFICE_EXPENSE, political_organization_id, financial_year)

    async def find_personnel_expense_transactions(self, political_organization_id, financial_year):
        return await self._rows(SectionKind.PERSONNEL_EXPENSE, political_organization_id, financial_year)

    async def find_organization_expense_transactions(self, political_organization_id, financial_year):
        return await self._rows(SectionKind.ORGANIZATION_EXPENSE, political_organization_id, financial_year)

    async def find_election_expense_transactions(self, political_organization_id, financial_year):
        return await self._rows(SectionKind.ELECTION_EXPENSE, political_organization_id, financial_year)

    async def find_publication_expense_transactions(self, political_organization_id, financial_year):
        return await self._rows(SectionKind.PUBLICATION_EXPENSE, political_organization_id, financial_year)

    async def find_advertising_expense_transactions(self, political_organization_id, financial_year):
        return await self._rows(SectionKind.ADVERTISING_EXPENSE, political_organization_id, financial_year)

    async def find_fundraising_party_expense_transactions(self, political_organization_id, financial_year):
        return await self._rows(SectionKind.FUNDRAISING_PARTY_EXPENSE, political_organization_id, financial_year)

    async def find_other_business_expense_transactions(self, political_organization_id, financial_year):
        return await self._rows(SectionKind.OTHER_BUSINESS_EXPENSE, political_organization_id, financial_year)

    async def find_research_expense_transactions(self, political_organization_id, financial_year):
        return await self._rows(SectionKind.RESEARCH_EXPENSE, political_organization_id, financial_year)

    async def find_donation_grant_expense_transactions(self, political_organization_id, financial_year):
        return await self._rows(SectionKind.DONATION_GRANT_EXPENSE, political_organization_id, financial_year)

    async def find_other_political_expense_transactions(self, political_organization_id, financial_year):
        return await self._rows(SectionKind.OTHER_POLITICAL_EXPENSE, political_organization_id, financial_year)

    async def find_transaction_type(self, transaction_id):
        return self.transaction_types.get(transaction_id)

    async def update_grant_expenditure_flag(self, transaction_id, is_grant_expenditure):
        self.flag_updates.append((transaction_id, is_grant_expenditure))

    async def find_profile(self, political_organization_id, financial_year):
        return self.profile


@pytest.fixture
def sample_profile():
    """Create a fully populated report profile."""
    return OrganizationProfile(
        political_organization_id="1",
        financial_year=2024,
        official_name="テスト政治団体",
        official_name_kana="てすとせいじだんたい",
        office_address="東京都千代田区永田町1-1-1",
        office_address_building="テストビル3階",
        representative=PersonName(last_name="山田", first_name="太郎"),
        accountant=PersonName(last_name="佐藤", first_name="花子"),
        contact_persons=(ContactPerson(last_name="鈴木", first_name="一郎", tel="03-1234-5678"),),
        organization_type="2",
        activity_area="2",
        previous_year_carryover=50000,
    )


@pytest.fixture
def fake_repository(sample_profile):
    """Create an in-memory repository holding the sample profile."""
    return FakeReportRepository(
        profile=sample_profile,
        transaction_types={1: TransactionType.INCOME, 2: TransactionType.EXPENSE},
    )


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def sample_organization(temp_db):
    """Create a sample political organization and return its ID."""
    return temp_db.create_organization("テスト後援会")


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
