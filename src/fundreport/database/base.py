"""Abstract database interfaces."""

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from fundreport.domain.entities import (
    ContactPerson,
    OrganizationProfile,
    PersonName,
    TransactionRow,
    TransactionType,
)


class ReportTransactionRepository(ABC):
    """Supplies pre-filtered ledger rows for each report section.

    Every finder returns the rows of one organization and financial year,
    ordered the way they should be printed. An empty list means the
    section has no data, which is not an error.
    """

    @abstractmethod
    async def find_business_income_transactions(
        self, political_organization_id: str, financial_year: int
    ) -> list[TransactionRow]:
        """Find business (publication) income transactions."""
        pass

    @abstractmethod
    async def find_loan_income_transactions(
        self, political_organization_id: str, financial_year: int
    ) -> list[TransactionRow]:
        """Find loan income transactions."""
        pass

    @abstractmethod
    async def find_grant_income_transactions(
        self, political_organization_id: str, financial_year: int
    ) -> list[TransactionRow]:
        """Find grants received from the party headquarters or branches."""
        pass

    @abstractmethod
    async def find_other_income_transactions(
        self, political_organization_id: str, financial_year: int
    ) -> list[TransactionRow]:
        """Find other income transactions."""
        pass

    @abstractmethod
    async def find_personal_donation_transactions(
        self, political_organization_id: str, financial_year: int
    ) -> list[TransactionRow]:
        """Find donations from individuals."""
        pass

    @abstractmethod
    async def find_utility_expense_transactions(
        self, political_organization_id: str, financial_year: int
    ) -> list[TransactionRow]:
        """Find utility expense transactions."""
        pass

    @abstractmethod
    async def find_supplies_expense_transactions(
        self, political_organization_id: str, financial_year: int
    ) -> list[TransactionRow]:
        """Find equipment and supplies expense transactions."""
        pass

    @abstractmethod
    async def find_office_expense_transactions(
        self, political_organization_id: str, financial_year: int
    ) -> list[TransactionRow]:
        """Find office expense transactions."""
        pass

    @abstractmethod
    async def find_personnel_expense_transactions(
        self, political_organization_id: str, financial_year: int
    ) -> list[TransactionRow]:
        """Find personnel expense transactions."""
        pass

    @abstractmethod
    async def find_organization_expense_transactions(
        self, political_organization_id: str, financial_year: int
    ) -> list[TransactionRow]:
        """Find organizational activity expense transactions."""
        pass

    @abstractmethod
    async def find_election_expense_transactions(
        self, political_organization_id: str, financial_year: int
    ) -> list[TransactionRow]:
        """Find election-related expense transactions."""
        pass

    @abstractmethod
    async def find_publication_expense_transactions(
        self, political_organization_id: str, financial_year: int
    ) -> list[TransactionRow]:
        """Find publication (機関紙誌) expense transactions."""
        pass

    @abstractmethod
    async def find_advertising_expense_transactions(
        self, political_organization_id: str, financial_year: int
    ) -> list[TransactionRow]:
        """Find advertising expense transactions."""
        pass

    @abstractmethod
    async def find_fundraising_party_expense_transactions(
        self, political_organization_id: str, financial_year: int
    ) -> list[TransactionRow]:
        """Find fundraising party expense transactions."""
        pass

    @abstractmethod
    async def find_other_business_expense_transactions(
        self, political_organization_id: str, financial_year: int
    ) -> list[TransactionRow]:
        """Find other business expense transactions."""
        pass

    @abstractmethod
    async def find_research_expense_transactions(
        self, political_organization_id: str, financial_year: int
    ) -> list[TransactionRow]:
        """Find research expense transactions."""
        pass

    @abstractmethod
    async def find_donation_grant_expense_transactions(
        self, political_organization_id: str, financial_year: int
    ) -> list[TransactionRow]:
        """Find donations and grants paid out."""
        pass

    @abstractmethod
    async def find_other_political_expense_transactions(
        self, political_organization_id: str, financial_year: int
    ) -> list[TransactionRow]:
        """Find other political activity expense transactions."""
        pass

    @abstractmethod
    async def find_transaction_type(self, transaction_id: int) -> Optional[TransactionType]:
        """Get the ledger side of a transaction, or None if it does not exist."""
        pass

    @abstractmethod
    async def update_grant_expenditure_flag(
        self, transaction_id: int, is_grant_expenditure: bool
    ) -> None:
        """Set the grant expenditure flag on a transaction."""
        pass


class OrganizationProfileRepository(ABC):
    """Supplies the report profile of an organization."""

    @abstractmethod
    async def find_profile(
        self, political_organization_id: str, financial_year: int
    ) -> Optional[OrganizationProfile]:
        """Get the profile for one financial year, or None if there is none."""
        pass


class Database(ReportTransactionRepository, OrganizationProfileRepository):
    """Full database interface for fundreport, including ledger maintenance."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Organization operations
    @abstractmethod
    def create_organization(self, name: str) -> int:
        """Create a political organization. Returns organization ID."""
        pass

    @abstractmethod
    def get_organization_name(self, organization_id: int) -> Optional[str]:
        """Get the organization name, or None if it does not exist."""
        pass

    @abstractmethod
    def list_organizations(self) -> list[tuple[int, str]]:
        """List organizations as (id, name) pairs."""
        pass

    # Profile operations
    @abstractmethod
    def save_profile(
        self,
        organization_id: int,
        financial_year: int,
        official_name: Optional[str] = None,
        official_name_kana: Optional[str] = None,
        office_address: Optional[str] = None,
        office_address_building: Optional[str] = None,
        representative: Optional[PersonName] = None,
        accountant: Optional[PersonName] = None,
        contact_persons: Optional[list[ContactPerson]] = None,
        organization_type: Optional[str] = None,
        activity_area: Optional[str] = None,
        previous_year_carryover: Optional[int] = None,
    ) -> int:
        """Create or update the profile for one year. Returns profile ID.

        Arguments left as None keep their stored value on update.
        """
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        organization_id: int,
        transaction_no: str,
        transaction_date: date,
        transaction_type: TransactionType,
        category_key: str,
        amount: Decimal,
        debit_account: str = "",
        credit_account: str = "",
        friendly_category: Optional[str] = None,
        label: Optional[str] = None,
        description: Optional[str] = None,
        memo: Optional[str] = None,
        counterpart_name: Optional[str] = None,
        counterpart_address: Optional[str] = None,
        counterpart_occupation: Optional[str] = None,
        is_grant_expenditure: bool = False,
    ) -> int:
        """Create a ledger transaction. Returns transaction ID."""
        pass
