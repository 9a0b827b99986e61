"""Domain model entities for fundreport.

These are pure data classes representing the political fund report,
independent of the database schema. Every entity is created fresh per
export and never mutated afterwards.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Generic, Optional, TypeVar


class TransactionType(str, Enum):
    """Ledger side of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class SectionKind(str, Enum):
    """Closed set of report sections fetched from the ledger.

    The value is the ledger category key the section is selected by.
    """

    BUSINESS_INCOME = "publication-income"
    LOAN_INCOME = "loans"
    GRANT_INCOME = "grants"
    OTHER_INCOME = "other-income"
    PERSONAL_DONATION = "individual-donations"
    PERSONNEL_EXPENSE = "personnel-costs"
    UTILITY_EXPENSE = "utilities"
    SUPPLIES_EXPENSE = "equipment-supplies"
    OFFICE_EXPENSE = "office-expenses"
    ORGANIZATION_EXPENSE = "organizational-activities"
    ELECTION_EXPENSE = "election-expenses"
    PUBLICATION_EXPENSE = "publication-expenses"
    ADVERTISING_EXPENSE = "advertising-expenses"
    FUNDRAISING_PARTY_EXPENSE = "fundraising-party-expenses"
    OTHER_BUSINESS_EXPENSE = "other-business-expenses"
    RESEARCH_EXPENSE = "research-expenses"
    DONATION_GRANT_EXPENSE = "donations-grants-expenses"
    OTHER_POLITICAL_EXPENSE = "other-expenses"

    @property
    def transaction_type(self) -> TransactionType:
        if self in _INCOME_KINDS:
            return TransactionType.INCOME
        return TransactionType.EXPENSE

    @property
    def is_political_activity(self) -> bool:
        return self in POLITICAL_ACTIVITY_KINDS


_INCOME_KINDS = frozenset(
    {
        SectionKind.BUSINESS_INCOME,
        SectionKind.LOAN_INCOME,
        SectionKind.GRANT_INCOME,
        SectionKind.OTHER_INCOME,
        SectionKind.PERSONAL_DONATION,
    }
)

# SYUUSHI07_15 KUBUN1-9, in form order
POLITICAL_ACTIVITY_KINDS: tuple[SectionKind, ...] = (
    SectionKind.ORGANIZATION_EXPENSE,
    SectionKind.ELECTION_EXPENSE,
    SectionKind.PUBLICATION_EXPENSE,
    SectionKind.ADVERTISING_EXPENSE,
    SectionKind.FUNDRAISING_PARTY_EXPENSE,
    SectionKind.OTHER_BUSINESS_EXPENSE,
    SectionKind.RESEARCH_EXPENSE,
    SectionKind.DONATION_GRANT_EXPENSE,
    SectionKind.OTHER_POLITICAL_EXPENSE,
)


@dataclass(frozen=True)
class TransactionRow:
    """Normalized ledger row as supplied by the repository."""

    transaction_no: str
    transaction_date: Optional[date]
    debit_account: str
    debit_amount: Optional[Decimal]
    credit_account: str
    credit_amount: Optional[Decimal]
    friendly_category: Optional[str] = None
    label: Optional[str] = None
    description: Optional[str] = None
    memo: Optional[str] = None
    counterpart_name: Optional[str] = None
    counterpart_address: Optional[str] = None
    donor_occupation: Optional[str] = None
    is_grant_expenditure: bool = False


@dataclass(frozen=True)
class BusinessIncomeRow:
    """SYUUSHI07_03 detail row (事業による収入)."""

    ichiren_no: str
    gigyou_syurui: str
    kingaku: int
    bikou: str = ""


@dataclass(frozen=True)
class LoanIncomeRow:
    """SYUUSHI07_04 detail row (借入金)."""

    ichiren_no: str
    kariiresaki: str
    kingaku: int
    bikou: str = ""


@dataclass(frozen=True)
class GrantIncomeRow:
    """SYUUSHI07_05 detail row (本部又は支部から供与された交付金)."""

    ichiren_no: str
    honsibu_nm: str
    kingaku: int
    dt: Optional[date]
    jimu_adr: str
    bikou: str = ""


@dataclass(frozen=True)
class OtherIncomeRow:
    """SYUUSHI07_06 detail row (その他の収入)."""

    ichiren_no: str
    tekiyou: str
    kingaku: int
    bikou: str = ""


@dataclass(frozen=True)
class PersonalDonationRow:
    """SYUUSHI07_07 KUBUN1 detail row (個人からの寄附).

    ``zeigakukoujyo`` is "1" when a tax-deduction receipt is needed and
    ``rowkbn`` is "0" for a detail line.
    """

    ichiren_no: str
    kifusya_nm: str
    kingaku: int
    dt: Optional[date]
    adr: str
    syokugyo: str
    bikou: str = ""
    seq_no: Optional[str] = None
    zeigakukoujyo: str = "0"
    rowkbn: str = "0"


@dataclass(frozen=True)
class ExpenseRow:
    """SYUUSHI07_14 KUBUN1-3 detail row (経常経費)."""

    ichiren_no: str
    mokuteki: str
    kingaku: int
    dt: Optional[date]
    nm: str
    adr: str
    bikou: str = ""
    koufukin: bool = False


@dataclass(frozen=True)
class GrantExpenditureRow:
    """SYUUSHI07_16 detail row (本部又は支部に対する交付金の支出)."""

    ichiren_no: str
    shisyutu_kmk: str
    kingaku: int
    dt: Optional[date]
    honsibu_nm: str
    jimu_adr: str
    bikou: str = ""


RowT = TypeVar("RowT")


@dataclass(frozen=True)
class Section(Generic[RowT]):
    """Aggregated report section.

    ``under_threshold_amount`` is None when the section has no
    below-threshold bucket at all, and an integer (possibly 0) when it does.
    """

    total_amount: int = 0
    under_threshold_amount: Optional[int] = None
    rows: tuple[RowT, ...] = ()

    def should_output_sheet(self) -> bool:
        """Whether the section carries anything worth a SHEET element."""
        return len(self.rows) > 0 or self.total_amount > 0


@dataclass(frozen=True)
class PoliticalActivitySection(Section[ExpenseRow]):
    """One SYUUSHI07_15 SHEET: the expenses of a KUBUN sharing one 費目.

    ``himoku`` is the ledger's friendly category, "" when it has none.
    """

    himoku: str = ""


PoliticalActivitySections = tuple[PoliticalActivitySection, ...]


@dataclass(frozen=True)
class PersonName:
    last_name: str = ""
    first_name: str = ""


@dataclass(frozen=True)
class ContactPerson:
    """Clerical contact listed on SYUUSHI07_01 (up to three)."""

    last_name: str = ""
    first_name: str = ""
    tel: str = ""


@dataclass(frozen=True)
class OrganizationProfile:
    """Report profile of a political organization for one financial year."""

    political_organization_id: str
    financial_year: int
    official_name: Optional[str] = None
    official_name_kana: Optional[str] = None
    office_address: Optional[str] = None
    office_address_building: Optional[str] = None
    representative: Optional[PersonName] = None
    accountant: Optional[PersonName] = None
    contact_persons: tuple[ContactPerson, ...] = ()
    organization_type: Optional[str] = None
    activity_area: Optional[str] = None
    previous_year_carryover: int = 0


@dataclass(frozen=True)
class ReportData:
    """All sections of one organization's report for one financial year."""

    profile: OrganizationProfile
    personal_donations: Section[PersonalDonationRow] = field(default_factory=Section)
    business_income: Section[BusinessIncomeRow] = field(default_factory=Section)
    loan_income: Section[LoanIncomeRow] = field(default_factory=Section)
    grant_income: Section[GrantIncomeRow] = field(default_factory=Section)
    other_income: Section[OtherIncomeRow] = field(default_factory=Section)
    utility_expenses: Section[ExpenseRow] = field(default_factory=Section)
    supplies_expenses: Section[ExpenseRow] = field(default_factory=Section)
    office_expenses: Section[ExpenseRow] = field(default_factory=Section)
    personnel_expenses: Section[ExpenseRow] = field(default_factory=Section)
    organization_expenses: PoliticalActivitySections = ()
    election_expenses: PoliticalActivitySections = ()
    publication_expenses: PoliticalActivitySections = ()
    advertising_expenses: PoliticalActivitySections = ()
    fundraising_party_expenses: PoliticalActivitySections = ()
    other_business_expenses: PoliticalActivitySections = ()
    research_expenses: PoliticalActivitySections = ()
    donation_grant_expenses: PoliticalActivitySections = ()
    other_political_expenses: PoliticalActivitySections = ()
    grant_expenditures: Section[GrantExpenditureRow] = field(default_factory=Section)

    def should_output_regular_expense_sheet(self) -> bool:
        return (
            self.utility_expenses.should_output_sheet()
            or self.supplies_expenses.should_output_sheet()
            or self.office_expenses.should_output_sheet()
        )

    def political_activity_expenses(self) -> tuple[tuple[SectionKind, PoliticalActivitySections], ...]:
        """SYUUSHI07_15 sections keyed by kind, in KUBUN1-9 order."""
        return (
            (SectionKind.ORGANIZATION_EXPENSE, self.organization_expenses),
            (SectionKind.ELECTION_EXPENSE, self.election_expenses),
            (SectionKind.PUBLICATION_EXPENSE, self.publication_expenses),
            (SectionKind.ADVERTISING_EXPENSE, self.advertising_expenses),
            (SectionKind.FUNDRAISING_PARTY_EXPENSE, self.fundraising_party_expenses),
            (SectionKind.OTHER_BUSINESS_EXPENSE, self.other_business_expenses),
            (SectionKind.RESEARCH_EXPENSE, self.research_expenses),
            (SectionKind.DONATION_GRANT_EXPENSE, self.donation_grant_expenses),
            (SectionKind.OTHER_POLITICAL_EXPENSE, self.other_political_expenses),
        )

    def should_output_political_activity_sheet(self) -> bool:
        return any(
            section.should_output_sheet()
            for _, sections in self.political_activity_expenses()
            for section in sections
        )


@dataclass(frozen=True)
class SummaryData:
    """Income/expense summary table (SYUUSHI07_02).

    Fields left as None are categories this export does not cover.
    """

    syunyu_sgk: int
    zennen_kks_gk: int
    honnen_syunyu_gk: int
    sisyutu_sgk: int
    yokunen_kks_gk: int
    kojin_kifu_gk: int
    kifu_skei_gk: int
    kifu_gkei_gk: int
    kojin_futan_kgk: Optional[int] = None
    kojin_futan_su: Optional[int] = None
    kojin_kifu_bikou: Optional[str] = None
    tokutei_kifu_gk: Optional[int] = None
    tokutei_kifu_bikou: Optional[str] = None
    hojin_kifu_gk: Optional[int] = None
    hojin_kifu_bikou: Optional[str] = None
    seiji_kifu_gk: Optional[int] = None
    seiji_kifu_bikou: Optional[str] = None
    kifu_skei_bikou: Optional[str] = None
    atusen_gk: Optional[int] = None
    atusen_bikou: Optional[str] = None
    tokumei_kifu_gk: Optional[int] = None
    tokumei_bikou: Optional[str] = None
    kifu_gkei_bikou: Optional[str] = None


@dataclass(frozen=True)
class ExpenseSummaryItem:
    """One line of SYUUSHI07_13: amount, grant portion and remark.

    Grant portions and remarks are not tracked, so they stay None.
    """

    amount: Optional[int] = None
    koufu: Optional[int] = None
    bikou: Optional[str] = None


@dataclass(frozen=True)
class ExpenseSummaryData:
    """Expense breakdown by item (SYUUSHI07_13, 支出項目別金額の内訳)."""

    personnel: ExpenseSummaryItem
    utility: ExpenseSummaryItem
    supplies: ExpenseSummaryItem
    office: ExpenseSummaryItem
    regular_subtotal: ExpenseSummaryItem
    organization: ExpenseSummaryItem
    election: ExpenseSummaryItem
    business: ExpenseSummaryItem
    publication: ExpenseSummaryItem
    advertising: ExpenseSummaryItem
    fundraising_party: ExpenseSummaryItem
    other_business: ExpenseSummaryItem
    research: ExpenseSummaryItem
    donation_grant: ExpenseSummaryItem
    other_political: ExpenseSummaryItem
    political_subtotal: ExpenseSummaryItem
    total_amount: int = 0

    def should_output_sheet(self) -> bool:
        return self.total_amount > 0


@dataclass(frozen=True)
class ExportResult:
    """Outcome of exporting one report."""

    xml: str
    report_data: ReportData
    filename: str


@dataclass(frozen=True)
class FlagUpdateValidation:
    is_valid: bool
    error_message: Optional[str] = None
