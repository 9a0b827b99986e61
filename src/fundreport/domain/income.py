"""Income section aggregation (SYUUSHI07_03 to SYUUSHI07_06)."""

from typing import Iterable

from fundreport.domain.aggregation import SECTION_THRESHOLDS, aggregate_section
from fundreport.domain.entities import (
    BusinessIncomeRow,
    GrantIncomeRow,
    LoanIncomeRow,
    OtherIncomeRow,
    Section,
    SectionKind,
    TransactionRow,
)
from fundreport.domain.transaction_utils import (
    build_bikou,
    first_text,
    resolve_income_amount,
    sanitize_text,
)

GIGYOU_SYURUI_MAX_LENGTH = 200
KARIIRESAKI_MAX_LENGTH = 200
HONSIBU_NM_MAX_LENGTH = 120
JIMU_ADR_MAX_LENGTH = 80
TEKIYOU_MAX_LENGTH = 200


def to_business_income_row(
    transaction: TransactionRow, ichiren_no: str, kingaku: int
) -> BusinessIncomeRow:
    return BusinessIncomeRow(
        ichiren_no=ichiren_no,
        gigyou_syurui=first_text(
            transaction.friendly_category,
            transaction.label,
            transaction.description,
            max_length=GIGYOU_SYURUI_MAX_LENGTH,
        ),
        kingaku=kingaku,
        bikou=build_bikou(transaction.transaction_no, transaction.memo),
    )


def to_loan_income_row(
    transaction: TransactionRow, ichiren_no: str, kingaku: int
) -> LoanIncomeRow:
    return LoanIncomeRow(
        ichiren_no=ichiren_no,
        kariiresaki=first_text(
            transaction.counterpart_name,
            transaction.label,
            max_length=KARIIRESAKI_MAX_LENGTH,
        ),
        kingaku=kingaku,
        bikou=build_bikou(transaction.transaction_no, transaction.memo),
    )


def to_grant_income_row(
    transaction: TransactionRow, ichiren_no: str, kingaku: int
) -> GrantIncomeRow:
    return GrantIncomeRow(
        ichiren_no=ichiren_no,
        honsibu_nm=first_text(
            transaction.counterpart_name,
            transaction.label,
            max_length=HONSIBU_NM_MAX_LENGTH,
        ),
        kingaku=kingaku,
        dt=transaction.transaction_date,
        jimu_adr=sanitize_text(transaction.counterpart_address, JIMU_ADR_MAX_LENGTH),
        bikou=build_bikou(transaction.transaction_no, transaction.memo),
    )


def to_other_income_row(
    transaction: TransactionRow, ichiren_no: str, kingaku: int
) -> OtherIncomeRow:
    return OtherIncomeRow(
        ichiren_no=ichiren_no,
        tekiyou=first_text(
            transaction.friendly_category,
            transaction.label,
            transaction.description,
            transaction.transaction_no,
            max_length=TEKIYOU_MAX_LENGTH,
        ),
        kingaku=kingaku,
        bikou=build_bikou(transaction.transaction_no, transaction.memo),
    )


def build_business_income_section(
    transactions: Iterable[TransactionRow],
) -> Section[BusinessIncomeRow]:
    """Every business income transaction is itemized."""
    return aggregate_section(
        transactions,
        resolve_income_amount,
        to_business_income_row,
        threshold=SECTION_THRESHOLDS[SectionKind.BUSINESS_INCOME],
    )


def build_loan_income_section(
    transactions: Iterable[TransactionRow],
) -> Section[LoanIncomeRow]:
    """Loans require full disclosure, so there is no below-threshold bucket."""
    return aggregate_section(
        transactions,
        resolve_income_amount,
        to_loan_income_row,
        threshold=SECTION_THRESHOLDS[SectionKind.LOAN_INCOME],
    )


def build_grant_income_section(
    transactions: Iterable[TransactionRow],
) -> Section[GrantIncomeRow]:
    return aggregate_section(
        transactions,
        resolve_income_amount,
        to_grant_income_row,
        threshold=SECTION_THRESHOLDS[SectionKind.GRANT_INCOME],
    )


def build_other_income_section(
    transactions: Iterable[TransactionRow],
) -> Section[OtherIncomeRow]:
    """Itemize other income of 100,000 yen or more; bucket the rest."""
    return aggregate_section(
        transactions,
        resolve_income_amount,
        to_other_income_row,
        threshold=SECTION_THRESHOLDS[SectionKind.OTHER_INCOME],
    )
