"""Regular expense aggregation (SYUUSHI07_14 KUBUN1-3 and 人件費)."""

from typing import Iterable

from fundreport.domain.aggregation import SECTION_THRESHOLDS, aggregate_section
from fundreport.domain.entities import (
    ExpenseRow,
    Section,
    SectionKind,
    TransactionRow,
    TransactionType,
)
from fundreport.domain.transaction_utils import (
    build_bikou,
    first_text,
    resolve_expense_amount,
    round_yen,
    sanitize_text,
)

MOKUTEKI_MAX_LENGTH = 200
NM_MAX_LENGTH = 120
ADR_MAX_LENGTH = 120


def to_expense_row(transaction: TransactionRow, ichiren_no: str, kingaku: int) -> ExpenseRow:
    return ExpenseRow(
        ichiren_no=ichiren_no,
        mokuteki=first_text(
            transaction.friendly_category,
            transaction.label,
            transaction.description,
            max_length=MOKUTEKI_MAX_LENGTH,
        ),
        kingaku=kingaku,
        dt=transaction.transaction_date,
        nm=sanitize_text(transaction.counterpart_name, NM_MAX_LENGTH),
        adr=sanitize_text(transaction.counterpart_address, ADR_MAX_LENGTH),
        bikou=build_bikou(transaction.transaction_no, transaction.memo),
        koufukin=transaction.is_grant_expenditure,
    )


def build_expense_section(
    kind: SectionKind, transactions: Iterable[TransactionRow]
) -> Section[ExpenseRow]:
    """Itemize expenses of 50,000 yen or more; bucket the rest.

    Raises:
        ValueError: If ``kind`` is not an itemized expense section
    """
    if (
        kind.transaction_type is not TransactionType.EXPENSE
        or kind is SectionKind.PERSONNEL_EXPENSE
    ):
        raise ValueError(f"{kind.name} is not an itemized expense section")
    return aggregate_section(
        transactions,
        resolve_expense_amount,
        to_expense_row,
        threshold=SECTION_THRESHOLDS[kind],
    )


def build_utility_expense_section(
    transactions: Iterable[TransactionRow],
) -> Section[ExpenseRow]:
    return build_expense_section(SectionKind.UTILITY_EXPENSE, transactions)


def build_supplies_expense_section(
    transactions: Iterable[TransactionRow],
) -> Section[ExpenseRow]:
    return build_expense_section(SectionKind.SUPPLIES_EXPENSE, transactions)


def build_office_expense_section(
    transactions: Iterable[TransactionRow],
) -> Section[ExpenseRow]:
    return build_expense_section(SectionKind.OFFICE_EXPENSE, transactions)


def build_personnel_expense_section(
    transactions: Iterable[TransactionRow],
) -> Section[ExpenseRow]:
    """Total personnel expenses (人件費).

    Personnel expenses appear only as a total on SYUUSHI07_13, so nothing
    is itemized and the whole amount sits in the bucket.
    """
    total_amount = sum(
        round_yen(resolve_expense_amount(t.debit_amount, t.credit_amount))
        for t in transactions
    )
    return Section(total_amount=total_amount, under_threshold_amount=total_amount)
