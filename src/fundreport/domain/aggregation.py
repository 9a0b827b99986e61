"""Generic section aggregation shared by every report section."""

from decimal import Decimal
from typing import Any, Callable, Iterable, Optional, TypeVar

from fundreport.domain.entities import Section, SectionKind, TransactionRow
from fundreport.domain.transaction_utils import (
    FIVE_MAN_THRESHOLD,
    TEN_MAN_THRESHOLD,
    is_above_threshold,
    round_yen,
)

RowT = TypeVar("RowT")

AmountResolver = Callable[[Any, Any], Decimal]
RowFactory = Callable[[TransactionRow, str, int], RowT]

# None means every transaction is itemized regardless of amount
SECTION_THRESHOLDS: dict[SectionKind, Optional[int]] = {
    SectionKind.BUSINESS_INCOME: None,
    SectionKind.LOAN_INCOME: None,
    SectionKind.GRANT_INCOME: None,
    SectionKind.OTHER_INCOME: TEN_MAN_THRESHOLD,
    SectionKind.PERSONAL_DONATION: None,
    # never itemized, see build_personnel_expense_section
    SectionKind.PERSONNEL_EXPENSE: None,
    SectionKind.UTILITY_EXPENSE: FIVE_MAN_THRESHOLD,
    SectionKind.SUPPLIES_EXPENSE: FIVE_MAN_THRESHOLD,
    SectionKind.OFFICE_EXPENSE: FIVE_MAN_THRESHOLD,
    SectionKind.ORGANIZATION_EXPENSE: FIVE_MAN_THRESHOLD,
    SectionKind.ELECTION_EXPENSE: FIVE_MAN_THRESHOLD,
    SectionKind.PUBLICATION_EXPENSE: FIVE_MAN_THRESHOLD,
    SectionKind.ADVERTISING_EXPENSE: FIVE_MAN_THRESHOLD,
    SectionKind.FUNDRAISING_PARTY_EXPENSE: FIVE_MAN_THRESHOLD,
    SectionKind.OTHER_BUSINESS_EXPENSE: FIVE_MAN_THRESHOLD,
    SectionKind.RESEARCH_EXPENSE: FIVE_MAN_THRESHOLD,
    SectionKind.DONATION_GRANT_EXPENSE: FIVE_MAN_THRESHOLD,
    SectionKind.OTHER_POLITICAL_EXPENSE: FIVE_MAN_THRESHOLD,
}

if set(SECTION_THRESHOLDS) != set(SectionKind):
    raise RuntimeError("SECTION_THRESHOLDS must cover every SectionKind")


def aggregate_section(
    transactions: Iterable[TransactionRow],
    resolve_amount: AmountResolver,
    to_row: RowFactory,
    threshold: Optional[int] = None,
    has_bucket: bool = False,
) -> Section:
    """Split transactions into itemized rows and a below-threshold bucket.

    Rows are numbered "1", "2", ... in input order; only itemized rows
    take a number. The threshold is compared against the unrounded
    amount, so ¥99,999.5 stays below a ¥100,000 threshold even though it
    rounds to ¥100,000. The bucket is reported as an integer whenever the
    section has a threshold (or ``has_bucket`` is set), and as None
    otherwise.

    Args:
        transactions: Ledger rows in the order they should be printed
        resolve_amount: Picks the amount from (debit, credit)
        to_row: Builds a report row from (transaction, ichiren_no, kingaku)
        threshold: Inclusive itemization threshold in yen, or None
        has_bucket: Report a 0 bucket even when there is no threshold

    Returns:
        Section whose total equals the itemized rows plus the bucket
    """
    total_amount = 0
    under_threshold_amount = 0
    rows = []

    for transaction in transactions:
        raw_amount = resolve_amount(transaction.debit_amount, transaction.credit_amount)
        amount = round_yen(raw_amount)
        total_amount += amount
        if threshold is not None and not is_above_threshold(raw_amount, threshold):
            under_threshold_amount += amount
            continue
        rows.append(to_row(transaction, str(len(rows) + 1), amount))

    bucket = under_threshold_amount if threshold is not None or has_bucket else None
    return Section(
        total_amount=total_amount,
        under_threshold_amount=bucket,
        rows=tuple(rows),
    )
