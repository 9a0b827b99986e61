"""Personal donation aggregation (SYUUSHI07_07 KUBUN1)."""

from typing import Iterable

from fundreport.domain.aggregation import SECTION_THRESHOLDS, aggregate_section
from fundreport.domain.entities import (
    PersonalDonationRow,
    Section,
    SectionKind,
    TransactionRow,
)
from fundreport.domain.transaction_utils import (
    build_bikou,
    resolve_income_amount,
    sanitize_text,
)

KIFUSYA_NM_MAX_LENGTH = 120
ADR_MAX_LENGTH = 120
SYOKUGYO_MAX_LENGTH = 50
DONATION_BIKOU_MEMO_MAX_LENGTH = 70
DONATION_BIKOU_MAX_LENGTH = 100


def to_personal_donation_row(
    transaction: TransactionRow, ichiren_no: str, kingaku: int
) -> PersonalDonationRow:
    return PersonalDonationRow(
        ichiren_no=ichiren_no,
        kifusya_nm=sanitize_text(transaction.counterpart_name, KIFUSYA_NM_MAX_LENGTH),
        kingaku=kingaku,
        dt=transaction.transaction_date,
        adr=sanitize_text(transaction.counterpart_address, ADR_MAX_LENGTH),
        syokugyo=sanitize_text(transaction.donor_occupation, SYOKUGYO_MAX_LENGTH),
        bikou=build_bikou(
            transaction.transaction_no,
            transaction.memo,
            DONATION_BIKOU_MEMO_MAX_LENGTH,
            DONATION_BIKOU_MAX_LENGTH,
        ),
    )


def build_personal_donation_section(
    transactions: Iterable[TransactionRow],
) -> Section[PersonalDonationRow]:
    """Build the personal donation sheet.

    Every donation is itemized; the "other donations" column (SONOTA_GK)
    exists on the form but is always reported as 0.
    """
    return aggregate_section(
        transactions,
        resolve_income_amount,
        to_personal_donation_row,
        threshold=SECTION_THRESHOLDS[SectionKind.PERSONAL_DONATION],
        has_bucket=True,
    )
