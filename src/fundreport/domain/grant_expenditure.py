"""Grant expenditure (SYUUSHI07_16) extraction and flag rules."""

import logging
import re
from typing import Iterable

from fundreport.database.base import ReportTransactionRepository
from fundreport.domain.entities import (
    ExpenseRow,
    GrantExpenditureRow,
    PoliticalActivitySections,
    Section,
    SectionKind,
)
from fundreport.domain.errors import (
    NotFoundError,
    ValidationError,
    invalid_transaction_id,
    transaction_not_found,
)
from fundreport.domain.transaction_utils import validate_grant_expenditure_flag_update

logger = logging.getLogger(__name__)

# Expense item name written to SHISYUTU_KMK
SHISYUTU_KMK: dict[SectionKind, str] = {
    SectionKind.UTILITY_EXPENSE: "光熱水費",
    SectionKind.SUPPLIES_EXPENSE: "備品・消耗品費",
    SectionKind.OFFICE_EXPENSE: "事務所費",
    SectionKind.ORGANIZATION_EXPENSE: "組織活動費",
    SectionKind.ELECTION_EXPENSE: "選挙関係費",
    SectionKind.PUBLICATION_EXPENSE: "機関紙誌の発行事業費",
    SectionKind.ADVERTISING_EXPENSE: "宣伝事業費",
    SectionKind.FUNDRAISING_PARTY_EXPENSE: "政治資金パーティー開催事業費",
    SectionKind.OTHER_BUSINESS_EXPENSE: "その他の事業費",
    SectionKind.RESEARCH_EXPENSE: "調査研究費",
    SectionKind.DONATION_GRANT_EXPENSE: "寄附・交付金",
    SectionKind.OTHER_POLITICAL_EXPENSE: "その他の経費",
}

_TRANSACTION_ID = re.compile(r"^\d+$")


def build_grant_expenditure_section(
    utility_expenses: Section[ExpenseRow],
    supplies_expenses: Section[ExpenseRow],
    office_expenses: Section[ExpenseRow],
    political_activity_expenses: Iterable[tuple[SectionKind, PoliticalActivitySections]] = (),
) -> Section[GrantExpenditureRow]:
    """Collect flagged expense rows into the grant expenditure sheet.

    Rows keep the order utility, supplies, office, then each political
    activity KUBUN in turn, and are renumbered from 1. Only itemized rows
    can be flagged, so the sheet has no below-threshold bucket.
    """
    sources: list[tuple[SectionKind, Section[ExpenseRow]]] = [
        (SectionKind.UTILITY_EXPENSE, utility_expenses),
        (SectionKind.SUPPLIES_EXPENSE, supplies_expenses),
        (SectionKind.OFFICE_EXPENSE, office_expenses),
    ]
    for kind, sections in political_activity_expenses:
        sources.extend((kind, section) for section in sections)

    rows: list[GrantExpenditureRow] = []
    for kind, section in sources:
        for row in section.rows:
            if not row.koufukin:
                continue
            rows.append(
                GrantExpenditureRow(
                    ichiren_no=str(len(rows) + 1),
                    shisyutu_kmk=SHISYUTU_KMK[kind],
                    kingaku=row.kingaku,
                    dt=row.dt,
                    honsibu_nm=row.nm,
                    jimu_adr=row.adr,
                    bikou=row.bikou,
                )
            )

    return Section(
        total_amount=sum(row.kingaku for row in rows),
        under_threshold_amount=None,
        rows=tuple(rows),
    )


class GrantExpenditureFlagService:
    """Service for setting the grant expenditure flag on ledger rows."""

    def __init__(self, repository: ReportTransactionRepository):
        """Initialize the flag service.

        Args:
            repository: Transaction repository
        """
        self.repository = repository

    async def update_flag(self, transaction_id: str, is_grant_expenditure: bool) -> None:
        """Set or clear the grant expenditure flag on one transaction.

        Raises:
            ValidationError: If the id is malformed or the transaction is income
            NotFoundError: If the transaction does not exist
        """
        transaction_id = str(transaction_id).strip()
        if not _TRANSACTION_ID.match(transaction_id):
            raise ValidationError(
                invalid_transaction_id(transaction_id),
                field="transaction_id",
                value=transaction_id,
            )

        numeric_id = int(transaction_id)
        transaction_type = await self.repository.find_transaction_type(numeric_id)
        if transaction_type is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        validation = validate_grant_expenditure_flag_update(transaction_type)
        if not validation.is_valid:
            raise ValidationError(
                validation.error_message,
                field="transaction_type",
                value=transaction_type.value,
            )

        await self.repository.update_grant_expenditure_flag(numeric_id, is_grant_expenditure)
        logger.info(
            "Grant expenditure flag on transaction %s set to %s",
            transaction_id,
            is_grant_expenditure,
        )
