"""Political activity expense aggregation (SYUUSHI07_15 KUBUN1-9)."""

from typing import Iterable

from fundreport.domain.entities import (
    PoliticalActivitySection,
    PoliticalActivitySections,
    SectionKind,
    TransactionRow,
)
from fundreport.domain.expense import build_expense_section
from fundreport.domain.transaction_utils import sanitize_text


def build_political_activity_sections(
    kind: SectionKind, transactions: Iterable[TransactionRow]
) -> PoliticalActivitySections:
    """Group one KUBUN's expenses by 費目 and aggregate each group.

    The 費目 is the ledger's friendly category. Each group is itemized at
    50,000 yen with its own bucket and its own row numbering. Groups are
    ordered by 費目, with the uncategorized group last.

    Raises:
        ValueError: If ``kind`` is not a political activity section
    """
    if not kind.is_political_activity:
        raise ValueError(f"{kind.name} is not a political activity section")

    groups: dict[str, list[TransactionRow]] = {}
    for transaction in transactions:
        himoku = sanitize_text(transaction.friendly_category)
        groups.setdefault(himoku, []).append(transaction)

    sections = []
    for himoku in sorted(groups, key=lambda name: (name == "", name)):
        section = build_expense_section(kind, groups[himoku])
        sections.append(
            PoliticalActivitySection(
                total_amount=section.total_amount,
                under_threshold_amount=section.under_threshold_amount,
                rows=section.rows,
                himoku=himoku,
            )
        )
    return tuple(sections)
