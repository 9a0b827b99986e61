"""Expense serializers (SYUUSHI07_14, SYUUSHI07_15 and SYUUSHI07_16)."""

import xml.etree.ElementTree as ET
from typing import Iterable

from fundreport.domain.entities import (
    ExpenseRow,
    GrantExpenditureRow,
    PoliticalActivitySections,
    Section,
    SectionKind,
)
from fundreport.serializers.formatting import format_wareki_date
from fundreport.serializers.writer import add_amount, add_text


def _serialize_expense_rows(sheet: ET.Element, rows: Iterable[ExpenseRow]) -> None:
    for row in rows:
        row_element = ET.SubElement(sheet, "ROW")
        add_text(row_element, "ICHIREN_NO", row.ichiren_no)
        add_text(row_element, "MOKUTEKI", row.mokuteki)
        add_amount(row_element, "KINGAKU", row.kingaku)
        add_text(row_element, "DT", format_wareki_date(row.dt))
        add_text(row_element, "NM", row.nm)
        add_text(row_element, "ADR", row.adr)
        add_text(row_element, "BIKOU", row.bikou)


def _serialize_expense_kubun(kubun: ET.Element, section: Section[ExpenseRow]) -> None:
    sheet = ET.SubElement(kubun, "SHEET")
    add_amount(sheet, "KINGAKU_GK", section.total_amount)
    add_amount(sheet, "SONOTA_GK", section.under_threshold_amount)
    _serialize_expense_rows(sheet, section.rows)


def serialize_expense_section(
    utility_section: Section[ExpenseRow],
    supplies_section: Section[ExpenseRow],
    office_section: Section[ExpenseRow],
) -> ET.Element:
    """Serialize the three regular expense categories as SYUUSHI07_14.

    KUBUN1 is utilities (光熱水費), KUBUN2 supplies (備品・消耗品費) and
    KUBUN3 office expenses (事務所費). All three are always written.
    """
    root = ET.Element("SYUUSHI07_14")
    for tag, section in (
        ("KUBUN1", utility_section),
        ("KUBUN2", supplies_section),
        ("KUBUN3", office_section),
    ):
        _serialize_expense_kubun(ET.SubElement(root, tag), section)
    return root


def serialize_political_activity_section(
    sections_by_kind: Iterable[tuple[SectionKind, PoliticalActivitySections]],
) -> ET.Element:
    """Serialize political activity expenses as SYUUSHI07_15.

    ``sections_by_kind`` lists the nine categories in KUBUN1-9 order. Each
    費目 group becomes one SHEET under its KUBUN; a category without any
    expenses is written as an empty KUBUN. A zero bucket is left blank.
    """
    root = ET.Element("SYUUSHI07_15")
    for number, (_, sections) in enumerate(sections_by_kind, start=1):
        kubun = ET.SubElement(root, f"KUBUN{number}")
        for section in sections:
            sheet = ET.SubElement(kubun, "SHEET")
            add_text(sheet, "HIMOKU", section.himoku)
            add_amount(sheet, "KINGAKU_GK", section.total_amount)
            add_amount(sheet, "SONOTA_GK", section.under_threshold_amount or None)
            _serialize_expense_rows(sheet, section.rows)
    return root


def serialize_grant_expenditure_section(
    section: Section[GrantExpenditureRow],
) -> ET.Element:
    """SYUUSHI07_16: 本部又は支部に対する交付金の支出."""
    root = ET.Element("SYUUSHI07_16")
    sheet = ET.SubElement(root, "SHEET")
    add_amount(sheet, "KINGAKU_GK", section.total_amount)

    for row in section.rows:
        row_element = ET.SubElement(sheet, "ROW")
        add_text(row_element, "ICHIREN_NO", row.ichiren_no)
        add_text(row_element, "SHISYUTU_KMK", row.shisyutu_kmk)
        add_amount(row_element, "KINGAKU", row.kingaku)
        add_text(row_element, "DT", format_wareki_date(row.dt))
        add_text(row_element, "HONSIBU_NM", row.honsibu_nm)
        add_text(row_element, "JIMU_ADR", row.jimu_adr)
        add_text(row_element, "BIKOU", row.bikou)

    return root
