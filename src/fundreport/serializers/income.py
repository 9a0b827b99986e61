"""Income section serializers (SYUUSHI07_03 to SYUUSHI07_06)."""

import xml.etree.ElementTree as ET

from fundreport.domain.entities import (
    BusinessIncomeRow,
    GrantIncomeRow,
    LoanIncomeRow,
    OtherIncomeRow,
    Section,
)
from fundreport.serializers.formatting import format_wareki_date
from fundreport.serializers.writer import add_amount, add_text


def _income_sheet(form_id: str, section: Section) -> tuple[ET.Element, ET.Element]:
    root = ET.Element(form_id)
    sheet = ET.SubElement(root, "SHEET")
    add_amount(sheet, "KINGAKU_GK", section.total_amount)
    add_amount(sheet, "MIMAN_GK", section.under_threshold_amount)
    return root, sheet


def serialize_business_income_section(section: Section[BusinessIncomeRow]) -> ET.Element:
    """SYUUSHI07_03: 事業による収入."""
    root, sheet = _income_sheet("SYUUSHI07_03", section)
    for row in section.rows:
        row_element = ET.SubElement(sheet, "ROW")
        add_text(row_element, "ICHIREN_NO", row.ichiren_no)
        add_text(row_element, "GIGYOU_SYURUI", row.gigyou_syurui)
        add_amount(row_element, "KINGAKU", row.kingaku)
        add_text(row_element, "BIKOU", row.bikou)
    return root


def serialize_loan_income_section(section: Section[LoanIncomeRow]) -> ET.Element:
    """SYUUSHI07_04: 借入金."""
    root, sheet = _income_sheet("SYUUSHI07_04", section)
    for row in section.rows:
        row_element = ET.SubElement(sheet, "ROW")
        add_text(row_element, "ICHIREN_NO", row.ichiren_no)
        add_text(row_element, "KARIIRESAKI", row.kariiresaki)
        add_amount(row_element, "KINGAKU", row.kingaku)
        add_text(row_element, "BIKOU", row.bikou)
    return root


def serialize_grant_income_section(section: Section[GrantIncomeRow]) -> ET.Element:
    """SYUUSHI07_05: 本部又は支部から供与された交付金."""
    root, sheet = _income_sheet("SYUUSHI07_05", section)
    for row in section.rows:
        row_element = ET.SubElement(sheet, "ROW")
        add_text(row_element, "ICHIREN_NO", row.ichiren_no)
        add_text(row_element, "HONSIBU_NM", row.honsibu_nm)
        add_amount(row_element, "KINGAKU", row.kingaku)
        add_text(row_element, "DT", format_wareki_date(row.dt))
        add_text(row_element, "JIMU_ADR", row.jimu_adr)
        add_text(row_element, "BIKOU", row.bikou)
    return root


def serialize_other_income_section(section: Section[OtherIncomeRow]) -> ET.Element:
    """SYUUSHI07_06: その他の収入."""
    root, sheet = _income_sheet("SYUUSHI07_06", section)
    for row in section.rows:
        row_element = ET.SubElement(sheet, "ROW")
        add_text(row_element, "ICHIREN_NO", row.ichiren_no)
        add_text(row_element, "TEKIYOU", row.tekiyou)
        add_amount(row_element, "KINGAKU", row.kingaku)
        add_text(row_element, "BIKOU", row.bikou)
    return root
