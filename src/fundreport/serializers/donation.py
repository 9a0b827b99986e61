"""Donation serializer (SYUUSHI07_07)."""

import xml.etree.ElementTree as ET

from fundreport.domain.entities import PersonalDonationRow, Section
from fundreport.serializers.formatting import format_wareki_date
from fundreport.serializers.writer import add_amount, add_text


def serialize_personal_donation_section(
    section: Section[PersonalDonationRow],
) -> ET.Element:
    """Serialize personal donations as SYUUSHI07_07 KUBUN1.

    Corporate (KUBUN2) and political-group (KUBUN3) donations are not
    exported, so only KUBUN1 is written.
    """
    root = ET.Element("SYUUSHI07_07")
    sheet = ET.SubElement(ET.SubElement(root, "KUBUN1"), "SHEET")
    add_amount(sheet, "KINGAKU_GK", section.total_amount)
    add_amount(sheet, "SONOTA_GK", section.under_threshold_amount)

    for row in section.rows:
        row_element = ET.SubElement(sheet, "ROW")
        add_text(row_element, "ICHIREN_NO", row.ichiren_no)
        add_text(row_element, "KIFUSYA_NM", row.kifusya_nm)
        add_amount(row_element, "KINGAKU", row.kingaku)
        add_text(row_element, "DT", format_wareki_date(row.dt))
        add_text(row_element, "ADR", row.adr)
        add_text(row_element, "SYOKUGYO", row.syokugyo)
        add_text(row_element, "BIKOU", row.bikou)
        add_text(row_element, "SEQ_NO", row.seq_no)
        add_text(row_element, "ZEIGAKUKOUJYO", row.zeigakukoujyo)
        add_text(row_element, "ROWKBN", row.rowkbn)

    return root
