"""Summary serializers (SYUUSHI07_02 and SYUUSHI07_13)."""

import xml.etree.ElementTree as ET

from fundreport.domain.entities import ExpenseSummaryData, SummaryData
from fundreport.serializers.writer import add_amount, add_text

# (amount tag, amount field, remark tag, remark field); remark tag may be None
_SUMMARY_FIELDS: tuple[tuple[str, str, str | None, str | None], ...] = (
    ("SYUNYU_SGK", "syunyu_sgk", None, None),
    ("ZENNEN_KKS_GK", "zennen_kks_gk", None, None),
    ("HONNEN_SYUNYU_GK", "honnen_syunyu_gk", None, None),
    ("SISYUTU_SGK", "sisyutu_sgk", None, None),
    ("YOKUNEN_KKS_GK", "yokunen_kks_gk", None, None),
    ("KOJIN_FUTAN_KGK", "kojin_futan_kgk", None, None),
    ("KOJIN_FUTAN_SU", "kojin_futan_su", None, None),
    ("KOJIN_KIFU_GK", "kojin_kifu_gk", "KOJIN_KIFU_BIKOU", "kojin_kifu_bikou"),
    ("TOKUTEI_KIFU_GK", "tokutei_kifu_gk", "TOKUTEI_KIFU_BIKOU", "tokutei_kifu_bikou"),
    ("HOJIN_KIFU_GK", "hojin_kifu_gk", "HOJIN_KIFU_BIKOU", "hojin_kifu_bikou"),
    ("SEIJI_KIFU_GK", "seiji_kifu_gk", "SEIJI_KIFU_BIKOU", "seiji_kifu_bikou"),
    ("KIFU_SKEI_GK", "kifu_skei_gk", "KIFU_SKEI_BIKOU", "kifu_skei_bikou"),
    ("ATUSEN_GK", "atusen_gk", "ATUSEN_BIKOU", "atusen_bikou"),
    ("TOKUMEI_KIFU_GK", "tokumei_kifu_gk", "TOKUMEI_KIFU_BIKOU", "tokumei_bikou"),
    ("KIFU_GKEI_GK", "kifu_gkei_gk", "KIFU_GKEI_BIKOU", "kifu_gkei_bikou"),
)


def serialize_summary_section(summary: SummaryData) -> ET.Element:
    """Serialize the summary table; uncovered categories become empty tags."""
    root = ET.Element("SYUUSHI07_02")
    sheet = ET.SubElement(root, "SHEET")
    for amount_tag, amount_field, bikou_tag, bikou_field in _SUMMARY_FIELDS:
        add_amount(sheet, amount_tag, getattr(summary, amount_field))
        if bikou_tag is not None:
            add_text(sheet, bikou_tag, getattr(summary, bikou_field))
    return root


# (tag prefix, ExpenseSummaryData field) in sheet order
_EXPENSE_SUMMARY_ITEMS: tuple[tuple[str, str], ...] = (
    ("JINKENHI", "personnel"),
    ("KOUNETU", "utility"),
    ("BIHIN", "supplies"),
    ("JIMUSYO", "office"),
    ("KEIHI_SKEI", "regular_subtotal"),
    ("SOSIKI", "organization"),
    ("SENKYO", "election"),
    ("SONOTA_JIGYO", "business"),
    ("HAKKOU_JIGYO", "publication"),
    ("SENDEN", "advertising"),
    ("KAISAI", "fundraising_party"),
    ("SONOTA", "other_business"),
    ("CYOUSA", "research"),
    ("KIFU", "donation_grant"),
    ("SONOTA_KEIHI", "other_political"),
    ("KATUDOU_SKEI", "political_subtotal"),
)


def serialize_expense_summary_section(summary: ExpenseSummaryData) -> ET.Element:
    """Serialize the expense breakdown table (SYUUSHI07_13).

    Each item writes ``<PREFIX>_GK``, ``_KOUFU`` and ``_BIKOU``; GKEI_GK
    closes the sheet with the grand total.
    """
    root = ET.Element("SYUUSHI07_13")
    sheet = ET.SubElement(root, "SHEET")
    for prefix, item_field in _EXPENSE_SUMMARY_ITEMS:
        item = getattr(summary, item_field)
        add_amount(sheet, f"{prefix}_GK", item.amount)
        add_amount(sheet, f"{prefix}_KOUFU", item.koufu)
        add_text(sheet, f"{prefix}_BIKOU", item.bikou)
    add_amount(sheet, "GKEI_GK", summary.total_amount)
    return root
