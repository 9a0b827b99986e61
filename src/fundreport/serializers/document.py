"""Top-level report document: HEAD, form-presence mask and form sections."""

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from fundreport.domain.entities import ReportData
from fundreport.domain.summary import build_expense_summary, build_summary
from fundreport.serializers.donation import serialize_personal_donation_section
from fundreport.serializers.expense import (
    serialize_expense_section,
    serialize_grant_expenditure_section,
    serialize_political_activity_section,
)
from fundreport.serializers.income import (
    serialize_business_income_section,
    serialize_grant_income_section,
    serialize_loan_income_section,
    serialize_other_income_section,
)
from fundreport.serializers.profile import serialize_profile_section
from fundreport.serializers.summary import (
    serialize_expense_summary_section,
    serialize_summary_section,
)
from fundreport.serializers.writer import add_text, render_document

XML_HEAD: dict[str, str] = {
    "VERSION": "20081001",
    "APP": "収支報告書作成ソフト (収支報告書作成ソフト)",
    "FILE_FORMAT_NO": "1",
    "KOKUJI_APP_FLG": "0",
    "CHOUBO_APP_VER": "20081001",
}

# Statutory order; the index of each ID is its position in SYUUSHI_UMU
KNOWN_FORM_IDS: tuple[str, ...] = (
    "SYUUSHI07_01",  # 団体の基本情報
    "SYUUSHI07_02",  # 収支の総括表
    "SYUUSHI07_03",  # 事業による収入
    "SYUUSHI07_04",  # 借入金
    "SYUUSHI07_05",  # 本部又は支部から供与された交付金
    "SYUUSHI07_06",  # その他の収入
    "SYUUSHI07_07",  # 寄附の明細
    "SYUUSHI07_08",  # 寄附のあっせん
    "SYUUSHI07_09",  # 政党匿名寄附
    "SYUUSHI07_10",  # 政治資金パーティーの対価に係る収入
    "SYUUSHI07_11",  # 政治資金パーティー対価の支払をした者
    "SYUUSHI07_12",  # 政治資金パーティー対価の支払のあっせんをした者
    "SYUUSHI07_13",  # 支出項目別金額の内訳
    "SYUUSHI07_14",  # 経常経費の支出
    "SYUUSHI07_15",  # 政治活動費の支出
    "SYUUSHI07_16",  # 本部又は支部に対する交付金の支出
    "SYUUSHI07_17",  # 資産等の項目別内訳の有無
    "SYUUSHI07_18",  # 資産等の項目別内訳の明細
    "SYUUSHI07_19",  # 不動産に関する使用の状況
    "SYUUSHI07_20",  # 宣誓書
    "SYUUSHI08",  # 訂正等届出書
    "SYUUSHI08_02",  # 解散届出書
    "SYUUSHI_KIFUKOUJYO",  # 寄附金控除関連
)

FLAG_STRING_LENGTH = 51

# Set when no form IDs are given at all
DEFAULT_FLAG_INDEX = 5

_FORM_INDEX = {form_id: index for index, form_id in enumerate(KNOWN_FORM_IDS)}


@dataclass(frozen=True)
class XmlSection:
    """One serialized form, tagged with its form ID."""

    form_id: str
    element: ET.Element


def build_flag_mask(form_ids: Iterable[str]) -> str:
    """Build the fixed-width SYUUSHI_UMU presence mask.

    Unknown form IDs are ignored so newer schemas with extra forms do not
    break older exports.

    Examples:
        >>> build_flag_mask([]).index("1")
        5
        >>> mask = build_flag_mask(["SYUUSHI07_02", "UNKNOWN", "SYUUSHI08"])
        >>> [i for i, flag in enumerate(mask) if flag == "1"]
        [1, 20]
    """
    form_ids = list(form_ids)
    flags = ["0"] * FLAG_STRING_LENGTH
    if not form_ids:
        flags[DEFAULT_FLAG_INDEX] = "1"
        return "".join(flags)

    for form_id in form_ids:
        index = _FORM_INDEX.get(form_id)
        if index is not None:
            flags[index] = "1"
    return "".join(flags)


def _statutory_position(section: XmlSection) -> int:
    return _FORM_INDEX.get(section.form_id, len(KNOWN_FORM_IDS))


def build_xml_document(
    sections: Iterable[XmlSection], head: Optional[Mapping[str, str]] = None
) -> str:
    """Assemble the full BOOK document.

    Sections are written in statutory order regardless of the order they
    are given in; sections with unknown form IDs follow the known ones.

    Args:
        sections: Serialized forms to include
        head: HEAD values overriding XML_HEAD key by key

    Returns:
        XML text with a Shift_JIS declaration, not yet encoded
    """
    sections = sorted(sections, key=_statutory_position)

    book = ET.Element("BOOK")
    head_element = ET.SubElement(book, "HEAD")
    for key, value in {**XML_HEAD, **(head or {})}.items():
        add_text(head_element, key, value)

    flag_element = ET.SubElement(book, "SYUUSHI_UMU_FLG")
    add_text(
        flag_element,
        "SYUUSHI_UMU",
        build_flag_mask(section.form_id for section in sections),
    )

    for section in sections:
        book.append(section.element)

    return render_document(book)


def build_report_sections(report_data: ReportData) -> list[XmlSection]:
    """Serialize every form that has something to report.

    SYUUSHI07_01 and SYUUSHI07_02 are always present; the others only when
    their section has rows or a non-zero total. SYUUSHI07_13 is written
    whenever there is any expense at all.
    """
    sections = [
        XmlSection("SYUUSHI07_01", serialize_profile_section(report_data.profile)),
        XmlSection("SYUUSHI07_02", serialize_summary_section(build_summary(report_data))),
    ]

    optional_sections = (
        ("SYUUSHI07_03", report_data.business_income, serialize_business_income_section),
        ("SYUUSHI07_04", report_data.loan_income, serialize_loan_income_section),
        ("SYUUSHI07_05", report_data.grant_income, serialize_grant_income_section),
        ("SYUUSHI07_06", report_data.other_income, serialize_other_income_section),
        ("SYUUSHI07_07", report_data.personal_donations, serialize_personal_donation_section),
    )
    for form_id, section, serialize in optional_sections:
        if section.should_output_sheet():
            sections.append(XmlSection(form_id, serialize(section)))

    expense_summary = build_expense_summary(report_data)
    if expense_summary.should_output_sheet():
        sections.append(
            XmlSection("SYUUSHI07_13", serialize_expense_summary_section(expense_summary))
        )

    if report_data.should_output_regular_expense_sheet():
        sections.append(
            XmlSection(
                "SYUUSHI07_14",
                serialize_expense_section(
                    report_data.utility_expenses,
                    report_data.supplies_expenses,
                    report_data.office_expenses,
                ),
            )
        )

    if report_data.should_output_political_activity_sheet():
        sections.append(
            XmlSection(
                "SYUUSHI07_15",
                serialize_political_activity_section(
                    report_data.political_activity_expenses()
                ),
            )
        )

    if report_data.grant_expenditures.rows:
        sections.append(
            XmlSection(
                "SYUUSHI07_16",
                serialize_grant_expenditure_section(report_data.grant_expenditures),
            )
        )

    return sections


def serialize_report_data(report_data: ReportData) -> str:
    """Serialize an assembled report into the complete XML document."""
    return build_xml_document(build_report_sections(report_data))
