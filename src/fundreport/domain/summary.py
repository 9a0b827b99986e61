"""Summary tables derived from report data (SYUUSHI07_02 and SYUUSHI07_13)."""

from typing import Optional

from fundreport.domain.entities import (
    ExpenseSummaryData,
    ExpenseSummaryItem,
    PoliticalActivitySections,
    ReportData,
    SummaryData,
)


def _amount(value: Optional[int]) -> int:
    return value if value is not None else 0


def _sections_total(sections: PoliticalActivitySections) -> int:
    return sum(section.total_amount for section in sections)


def _regular_item(amount: int) -> ExpenseSummaryItem:
    # regular expense lines are left blank rather than written as 0
    return ExpenseSummaryItem(amount=amount if amount > 0 else None)


def build_expense_summary(report_data: ReportData) -> ExpenseSummaryData:
    """Compute the expense breakdown table (SYUUSHI07_13).

    経常経費 = 人件費 + 光熱水費 + 備品・消耗品費 + 事務所費
    機関紙誌の発行その他の事業費 = 発行 + 宣伝 + パーティー + その他の事業
    政治活動費 = 組織活動 + 選挙関係 + 事業費 + 調査研究 + 寄附・交付金 + その他の経費
    支出総額 = 経常経費 + 政治活動費
    """
    personnel = report_data.personnel_expenses.total_amount
    utility = report_data.utility_expenses.total_amount
    supplies = report_data.supplies_expenses.total_amount
    office = report_data.office_expenses.total_amount
    regular_subtotal = personnel + utility + supplies + office

    organization = _sections_total(report_data.organization_expenses)
    election = _sections_total(report_data.election_expenses)
    publication = _sections_total(report_data.publication_expenses)
    advertising = _sections_total(report_data.advertising_expenses)
    fundraising_party = _sections_total(report_data.fundraising_party_expenses)
    other_business = _sections_total(report_data.other_business_expenses)
    research = _sections_total(report_data.research_expenses)
    donation_grant = _sections_total(report_data.donation_grant_expenses)
    other_political = _sections_total(report_data.other_political_expenses)

    business = publication + advertising + fundraising_party + other_business
    political_subtotal = (
        organization + election + business + research + donation_grant + other_political
    )

    return ExpenseSummaryData(
        personnel=_regular_item(personnel),
        utility=_regular_item(utility),
        supplies=_regular_item(supplies),
        office=_regular_item(office),
        regular_subtotal=ExpenseSummaryItem(amount=regular_subtotal),
        organization=ExpenseSummaryItem(amount=organization),
        election=ExpenseSummaryItem(amount=election),
        business=ExpenseSummaryItem(amount=business),
        publication=ExpenseSummaryItem(amount=publication),
        advertising=ExpenseSummaryItem(amount=advertising),
        fundraising_party=ExpenseSummaryItem(amount=fundraising_party),
        other_business=ExpenseSummaryItem(amount=other_business),
        research=ExpenseSummaryItem(amount=research),
        donation_grant=ExpenseSummaryItem(amount=donation_grant),
        other_political=ExpenseSummaryItem(amount=other_political),
        political_subtotal=ExpenseSummaryItem(amount=political_subtotal),
        total_amount=regular_subtotal + political_subtotal,
    )


def build_summary(
    report_data: ReportData, previous_year_carryover: Optional[int] = None
) -> SummaryData:
    """Compute the summary table from the assembled sections.

    Pure arithmetic over ``report_data``; categories this export does not
    cover (party fees, specific, corporate and political-group donations,
    mediated and anonymous donations) stay None and count as 0.

    Args:
        report_data: Assembled report
        previous_year_carryover: Overrides the carryover stored on the profile

    Returns:
        SummaryData with
            寄附小計 = 個人 + 特定 + 法人 + 政治団体
            寄附合計 = 寄附小計 + あっせん + 政党匿名
            本年収入額 = 寄附合計 + 事業 + 借入金 + 交付金 + その他
            収入総額 = 前年繰越額 + 本年収入額
            支出総額 = 経常経費 + 政治活動費 (see build_expense_summary)
            翌年繰越額 = 収入総額 - 支出総額
    """
    if previous_year_carryover is None:
        previous_year_carryover = report_data.profile.previous_year_carryover

    kojin_kifu_gk = report_data.personal_donations.total_amount
    tokutei_kifu_gk: Optional[int] = None
    hojin_kifu_gk: Optional[int] = None
    seiji_kifu_gk: Optional[int] = None
    atusen_gk: Optional[int] = None
    tokumei_kifu_gk: Optional[int] = None

    kifu_skei_gk = (
        kojin_kifu_gk
        + _amount(tokutei_kifu_gk)
        + _amount(hojin_kifu_gk)
        + _amount(seiji_kifu_gk)
    )
    kifu_gkei_gk = kifu_skei_gk + _amount(atusen_gk) + _amount(tokumei_kifu_gk)

    honnen_syunyu_gk = (
        kifu_gkei_gk
        + report_data.business_income.total_amount
        + report_data.loan_income.total_amount
        + report_data.grant_income.total_amount
        + report_data.other_income.total_amount
    )
    syunyu_sgk = previous_year_carryover + honnen_syunyu_gk
    sisyutu_sgk = build_expense_summary(report_data).total_amount

    return SummaryData(
        syunyu_sgk=syunyu_sgk,
        zennen_kks_gk=previous_year_carryover,
        honnen_syunyu_gk=honnen_syunyu_gk,
        sisyutu_sgk=sisyutu_sgk,
        yokunen_kks_gk=syunyu_sgk - sisyutu_sgk,
        kojin_kifu_gk=kojin_kifu_gk,
        kifu_skei_gk=kifu_skei_gk,
        kifu_gkei_gk=kifu_gkei_gk,
        tokutei_kifu_gk=tokutei_kifu_gk,
        hojin_kifu_gk=hojin_kifu_gk,
        seiji_kifu_gk=seiji_kifu_gk,
        atusen_gk=atusen_gk,
        tokumei_kifu_gk=tokumei_kifu_gk,
    )
