"""Tests for the income/expense summary."""

from fundreport.domain.entities import PoliticalActivitySection, ReportData, Section
from fundreport.domain.summary import build_expense_summary, build_summary


def _section(total, under=None):
    return Section(total_amount=total, under_threshold_amount=under)


def test_summary_formulas(sample_profile):
    report_data = ReportData(
        profile=sample_profile,
        personal_donations=_section(300000, 0),
        business_income=_section(10000),
        loan_income=_section(200000),
        grant_income=_section(0),
        other_income=_section(240000, 90000),
        utility_expenses=_section(60000, 0),
        supplies_expenses=_section(30000, 30000),
        office_expenses=_section(10000, 10000),
    )

    summary = build_summary(report_data)

    assert summary.zennen_kks_gk == 50000
    assert summary.kojin_kifu_gk == 300000
    assert summary.kifu_skei_gk == 300000
    assert summary.kifu_gkei_gk == 300000
    assert summary.honnen_syunyu_gk == 750000
    assert summary.syunyu_sgk == 800000
    assert summary.sisyutu_sgk == 100000
    assert summary.yokunen_kks_gk == 700000


def test_uncovered_categories_are_none(sample_profile):
    summary = build_summary(ReportData(profile=sample_profile))

    assert summary.tokutei_kifu_gk is None
    assert summary.hojin_kifu_gk is None
    assert summary.seiji_kifu_gk is None
    assert summary.atusen_gk is None
    assert summary.tokumei_kifu_gk is None
    assert summary.kojin_futan_kgk is None


def test_carryover_override(sample_profile):
    summary = build_summary(ReportData(profile=sample_profile), previous_year_carryover=0)

    assert summary.zennen_kks_gk == 0
    assert summary.syunyu_sgk == 0
    assert summary.yokunen_kks_gk == 0


def test_spending_more_than_income_goes_negative(sample_profile):
    report_data = ReportData(
        profile=sample_profile,
        office_expenses=_section(80000, 0),
    )

    summary = build_summary(report_data)

    assert summary.yokunen_kks_gk == -30000


def _political(*totals):
    return tuple(PoliticalActivitySection(total_amount=total, under_threshold_amount=0) for total in totals)


def _report_with_every_expense(profile):
    return ReportData(
        profile=profile,
        utility_expenses=_section(10000, 0),
        supplies_expenses=_section(20000, 0),
        office_expenses=_section(30000, 0),
        organization_expenses=_political(15000, 25000),
        election_expenses=_political(50000),
        publication_expenses=_political(60000),
        advertising_expenses=_political(70000),
        fundraising_party_expenses=_political(80000),
        other_business_expenses=_political(90000),
        research_expenses=_political(100000),
        donation_grant_expenses=_political(110000),
        other_political_expenses=_political(120000),
    )


def test_political_activity_counts_toward_total_spending(sample_profile):
    summary = build_summary(_report_with_every_expense(sample_profile), previous_year_carryover=0)

    # 経常経費 60000 + 政治活動費 720000
    assert summary.sisyutu_sgk == 780000
    assert summary.yokunen_kks_gk == -780000


def test_personnel_counts_toward_total_spending(sample_profile):
    report_data = ReportData(
        profile=sample_profile,
        personnel_expenses=_section(200000, 200000),
        utility_expenses=_section(100000, 0),
    )

    summary = build_summary(report_data)

    assert summary.sisyutu_sgk == 300000
    assert summary.yokunen_kks_gk == -250000


def test_expense_summary_items(sample_profile):
    expense_summary = build_expense_summary(_report_with_every_expense(sample_profile))

    assert expense_summary.personnel.amount is None
    assert expense_summary.utility.amount == 10000
    assert expense_summary.regular_subtotal.amount == 60000
    assert expense_summary.organization.amount == 40000
    assert expense_summary.business.amount == 300000
    assert expense_summary.other_business.amount == 90000
    assert expense_summary.political_subtotal.amount == 720000
    assert expense_summary.total_amount == 780000
    assert expense_summary.utility.koufu is None
    assert expense_summary.utility.bikou is None
    assert expense_summary.should_output_sheet()


def test_expense_summary_without_expenses(sample_profile):
    expense_summary = build_expense_summary(ReportData(profile=sample_profile))

    assert expense_summary.utility.amount is None
    assert expense_summary.regular_subtotal.amount == 0
    assert expense_summary.organization.amount == 0
    assert expense_summary.political_subtotal.amount == 0
    assert expense_summary.total_amount == 0
    assert not expense_summary.should_output_sheet()
