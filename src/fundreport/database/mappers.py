"""Mapper functions to convert SQLAlchemy models into domain entities.

This layer isolates the conversion logic, so the report core never sees
the schema (e.g. the counterpart table or the single stored profile row).
"""

from decimal import Decimal
from typing import Optional

from fundreport.domain import entities as domain
from fundreport.database.models import (
    OrganizationReportProfile as ORMProfile,
    ReportContactPerson as ORMContactPerson,
    Transaction as ORMTransaction,
)


def _person_name(last_name: Optional[str], first_name: Optional[str]) -> Optional[domain.PersonName]:
    if not last_name and not first_name:
        return None
    return domain.PersonName(last_name=last_name or "", first_name=first_name or "")


def _amount(value) -> Optional[Decimal]:
    return None if value is None else Decimal(value)


def transaction_to_row(orm_transaction: ORMTransaction) -> domain.TransactionRow:
    """Convert SQLAlchemy Transaction model to a domain TransactionRow."""
    counterpart = orm_transaction.counterpart
    return domain.TransactionRow(
        transaction_no=orm_transaction.transaction_no,
        transaction_date=orm_transaction.transaction_date,
        debit_account=orm_transaction.debit_account,
        debit_amount=_amount(orm_transaction.debit_amount),
        credit_account=orm_transaction.credit_account,
        credit_amount=_amount(orm_transaction.credit_amount),
        friendly_category=orm_transaction.friendly_category,
        label=orm_transaction.label,
        description=orm_transaction.description,
        memo=orm_transaction.memo,
        counterpart_name=counterpart.name if counterpart is not None else None,
        counterpart_address=counterpart.address if counterpart is not None else None,
        donor_occupation=counterpart.occupation if counterpart is not None else None,
        is_grant_expenditure=orm_transaction.is_grant_expenditure,
    )


def contact_person_to_domain(orm_contact: ORMContactPerson) -> domain.ContactPerson:
    """Convert SQLAlchemy ReportContactPerson model to a domain ContactPerson."""
    return domain.ContactPerson(
        last_name=orm_contact.last_name,
        first_name=orm_contact.first_name,
        tel=orm_contact.tel,
    )


def profile_to_domain(orm_profile: ORMProfile) -> domain.OrganizationProfile:
    """Convert SQLAlchemy OrganizationReportProfile model to a domain profile."""
    return domain.OrganizationProfile(
        political_organization_id=str(orm_profile.political_organization_id),
        financial_year=orm_profile.financial_year,
        official_name=orm_profile.official_name,
        official_name_kana=orm_profile.official_name_kana,
        office_address=orm_profile.office_address,
        office_address_building=orm_profile.office_address_building,
        representative=_person_name(
            orm_profile.representative_last_name, orm_profile.representative_first_name
        ),
        accountant=_person_name(
            orm_profile.accountant_last_name, orm_profile.accountant_first_name
        ),
        contact_persons=tuple(
            contact_person_to_domain(contact) for contact in orm_profile.contact_persons
        ),
        organization_type=orm_profile.organization_type,
        activity_area=orm_profile.activity_area,
        previous_year_carryover=orm_profile.previous_year_carryover or 0,
    )
