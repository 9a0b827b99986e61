"""Organization profile serializer (SYUUSHI07_01)."""

import xml.etree.ElementTree as ET

from fundreport.domain.entities import OrganizationProfile, PersonName
from fundreport.serializers.writer import add_text

MAX_CONTACT_PERSONS = 3


def _suffix(index: int) -> str:
    return "" if index == 0 else str(index + 1)


def _add_name(root: ET.Element, prefix: str, name: PersonName | None) -> None:
    name = name or PersonName()
    add_text(root, f"{prefix}1", name.last_name)
    add_text(root, f"{prefix}2", name.first_name)


def serialize_profile_section(profile: OrganizationProfile) -> ET.Element:
    """Serialize the organization's basic information.

    Fund-management and Diet-member designations are not tracked, so the
    organization is reported as neither (SIKIN_UMU and GIIN_DANTAI_KBN
    "0") with the dependent fields left empty.
    """
    root = ET.Element("SYUUSHI07_01")
    add_text(root, "HOUKOKU_NEN", str(profile.financial_year))
    add_text(root, "KAISAI_DT")
    add_text(root, "DANTAI_NM", profile.official_name)
    add_text(root, "DANTAI_KANA", profile.official_name_kana)
    add_text(root, "JIM_ADR", profile.office_address)
    add_text(root, "JIM_APA_ADR", profile.office_address_building)

    _add_name(root, "DAI_NM", profile.representative)
    _add_name(root, "KAI_NM", profile.accountant)

    for index in range(MAX_CONTACT_PERSONS):
        suffix = _suffix(index)
        person = (
            profile.contact_persons[index]
            if index < len(profile.contact_persons)
            else None
        )
        add_text(root, f"TANTOU{suffix}_NM1", person.last_name if person else None)
        add_text(root, f"TANTOU{suffix}_NM2", person.first_name if person else None)
        add_text(root, f"TANTOU{suffix}_TEL", person.tel if person else None)

    add_text(root, "DANTAI_KBN", profile.organization_type)
    add_text(root, "KATU_KUKI", profile.activity_area)

    add_text(root, "SIKIN_UMU", "0")
    for tag in ("KOSYOKU_NM", "KOSYOKU_KBN", "SIKIN_TODOKE_NM1", "SIKIN_TODOKE_NM2"):
        add_text(root, tag)

    add_text(root, "GIIN_DANTAI_KBN", "0")
    for index in range(MAX_CONTACT_PERSONS):
        suffix = _suffix(index)
        for tag in ("KOSYOKU_NM_1", "KOSYOKU_NM_2", "KOSYOKU_NM", "KOSYOKU_KBN"):
            add_text(root, f"GIIN{suffix}_{tag}")

    return root
