"""XML serializers for the political fund report (SYUUSHI07 forms)."""

from fundreport.serializers.document import (
    FLAG_STRING_LENGTH,
    KNOWN_FORM_IDS,
    build_flag_mask,
    build_xml_document,
    serialize_report_data,
)

__all__ = [
    "FLAG_STRING_LENGTH",
    "KNOWN_FORM_IDS",
    "build_flag_mask",
    "build_xml_document",
    "serialize_report_data",
]
