"""Byte encoding of the exported XML."""

# Windows Shift_JIS: also maps －, ～, circled digits and NEC/IBM kanji
SUBMISSION_ENCODING = "cp932"


def encode_shift_jis(xml: str) -> bytes:
    """Encode XML text for submission.

    Characters outside Shift_JIS are written as numeric character
    references, which keeps the document well formed.
    """
    return xml.encode(SUBMISSION_ENCODING, errors="xmlcharrefreplace")
