"""Value formatting for the report XML: amounts, wareki dates, escaping."""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

from fundreport.domain.errors import ValidationError, unsupported_date

# (era prefix, first day of the era); newest first
WAREKI_ERAS: tuple[tuple[str, date], ...] = (
    ("R", date(2019, 5, 1)),
    ("H", date(1989, 1, 8)),
    ("S", date(1926, 12, 25)),
)

_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def format_amount(value: Any) -> str:
    """Format a yen amount as a bare integer string.

    Examples:
        >>> format_amount(150000)
        '150000'
        >>> format_amount(Decimal("1000.5"))
        '1001'
        >>> format_amount(None)
        '0'
    """
    if value is None or isinstance(value, bool):
        return "0"
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        return "0"
    if not amount.is_finite():
        return "0"
    return str(int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP)))


def format_wareki_date(value: Optional[date]) -> str:
    """Convert a Gregorian date to the era notation used by the schema.

    Examples:
        >>> format_wareki_date(date(2025, 1, 15))
        'R7/1/15'
        >>> format_wareki_date(date(2019, 4, 30))
        'H31/4/30'
        >>> format_wareki_date(date(1989, 1, 7))
        'S64/1/7'

    Raises:
        ValidationError: If the date falls before the Showa era
    """
    if isinstance(value, datetime):
        value = value.date()
    if not isinstance(value, date):
        return ""

    for prefix, start in WAREKI_ERAS:
        if value >= start:
            era_year = value.year - start.year + 1
            return f"{prefix}{era_year}/{value.month}/{value.day}"

    raise ValidationError(unsupported_date(value.isoformat()), field="date", value=value)


def escape_xml(text: str) -> str:
    """Escape the five XML special characters and nothing else."""
    for char, entity in _XML_ESCAPES:
        text = text.replace(char, entity)
    return text
