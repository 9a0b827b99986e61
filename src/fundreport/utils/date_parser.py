"""Date parsing utilities."""

import re
import unicodedata
from datetime import date, timedelta

from dateutil import parser as date_parser

# Era prefix to the Gregorian year of the era's first year
_ERA_BASE_YEARS = {"R": 2018, "H": 1988, "S": 1925}
_WAREKI_PATTERN = re.compile(r"^([RHS])(\d{1,2})[/.-](\d{1,2})[/.-](\d{1,2})$")


def parse_wareki_date(date_str: str) -> date:
    """Parse an era-notation date such as "R7/1/15".

    Raises:
        ValueError: If the string is not in era notation or is not a valid date
    """
    match = _WAREKI_PATTERN.match(date_str.strip().upper())
    if match is None:
        raise ValueError(f"Not an era date: '{date_str}'")
    era, era_year, month, day = match.groups()
    return date(_ERA_BASE_YEARS[era] + int(era_year), int(month), int(day))


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports:
    - Absolute dates: "2024-01-15", "2024/1/15", "January 15, 2024", etc.
    - Era dates: "R6/1/15", "H31/4/30"
    - Relative dates: "today", "yesterday"

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = unicodedata.normalize("NFKC", date_str).strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    if _WAREKI_PATTERN.match(date_str.upper()):
        return parse_wareki_date(date_str)

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}") from e
