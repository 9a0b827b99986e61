"""Utility functions for fundreport."""

from fundreport.utils.date_parser import parse_date, parse_wareki_date
from fundreport.utils.amount_parser import parse_amount
from fundreport.utils.encoding import encode_shift_jis

__all__ = ["parse_date", "parse_wareki_date", "parse_amount", "encode_shift_jis"]
