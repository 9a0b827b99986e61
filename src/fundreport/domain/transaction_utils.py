"""Shared helpers for turning ledger rows into report rows."""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional, Union

from fundreport.domain.entities import FlagUpdateValidation, TransactionType
from fundreport.domain.errors import (
    GRANT_EXPENDITURE_EXPENSE_ONLY,
    ValidationError,
    invalid_transaction_type,
)

# Itemization thresholds in yen
TEN_MAN_THRESHOLD = 100_000
FIVE_MAN_THRESHOLD = 50_000

BIKOU_MEMO_MAX_LENGTH = 160
BIKOU_MAX_LENGTH = 200

_WHITESPACE = re.compile(r"\s+")


def _to_finite_decimal(value: Any) -> Optional[Decimal]:
    """Convert a raw amount to Decimal, or None if missing or not finite."""
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value))
        except InvalidOperation:
            return None
    if not value.is_finite():
        return None
    return value


def resolve_income_amount(debit_amount: Any, credit_amount: Any) -> Decimal:
    """Resolve the transaction amount for income sections.

    Income prefers the credit side; the debit side is used when the credit
    amount is zero, negative or invalid. Anything unusable resolves to 0.
    """
    credit = _to_finite_decimal(credit_amount)
    if credit is not None and credit > 0:
        return credit
    debit = _to_finite_decimal(debit_amount)
    return debit if debit is not None else Decimal(0)


def resolve_expense_amount(debit_amount: Any, credit_amount: Any) -> Decimal:
    """Resolve the transaction amount for expense sections (debit first)."""
    debit = _to_finite_decimal(debit_amount)
    if debit is not None and debit > 0:
        return debit
    credit = _to_finite_decimal(credit_amount)
    return credit if credit is not None else Decimal(0)


def round_yen(amount: Decimal) -> int:
    """Round to whole yen, halves away from zero."""
    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def is_above_threshold(amount: Union[int, Decimal], threshold: int = TEN_MAN_THRESHOLD) -> bool:
    """Whether an amount is itemized; the threshold itself is inclusive."""
    return amount >= threshold


def sanitize_text(value: Optional[str], max_length: Optional[int] = None) -> str:
    """Collapse whitespace runs, trim, and clip to ``max_length`` characters."""
    if not value:
        return ""
    normalized = _WHITESPACE.sub(" ", value).strip()
    if max_length and len(normalized) > max_length:
        return normalized[:max_length]
    return normalized


def first_text(*values: Optional[str], max_length: Optional[int] = None) -> str:
    """Return the first value that is non-empty after sanitizing."""
    for value in values:
        text = sanitize_text(value, max_length)
        if text:
            return text
    return ""


def build_bikou(
    transaction_no: Optional[str],
    memo: Optional[str],
    memo_max_length: int = BIKOU_MEMO_MAX_LENGTH,
    total_max_length: int = BIKOU_MAX_LENGTH,
) -> str:
    """Build the remark column, embedding the source ledger row number.

    Examples:
        >>> build_bikou("12", "  電気代  7月分 ")
        '電気代 7月分 / MF行番号: 12'
        >>> build_bikou("", None)
        'MF行番号: -'
    """
    mf_row_info = f"MF行番号: {transaction_no or '-'}"
    memo_text = sanitize_text(memo, memo_max_length)
    combined = f"{memo_text} / {mf_row_info}" if memo_text else mf_row_info
    return sanitize_text(combined, total_max_length) or mf_row_info


def validate_grant_expenditure_flag_update(
    transaction_type: Union[TransactionType, str],
) -> FlagUpdateValidation:
    """Only expense transactions may carry the grant expenditure flag.

    Raises:
        ValidationError: If ``transaction_type`` is not a known type
    """
    try:
        transaction_type = TransactionType(transaction_type)
    except ValueError:
        raise ValidationError(
            invalid_transaction_type(transaction_type),
            field="transaction_type",
            value=transaction_type,
        ) from None

    if transaction_type is TransactionType.EXPENSE:
        return FlagUpdateValidation(is_valid=True)
    return FlagUpdateValidation(
        is_valid=False, error_message=GRANT_EXPENDITURE_EXPENSE_ONLY
    )
