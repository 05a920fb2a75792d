"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "1,234.56"

    Amounts are unsigned; the transaction type carries the direction, so a
    leading minus sign is passed through and rejected later by validation.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = re.sub(r"[$€£¥]", "", amount_str.strip())
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return amount


def has_cent_precision(amount: Decimal) -> bool:
    """Check that an amount has at most two decimal places.

    The ledger stores money in cents, so finer amounts would be rounded on
    write.
    """
    return amount.normalize().as_tuple().exponent >= -2
