"""Amount parsing utilities."""

import re
from decimal import Decimal, InvalidOperation

CURRENCY_SYMBOLS = re.compile(r"[$€£¥₹]")
CURRENCY_CODE = re.compile(r"\s*\b(usd|eur|gbp|jpy|inr|rs\.?)\s*", re.IGNORECASE)


def parse_amount(amount_str: str) -> Decimal:
    """Parse user input such as "12.50", "$1,234.56", "₹1,200" or "15 EUR".

    The sign is preserved; the record services reject non-positive amounts.

    Raises:
        ValueError: If no number can be read from the input
    """
    if amount_str is None or not str(amount_str).strip():
        raise ValueError("Empty amount string")

    cleaned = CURRENCY_SYMBOLS.sub("", str(amount_str))
    cleaned = CURRENCY_CODE.sub("", cleaned)
    cleaned = cleaned.replace(",", "").replace(" ", "")

    try:
        return Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}'") from e
