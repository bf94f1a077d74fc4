"""Promotion codes accepted at checkout.

A placeholder policy: a fixed table with no persistence or expiry. Codes are
matched case-insensitively and unknown codes simply give no discount.
"""

from decimal import Decimal

PROMOTION_CODES = {
    "SAVE10": Decimal("10"),
    "SAVE20": Decimal("20"),
}

NO_DISCOUNT = Decimal("0")


def normalize_code(code: str | None) -> str | None:
    if code is None:
        return None
    code = code.strip().upper()
    return code or None


def promotion_percent(code: str | None) -> Decimal:
    """Percent off the subtotal for ``code``; zero when absent or unknown."""
    return PROMOTION_CODES.get(normalize_code(code), NO_DISCOUNT)
