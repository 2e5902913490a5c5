"""
Price Parser

Turns a captured price string into a Decimal, tolerating currency
symbols, thousands separators and both decimal conventions:

    "$1,299.99"  -> 1299.99
    "1.299,99 €" -> 1299.99
    "12,50"      -> 12.50
    "1,299"      -> 1299
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

_NUMBER_RE = re.compile(r"\d[\d.,']*")
_CENTS = Decimal("0.01")


def _normalize(token: str) -> str:
    """Rewrite a numeric token with '.' as the only (decimal) separator."""
    last_dot = token.rfind('.')
    last_comma = token.rfind(',')

    if last_dot == -1 and last_comma == -1:
        return token

    if last_dot != -1 and last_comma != -1:
        # Both present: whichever comes last is the decimal mark
        decimal_sep = '.' if last_dot > last_comma else ','
        thousands_sep = ',' if decimal_sep == '.' else '.'
        integer, fraction = token.replace(thousands_sep, '').rsplit(decimal_sep, 1)
        return f"{integer}.{fraction}"

    sep = '.' if last_dot != -1 else ','
    integer, fraction = token.rsplit(sep, 1)
    integer = integer.replace(sep, '')

    if token.count(sep) > 1:
        # "1,299,000" is all thousands; "1.299.00" keeps its last mark as decimal
        if len(fraction) in (1, 2):
            return f"{integer}.{fraction}"
        return integer + fraction

    if len(fraction) == 3 and integer.strip('0'):
        # Lone separator before exactly three digits: thousands mark
        return integer + fraction

    return f"{integer}.{fraction}"


def parse_price(text: str) -> Optional[Decimal]:
    """
    Parse the first number in text as a price.

    Args:
        text: Captured price text (e.g. "US $1,299.00", "19,99")

    Returns:
        Decimal value, or None if text holds no parseable number
    """
    if not text:
        return None

    match = _NUMBER_RE.search(str(text))
    if not match:
        return None

    token = match.group(0).replace("'", "").rstrip('.,')
    if not token:
        return None

    try:
        return Decimal(_normalize(token))
    except InvalidOperation:
        return None


def round_price(value: Decimal) -> Decimal:
    """Round to cents, half up."""
    return value.quantize(_CENTS, rounding=ROUND_HALF_UP)
