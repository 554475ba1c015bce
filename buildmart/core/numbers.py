"""
Number-like value parsing.

Prices and quantities reach the stores as numbers or as strings that may carry
currency symbols ("₹1,250.00"). Every entry point parses them through these
helpers so that bad input degrades to ``None`` instead of raising.
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional

_NON_NUMERIC = re.compile(r"[^0-9.\-]+")
_LEADING_NUMBER = re.compile(r"\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")


def _leading_float(text: str) -> Optional[float]:
    """Parse the longest numeric prefix of text, like JavaScript's parseFloat"""
    match = _LEADING_NUMBER.match(text)
    if not match:
        return None
    value = float(match.group(1))
    if not math.isfinite(value):
        return None
    return value


def parse_price(value: Any) -> Optional[float]:
    """Parse a price after stripping everything but digits, '.' and '-'"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else None
    return _leading_float(_NON_NUMERIC.sub("", str(value)))


def parse_quantity(value: Any) -> Optional[int]:
    """Parse a quantity and floor it to an integer"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
        if not math.isfinite(number):
            return None
    else:
        number = _leading_float(str(value))
        if number is None:
            return None
    return math.floor(number)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half away from zero (Python's round() rounds half to even)"""
    exponent = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP))
