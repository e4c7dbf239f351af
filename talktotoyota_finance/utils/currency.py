"""Currency rounding and formatting utilities"""

import math


def round_currency(value: float) -> int:
    """Round to whole currency units, halves toward positive infinity"""
    floor = math.floor(value)
    # value - floor is exact, value + 0.5 is not
    return int(floor + 1 if value - floor >= 0.5 else floor)


def round_cents(value: float) -> float:
    """Round to two decimal places, halves toward positive infinity"""
    return round_currency(value * 100) / 100


def format_amount(value: float) -> str:
    """Format an amount with thousands separators, dropping a zero fraction"""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}".rstrip("0").rstrip(".")
