from decimal import Decimal, ROUND_HALF_UP


def round_one_decimal(value: float) -> float:
    """
    Rounds to one decimal place, halves going away from zero (2.25 -> 2.3).

    Goes through the decimal repr of the float so that values such as 2.25,
    which are exact in binary, are not subject to banker's rounding.
    """
    return float(Decimal(repr(value)).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP))


def format_one_decimal(value: float) -> str:
    return f'{round_one_decimal(value):.1f}'


def average(total: int, count: int) -> float:
    return total / count if count > 0 else 0
