from decimal import ROUND_HALF_UP, Decimal
from typing import Any

TWO_PLACES = Decimal("0.01")


def to_money(value: Any) -> Decimal | None:
    """Normalize a fixed-point value to exactly two decimal places, rounding half-up.

    Accepts Decimal, int, float or numeric text; None passes through.
    Hours and costs are stored as NUMERIC(7, 2), so every value written or
    read goes through here.
    """
    if value is None:
        return None
    if not isinstance(value, Decimal):
        # str() first so floats keep their shortest repr instead of binary noise
        value = Decimal(str(value))
    return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
