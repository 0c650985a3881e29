# order_fulfillment/utils/decimal_utils.py
from decimal import Decimal, ROUND_HALF_UP

WHOLE = Decimal("1")
HUNDRED = Decimal("100")


def to_decimal(value) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def percent(part, whole, cap: int | None = 100) -> int:
    """Whole-number percentage of ``part`` over ``whole``, rounded half up.

    Returns 0 when ``whole`` is zero or negative. Negative results are
    floored at 0 and, when ``cap`` is set, results are clamped to it.
    """
    whole = to_decimal(whole)
    if whole <= 0:
        return 0
    value = (to_decimal(part) / whole * HUNDRED).quantize(WHOLE, rounding=ROUND_HALF_UP)
    result = max(int(value), 0)
    if cap is not None:
        result = min(result, cap)
    return result
