import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

# Doubles at or above this magnitude carry no fractional part
_EXACT_INTEGER_LIMIT = 2**52


def normal_round(num, ndigits: int = 0):
    """
    Rounds a number to the specified number of decimal places.

    Halves are rounded away from zero, unlike the builtin `round`. The exact \
    binary value of `num` is rounded, so 0.49999999999999994 gives 0. NaN and \
    infinite values are returned unchanged.

    Args:
        num (any): the value to round
        ndigits: the number of digits to round to.

    """
    num = float(num)
    if not math.isfinite(num):
        return num
    if abs(num) >= _EXACT_INTEGER_LIMIT:
        return int(num) if ndigits == 0 else num

    with localcontext() as ctx:
        ctx.prec = 32 + abs(ndigits)
        rounded = Decimal(num).quantize(Decimal(1).scaleb(-ndigits), rounding=ROUND_HALF_UP)
    if ndigits == 0:
        return int(rounded)
    return float(rounded)
