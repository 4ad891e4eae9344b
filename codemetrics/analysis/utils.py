"""Numeric helpers shared by the aggregator, gate and report."""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half away from zero (2.5 -> 3, 0.25 -> 0.3 at one digit).

    The builtin ``round`` rounds half to even, which would print 2 for a
    Halstead time of 150 seconds.

    Args:
        value: Number to round.
        digits: Decimal places to keep.

    Returns:
        The rounded value.
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def format_number(value: float) -> str:
    """Format a metric for display; whole numbers print without a decimal point."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
