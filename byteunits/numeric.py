"""
Fixed-width integer arithmetic for unit conversions.

Python integers never overflow, so the signed 64-bit domain the unit tables work in
is enforced here explicitly: magnitudes are normalized into it, multiplications
saturate at its bounds and divisions truncate toward zero the way two's-complement
integer division does.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import operator
import logging
from typing import Final

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type, fmt_value

# @formatter:off
MAX_INT64: Final[int] = 2**63 - 1
MIN_INT64: Final[int] = -2**63
# @formatter:on

logger = logging.getLogger(__name__)


# Methods --------------------------------------------------------------------------------------------------------------

def std_int64(value, *, name: str = "count") -> int:
    """
    Convert an integer-like magnitude to a standard Python int within signed 64-bit range.

    Detection order follows the usual numeric normalization: booleans are rejected first
    (bool is a subclass of int), plain ints take the fast path, then anything exposing
    __index__ (NumPy integer scalars and similar) is converted exactly.

    Args:
        value: Magnitude to normalize.
        name: Argument name used in error messages.

    Returns:
        The magnitude as a Python int.

    Raises:
        TypeError: If value is a bool, a float, None, or does not implement __index__.
        ValueError: If value lies outside [MIN_INT64, MAX_INT64].

    Examples:
        >>> std_int64(42)
        42
        >>> std_int64(True)
        Traceback (most recent call last):
            ...
        TypeError: count must be an integer, got <bool>
    """
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got {fmt_type(value)}")

    if type(value) is not int:
        if not hasattr(value, "__index__"):
            raise TypeError(f"{name} must be an integer, got {fmt_type(value)}")
        try:
            value = operator.index(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to int via __index__: {e}") from e

    if not MIN_INT64 <= value <= MAX_INT64:
        raise ValueError(f"{name} out of signed 64-bit range: {fmt_value(value)}")

    return value


def saturated_multiply(size: int, factor: int, over: int) -> int:
    """
    Multiply size by factor, saturating at the signed 64-bit bounds.

    The caller supplies over = MAX_INT64 // factor. Comparing against it before
    multiplying keeps every product that is actually computed inside the range.

    Args:
        size: Signed magnitude.
        factor: Positive multiplier.
        over: Largest size that can be multiplied by factor without overflow.

    Returns:
        size * factor, or MAX_INT64 / MIN_INT64 when the product would overflow.
    """
    if size > over:
        logger.debug("%d * %d saturated to MAX_INT64", size, factor)
        return MAX_INT64
    if size < -over:
        logger.debug("%d * %d saturated to MIN_INT64", size, factor)
        return MIN_INT64
    return size * factor


def truncated_divide(size: int, divisor: int) -> int:
    """
    Integer division rounding toward zero.

    Identical to floor division for non-negative sizes; for negative sizes the
    remainder is dropped toward zero, e.g. truncated_divide(-999, 1000) == 0.
    """
    quotient = abs(size) // divisor
    return quotient if size >= 0 else -quotient
