"""
Decimal Helpers

Coercion of caller-supplied amounts and rates into Decimal, and exact
string rendering of balances. NEVER uses float arithmetic for money.
"""

from decimal import MAX_EMAX, MIN_EMIN, Decimal, Inexact, InvalidOperation, localcontext
from typing import Union

from .errors import InvalidArgumentError

Numeric = Union[Decimal, int, float, str]

ZERO = Decimal("0")


def to_decimal(value: Numeric, what: str = "Amount") -> Decimal:
    """
    Convert a caller-supplied number into a finite Decimal.

    Floats go through str() so 0.1 becomes Decimal("0.1") rather than the
    binary approximation.

    Args:
        value: Decimal, int, float or numeric string
        what: Label used in the error message

    Returns:
        Decimal equivalent of value

    Raises:
        InvalidArgumentError: If value is not a finite number
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{what} must be a number, got {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidArgumentError(f"{what} must be a number, got {value!r}") from None
    else:
        raise InvalidArgumentError(f"{what} must be a number, got {type(value).__name__}")

    if not result.is_finite():
        raise InvalidArgumentError(f"{what} must be finite, got {value!r}")
    return result


def _exact(operation, prec: int) -> Decimal:
    """Run operation in a context wide enough that no digit is rounded away"""
    with localcontext() as ctx:
        ctx.prec = max(prec, 1)
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        ctx.traps[Inexact] = True
        return operation()


def _sum_precision(a: Decimal, b: Decimal) -> int:
    # Coefficient spans from the lowest exponent up to the highest digit plus a carry
    top = max(a.adjusted(), b.adjusted()) + 1
    bottom = min(a.as_tuple().exponent, b.as_tuple().exponent)
    return top - bottom + 1


def exact_add(a: Decimal, b: Decimal) -> Decimal:
    """Add two Decimals without rounding, whatever their magnitude"""
    return _exact(lambda: a + b, _sum_precision(a, b))


def exact_subtract(a: Decimal, b: Decimal) -> Decimal:
    """Subtract two Decimals without rounding, whatever their magnitude"""
    return _exact(lambda: a - b, _sum_precision(a, b))


def exact_multiply(a: Decimal, b: Decimal) -> Decimal:
    """Multiply two Decimals without rounding, whatever their magnitude"""
    prec = len(a.as_tuple().digits) + len(b.as_tuple().digits)
    return _exact(lambda: a * b, prec)


def format_decimal(value: Decimal) -> str:
    """Render a Decimal exactly, in plain notation, without trailing fractional zeros"""
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("", "-0"):
        return "0"
    return text
