"""Exact-decimal calculator — the shared subject under test for every fixture.

All arithmetic runs in a fixed decimal context (29 significant digits,
half-even rounding), so literals like 5.5 and 2.5 stay exact and nothing
ever passes through binary floating point. Operands and results are bounded
by MAX_VALUE in magnitude; anything beyond it raises Overflow.
"""

from __future__ import annotations

import decimal
from contextlib import contextmanager
from decimal import Decimal
from typing import Iterator, Union

from calcfixtures.models import Operation

Number = Union[Decimal, int, float, str]

# Largest magnitude of a 96-bit unsigned mantissa with zero scale.
MAX_VALUE = Decimal(2**96 - 1)

# Enough digits to hold every integer up to MAX_VALUE exactly.
PRECISION = 29

# Template only: each operation runs in a localcontext() copy of it.
_CONTEXT = decimal.Context(
    prec=PRECISION,
    rounding=decimal.ROUND_HALF_EVEN,
    traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
)


class CalculatorError(ArithmeticError):
    """Base class for calculator failures."""


class DivisionByZero(CalculatorError, ZeroDivisionError):
    """Divisor was exactly zero."""


class Overflow(CalculatorError, OverflowError):
    """Value does not fit in the supported range (|x| <= MAX_VALUE)."""


def _check_range(value: Decimal) -> Decimal:
    if value.copy_abs() > MAX_VALUE:
        raise Overflow(f"{value} exceeds the supported maximum {MAX_VALUE}")
    return value


@contextmanager
def _arithmetic() -> Iterator[None]:
    """Run in the calculator context, reporting exponent overflow as Overflow."""
    with decimal.localcontext(_CONTEXT):
        try:
            yield
        except decimal.Overflow as e:
            raise Overflow(f"Result exceeds the supported maximum {MAX_VALUE}") from e


def to_decimal(value: Number) -> Decimal:
    """Coerce an operand to an exact Decimal.

    Floats go through their shortest repr, so 2.5 -> Decimal('2.5') and
    0.1 -> Decimal('0.1') rather than the binary expansion.

    Raises:
        TypeError: For bool, None, or any non-numeric type.
        ValueError: For unparsable strings, NaN/Infinity, and values with
            more than PRECISION significant digits.
        Overflow: If |value| > MAX_VALUE.
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        raise TypeError(f"Expected a decimal operand, got {type(value).__name__}")
    if isinstance(value, float):
        value = repr(value)
    try:
        result = Decimal(value.strip()) if isinstance(value, str) else Decimal(value)
    except decimal.InvalidOperation:
        raise ValueError(f"Not a decimal number: {value!r}") from None
    if not result.is_finite():
        raise ValueError(f"Operand must be finite, got {value!r}")
    _check_range(result)
    significant = "".join(map(str, result.as_tuple().digits)).rstrip("0")
    if len(significant) > PRECISION:
        raise ValueError(
            f"Operand has more than {PRECISION} significant digits: {value!r}"
        )
    return result


class Calculator:
    """Stateless arithmetic over exact decimals."""

    def add(self, x: Number, y: Number) -> Decimal:
        with _arithmetic():
            return _check_range(to_decimal(x) + to_decimal(y))

    def subtract(self, x: Number, y: Number) -> Decimal:
        with _arithmetic():
            return _check_range(to_decimal(x) - to_decimal(y))

    def multiply(self, x: Number, y: Number) -> Decimal:
        with _arithmetic():
            return _check_range(to_decimal(x) * to_decimal(y))

    def divide(self, x: Number, y: Number) -> Decimal:
        """Divide x by y.

        Exact when the quotient is representable in 29 digits (3 / 2 -> 1.5),
        otherwise rounded half-even to 29 significant digits.

        Raises:
            DivisionByZero: If y is zero, whatever x is (0 / 0 included).
            Overflow: If the quotient exceeds MAX_VALUE.
        """
        dividend, divisor = to_decimal(x), to_decimal(y)
        if divisor.is_zero():
            raise DivisionByZero(f"Cannot divide {dividend} by zero")
        with _arithmetic():
            return _check_range(dividend / divisor)

    def factorial(self, n: int) -> Decimal:
        """Return n! as an exact Decimal.

        0! and 1! are both 1. The largest supported argument is 27; anything
        whose factorial exceeds MAX_VALUE raises Overflow.

        Raises:
            TypeError: If n is not an int (bool and float are rejected).
            ValueError: If n is negative.
            Overflow: If n! > MAX_VALUE.
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"factorial() takes a non-negative int, got {type(n).__name__}")
        if n < 0:
            raise ValueError(f"factorial() is undefined for negative values: {n}")
        result = 1
        for k in range(2, n + 1):
            result *= k
            if result > MAX_VALUE:
                raise Overflow(f"{n}! exceeds the supported maximum {MAX_VALUE}")
        return Decimal(result)

    def apply(self, operation: Operation | str, *operands: Number) -> Decimal:
        """Dispatch to the method named by ``operation``.

        Args:
            operation: Operation member or its value (e.g., 'divide').
            *operands: Exactly ``operation.arity`` operands.

        Raises:
            ValueError: Unknown operation name.
            TypeError: Wrong number of operands.
        """
        op = Operation(operation)
        if len(operands) != op.arity:
            raise TypeError(
                f"{op.value} takes {op.arity} operand(s), got {len(operands)}"
            )
        return getattr(self, op.value)(*operands)
