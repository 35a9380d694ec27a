"""Framework-independent equality check used by every fixture."""

from __future__ import annotations

from calcfixtures.calculator import Number, to_decimal


def assert_exact(actual: Number, expected: Number) -> None:
    """Assert that two values are numerically equal as exact decimals.

    No tolerance is applied. Representation differences that do not change
    the value (trailing zeros, int vs Decimal) compare equal.

    Raises:
        AssertionError: If the values differ.
    """
    a, e = to_decimal(actual), to_decimal(expected)
    if a != e:
        raise AssertionError(f"expected {e}, got {a}")
