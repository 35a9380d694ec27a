"""Algebraic properties of the Calculator, checked with hypothesis."""

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from calcfixtures.calculator import MAX_VALUE, Calculator, DivisionByZero, Overflow

calc = Calculator()

_LIMIT = int(MAX_VALUE)

# Any value the calculator accepts: |x| <= MAX_VALUE, up to 29 digits, any scale.
decimals = st.builds(
    lambda coefficient, scale: Decimal(f"{coefficient}E-{scale}"),
    st.integers(min_value=-_LIMIT, max_value=_LIMIT),
    st.integers(min_value=0, max_value=28),
)
nonzero = decimals.filter(lambda d: not d.is_zero())


def _outcome(fn, *args):
    """Result of fn(*args), or 'overflow' when it falls outside the range."""
    try:
        return fn(*args)
    except Overflow:
        return "overflow"


@given(decimals, decimals)
def test_add_commutative(x, y):
    assert _outcome(calc.add, x, y) == _outcome(calc.add, y, x)


@given(decimals, decimals)
def test_subtract_antisymmetric(x, y):
    forward = _outcome(calc.subtract, x, y)
    backward = _outcome(calc.subtract, y, x)
    if forward == "overflow":
        assert backward == "overflow"
    else:
        assert forward == -backward


@given(decimals, decimals)
def test_multiply_commutative(x, y):
    assert _outcome(calc.multiply, x, y) == _outcome(calc.multiply, y, x)


@given(decimals)
def test_add_zero_identity(x):
    assert calc.add(x, 0) == x


@given(decimals)
def test_multiply_one_identity(x):
    assert calc.multiply(x, 1) == x


@given(decimals)
def test_divide_by_one(x):
    assert calc.divide(x, 1) == x


@given(nonzero)
def test_zero_divided(y):
    assert calc.divide(0, y) == 0


@given(decimals)
def test_divide_by_zero_always_raises(x):
    with pytest.raises(DivisionByZero):
        calc.divide(x, 0)


@given(st.integers(min_value=2, max_value=27))
def test_factorial_recurrence(n):
    assert calc.factorial(n) == n * calc.factorial(n - 1)
