"""calcfixtures — exact-decimal calculator and its pass/fail fixture table.

A single stateless Calculator (add, subtract, multiply, divide, factorial)
over exact decimals, plus one table of should-pass / should-fail fixtures
used to check that a test-execution harness reports results correctly.

Usage:
    python -m calcfixtures list                 # Show fixtures
    python -m calcfixtures calc add 3 5.5       # 8.5
    python -m calcfixtures check                # Run fixtures, verify verdicts
"""

from calcfixtures.calculator import (
    MAX_VALUE,
    Calculator,
    CalculatorError,
    DivisionByZero,
    Overflow,
)

__all__ = ["MAX_VALUE", "Calculator", "CalculatorError", "DivisionByZero", "Overflow"]
