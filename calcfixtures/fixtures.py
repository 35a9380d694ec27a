"""The fixture table and lookup helpers.

Each row stands in for one of the per-framework fixture projects a test
harness is validated against. Rows are named
``<passing|failing>.<framework>[.<n>]``:

    failing.*       divide(3, 2) asserted equal to 1 (wrong on purpose)
    passing.*.1     add / subtract
    passing.*.2     multiply / factorial

Every framework has exactly one should-fail row, so a harness adapter that
reports all-green for its framework is caught.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from calcfixtures.models import Fixture, Operation

FRAMEWORKS = ["mbunit", "mstest", "nunit", "nunit3", "xunit"]


def _failing(framework: str) -> Fixture:
    return Fixture(
        name=f"failing.{framework}",
        framework=framework,
        operation=Operation.DIVIDE,
        operands=(3, 2),
        expected=Decimal("1"),
        expect_pass=False,
        description="Calculator should divide two values",
    )


def _adding(framework: str, index: int) -> Fixture:
    return Fixture(
        name=f"passing.{framework}.{index}",
        framework=framework,
        operation=Operation.ADD,
        operands=(3, Decimal("5.5")),
        expected=Decimal("8.5"),
        description="Calculator should add two values",
    )


def _multiplying(framework: str, index: int) -> Fixture:
    return Fixture(
        name=f"passing.{framework}.{index}",
        framework=framework,
        operation=Operation.MULTIPLY,
        operands=(3, Decimal("2.5")),
        expected=Decimal("7.5"),
        description="Calculator should multiply two values",
    )


FIXTURES: list[Fixture] = [
    _failing("mbunit"),
    _adding("mbunit", 1),
    _multiplying("mbunit", 2),
    _failing("mstest"),
    _adding("mstest", 1),
    _multiplying("mstest", 2),
    _failing("nunit"),
    _adding("nunit", 1),
    _multiplying("nunit", 2),
    _failing("nunit3"),
    Fixture(
        name="passing.nunit3.2",
        framework="nunit3",
        operation=Operation.FACTORIAL,
        operands=(3,),
        expected=Decimal("6"),
        description="Calculator should return factorial",
    ),
    _failing("xunit"),
    Fixture(
        name="passing.xunit.1",
        framework="xunit",
        operation=Operation.SUBTRACT,
        operands=(Decimal("5.5"), 3),
        expected=Decimal("2.5"),
        description="Calculator should subtract two values",
    ),
    _multiplying("xunit", 2),
]


def list_fixtures(
    framework: Optional[str] = None,
    expect_pass: Optional[bool] = None,
) -> list[Fixture]:
    """Return fixture rows in table order, optionally filtered.

    Args:
        framework: Only rows for this framework label (case-insensitive).
        expect_pass: Only should-pass (True) or should-fail (False) rows.

    Raises:
        ValueError: If ``framework`` is not a known label.
    """
    fixtures = FIXTURES
    if framework is not None:
        key = framework.lower()
        if key not in FRAMEWORKS:
            raise ValueError(
                f"Unknown framework: {framework}. Choose: {', '.join(FRAMEWORKS)}"
            )
        fixtures = [f for f in fixtures if f.framework == key]
    if expect_pass is not None:
        fixtures = [f for f in fixtures if f.expect_pass == expect_pass]
    return list(fixtures)


def load_fixture(name: str) -> Optional[Fixture]:
    """Look up a single fixture by name (e.g., 'failing.xunit')."""
    for fixture in FIXTURES:
        if fixture.name == name:
            return fixture
    return None
