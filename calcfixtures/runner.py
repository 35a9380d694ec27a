"""calcfixtures runner — evaluates fixture rows against the Calculator.

Data flow per fixture:
1. Apply the fixture's operation to its operands
2. Compare the result with the expected value via assert_exact
3. Classify: passed / failed (assertion) / error (calculator or input fault)

Errors are recorded on the result rather than raised, so one broken row
never hides the rest of the report.
"""

from __future__ import annotations

from typing import Iterable, Optional

from rich.console import Console

from calcfixtures.assertions import assert_exact
from calcfixtures.calculator import Calculator, CalculatorError
from calcfixtures.models import Fixture, FixtureReport, FixtureResult, Outcome

_VERDICT_STYLES = {
    "ok": "green",
    "unexpected-pass": "yellow",
    "unexpected-fail": "red",
    "error": "red",
}


def verdict_style(verdict: str) -> str:
    """Rich colour for a verdict string."""
    return _VERDICT_STYLES.get(verdict, "white")


def run_fixture(fixture: Fixture, calculator: Optional[Calculator] = None) -> FixtureResult:
    """Run one fixture and classify its outcome.

    Args:
        fixture: Row to evaluate.
        calculator: Instance to call. A fresh one is created if omitted;
            Calculator is stateless so this is interchangeable.
    """
    calc = calculator or Calculator()
    actual = None
    try:
        actual = calc.apply(fixture.operation, *fixture.operands)
        assert_exact(actual, fixture.expected)
    except AssertionError as e:
        return FixtureResult(
            fixture=fixture, outcome=Outcome.FAILED, actual=actual, message=str(e),
        )
    except (CalculatorError, TypeError, ValueError) as e:
        return FixtureResult(
            fixture=fixture,
            outcome=Outcome.ERROR,
            actual=actual,
            message=f"{type(e).__name__}: {e}",
        )
    return FixtureResult(fixture=fixture, outcome=Outcome.PASSED, actual=actual)


def run_fixtures(
    fixtures: Iterable[Fixture],
    console: Optional[Console] = None,
) -> FixtureReport:
    """Run fixtures in order and collect a report.

    When a console is given, prints one progress line per fixture.
    """
    calc = Calculator()
    report = FixtureReport()
    for fixture in fixtures:
        result = run_fixture(fixture, calc)
        report.results.append(result)
        if console is not None:
            style = verdict_style(result.verdict)
            console.print(
                f"  {fixture.name:<20} {fixture.call:<22} "
                f"{result.outcome.value:<7} [{style}]{result.verdict}[/]"
            )
    return report
