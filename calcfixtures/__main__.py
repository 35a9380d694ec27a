"""CLI for calcfixtures.

Usage:
    python -m calcfixtures list                      # Show the fixture table
    python -m calcfixtures list --framework xunit    # One framework's rows
    python -m calcfixtures calc divide 3 2           # Evaluate one operation
    python -m calcfixtures check                     # Run every fixture
    python -m calcfixtures check failing.nunit --json
"""

from __future__ import annotations

import json
from typing import List, Optional

import typer
from rich.console import Console

from calcfixtures.calculator import Calculator, CalculatorError, to_decimal
from calcfixtures.fixtures import FRAMEWORKS, list_fixtures, load_fixture
from calcfixtures.models import Operation
from calcfixtures.report import render_fixtures, render_report
from calcfixtures.runner import run_fixtures

app = typer.Typer(
    name="calcfixtures",
    help="Exact-decimal calculator and its pass/fail fixture table",
    no_args_is_help=True,
)
console = Console(stderr=True)

_FRAMEWORK_HELP = f"Framework label: {', '.join(FRAMEWORKS)}"


def _select(framework: Optional[str], expect_pass: Optional[bool]):
    try:
        return list_fixtures(framework=framework, expect_pass=expect_pass)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


@app.command("list")
def cmd_list(
    framework: Optional[str] = typer.Option(
        None, "--framework", "-f", envvar="CALCFIXTURES_FRAMEWORK", help=_FRAMEWORK_HELP,
    ),
    expect_pass: Optional[bool] = typer.Option(
        None, "--passing/--failing", help="Only should-pass or should-fail fixtures",
    ),
) -> None:
    """Show the fixture table."""
    render_fixtures(_select(framework, expect_pass), console)


@app.command("calc")
def cmd_calc(
    operation: str = typer.Argument(help="add, subtract, multiply, divide, factorial"),
    operands: List[str] = typer.Argument(help="Decimal operands (one integer for factorial)"),
) -> None:
    """Evaluate a single calculator operation exactly."""
    try:
        op = Operation(operation)
    except ValueError:
        choices = ", ".join(o.value for o in Operation)
        console.print(f"[red]Invalid operation: {operation}[/red]. Choose: {choices}")
        raise typer.Exit(1)

    try:
        if op is Operation.FACTORIAL:
            values = [int(o) for o in operands]
        else:
            values = [to_decimal(o) for o in operands]
        result = Calculator().apply(op, *values)
    except (CalculatorError, TypeError, ValueError) as e:
        console.print(f"[red]{type(e).__name__}:[/red] {e}")
        raise typer.Exit(1)

    typer.echo(str(result))


@app.command("check")
def cmd_check(
    names: Optional[List[str]] = typer.Argument(None, help="Fixture names (default: all)"),
    framework: Optional[str] = typer.Option(
        None, "--framework", "-f", envvar="CALCFIXTURES_FRAMEWORK", help=_FRAMEWORK_HELP,
    ),
    as_json: bool = typer.Option(False, "--json", help="Write the report as JSON to stdout"),
) -> None:
    """Run fixtures and verify each one passes or fails as classified."""
    candidates = _select(framework, None)
    if names:
        fixtures = []
        for name in names:
            fixture = load_fixture(name)
            if fixture is None:
                console.print(f"[red]Unknown fixture: {name}[/red]")
                raise typer.Exit(1)
            if fixture not in candidates:
                console.print(f"[yellow]Skipping {name}: not a {framework} fixture[/yellow]")
                continue
            fixtures.append(fixture)
    else:
        fixtures = candidates

    if as_json:
        report = run_fixtures(fixtures)
        typer.echo(json.dumps(report.to_dict(), indent=2))
    else:
        console.print(f"\n[bold]Running {len(fixtures)} fixture(s)[/bold]")
        report = run_fixtures(fixtures, console)
        render_report(report, console)

    if not report.ok:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
