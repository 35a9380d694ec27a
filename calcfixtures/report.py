"""calcfixtures report — renders fixture listings and run results as Rich tables."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from calcfixtures.models import Fixture, FixtureReport
from calcfixtures.runner import verdict_style


def render_fixtures(fixtures: list[Fixture], console: Console) -> None:
    """Render the fixture table (no execution)."""
    if not fixtures:
        console.print("[yellow]No fixtures match.[/yellow]")
        return

    table = Table(title="Calculator Fixtures", show_header=True, header_style="bold")
    table.add_column("Name", style="green", min_width=18, no_wrap=True)
    table.add_column("Framework", min_width=8)
    table.add_column("Call", min_width=18)
    table.add_column("Expected", justify="right")
    table.add_column("Should", justify="center")

    for f in fixtures:
        should = "[green]pass[/green]" if f.expect_pass else "[red]fail[/red]"
        table.add_row(f.name, f.framework, f.call, str(f.expected), should)

    console.print()
    console.print(table)
    console.print()


def render_report(report: FixtureReport, console: Console) -> None:
    """Render a Rich results table followed by a one-line summary."""
    if not report.results:
        console.print("[yellow]No fixtures were run.[/yellow]")
        return

    table = Table(title="Fixture Results", show_header=True, header_style="bold")
    table.add_column("Name", style="dim", min_width=18, no_wrap=True)
    table.add_column("Call", min_width=18)
    table.add_column("Expected", justify="right")
    table.add_column("Actual", justify="right")
    table.add_column("Outcome", justify="center")
    table.add_column("Verdict", justify="center")

    for r in report.results:
        actual = "--" if r.actual is None else str(r.actual)
        style = verdict_style(r.verdict)
        table.add_row(
            r.fixture.name,
            r.fixture.call,
            str(r.fixture.expected),
            actual,
            r.outcome.value,
            f"[{style}]{r.verdict}[/]",
        )

    console.print()
    console.print(table)

    summary = (
        f"{report.passed} passed, {report.failed} failed, {report.errors} errors "
        f"of {report.total}"
    )
    if report.ok:
        console.print(f"[bold green]All fixtures behaved as classified[/bold green] ({summary})")
    else:
        console.print(
            f"[bold red]{len(report.unexpected)} fixture(s) did not behave as classified[/bold red] ({summary})"
        )
        for r in report.unexpected:
            detail = f": {r.message}" if r.message else ""
            console.print(f"  [red]{r.fixture.name}[/red] {r.verdict}{detail}")
    console.print()
