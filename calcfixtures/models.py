"""Data models for calcfixtures.

Operation enum, Fixture, FixtureResult, FixtureReport — the typed structures
that flow through fixtures → runner → report → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional


class Operation(str, Enum):
    """Calculator operations a fixture can exercise."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    FACTORIAL = "factorial"

    @property
    def arity(self) -> int:
        return 1 if self is Operation.FACTORIAL else 2


class Outcome(str, Enum):
    """What actually happened when a fixture ran."""

    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"


@dataclass(frozen=True)
class Fixture:
    """One row of the fixture table: a single call and its expected value.

    ``expect_pass`` is the a-priori classification. Should-fail fixtures carry
    a deliberately wrong ``expected`` so a harness can be checked for
    reporting the failure.
    """

    name: str
    framework: str
    operation: Operation
    operands: tuple
    expected: Decimal
    expect_pass: bool = True
    description: str = ""

    @property
    def call(self) -> str:
        """Human-readable call, e.g. 'divide(3, 2)'."""
        args = ", ".join(str(o) for o in self.operands)
        return f"{self.operation.value}({args})"


@dataclass
class FixtureResult:
    """Result of running a single fixture."""

    fixture: Fixture
    outcome: Outcome
    actual: Optional[Decimal] = None
    message: str = ""

    @property
    def as_expected(self) -> bool:
        if self.outcome is Outcome.ERROR:
            return False
        return (self.outcome is Outcome.PASSED) == self.fixture.expect_pass

    @property
    def verdict(self) -> str:
        if self.outcome is Outcome.ERROR:
            return "error"
        if self.as_expected:
            return "ok"
        if self.outcome is Outcome.PASSED:
            return "unexpected-pass"
        return "unexpected-fail"

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict (decimals as strings)."""
        return {
            "name": self.fixture.name,
            "framework": self.fixture.framework,
            "call": self.fixture.call,
            "expected": str(self.fixture.expected),
            "actual": None if self.actual is None else str(self.actual),
            "expect_pass": self.fixture.expect_pass,
            "outcome": self.outcome.value,
            "verdict": self.verdict,
            "message": self.message,
        }


@dataclass
class FixtureReport:
    """All results from one run, in execution order."""

    results: list[FixtureResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.outcome is Outcome.PASSED)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if r.outcome is Outcome.FAILED)

    @property
    def errors(self) -> int:
        return sum(1 for r in self.results if r.outcome is Outcome.ERROR)

    @property
    def unexpected(self) -> list[FixtureResult]:
        return [r for r in self.results if not r.as_expected]

    @property
    def ok(self) -> bool:
        """True when every fixture behaved as classified."""
        return not self.unexpected

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "errors": self.errors,
            "ok": self.ok,
            "results": [r.to_dict() for r in self.results],
        }
