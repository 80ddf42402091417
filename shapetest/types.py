"""Core types for shapetest — errors, fixture outcomes and run reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ShapetestError(Exception):
    """Base class for errors raised by shapetest."""


class ParseError(ShapetestError):
    """A Turtle document could not be parsed.

    Carries the offending path and the underlying parser message.
    """

    def __init__(self, path: Path | str, message: str):
        self.path = Path(path)
        self.message = message
        super().__init__(f"{self.path}: {message}")


class ProfileError(ShapetestError):
    """A profile run cannot start (missing shapes, bad shapes, no fixtures)."""


# ---------------------------------------------------------------------------
# FixtureOutcome — verdict of one fixture
# ---------------------------------------------------------------------------

class FixtureOutcome(Enum):
    PASS = "PASS"
    FAIL = "FAIL"
    ERROR = "ERROR"
    SKIP = "SKIP"


# ---------------------------------------------------------------------------
# FixtureResult — one line of a run
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FixtureResult:
    """Result of checking one fixture file against its expectation."""
    name: str
    outcome: FixtureOutcome
    expected: bool | None = None
    conforms: bool | None = None
    error: str = ""

    def __repr__(self) -> str:
        return f"FixtureResult({self.outcome.value} {self.name})"


# ---------------------------------------------------------------------------
# RunReport — a batch of fixtures
# ---------------------------------------------------------------------------

@dataclass
class RunReport:
    """All fixture results of one profile (or observation) run."""
    label: str
    results: list[FixtureResult] = field(default_factory=list)
    shape_triples: int = 0

    def add(self, result: FixtureResult) -> FixtureResult:
        self.results.append(result)
        return result

    def count(self, outcome: FixtureOutcome) -> int:
        return sum(1 for r in self.results if r.outcome == outcome)

    @property
    def passed(self) -> bool:
        """True when every non-skipped fixture matched its expectation."""
        return all(
            r.outcome in (FixtureOutcome.PASS, FixtureOutcome.SKIP)
            for r in self.results
        )

    def summary(self) -> str:
        return (
            f"{self.label}: "
            f"{self.count(FixtureOutcome.PASS)} passed, "
            f"{self.count(FixtureOutcome.FAIL)} failed, "
            f"{self.count(FixtureOutcome.ERROR)} errors, "
            f"{self.count(FixtureOutcome.SKIP)} skipped"
        )
